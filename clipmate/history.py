"""
History store for clipmate
Keeps the ordered clipboard log in memory and mirrors it to a JSON file
"""

import logging
import time
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, model_validator

from clipmate.errors import HistoryLoadError, HistoryPersistError

logger = logging.getLogger(__name__)

STORED_FIELDS = ("items", "image_counter", "text_counter")


class ClipboardItemType(str, Enum):
    TEXT = "TEXT"
    IMAGE = "IMAGE"


class ClipboardItem(BaseModel):
    """A single captured clipboard entry"""
    time: int = Field(description="Capture time in nanoseconds since the epoch")
    item_type: ClipboardItemType
    data: str = Field(description="Literal text, or the stored image filename")


class ClipboardHistory(BaseModel):
    """Ordered clipboard log, oldest first, with per-type counters"""
    items: List[ClipboardItem] = Field(default_factory=list)
    image_counter: int = 0
    text_counter: int = 0

    def add_item(self, data: str, item_type: ClipboardItemType) -> ClipboardItem:
        if item_type == ClipboardItemType.IMAGE:
            self.image_counter += 1
        elif item_type == ClipboardItemType.TEXT:
            self.text_counter += 1

        item = ClipboardItem(time=time.time_ns(), item_type=item_type, data=data)
        self.items.append(item)
        return item

    def get_item(self, index: int) -> Optional[ClipboardItem]:
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def counter(self, item_type: ClipboardItemType) -> int:
        if item_type == ClipboardItemType.IMAGE:
            return self.image_counter
        return self.text_counter

    def last_data(self, item_type: ClipboardItemType) -> str:
        """Return the data of the newest item of the given type, or an empty string"""
        for item in reversed(self.items):
            if item.item_type == item_type:
                return item.data
        return ""

    def contains_image(self, image_name: str) -> bool:
        """Whether any Image item refers to a blob with this filename, in any directory"""
        return any(
            item.item_type == ClipboardItemType.IMAGE and Path(item.data).name == image_name
            for item in self.items
        )

    @model_validator(mode="before")
    @classmethod
    def require_stored_fields(cls, data: Any, info: ValidationInfo) -> Any:
        """History read from disk must carry every field, defaults only apply in memory"""
        if info.context and info.context.get("from_file") and isinstance(data, dict):
            missing = [name for name in STORED_FIELDS if name not in data]
            if missing:
                raise ValueError(f"history file is missing fields: {', '.join(missing)}")
        return data


class HistoryStore:
    """Owns a ClipboardHistory and the file it is persisted to"""

    def __init__(self, path: Union[str, Path], history: ClipboardHistory):
        self._path = Path(path)
        self.history = history

    @property
    def path(self) -> Path:
        return self._path

    @classmethod
    def load(cls, path: Union[str, Path]) -> "HistoryStore":
        """
        Load history from a JSON file

        A missing file yields an empty history. A file that exists but cannot
        be read or parsed raises HistoryLoadError; it is never replaced by an
        empty history.

        Args:
            path: Location of the history file

        Returns:
            HistoryStore bound to path
        """
        path = Path(path)
        if not path.exists():
            logger.info(f"No history file at {path}, starting with empty history")
            return cls(path, ClipboardHistory())

        try:
            contents = path.read_text(encoding="utf-8")
            history = ClipboardHistory.model_validate_json(contents, context={"from_file": True})
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            raise HistoryLoadError(f"Failed to load history file {path}: {e}") from e

        logger.info(f"Loaded {len(history.items)} items from {path}")
        return cls(path, history)

    def append(self, item_type: ClipboardItemType, payload: str) -> ClipboardItem:
        """Append a new item stamped with the current time. No dedup at this layer."""
        return self.history.add_item(payload, item_type)

    def get(self, index: int) -> Optional[ClipboardItem]:
        """0-based lookup, None when out of range"""
        return self.history.get_item(index)

    def persist(self) -> None:
        """Rewrite the whole history file from the in-memory history"""
        contents = self.history.model_dump_json()
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                f.write(contents)
        except OSError as e:
            raise HistoryPersistError(f"Failed to write history file {self._path}: {e}") from e

    @property
    def items(self) -> List[ClipboardItem]:
        return self.history.items

    def __len__(self) -> int:
        return len(self.history.items)

    def __iter__(self) -> Iterator[ClipboardItem]:
        return iter(self.history.items)
