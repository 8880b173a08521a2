#!/usr/bin/env python3
"""
Clipboard Manager - Samples the clipboard and records new content
"""
import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from clipmate.core.protocols import ClipboardPort
from clipmate.errors import ClipboardAccessError, ImageHelperError
from clipmate.history import ClipboardItem, ClipboardItemType, HistoryStore
from clipmate.services.clipboard_access import SystemClipboard
from clipmate.services.content_hasher import ContentHasher

logger = logging.getLogger(__name__)

# Helper output up to this size is treated as an empty clipboard, not an image
MIN_IMAGE_BYTES = 51


class HelperState(Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class ClipboardManager:
    """Service that keeps the clipboard history in sync with the clipboard"""

    def __init__(
        self,
        store_path: Union[str, Path],
        clipboard: Optional[ClipboardPort] = None,
        image_dir: Union[str, Path] = ".",
        hasher: Optional[ContentHasher] = None,
    ):
        """
        Initialize clipboard manager

        Args:
            store_path: Path to the history file, loaded immediately
            clipboard: Clipboard port, defaults to the system clipboard
            image_dir: Directory image blobs are written to
            hasher: Content hasher used to name image blobs
        """
        logger.info("[ClipboardManager.__init__] Starting initialization...")
        self.store = HistoryStore.load(store_path)
        self.clipboard = clipboard if clipboard is not None else SystemClipboard()
        self.image_dir = Path(image_dir)
        self.hasher = hasher or ContentHasher()
        self._helper_state = HelperState.AVAILABLE
        logger.info("[ClipboardManager.__init__] Initialization complete")

    @property
    def store_path(self) -> Path:
        return self.store.path

    @property
    def helper_state(self) -> HelperState:
        return self._helper_state

    def list(self) -> List[ClipboardItem]:
        """Full history, oldest first"""
        return list(self.store.items)

    def poll_once(self) -> None:
        """Run a single sampling iteration"""
        self.sample_text()
        self.sample_image()

    def save_text(self, text: str) -> bool:
        """Append text to history and persist. Empty text is never recorded."""
        if not text:
            return False
        self.store.append(ClipboardItemType.TEXT, text)
        self.store.persist()
        logger.info(f"Recorded text item ({len(text)} chars)")
        return True

    def sample_text(self) -> None:
        try:
            content = self.clipboard.get_text()
        except ClipboardAccessError as e:
            logger.warning(f"Error while getting text content from the clipboard: {e}")
            return

        if content == self.store.history.last_data(ClipboardItemType.TEXT):
            return
        self.save_text(content)

    def sample_image(self) -> None:
        if self._helper_state is HelperState.UNAVAILABLE:
            return

        try:
            image_data = self.clipboard.get_image_bytes()
        except ImageHelperError as e:
            self._helper_state = HelperState.UNAVAILABLE
            logger.warning(f"Image clipboard helper unavailable, image capture disabled: {e}")
            return

        if len(image_data) < MIN_IMAGE_BYTES:
            return

        self.save_image(image_data)

    def save_image(self, image_data: bytes) -> bool:
        """
        Store an image blob under its content-addressed name and record it

        Identical bytes always map to the same name, so an image already in
        history is never appended twice. If a blob with that name is already
        on disk but not in history, nothing is written or recorded.

        Args:
            image_data: Raw image bytes

        Returns:
            True if a new Image item was appended
        """
        image_name = self.hasher.image_name(image_data)
        if self.store.history.contains_image(image_name):
            logger.debug(f"Image {image_name} already in history")
            return False

        target = self.image_dir / image_name
        if target.exists():
            logger.debug(f"Image file {target} already exists, not recording it")
            return False

        with open(target, "wb") as f:
            f.write(image_data)

        self.store.append(ClipboardItemType.IMAGE, str(target))
        self.store.persist()
        logger.info(f"Recorded image item {target} ({len(image_data)} bytes)")
        return True

    def restore(self, item_number: int) -> bool:
        """
        Put a history item back on the clipboard

        Args:
            item_number: 1-based position in history

        Returns:
            True if the clipboard was set, False if no such item exists
        """
        item = self.store.get(item_number - 1) if item_number >= 1 else None
        if item is None:
            print(f"Item {item_number} not found in clipboard history")
            return False

        if item.item_type == ClipboardItemType.TEXT:
            self.clipboard.set_text(item.data)
        else:
            with open(item.data, "rb") as f:
                self.clipboard.set_image_bytes(f.read())

        logger.info(f"Restored item {item_number} ({item.item_type.value})")
        print(f"Clipboard set to item {item_number}")
        return True
