"""Protocol definitions for dependency injection."""

from typing import Protocol


class ClipboardPort(Protocol):
    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def get_image_bytes(self) -> bytes: ...

    def set_image_bytes(self, data: bytes) -> None: ...
