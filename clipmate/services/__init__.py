"""Business logic services."""

from .clipboard_access import SystemClipboard
from .clipboard_manager import ClipboardManager, HelperState
from .content_hasher import ContentHasher
from .settings_service import SettingsService

__all__ = ["ClipboardManager", "ContentHasher", "HelperState", "SettingsService", "SystemClipboard"]
