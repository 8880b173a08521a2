#!/usr/bin/env python3
"""
Settings Service - Wrapper for settings management
"""
import logging
from pathlib import Path
from typing import Optional

from clipmate.settings import SettingsManager

logger = logging.getLogger(__name__)


class SettingsService:
    """Service for reading application settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings service

        Args:
            config_path: Optional path to settings file
        """
        logger.debug(f"[SettingsService.__init__] Loading settings from: {config_path or 'default path'}")
        self._manager = SettingsManager(config_path)

    @property
    def history_path(self) -> Path:
        """Get history file path"""
        return self._manager.history_path

    @property
    def image_dir(self) -> Path:
        """Get image directory"""
        return self._manager.image_dir

    @property
    def poll_interval(self) -> float:
        """Get sampling interval"""
        return self._manager.poll_interval

    @property
    def image_helper(self) -> str:
        """Get image helper tool"""
        return self._manager.image_helper

    @property
    def helper_timeout(self) -> Optional[float]:
        """Get image helper timeout"""
        return self._manager.helper_timeout

    def reload(self):
        """Reload settings from file"""
        self._manager.reload()
