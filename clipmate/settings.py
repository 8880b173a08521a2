#!/usr/bin/env python3
"""
clipmate Settings Management
Loads and validates settings from settings.yml using Pydantic
"""

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("settings.yml")


class HistorySettings(BaseModel):
    """Where history and image blobs live"""
    path: Path = Field(
        default=Path(".clipboard_history.json"),
        description="History file, relative to the invoking directory"
    )
    image_dir: Path = Field(
        default=Path("."),
        description="Directory captured images are written to"
    )


class DaemonSettings(BaseModel):
    """Sampling loop settings"""
    poll_interval: float = Field(
        default=0.5,
        ge=0.05,
        le=60.0,
        description="Seconds between clipboard samples (0.05-60)"
    )


class ImageHelperSettings(BaseModel):
    """External image clipboard helper"""
    tool: Literal["xclip", "wl-clipboard"] = Field(
        default="xclip",
        description="Helper used to read and write PNG clipboard data"
    )
    timeout: Optional[float] = Field(
        default=None,
        description="Seconds to wait for the helper, null waits forever"
    )

    @field_validator('timeout')
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Ensure a configured timeout is positive"""
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive or null")
        return v


class Settings(BaseModel):
    """Main settings model"""
    history: HistorySettings = Field(default_factory=HistorySettings)
    daemon: DaemonSettings = Field(default_factory=DaemonSettings)
    image_helper: ImageHelperSettings = Field(default_factory=ImageHelperSettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to ./settings.yml
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        self.config_path = Path(config_path)
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.debug(f"Settings file not found at {self.config_path}, using defaults")
            return Settings()

        try:
            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Error reading settings from {self.config_path}: {e}. Using default settings")
            return Settings()

        if config_data is None:
            logger.warning("Settings file is empty, using defaults")
            return Settings()

        try:
            settings = Settings(**config_data)
        except (TypeError, ValidationError) as e:
            logger.warning(f"Invalid settings in {self.config_path}: {e}. Using default settings")
            return Settings()

        logger.info(f"Loaded settings from {self.config_path}")
        return settings

    def reload(self):
        """Reload settings from file"""
        self.settings = self._load_settings()

    @property
    def history_path(self) -> Path:
        """Get the history file path"""
        return self.settings.history.path

    @property
    def image_dir(self) -> Path:
        """Get the image blob directory"""
        return self.settings.history.image_dir

    @property
    def poll_interval(self) -> float:
        """Get the sampling interval in seconds"""
        return self.settings.daemon.poll_interval

    @property
    def image_helper(self) -> str:
        """Get the image helper tool name"""
        return self.settings.image_helper.tool

    @property
    def helper_timeout(self) -> Optional[float]:
        """Get the image helper timeout"""
        return self.settings.image_helper.timeout
