"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add tests/ to path for fixtures imports
sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture
def temp_history_path(tmp_path: Path) -> Path:
    return tmp_path / ".clipboard_history.json"


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def temp_image_dir(tmp_path: Path) -> Path:
    images = tmp_path / "images"
    images.mkdir()
    return images
