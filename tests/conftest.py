"""Pytest configuration and fixtures for PyGeoProver tests."""

import os
import sys
from pathlib import Path

import pytest

# Qt must not need a display while testing
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure the repo root is on sys.path so that `core` and `ui` import
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from PyQt5.QtWidgets import QApplication  # noqa: E402 - needs QT_QPA_PLATFORM first

from core.config import ConfigManager  # noqa: E402
from ui.theme import ThemeManager  # noqa: E402


class FakeSettings:
    """In-memory dark-mode preference."""

    def __init__(self, dark_mode: bool = False):
        self.dark_mode = dark_mode
        self.writes = []

    def is_dark_mode(self) -> bool:
        return self.dark_mode

    def set_dark_mode(self, dark_mode: bool):
        self.dark_mode = dark_mode
        self.writes.append(dark_mode)


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def theme_manager(qapp):
    return ThemeManager()


@pytest.fixture
def fake_settings():
    return FakeSettings()


@pytest.fixture
def config_manager(tmp_path):
    """ConfigManager singleton backed by a throwaway database."""
    ConfigManager.reset_instance()
    manager = ConfigManager.get_instance(db_path=str(tmp_path / "settings.db"))
    yield manager
    ConfigManager.reset_instance()
