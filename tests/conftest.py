"""Shared pytest setup: headless Qt and isolated QSettings."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSettings

from src.services.settings_manager import SettingsManager


@pytest.fixture
def settings_manager(tmp_path):
    """SettingsManager backed by a throwaway INI file."""
    qsettings = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return SettingsManager(qsettings)


@pytest.fixture(autouse=True)
def english_strings():
    """Status messages are asserted in English; reset after any language switch."""
    from src.utils.i18n import init_language

    init_language("en")
    yield
    init_language("en")
