"""Settings manager: panel records persisted as JSON strings in QSettings."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from PySide6.QtCore import QSettings

from src.models.output_settings import OutputSettings
from src.models.position_preset import PresetStore
from src.models.style import SubtitleStyle
from src.utils.config import (
    OUTPUT_NAMESPACE,
    PRESETS_NAMESPACE,
    STYLE_NAMESPACE,
    UI_LANGUAGE_KEY,
)

logger = logging.getLogger(__name__)


class SettingsManager:
    """Wrapper around QSettings acting as the panel's key/value store.

    Each record (style, output settings, presets) lives under its own
    namespace as one serialized JSON document; last write wins.
    """

    def __init__(self, settings: Optional[QSettings] = None):
        self._settings = settings if settings is not None else QSettings()

    # ---------------------------------------------------- Raw key/value

    def get(self, namespace: str) -> Optional[str]:
        """Return the raw string stored under *namespace*, or None."""
        value = self._settings.value(namespace, None)
        if value is None or not isinstance(value, str):
            return None
        return value

    def set(self, namespace: str, value: str) -> None:
        self._settings.setValue(namespace, value)
        self._settings.sync()

    def _load_json(self, namespace: str) -> Any:
        raw = self.get(namespace)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            logger.warning(f"Ignoring malformed record in '{namespace}'")
            return None

    def _save_json(self, namespace: str, data: Any) -> None:
        self.set(namespace, json.dumps(data, ensure_ascii=False))

    # ---------------------------------------------------- Subtitle style

    def load_style(self) -> SubtitleStyle:
        """Load the persisted style (defaults if missing or malformed)."""
        data = self._load_json(STYLE_NAMESPACE)
        if data is None:
            return SubtitleStyle()
        return SubtitleStyle.from_dict(data)

    def save_style(self, style: SubtitleStyle) -> None:
        self._save_json(STYLE_NAMESPACE, style.to_dict())

    # ---------------------------------------------------- Output settings

    def load_output(self) -> OutputSettings:
        """Load the persisted output settings (defaults if missing or malformed)."""
        data = self._load_json(OUTPUT_NAMESPACE)
        if data is None:
            return OutputSettings()
        return OutputSettings.from_dict(data)

    def save_output(self, output: OutputSettings) -> None:
        self._save_json(OUTPUT_NAMESPACE, output.to_dict())

    # ---------------------------------------------------- Position presets

    def load_presets(self) -> PresetStore:
        """Load the 9 preset slots (all empty if missing or malformed)."""
        data = self._load_json(PRESETS_NAMESPACE)
        if data is None:
            return PresetStore()
        return PresetStore.from_list(data)

    def save_presets(self, presets: PresetStore) -> None:
        self._save_json(PRESETS_NAMESPACE, presets.to_list())

    # ---------------------------------------------------- UI Settings

    def get_ui_language(self) -> str:
        """Get the UI language code (default: ko)."""
        return self._settings.value(UI_LANGUAGE_KEY, "ko", str)

    def set_ui_language(self, lang: str) -> None:
        """Set the UI language code ('en', 'ko')."""
        self._settings.setValue(UI_LANGUAGE_KEY, lang)

    # ---------------------------------------------------- General Methods

    def reset_to_defaults(self) -> None:
        """Remove every stored record."""
        self._settings.clear()
        self._settings.sync()

    def sync(self) -> None:
        """Force synchronization of settings to disk."""
        self._settings.sync()
