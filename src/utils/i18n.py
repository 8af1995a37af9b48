"""Lightweight dictionary-based i18n for the subtitle panel.

Keys are the English strings. Messages with placeholders are formatted by the
caller after translation, e.g. ``tr("Created: {name}").format(name=...)``.
"""

from __future__ import annotations

import importlib

_current_strings: dict[str, str] = {}
_current_lang: str = "en"


def init_language(lang_code: str = "en") -> None:
    """Load the string table for *lang_code*. Unknown codes fall back to English."""
    global _current_strings, _current_lang
    _current_lang = lang_code
    if lang_code == "en":
        _current_strings = {}
        return
    try:
        mod = importlib.import_module(f"src.utils.lang.{lang_code}")
        _current_strings = dict(mod.STRINGS)
    except (ImportError, AttributeError):
        _current_lang = "en"
        _current_strings = {}


def tr(key: str) -> str:
    """Translate *key* to the current language. Returns *key* unchanged if no translation."""
    return _current_strings.get(key, key)


def current_language() -> str:
    """Return the active language code (e.g. 'en', 'ko')."""
    return _current_lang
