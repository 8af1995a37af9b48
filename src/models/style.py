"""Subtitle card style model."""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass, fields

from src.utils.config import DEFAULT_FONT_WEIGHT, FONT_WEIGHTS

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")
_WEIGHT_TOKENS = {value for _, value in FONT_WEIGHTS}


def _as_int(value, default: int) -> int:
    """Coerce a persisted value to a finite int, falling back to *default*."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _as_color(value, default: str) -> str:
    if isinstance(value, str) and _HEX_COLOR_RE.match(value):
        return value
    return default


@dataclass
class SubtitleStyle:
    """Visual style of a rendered subtitle card.

    All spatial fields are pixels. ``bg_opacity`` is a percentage (0-100).
    """

    font_family: str = "Pretendard"
    font_weight: str = DEFAULT_FONT_WEIGHT
    font_size: int = 48
    letter_spacing: int = -1
    text_color: str = "#FFFFFF"
    bg_color: str = "#000000"
    bg_opacity: int = 70
    padding_v: int = 16
    padding_h: int = 24
    border_radius: int = 8
    text_offset_y: int = 0

    def copy(self) -> SubtitleStyle:
        """Return a shallow copy."""
        return SubtitleStyle(**asdict(self))

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> SubtitleStyle:
        """Build a style from an untrusted persisted record.

        Unknown keys are ignored, missing or malformed fields take the default
        value and out-of-range numbers are clamped.
        """
        default = cls()
        if not isinstance(data, dict):
            return default

        family = data.get("font_family")
        if not isinstance(family, str) or not family.strip():
            family = default.font_family

        weight = str(data.get("font_weight", default.font_weight))
        if weight not in _WEIGHT_TOKENS:
            weight = default.font_weight

        font_size = _as_int(data.get("font_size"), default.font_size)
        if font_size <= 0:
            font_size = default.font_size

        return cls(
            font_family=family,
            font_weight=weight,
            font_size=font_size,
            letter_spacing=_as_int(data.get("letter_spacing"), default.letter_spacing),
            text_color=_as_color(data.get("text_color"), default.text_color),
            bg_color=_as_color(data.get("bg_color"), default.bg_color),
            bg_opacity=min(100, max(0, _as_int(data.get("bg_opacity"), default.bg_opacity))),
            padding_v=max(0, _as_int(data.get("padding_v"), default.padding_v)),
            padding_h=max(0, _as_int(data.get("padding_h"), default.padding_h)),
            border_radius=max(0, _as_int(data.get("border_radius"), default.border_radius)),
            text_offset_y=_as_int(data.get("text_offset_y"), default.text_offset_y),
        )

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]
