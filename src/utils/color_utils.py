"""Color conversion helpers."""

from __future__ import annotations

from PySide6.QtGui import QColor


def hex_to_rgba(hex_color: str, opacity: int) -> tuple[int, int, int, float]:
    """Convert ``#RRGGBB`` plus an opacity percentage to ``(r, g, b, alpha)``.

    Alpha is in the 0.0-1.0 range; opacity is clamped to 0-100.
    """
    r = int(hex_color[1:3], 16)
    g = int(hex_color[3:5], 16)
    b = int(hex_color[5:7], 16)
    opacity = min(100, max(0, opacity))
    return r, g, b, opacity / 100


def hex_to_qcolor(hex_color: str, opacity: int = 100) -> QColor:
    r, g, b, a = hex_to_rgba(hex_color, opacity)
    color = QColor(r, g, b)
    color.setAlphaF(a)
    return color
