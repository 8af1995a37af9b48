"""Subtitle card layout and rasterization.

The same ``render_card`` call produces both the live preview and the exported
PNG, so the file on disk always matches what the panel shows.

Sequence per render:
    1. make sure the font family is available (register user fonts if needed)
    2. measure the text advance with the configured font and letter spacing
    3. size the image to advance + 2*padding_h by font_size + 2*padding_v
    4. paint the background (rounded if border_radius > 0), then the text
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import (
    QColor,
    QFont,
    QFontDatabase,
    QFontMetricsF,
    QImage,
    QPainter,
)

from src.models.style import SubtitleStyle
from src.utils.color_utils import hex_to_qcolor
from src.utils.config import FONT_FILE_EXTENSIONS, USER_FONTS_DIR

logger = logging.getLogger(__name__)

_WEIGHTS = {
    "400": QFont.Weight.Normal,
    "500": QFont.Weight.Medium,
    "600": QFont.Weight.DemiBold,
    "700": QFont.Weight.Bold,
    "800": QFont.Weight.ExtraBold,
}

# Font files already handed to QFontDatabase in this process
_registered_font_files: set[str] = set()


@dataclass(frozen=True, slots=True)
class CardLayout:
    """Pixel geometry of a card."""

    width: int
    height: int
    text_x: float
    baseline_y: float


def compute_layout(
    text_width: float,
    style: SubtitleStyle,
    ascent: float = 0.0,
    descent: float = 0.0,
) -> CardLayout:
    """Size the card around a measured text advance.

    ``baseline_y`` places the middle of the em box (ascent/descent) at
    ``height / 2 + text_offset_y``.
    """
    width = max(1, math.ceil(text_width) + 2 * style.padding_h)
    height = max(1, style.font_size + 2 * style.padding_v)
    middle_y = height / 2 + style.text_offset_y
    baseline_y = middle_y + (ascent - descent) / 2
    return CardLayout(
        width=width,
        height=height,
        text_x=float(style.padding_h),
        baseline_y=baseline_y,
    )


# ------------------------------------------------------------------ Fonts


def _family_installed(family: str) -> bool:
    target = family.casefold()
    return any(f.casefold() == target for f in QFontDatabase.families())


def ensure_font(family: str, fonts_dir: Path | None = None) -> bool:
    """Make sure *family* is available before measuring text with it.

    Installed families are used directly. Otherwise every font file under
    *fonts_dir* (default: the user fonts directory) is registered and the
    lookup is retried. Returns False when the family is still missing; Qt then
    substitutes a fallback family.
    """
    if _family_installed(family):
        return True

    fonts_dir = fonts_dir or USER_FONTS_DIR
    if fonts_dir.is_dir():
        for path in sorted(fonts_dir.iterdir()):
            if path.suffix.lower() not in FONT_FILE_EXTENSIONS:
                continue
            key = str(path.resolve())
            if key in _registered_font_files:
                continue
            _registered_font_files.add(key)
            font_id = QFontDatabase.addApplicationFont(key)
            if font_id < 0:
                logger.warning(f"Could not load font file: {path}")
                continue
            loaded = QFontDatabase.applicationFontFamilies(font_id)
            logger.info(f"Registered font {path.name}: {', '.join(loaded)}")

    if _family_installed(family):
        return True
    logger.warning(f"Font family '{family}' not available, using substitute")
    return False


def build_font(style: SubtitleStyle) -> QFont:
    """Return the QFont described by *style*."""
    font = QFont(style.font_family)
    font.setPixelSize(style.font_size)
    font.setWeight(_WEIGHTS.get(style.font_weight, QFont.Weight.Bold))
    font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, style.letter_spacing)
    font.setStyleStrategy(QFont.StyleStrategy.PreferAntialias)
    return font


# ------------------------------------------------------------------ Measure / render


def measure_card(text: str, style: SubtitleStyle) -> CardLayout | None:
    """Return the card geometry for *text*, or None for empty text."""
    if not text:
        return None
    ensure_font(style.font_family)
    metrics = QFontMetricsF(build_font(style))
    return compute_layout(
        metrics.horizontalAdvance(text),
        style,
        ascent=metrics.ascent(),
        descent=metrics.descent(),
    )


def render_card(text: str, style: SubtitleStyle) -> QImage | None:
    """Rasterize *text* with *style* into a transparent ARGB image.

    Returns None (and draws nothing) when *text* is empty.
    """
    layout = measure_card(text, style)
    if layout is None:
        return None

    image = QImage(layout.width, layout.height, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)

    painter = QPainter(image)
    try:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)

        # Background
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(hex_to_qcolor(style.bg_color, style.bg_opacity))
        rect = QRectF(0, 0, layout.width, layout.height)
        if style.border_radius > 0:
            painter.drawRoundedRect(rect, style.border_radius, style.border_radius)
        else:
            painter.drawRect(rect)

        # Text (font applied to the final-size surface)
        painter.setFont(build_font(style))
        painter.setPen(QColor(style.text_color))
        painter.drawText(QPointF(layout.text_x, layout.baseline_y), text)
    finally:
        painter.end()

    return image
