"""Sequential PNG output: next-number scan, file naming, atomic write."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QSaveFile
from PySide6.QtGui import QImage

from src.utils.config import FILE_NUMBER_WIDTH, IMAGE_EXTENSION

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"\d+")


def next_file_number(directory: str | Path, prefix: str) -> int:
    """Return one more than the highest ``{prefix}{N}.png`` number in *directory*.

    Missing or unreadable directories and directories without a matching file
    yield 1. Entries whose middle part is not a plain integer are ignored.
    """
    directory = Path(directory)
    try:
        names = [entry.name for entry in directory.iterdir()]
    except OSError:
        return 1

    ext = IMAGE_EXTENSION.lower()
    max_num = 0
    for name in names:
        if not name.startswith(prefix) or not name.lower().endswith(ext):
            continue
        remainder = name[len(prefix):len(name) - len(ext)]
        if not _DIGITS_RE.fullmatch(remainder):
            continue
        max_num = max(max_num, int(remainder))
    return max_num + 1


def format_file_name(prefix: str, number: int) -> str:
    """``sub_`` + 7 -> ``sub_007.png``; numbers wider than 3 digits are kept as-is."""
    return f"{prefix}{number:0{FILE_NUMBER_WIDTH}d}{IMAGE_EXTENSION}"


def encode_png(image: QImage) -> bytes | None:
    """Encode *image* as a 32-bit RGBA PNG."""
    data = QByteArray()
    buffer = QBuffer(data)
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    ok = image.convertToFormat(QImage.Format.Format_ARGB32).save(buffer, "PNG")
    buffer.close()
    if not ok:
        return None
    return bytes(data.data())


def write_card(image: QImage, path: str | Path) -> bool:
    """Write *image* to *path* as PNG. Either the whole file lands or nothing does."""
    path = Path(path)
    png = encode_png(image)
    if png is None:
        logger.error(f"PNG encoding failed for {path.name}")
        return False

    save_file = QSaveFile(str(path))
    if not save_file.open(QIODevice.OpenModeFlag.WriteOnly):
        logger.error(f"Cannot open {path} for writing: {save_file.errorString()}")
        return False
    written = save_file.write(png)
    if written != len(png):
        logger.error(f"Short write to {path}: {save_file.errorString()}")
        save_file.cancelWriting()
        save_file.commit()
        return False
    if not save_file.commit():
        logger.error(f"Commit failed for {path}: {save_file.errorString()}")
        return False

    logger.info(f"Wrote {path} ({image.width()}x{image.height()})")
    return True
