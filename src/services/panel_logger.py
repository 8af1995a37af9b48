"""File logging for the panel."""

import logging
from pathlib import Path

from src.utils.config import USER_LOGS_DIR

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_log_path() -> Path:
    """Return the path to the panel log file."""
    USER_LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return USER_LOGS_DIR / "panel.log"


def setup_logging(level: int = logging.INFO, log_path: Path | None = None) -> logging.Logger:
    """Attach a UTF-8 file handler to the ``src`` logger tree (idempotent)."""
    logger = logging.getLogger("src")
    logger.setLevel(level)
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        fh = logging.FileHandler(log_path or get_log_path(), encoding="utf-8")
        fh.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(fh)
    return logger
