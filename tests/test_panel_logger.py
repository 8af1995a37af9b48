"""Tests for panel file logging."""

import logging

from src.services.panel_logger import setup_logging


def test_setup_logging_writes_file(tmp_path):
    log_path = tmp_path / "panel.log"
    logger = setup_logging(log_path=log_path)
    try:
        handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(handlers) == 1

        # second call does not stack handlers
        setup_logging(log_path=log_path)
        assert len([h for h in logger.handlers if isinstance(h, logging.FileHandler)]) == 1

        logging.getLogger("src.services.output_writer").info("wrote sub_001.png")
        handlers[0].flush()
        text = log_path.read_text(encoding="utf-8")
        assert "[INFO] src.services.output_writer: wrote sub_001.png" in text
    finally:
        for h in list(logger.handlers):
            if isinstance(h, logging.FileHandler):
                logger.removeHandler(h)
                h.close()
