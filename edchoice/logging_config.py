"""Logging setup shared by the API and the CLI."""
import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "edchoice-stream"


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Calling this again updates the level (and the stream, when one is
    given), so app factories and CLI entry points can both call it.
    """
    logger = logging.getLogger("edchoice")
    logger.setLevel(level.upper())

    existing = [handler for handler in logger.handlers if handler.get_name() == _HANDLER_NAME]
    if existing:
        if stream is not None:
            existing[0].setStream(stream)
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
