"""Console logging configuration for the entry point."""

from __future__ import annotations

import logging
import sys

_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_HANDLER_NAME = "mdreader-console"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach one console handler to the package logger."""
    logger = logging.getLogger("mdreader_py")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
