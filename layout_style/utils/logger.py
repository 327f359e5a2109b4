"""Logging setup shared by all layout_style modules."""
from __future__ import annotations

import logging
from typing import Optional

LIBRARY_LOGGER = "layout_style"
_DEFAULT_LEVEL = logging.INFO
_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = _DEFAULT_LEVEL) -> None:
    """Install a basic root handler unless the application configured logging already."""
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=_DEFAULT_FORMAT)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for ``name`` (the library logger when omitted)."""
    configure_logging()
    return logging.getLogger(name or LIBRARY_LOGGER)
