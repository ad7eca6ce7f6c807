"""
Logging setup for the bookstore package.

Handlers are attached to the ``bookstore`` logger only, so uvicorn's own
loggers and whatever the host process does with the root logger are left
alone. ``setup_logging`` can run on every ``create_app`` call: the level is
re-applied each time, while the console handler and one file handler per path
are attached once.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bookstore.core.config import Settings

PACKAGE_LOGGER = "bookstore"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_console(logger: logging.Logger) -> bool:
    return any(type(h) is logging.StreamHandler for h in logger.handlers)


def _has_file(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(h, logging.FileHandler) and Path(h.baseFilename) == path for h in logger.handlers
    )


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the package logger from ``settings.log_level`` / ``settings.log_file``.

    Unknown level names fall back to ``INFO``. Returns the configured logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.propagate = False
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_console(logger):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file).resolve()
        if not _has_file(logger, log_path):
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    return logger
