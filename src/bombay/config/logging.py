"""Logging setup for applications and test sessions using bombay."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "bombay"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class _PackageHandler(logging.StreamHandler):
    """Handler installed by ``configure_logging``, so a reconfigure can find it."""


def configure_logging(
    *,
    level: int = logging.INFO,
    logger_name: str = PACKAGE_LOGGER,
    force: bool = False,
) -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level.

    Only ``logger_name`` is touched; the root logger and other libraries keep
    their configuration. Calling again only updates the level unless
    ``force=True``, which replaces the handlers this function installed.
    """

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    installed = [h for h in logger.handlers if isinstance(h, _PackageHandler)]
    if installed and not force:
        return logger

    for handler in installed:
        logger.removeHandler(handler)
        handler.close()
    handler = _PackageHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger
