"""Logging setup for the command line."""

import logging

import structlog

from tvdb_catalog.core.config import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    """Route structlog events through a level filter taken from config."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
