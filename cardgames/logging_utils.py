"""Logging setup for the card-table entry point."""

import logging

from config import LoggingConfig, config


def setup_logging(level: str | None = None, settings: LoggingConfig | None = None) -> None:
    """Call once at program start (cli.main)."""
    settings = settings or config.logging
    level = (level or settings.level).upper()
    numeric = getattr(logging, level, logging.WARNING)
    logging.basicConfig(level=numeric, format=settings.format, datefmt=settings.datefmt)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("cardgames").setLevel(numeric)
