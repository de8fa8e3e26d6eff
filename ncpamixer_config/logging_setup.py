#!/usr/bin/env python3
"""Logging setup for the ncpamixer-config command.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
command line entry point calls ``setup_logging`` once to route records to a
rich handler on stderr.
"""
import logging
import os
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "NCPAMIXER_CONFIG_LOG_LEVEL"


def level_from_str(value: Optional[str]) -> int:
    if not value:
        return logging.WARNING
    v = str(value).strip().upper()
    mapping = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
    }
    return mapping.get(v, logging.WARNING)


def setup_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Configure the package logger and return it.

    ``level`` wins over $NCPAMIXER_CONFIG_LOG_LEVEL, which wins over WARNING.
    """
    if isinstance(level, int):
        lvl = level
    else:
        lvl = level_from_str(level or os.getenv(LOG_LEVEL_ENV))

    logger = logging.getLogger("ncpamixer_config")
    logger.setLevel(lvl)

    # Re-running must not stack handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=lvl <= logging.DEBUG,
        markup=False,
    )
    handler.setLevel(lvl)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
