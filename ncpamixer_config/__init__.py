"""Configuration subsystem for the ncpamixer terminal mixer."""

from .config import Config
from .errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigReadError,
    ConfigWriteError,
    HomeDirectoryError,
)
from .keycodes import get_keycode_name
from .parser import parse_line

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigReadError",
    "ConfigWriteError",
    "HomeDirectoryError",
    "get_keycode_name",
    "parse_line",
    "__version__",
]
