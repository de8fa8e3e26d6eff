#!/usr/bin/env python3
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

from .defaults import write_default
from .errors import ConfigNotFoundError, ConfigReadError
from .keycodes import keycode_events
from .parser import iter_entries, lenient_int
from .paths import resolve_config_path

logger = logging.getLogger(__name__)

TRUTHY_VALUES = {"1", "yes", "true"}


class Config:
    """ncpamixer key/value configuration.

    Build one ``Config`` at startup, call ``init()`` once, then hand the
    object to whatever needs settings. Accessors never raise: a missing key
    is answered with the caller's default, which is also stored so later
    lookups (and ``get_config()``) see it.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self.filename: Optional[Path] = None
        self._environ = environ
        self._config: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def init(self, explicit_path: str = "") -> None:
        """Resolve the config file and load it, writing defaults if needed.

        Raises ConfigNotFoundError for a missing ``explicit_path``,
        ConfigReadError when a freshly written default cannot be read back,
        HomeDirectoryError when no location can be derived and
        ConfigWriteError when the default file cannot be created.
        """
        if explicit_path:
            if not self.file_exists(explicit_path):
                raise ConfigNotFoundError(explicit_path)
            self.filename = Path(explicit_path)

        if self.filename is None:
            self.filename = resolve_config_path(self._environ)

        wrote_default = False
        while not self.read_config():
            if wrote_default:
                # Writable but not readable; another pass would spin forever.
                raise ConfigReadError(self.filename)

            logger.warning(
                "Unable to find config file %s, creating default config.",
                self.filename,
            )
            write_default(self.filename)
            wrote_default = True

    def read_config(self) -> bool:
        """Replace the store with the contents of ``filename``.

        Returns False when the file cannot be opened.
        """
        if self.filename is None:
            return False

        try:
            # Only "\n" ends a line; a stray "\r" ends the scan of its line
            with open(
                self.filename, "r", encoding="utf-8", errors="replace", newline="\n"
            ) as handle:
                self._config = {}
                self.update(iter_entries(handle))
        except OSError as error:
            logger.debug("Could not read %s: %s", self.filename, error)
            return False

        logger.debug("Loaded %d entries from %s", len(self._config), self.filename)
        return True

    def update(self, entries: Iterable[tuple[str, str]]) -> None:
        for key, value in entries:
            self._config[key] = value

    @staticmethod
    def file_exists(name) -> bool:
        try:
            os.stat(name)
        except (OSError, ValueError):
            return False
        return True

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_string(self, key: str, default: str = "") -> str:
        if key not in self._config:
            self._config[key] = default
        return self._config[key]

    def get_int(self, key: str, default: int = 0) -> int:
        return lenient_int(self.get_string(key, str(default)))

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get_string(key, "true" if default else "false")
        return value in TRUTHY_VALUES

    def key_exists(self, key: str) -> bool:
        return key in self._config

    def key_empty(self, key: str) -> bool:
        return not self._config.get(key, "")

    def get_config(self) -> Dict[str, str]:
        return dict(self._config)

    def get_keycode_name_events(self) -> Dict[str, str]:
        """Terminal key name -> bound action, for every ``keycode.*`` entry."""
        return keycode_events(self._config)

    def __len__(self) -> int:
        return len(self._config)

    def __contains__(self, key) -> bool:
        return key in self._config
