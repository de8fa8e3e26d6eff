#!/usr/bin/env python3


class ConfigError(Exception):
    """Base class for configuration failures the caller has to act on."""


class ConfigNotFoundError(ConfigError):
    def __init__(self, path) -> None:
        super().__init__(f"Unable to find config file {path}.")
        self.path = path


class ConfigWriteError(ConfigError):
    def __init__(self, path, reason: str = "") -> None:
        message = "Unable to create default config!"
        if reason:
            message = f"{message} ({path}: {reason})"
        super().__init__(message)
        self.path = path


class HomeDirectoryError(ConfigError):
    def __init__(self) -> None:
        super().__init__("Unable to find home-directory")


class ConfigReadError(ConfigError):
    def __init__(self, path) -> None:
        super().__init__(f"Unable to read config file {path}.")
        self.path = path
