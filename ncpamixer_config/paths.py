#!/usr/bin/env python3
import os
import pwd
from pathlib import Path
from typing import Mapping, Optional

from .errors import HomeDirectoryError

CONFIG_NAME = "ncpamixer.conf"
HOME_CONFIG_NAME = ".ncpamixer.conf"


def get_home_dir(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    if home is not None:
        return home

    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError as error:
        raise HomeDirectoryError() from error


def resolve_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Pick the config file location.

    ``$XDG_CONFIG_HOME/ncpamixer.conf`` when the variable is set, otherwise
    ``~/.ncpamixer.conf``.
    """
    env = os.environ if environ is None else environ
    config_dir = env.get("XDG_CONFIG_HOME")
    if config_dir is not None:
        return Path(config_dir) / CONFIG_NAME

    return Path(get_home_dir(env)) / HOME_CONFIG_NAME
