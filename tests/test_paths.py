import pwd
import types
from pathlib import Path

import pytest

from ncpamixer_config.errors import HomeDirectoryError
from ncpamixer_config.paths import get_home_dir, resolve_config_path


def test_xdg_config_home_takes_precedence():
    env = {"XDG_CONFIG_HOME": "/cfg", "HOME": "/home/me"}
    assert resolve_config_path(env) == Path("/cfg/ncpamixer.conf")


def test_home_dotfile_when_xdg_unset():
    assert resolve_config_path({"HOME": "/home/me"}) == Path("/home/me/.ncpamixer.conf")


def test_home_dir_from_environment():
    assert get_home_dir({"HOME": "/home/me"}) == "/home/me"


def test_home_dir_falls_back_to_user_database(monkeypatch):
    monkeypatch.setattr(pwd, "getpwuid", lambda uid: types.SimpleNamespace(pw_dir="/var/lib/me"))
    assert get_home_dir({}) == "/var/lib/me"
    assert resolve_config_path({}) == Path("/var/lib/me/.ncpamixer.conf")


def test_missing_home_dir_raises(monkeypatch):
    def getpwuid(uid):
        raise KeyError(uid)

    monkeypatch.setattr(pwd, "getpwuid", getpwuid)
    with pytest.raises(HomeDirectoryError):
        get_home_dir({})


def test_reads_process_environment_by_default(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert resolve_config_path() == tmp_path / "ncpamixer.conf"
