"""Pytest configuration.

Ensures the project root is on sys.path so tests can import
``ncpamixer_config`` without installing it, and keeps logging state from
leaking between tests.
"""

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("ncpamixer_config")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fake_keyname(monkeypatch):
    """Replace curses.keyname with a small deterministic table."""
    import curses

    names = {9: b"^I", 13: b"^M", 27: b"^[", 113: b"q", 259: b"KEY_UP"}

    def keyname(code):
        if code < 0:
            raise ValueError("invalid key number")
        return names.get(code, f"K{code}".encode())

    monkeypatch.setattr(curses, "keyname", keyname)
    monkeypatch.setattr("ncpamixer_config.cli.start_terminal_database", lambda: True)
    return names


@pytest.fixture
def terminal(monkeypatch):
    """Start curses against the xterm description so real key names resolve."""
    from ncpamixer_config.keycodes import start_terminal_database

    monkeypatch.setenv("TERM", "xterm")
    if not start_terminal_database():
        pytest.skip("no xterm terminfo entry available")


@pytest.fixture
def config_file(tmp_path):
    def write(text: str, name: str = "ncpamixer.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return write
