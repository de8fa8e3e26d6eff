#!/usr/bin/env python3
"""Translate ``keycode.*`` config keys into terminal key names.

``keycode.<N>`` names a raw curses key code and resolves through the
terminal database (``curses.keyname``). ``keycode.f.<N>`` names a VT100
function key; those report codes 80.. for F1.., hence the fixed offset.

``curses.keyname`` only answers once curses has been started. An
application that already runs a curses screen needs nothing more; other
callers use ``start_terminal_database()`` first.
"""
import curses
import logging
import os
import sys
from typing import Mapping

from .parser import parse_int_prefix

logger = logging.getLogger(__name__)

KEYCODE_PREFIX = "keycode."
VT100_PREFIX = "f."
VT100_OFFSET = 79

# Key numbers are C ints
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_terminal_started = False


def start_terminal_database() -> bool:
    """Start and immediately end a curses session so key names resolve.

    $TERM is checked with ``setupterm`` first: ncurses'
    ``initscr`` exits the process on an unknown terminal. Returns False,
    after logging a warning, when no terminal description is available.
    """
    global _terminal_started
    if _terminal_started:
        return True

    # ncpamixer-config output may be piped; keep the screen setup off stdout
    if sys.stdout is not None:
        sys.stdout.flush()
    saved_stdout = os.dup(1)
    try:
        with open(os.devnull, "w") as devnull:
            os.dup2(devnull.fileno(), 1)
            try:
                curses.setupterm(None, devnull.fileno())
                curses.initscr()
                curses.endwin()
            finally:
                os.dup2(saved_stdout, 1)
    except curses.error as error:
        logger.warning("Terminal key names unavailable: %s", error)
        return False
    finally:
        os.close(saved_stdout)

    _terminal_started = True
    return True


def terminal_key_name(code: int) -> str:
    if code < 0:
        return ""
    try:
        name = curses.keyname(code)
    except curses.error as error:
        logger.warning("No terminal name for key code %d: %s", code, error)
        return ""
    if isinstance(name, bytes):
        name = name.decode("ascii", errors="replace")
    return name or ""


def get_keycode_name(key: str) -> str:
    if not key or not key.startswith(KEYCODE_PREFIX):
        return ""

    remainder = key[len(KEYCODE_PREFIX):]
    if not remainder:
        return ""

    is_vt100 = remainder.startswith(VT100_PREFIX)
    code = parse_int_prefix(remainder[len(VT100_PREFIX):] if is_vt100 else remainder)
    if code is None or not INT_MIN <= code <= INT_MAX:
        logger.debug("Ignoring keycode key without a usable number: %s", key)
        return ""

    if is_vt100:
        return f"VT100_F{code - VT100_OFFSET}"

    return terminal_key_name(code)


def keycode_events(store: Mapping[str, str]) -> dict[str, str]:
    """Map each translatable key's terminal name to its bound value."""
    events: dict[str, str] = {}
    for key, value in store.items():
        name = get_keycode_name(key)
        if not name:
            continue
        events[name] = value
    return events
