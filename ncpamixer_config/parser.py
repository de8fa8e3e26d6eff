#!/usr/bin/env python3
"""Tokenizer for the ncpamixer.conf line format.

One physical line holds at most one ``key = value`` pair:

- spaces outside double quotes are dropped, inside quotes they are kept
- ``"`` toggles quoting and is never part of the key or value
- the first ``=`` outside quotes switches from key to value
- ``#`` outside quotes starts a comment running to the end of the line
"""
import re
from typing import Iterable, Iterator, Optional, Tuple

Entry = Tuple[str, str]

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def parse_line(line: str) -> Optional[Entry]:
    key: list[str] = []
    value: list[str] = []
    current = key
    in_string = False

    for char in line:
        if char in "\r\n":
            break

        if not in_string:
            if char == "=" and current is key:
                current = value
                continue
            if char == "#":
                break

        if char == '"':
            in_string = not in_string
        elif char != " " or in_string:
            current.append(char)

    if not key:
        return None

    return "".join(key), "".join(value)


def iter_entries(lines: Iterable[str]) -> Iterator[Entry]:
    for line in lines:
        entry = parse_line(line)
        if entry is not None:
            yield entry


def parse_int_prefix(text: str) -> Optional[int]:
    """Parse the leading base-10 integer of ``text``.

    Leading whitespace and a sign are accepted and trailing text is
    ignored, so ``" 42px"`` gives 42. Returns None when no digits lead.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def lenient_int(text: str) -> int:
    value = parse_int_prefix(text)
    return 0 if value is None else value
