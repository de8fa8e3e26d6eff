#!/usr/bin/env python3
import re
from typing import List, Tuple

from rich.console import Console
from rich.highlighter import Highlighter

HIGHLIGHTER_RULES = [
    {
        "name": "keycode",
        "pattern": r"(?P<keycode>\bkeycode\.(?:f\.)?-?\d+\b)",
        "style": "bold cyan",
    },
    {
        "name": "vt100",
        "pattern": r"(?P<vt100>\bVT100_F-?\d+\b)",
        "style": "bold magenta",
    },
    {
        "name": "number",
        "pattern": r"(?P<number>(?<![\w.])-?\d+(?![\w.]))",
        "style": "yellow",
    },
    {
        "name": "bool",
        "pattern": r"(?P<bool>\b(?:true|false|yes)\b)",
        "style": "italic green",
    },
]


class ConfigurableHighlighter(Highlighter):
    def __init__(self, rules: List[dict]) -> None:
        super().__init__()
        self._patterns: List[Tuple[re.Pattern[str], str]] = []

        for rule in rules:
            pattern = rule.get("pattern")
            style = rule.get("style")
            if not pattern or not style:
                continue

            try:
                compiled = re.compile(pattern)
            except re.error:
                continue

            self._patterns.append((compiled, style))

    def highlight(self, text) -> None:
        plain = text.plain
        for regex, style in self._patterns:
            for match in regex.finditer(plain):
                start, end = match.span()
                if start == end:
                    continue
                text.stylize(style, start, end)


def create_console(stderr: bool = False, highlight: bool = True) -> Console:
    if highlight and HIGHLIGHTER_RULES:
        return Console(stderr=stderr, highlighter=ConfigurableHighlighter(HIGHLIGHTER_RULES))

    return Console(stderr=stderr)
