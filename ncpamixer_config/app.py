#!/usr/bin/env python3
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import Config
from .defaults import DEFAULT_CONFIG
from .ui.theme import PanelTheme


def render_summary(console: Console, config: Config) -> None:
    entry_count = len(config)
    events = config.get_keycode_name_events()
    theme = config.get_string("theme", "default")

    body = Table.grid(padding=(0, 2))
    body.add_column(style="dim")
    body.add_column()
    body.add_row("File", Text(str(config.filename)))
    body.add_row("Entries", str(entry_count))
    body.add_row("Bound keys", str(len(events)))
    body.add_row("Theme", Text(theme))

    console.print(PanelTheme.build(body, title="ncpamixer config", style="info"))


def render_keybinds(console: Console, config: Config) -> None:
    events = config.get_keycode_name_events()

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Key")
    table.add_column("Action")
    for name in sorted(events, key=str.lower):
        table.add_row(Text(name), Text(events[name]))

    console.print(
        PanelTheme.build(table, title=f"Keybindings ({len(events)})", style="info")
    )


def display_value(value: str) -> str:
    # Quote values whose spaces would otherwise be invisible
    if not value or value.strip() != value:
        return f'"{value}"'
    return value


def render_dump(console: Console, config: Config, prefix: Optional[str] = None) -> None:
    entries = config.get_config()

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Key")
    table.add_column("Value")
    for key, value in entries.items():
        if prefix and not key.startswith(prefix):
            continue
        table.add_row(Text(key), Text(display_value(value)))

    console.print(PanelTheme.build(table, title=str(config.filename), style="default"))


def render_default(console: Console) -> None:
    console.print(Text(DEFAULT_CONFIG), highlight=False)


def render_error(console: Console, message: str) -> None:
    console.print(PanelTheme.build(Text(message), title="Error", style="error"))
