#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Any, Dict, Optional
from rich.panel import Panel
from rich.text import Text

PANEL_STYLES: Dict[str, Dict[str, Any]] = {
    "default": {
        "border_style": "#888888",
        "padding": (0, 1),
        "title_align": "left",
        "expand": False,
    },
    "info": {
        "border_style": "#8caaee",
        "padding": (0, 1),
        "title_align": "left",
        "title_style": "bold #8caaee",
        "expand": False,
    },
    "error": {
        "border_style": "#e78284",
        "padding": (0, 1),
        "title_align": "left",
        "title_style": "bold #e78284",
        "expand": False,
    },
}


@dataclass(frozen=True)
class PanelStyle:
    border_style: str
    padding: Optional[tuple[int, int]] = (0, 1)
    title_style: Optional[str] = None
    title_align: str = "left"
    expand: bool = False


class PanelTheme:
    @staticmethod
    def get_style(name: str) -> PanelStyle:
        default_theme = PANEL_STYLES["default"]
        theme = PANEL_STYLES.get(name, default_theme)

        return PanelStyle(
            border_style=theme.get(
                "border_style", default_theme.get("border_style", "#888888")
            ),
            padding=theme.get("padding", default_theme.get("padding")),
            title_style=theme.get("title_style"),
            title_align=theme.get("title_align", default_theme.get("title_align", "left")),
            expand=theme.get("expand", default_theme.get("expand", False)),
        )

    @staticmethod
    def build(
        renderable: Any,
        title: str | Text = "",
        style: str = "default",
        **overrides: Any,
    ) -> Panel:
        panel_style = PanelTheme.get_style(style)

        panel_kwargs: Dict[str, Any] = {"border_style": panel_style.border_style}
        if panel_style.padding is not None:
            panel_kwargs["padding"] = panel_style.padding
        if panel_style.title_align:
            panel_kwargs["title_align"] = panel_style.title_align
        panel_kwargs["expand"] = panel_style.expand

        panel_kwargs.update(overrides)

        title_value = title
        if isinstance(title, str) and title and panel_style.title_style:
            title_value = Text(title, style=panel_style.title_style)

        return Panel(renderable, title=title_value or None, **panel_kwargs)
