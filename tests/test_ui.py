from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ncpamixer_config.app import display_value
from ncpamixer_config.ui.highlighter import HIGHLIGHTER_RULES, ConfigurableHighlighter
from ncpamixer_config.ui.theme import PanelTheme


def test_panel_style_falls_back_to_default():
    assert PanelTheme.get_style("missing") == PanelTheme.get_style("default")


def test_build_panel_applies_title_style():
    panel = PanelTheme.build("body", title="Error", style="error")
    assert isinstance(panel, Panel)
    assert isinstance(panel.title, Text)
    assert panel.border_style == "#e78284"


def test_highlighter_marks_keycode_keys():
    text = Text("keycode.f.80 = tab_playback")
    ConfigurableHighlighter(HIGHLIGHTER_RULES).highlight(text)
    styled = {text.plain[span.start:span.end] for span in text.spans}
    assert "keycode.f.80" in styled


def test_highlighter_skips_invalid_rules():
    highlighter = ConfigurableHighlighter([{"pattern": "(", "style": "red"}, {"pattern": "x"}])
    text = Text("x")
    highlighter.highlight(text)
    assert text.spans == []


def test_display_value_quotes_invisible_spaces():
    assert display_value("") == '""'
    assert display_value("♦ ") == '"♦ "'
    assert display_value("quit") == "quit"


def test_panel_renders():
    console = Console(width=40, record=True)
    console.print(PanelTheme.build("hello", title="t"))
    assert "hello" in console.export_text()
