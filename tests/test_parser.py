import pytest

from ncpamixer_config.parser import iter_entries, lenient_int, parse_int_prefix, parse_line


@pytest.mark.parametrize("line,expected", [
    ("theme=default", ("theme", "default")),
    ("volume_step=5\n", ("volume_step", "5")),
    ("key=value\r\n", ("key", "value")),
    ("  a  =  b c  ", ("a", "bc")),
    ("key =", ("key", "")),
    ("k = v # trailing note", ("k", "v")),
    ("a=b=c", ("a", "b=c")),
    ('"keycode.113"  = "quit"            # q', ("keycode.113", "quit")),
    ('"theme.default.default_indicator" = "♦ "', ("theme.default.default_indicator", "♦ ")),
    ('"theme.c0r73x.bar_style.top" = "" ', ("theme.c0r73x.bar_style.top", "")),
])
def test_parse_line_pairs(line, expected):
    assert parse_line(line) == expected


def test_quoted_spans_keep_structural_characters():
    assert parse_line('"a = b" = "c#d"') == ("a = b", "c#d")


def test_equals_after_switch_is_literal_even_after_quotes():
    assert parse_line('"x" = "y" = z') == ("x", "y=z")


@pytest.mark.parametrize("line", [
    "",
    "\n",
    "   ",
    "# a comment",
    '#   "keycode.48"   = "set_volume_100"  # 0',
    "# }",
    "=orphan value",
    '""=""',
])
def test_parse_line_without_key_yields_nothing(line):
    assert parse_line(line) is None


def test_unterminated_quote_swallows_rest_of_line():
    assert parse_line('"abc = d # e') == ("abc = d # e", "")


def test_quote_state_does_not_leak_between_lines():
    entries = list(iter_entries(['"open = 1\n', "next = 2\n"]))
    assert entries == [("open = 1", ""), ("next", "2")]


def test_iter_entries_skips_noise():
    lines = ["# header {\n", "\n", "a = 1\n", "   # }\n", "b = 2\n"]
    assert list(iter_entries(lines)) == [("a", "1"), ("b", "2")]


@pytest.mark.parametrize("text,expected", [
    ("42", 42),
    ("-1", -1),
    ("+7", 7),
    ("  15", 15),
    ("12abc", 12),
    ("abc", 0),
    ("", 0),
    ("-", 0),
    ("3.9", 3),
    ("\t\v12", 12),
    ("\u00a012", 0),
])
def test_lenient_int(text, expected):
    assert lenient_int(text) == expected


def test_parse_int_prefix_reports_missing_digits():
    assert parse_int_prefix("x1") is None
    assert parse_int_prefix("80") == 80
