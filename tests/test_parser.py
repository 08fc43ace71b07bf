# tests/test_parser.py
"""
Tests for flatconf.parser: the line rules and literal grammars.
"""

import logging

import pytest

from flatconf.config import ParserSettings
from flatconf.parser import (
    BOOL_FALSE_VALUES,
    BOOL_TRUE_VALUES,
    INT_MAX,
    INT_MIN,
    parse_bool,
    parse_float,
    parse_int,
    parse_line,
    parse_text,
)


class TestParseLine:
    """Tests for single-line parsing."""

    @pytest.mark.parametrize("line", ["", "   ", "\t\r", "# comment", "   #indented comment", "#key=value"])
    def test_skipped_lines(self, line):
        assert parse_line(line) is None

    def test_line_without_separator(self):
        assert parse_line("just ignore this") is None

    def test_empty_key(self):
        assert parse_line("  = value") is None

    def test_internal_whitespace_preserved(self):
        assert parse_line("  key 3 = value  3") == ("key 3", "value  3")

    def test_split_on_first_separator(self):
        assert parse_line("a = b = c") == ("a", "b = c")

    def test_hash_after_start_is_not_a_comment(self):
        assert parse_line("color = #ff0000") == ("color", "#ff0000")

    def test_trim_removes_separator_controls(self):
        assert parse_line("\x1ckey = value\x1f") == ("key", "value")

    def test_skipped_line_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="flatconf.parser"):
            parse_line("no separator here")
        assert "no separator here" in caplog.text
        assert all(r.levelno == logging.DEBUG for r in caplog.records)


class TestParseText:
    """Tests for whole-text parsing."""

    def test_mixed_content(self):
        text = "a=1\n# c\n\nnot a pair\n b = 2 \r\n=orphan\na=3"
        assert parse_text(text) == {"a": "3", "b": "2"}

    def test_only_newline_splits_lines(self):
        """Other line-break characters stay inside the value."""
        assert parse_text("a = x\x0by\nb = 1") == {"a": "x\x0by", "b": "1"}

    def test_settings(self):
        settings = ParserSettings(comment_prefix="//", separator=":=")
        text = "// note\nkey := v = w\n# kept := yes"
        assert parse_text(text, settings) == {"key": "v = w", "# kept": "yes"}


class TestLiteralGrammars:
    """Tests for the integer, float and boolean grammars."""

    def test_parse_int(self):
        assert parse_int("42") == 42
        assert parse_int("-0") == 0
        assert parse_int("9223372036854775807") == INT_MAX
        assert parse_int("-9223372036854775808") == INT_MIN
        assert parse_int("99999999999999999999") is None
        assert parse_int("1" * 5000) is None
        assert parse_int("4.2") is None
        assert parse_int(" 4") is None

    def test_parse_float(self):
        assert parse_float("3.14") == 3.14
        assert parse_float("10") == 10.0
        assert parse_float("1e400") is None
        assert parse_float("infinity") == float("inf")
        assert parse_float("abc") is None

    def test_parse_bool(self):
        assert parse_bool("Yes") is True
        assert parse_bool("DISABLED") is False
        assert parse_bool("maybe") is None

    def test_token_sets_are_disjoint_and_frozen(self):
        assert not BOOL_TRUE_VALUES & BOOL_FALSE_VALUES
        assert isinstance(BOOL_TRUE_VALUES, frozenset)
        assert isinstance(BOOL_FALSE_VALUES, frozenset)
        assert BOOL_TRUE_VALUES == {"on", "true", "yes", "enable", "enabled", "1"}
        assert BOOL_FALSE_VALUES == {"off", "false", "no", "disable", "disabled", "0"}
