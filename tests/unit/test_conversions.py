"""Unit tests for value conversions."""

import pytest

from afmkit.core.conversions import (
    hex_to_string,
    parse_bool,
    parse_float,
    parse_hex_int,
    parse_int,
)
from afmkit.exceptions import FormatError


class TestParseInt:
    """Tests for parse_int."""

    @pytest.mark.parametrize("text,expected", [("0", 0), ("32", 32), ("-1", -1), ("+7", 7)])
    def test_valid(self, text, expected):
        """Test decimal integers."""
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["", "4.1", "abc", "1_000", "0x10", " 1"])
    def test_invalid(self, text):
        """Test that non-integers raise FormatError."""
        with pytest.raises(FormatError):
            parse_int(text)

    def test_error_carries_line(self):
        """Test that the error message names the line and the text."""
        with pytest.raises(FormatError) as exc_info:
            parse_int("x", 12)
        assert exc_info.value.line == 12
        assert "'x'" in str(exc_info.value)
        assert str(exc_info.value).startswith("line 12:")


class TestParseFloat:
    """Tests for parse_float."""

    @pytest.mark.parametrize(
        "text,expected",
        [("4.1", 4.1), ("-207", -207.0), ("-1.5", -1.5), (".5", 0.5), ("2.", 2.0), ("1e3", 1000.0)],
    )
    def test_valid(self, text, expected):
        """Test number forms."""
        assert parse_float(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "abc", "nan", "inf", "1.2.3", "-"])
    def test_invalid(self, text):
        """Test that non-numbers raise FormatError."""
        with pytest.raises(FormatError):
            parse_float(text)


class TestParseBool:
    """Tests for parse_bool."""

    @pytest.mark.parametrize(
        "text,expected", [("true", True), ("false", False), ("True", True), ("FALSE", False)]
    )
    def test_valid(self, text, expected):
        """Test boolean literals in any case."""
        assert parse_bool(text) is expected

    @pytest.mark.parametrize("text", ["yes", "1", ""])
    def test_invalid(self, text):
        """Test that other words raise FormatError."""
        with pytest.raises(FormatError):
            parse_bool(text)


class TestParseHexInt:
    """Tests for parse_hex_int."""

    @pytest.mark.parametrize("text,expected", [("<FF>", 255), ("FF", 255), ("<20>", 32), ("a", 10)])
    def test_valid(self, text, expected):
        """Test bracketed and bare hex codes."""
        assert parse_hex_int(text) == expected

    @pytest.mark.parametrize("text", ["<>", "<GG>", "xyz", ""])
    def test_invalid(self, text):
        """Test that non-hex codes raise FormatError."""
        with pytest.raises(FormatError):
            parse_hex_int(text)


class TestHexToString:
    """Tests for hex_to_string."""

    def test_decode(self):
        """Test decoding pairs of hex digits."""
        assert hex_to_string("<4142>") == "AB"
        assert hex_to_string("<41>") == "A"

    def test_empty(self):
        """Test that <> decodes to an empty string."""
        assert hex_to_string("<>") == ""

    def test_latin1_bytes(self):
        """Test that high bytes decode as Latin-1."""
        assert hex_to_string("<E9>") == "é"

    @pytest.mark.parametrize(
        "text,message",
        [
            ("<", "length"),
            ("4142", "angle brackets"),
            ("<4142", "angle brackets"),
            ("<414>", "odd"),
            ("<41GG>", "non-hex"),
        ],
    )
    def test_invalid(self, text, message):
        """Test malformed hex strings."""
        with pytest.raises(FormatError, match=message):
            hex_to_string(text, 5)
