"""Unit tests for the line tokenizer."""

import pytest

from afmkit.core.tokenizer import (
    COMPOSITE_DELIMITERS,
    METRICS_DELIMITERS,
    METRICS_KEEP,
    LineTokenizer,
)
from afmkit.exceptions import GrammarError


class TestLineTokenizer:
    """Tests for LineTokenizer class."""

    def test_default_delimiters(self):
        """Test splitting on whitespace."""
        tokens = LineTokenizer("KPX  A\tV -70")
        assert list(tokens) == ["KPX", "A", "V", "-70"]

    def test_no_empty_tokens(self):
        """Test that runs of delimiters produce no empty tokens."""
        tokens = LineTokenizer("  a   b  ")
        assert list(tokens) == ["a", "b"]

    def test_empty_line(self):
        """Test a line with no tokens."""
        tokens = LineTokenizer("   ")
        assert not tokens.has_next()

    def test_next_token_past_end(self):
        """Test that reading past the end raises GrammarError with the line."""
        tokens = LineTokenizer("C 32", line_number=7)
        tokens.next_token()
        tokens.next_token()
        with pytest.raises(GrammarError) as exc_info:
            tokens.next_token()
        assert exc_info.value.line == 7
        assert "C 32" in str(exc_info.value)

    def test_has_next(self):
        """Test has_next before and after consuming."""
        tokens = LineTokenizer("a")
        assert tokens.has_next()
        assert tokens.next_token() == "a"
        assert not tokens.has_next()

    def test_line_properties(self):
        """Test that the source line and number are kept."""
        tokens = LineTokenizer("C 32 ;", line_number=3)
        assert tokens.line == "C 32 ;"
        assert tokens.line_number == 3


class TestMetricsDelimiters:
    """Tests for char metric line splitting."""

    def _split(self, line: str) -> list[str]:
        return list(LineTokenizer(line, delimiters=METRICS_DELIMITERS, keep=METRICS_KEEP))

    def test_semicolon_is_token(self):
        """Test that ';' is returned as its own token."""
        assert self._split("C 32 ; WX 278 ; N space ; B 0 0 0 0 ;") == [
            "C", "32", ";", "WX", "278", ";", "N", "space", ";",
            "B", "0", "0", "0", "0", ";",
        ]

    def test_semicolon_without_spaces(self):
        """Test that ';' splits even when glued to a value."""
        assert self._split("N fi;L i fi;") == ["N", "fi", ";", "L", "i", "fi", ";"]

    def test_consecutive_semicolons(self):
        """Test that each ';' is its own token."""
        assert self._split(";;") == [";", ";"]


class TestCompositeDelimiters:
    """Tests for composite line splitting."""

    def test_semicolon_dropped(self):
        """Test that ';' separates tokens but is not returned."""
        tokens = LineTokenizer(
            "CC Aacute 2 ; PCC A 0 0 ; PCC acute 167 211 ;",
            delimiters=COMPOSITE_DELIMITERS,
        )
        assert list(tokens) == [
            "CC", "Aacute", "2", "PCC", "A", "0", "0", "PCC", "acute", "167", "211",
        ]
