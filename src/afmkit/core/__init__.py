"""Core parsing engine for afmkit.

This module contains the pieces that turn AFM bytes into a FontMetrics:

- Byte lexing (whitespace-delimited tokens and rest-of-line reads)
- Line tokenizing for character metric and composite lines
- Strict numeric, boolean and hex conversions
- Keyword dispatch tables
- The grammar parser itself

All components are single-pass and hold no state beyond one parse.

Key functions:
- parse_afm: Parse bytes or a binary stream
- hex_to_string: Decode <4142>-style glyph names

Key classes:
- AfmParser: Grammar parser over a binary stream
- ByteLexer: Forward-only token reader
- LineTokenizer: Splits one line into tokens
"""

from afmkit.core.conversions import (
    hex_to_string,
    parse_bool,
    parse_float,
    parse_hex_int,
    parse_int,
)
from afmkit.core.keywords import (
    CHAR_METRIC_KEYWORDS,
    HEADER_KEYWORDS,
    KeywordSpec,
    ValueKind,
)
from afmkit.core.lexer import ByteLexer
from afmkit.core.parser import AfmParser, parse_afm
from afmkit.core.tokenizer import LineTokenizer

__all__ = [
    # Parser
    "AfmParser",
    "parse_afm",
    # Lexing
    "ByteLexer",
    "LineTokenizer",
    # Keyword tables
    "CHAR_METRIC_KEYWORDS",
    "HEADER_KEYWORDS",
    "KeywordSpec",
    "ValueKind",
    # Conversions
    "hex_to_string",
    "parse_bool",
    "parse_float",
    "parse_hex_int",
    "parse_int",
]
