"""Strict conversion of AFM value tokens.

Python's own ``int()`` and ``float()`` accept more than AFM allows
(underscores, surrounding whitespace, ``inf``, ``nan``), so tokens are
matched against the AFM literal forms first.
"""

import re

from afmkit.exceptions import FormatError

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_RE = re.compile(r"[0-9A-Fa-f]+")

_BOOLEANS = {"true": True, "false": False}


def parse_int(text: str, line: int | None = None) -> int:
    """Convert a decimal integer token.

    Args:
        text: Token text, e.g. "-12"
        line: Source line for error messages

    Returns:
        Integer value

    Raises:
        FormatError: If the token is not a decimal integer
    """
    if not _INT_RE.fullmatch(text):
        raise FormatError(f"Expected integer, found '{text}'", line)
    return int(text)


def parse_float(text: str, line: int | None = None) -> float:
    """Convert a number token, with optional fraction and exponent.

    Raises:
        FormatError: If the token is not a number
    """
    if not _FLOAT_RE.fullmatch(text):
        raise FormatError(f"Expected number, found '{text}'", line)
    return float(text)


def parse_bool(text: str, line: int | None = None) -> bool:
    """Convert a "true"/"false" token, ignoring case.

    Raises:
        FormatError: If the token is not a boolean literal
    """
    try:
        return _BOOLEANS[text.lower()]
    except KeyError:
        raise FormatError(f"Expected true or false, found '{text}'", line) from None


def parse_hex_int(text: str, line: int | None = None) -> int:
    """Convert a hexadecimal character code, written as <FF> or FF.

    Raises:
        FormatError: If the token is not a hex number
    """
    digits = text
    if len(text) >= 2 and text[0] == "<" and text[-1] == ">":
        digits = text[1:-1]
    if not _HEX_RE.fullmatch(digits):
        raise FormatError(f"Expected hex number, found '{text}'", line)
    return int(digits, 16)


def hex_to_string(text: str, line: int | None = None) -> str:
    """Decode an angle-bracketed hex string such as <4142> into text.

    Each pair of hex digits is one byte; the bytes are read as Latin-1.

    Args:
        text: Token including the brackets
        line: Source line for error messages

    Returns:
        Decoded string ("AB" for <4142>)

    Raises:
        FormatError: If the brackets are missing, the token is shorter than
            two characters, or the digits are odd in number or not hex
    """
    if len(text) < 2:
        raise FormatError(f"Expected hex string of length >= 2, found '{text}'", line)
    if text[0] != "<" or text[-1] != ">":
        raise FormatError(f"Hex string should be enclosed by angle brackets: '{text}'", line)

    digits = text[1:-1]
    if len(digits) % 2 != 0:
        raise FormatError(f"Hex string has an odd number of digits: '{text}'", line)
    if digits and not _HEX_RE.fullmatch(digits):
        raise FormatError(f"Hex string contains non-hex characters: '{text}'", line)

    return bytes.fromhex(digits).decode("latin-1")
