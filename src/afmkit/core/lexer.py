"""Byte-level lexer for AFM documents.

The lexer pulls bytes from a binary source strictly forward and offers the
two reads the AFM grammar needs: the next whitespace-delimited token, and the
rest of the current line. It knows nothing about keywords.
"""

import io
from typing import BinaryIO

CR = 0x0D
LF = 0x0A
SPACE = 0x20
TAB = 0x09

WHITESPACE = frozenset({SPACE, TAB, CR, LF})
EOL = frozenset({CR, LF})

# Returned by _next_byte when the source is exhausted
_EOF = -1


def is_whitespace(byte: int) -> bool:
    """Check whether a byte separates tokens (space, tab, CR or LF)."""
    return byte in WHITESPACE


def is_eol(byte: int) -> bool:
    """Check whether a byte ends a line (CR or LF)."""
    return byte in EOL


class ByteLexer:
    """Forward-only token reader over a binary stream.

    Bytes are decoded as Latin-1, so every byte value maps to exactly one
    character. The lexer never seeks and never closes the stream.

    Example:
        lexer = ByteLexer.from_bytes(b"StartFontMetrics 4.1\\nFontName Times-Roman\\n")
        lexer.read_token()        # "StartFontMetrics"
        lexer.read_token()        # "4.1"
        lexer.read_token()        # "FontName"
        lexer.read_rest_of_line() # "Times-Roman"
        lexer.read_token()        # None
    """

    def __init__(self, stream: BinaryIO, read_size: int = 8192) -> None:
        """Initialize the lexer.

        Args:
            stream: Readable binary stream positioned at the start of the document
            read_size: Number of bytes to request from the stream per read
        """
        if read_size < 1:
            raise ValueError(f"read_size must be positive, not {read_size}")

        self._stream = stream
        self._read_size = read_size
        self._buffer = b""
        self._pos = 0
        self._exhausted = False
        self._line = 1
        self._token_line = 1
        self._last = _EOF

    @classmethod
    def from_bytes(cls, data: bytes, read_size: int = 8192) -> "ByteLexer":
        """Create a lexer over an in-memory document."""
        return cls(io.BytesIO(data), read_size=read_size)

    @property
    def line_number(self) -> int:
        """1-based line of the next unread byte."""
        return self._line

    @property
    def token_line(self) -> int:
        """1-based line on which the last token or line read started."""
        return self._token_line

    def read_token(self) -> str | None:
        """Read the next whitespace-delimited token.

        Leading whitespace is skipped. The whitespace byte that ends the
        token is consumed.

        Returns:
            The token text, or None if the stream holds no further token
        """
        byte = self._skip_whitespace()
        if byte == _EOF:
            return None
        self._token_line = self._line

        token = bytearray((byte,))
        byte = self._next_byte()
        while byte != _EOF and not is_whitespace(byte):
            token.append(byte)
            byte = self._next_byte()
        return token.decode("latin-1")

    def read_rest_of_line(self) -> str | None:
        """Read from the next non-whitespace byte up to the end of the line.

        Leading whitespace, including line breaks, is skipped. The CR or LF
        that ends the line is consumed but not returned; trailing spaces
        are kept.

        Returns:
            The line text, or None if the stream is exhausted
        """
        byte = self._skip_whitespace()
        if byte == _EOF:
            return None
        self._token_line = self._line

        line = bytearray((byte,))
        byte = self._next_byte()
        while byte != _EOF and not is_eol(byte):
            line.append(byte)
            byte = self._next_byte()
        return line.decode("latin-1")

    def _skip_whitespace(self) -> int:
        byte = self._next_byte()
        while byte != _EOF and is_whitespace(byte):
            byte = self._next_byte()
        return byte

    def _next_byte(self) -> int:
        if self._pos >= len(self._buffer):
            if not self._fill():
                return _EOF

        byte = self._buffer[self._pos]
        self._pos += 1

        # CR, LF and CRLF each end one line
        if byte == CR or (byte == LF and self._last != CR):
            self._line += 1
        self._last = byte
        return byte

    def _fill(self) -> bool:
        if self._exhausted:
            return False

        chunk = self._stream.read(self._read_size)
        if not chunk:
            self._exhausted = True
            return False

        self._buffer = bytes(chunk)
        self._pos = 0
        return True
