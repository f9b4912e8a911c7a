"""Splitting of already-extracted lines into tokens."""

from collections.abc import Iterator

from afmkit.exceptions import GrammarError

DEFAULT_DELIMITERS = " \t\n\r\f"

# Char metric lines: fields are separated by ';', which is kept as a token so
# the parser can check for it. "N fi;" and "N fi ;" both give N, fi, ;
METRICS_DELIMITERS = DEFAULT_DELIMITERS
METRICS_KEEP = ";"

# Composite lines: ';' only separates, it carries no meaning
COMPOSITE_DELIMITERS = DEFAULT_DELIMITERS + ";"


class LineTokenizer:
    """Single-pass tokenizer over one line of text.

    Characters in ``delimiters`` split tokens and are dropped. Characters in
    ``keep`` also split tokens but are emitted as one-character tokens of
    their own. Consecutive delimiters never produce empty tokens.

    Example:
        tokens = LineTokenizer("C 32 ; WX 278 ;", keep=";")
        while tokens.has_next():
            print(tokens.next_token())
    """

    def __init__(
        self,
        line: str,
        delimiters: str = DEFAULT_DELIMITERS,
        keep: str = "",
        line_number: int | None = None,
    ) -> None:
        """Initialize the tokenizer.

        Args:
            line: Text to split
            delimiters: Characters that separate tokens and are dropped
            keep: Characters that separate tokens and are returned as tokens
            line_number: Line the text came from, used in error messages
        """
        self._line = line
        self._line_number = line_number
        self._tokens = _split(line, frozenset(delimiters), frozenset(keep))
        self._pos = 0

    @property
    def line(self) -> str:
        return self._line

    @property
    def line_number(self) -> int | None:
        return self._line_number

    def has_next(self) -> bool:
        """Check whether another token is available."""
        return self._pos < len(self._tokens)

    def next_token(self) -> str:
        """Return the next token.

        Raises:
            GrammarError: If no tokens remain
        """
        if not self.has_next():
            raise GrammarError(f"Unexpected end of line '{self._line}'", self._line_number)

        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if not self.has_next():
            raise StopIteration
        return self.next_token()


def _split(line: str, delimiters: frozenset[str], keep: frozenset[str]) -> list[str]:
    tokens: list[str] = []
    current: list[str] = []

    for char in line:
        if char in keep:
            if current:
                tokens.append("".join(current))
                current = []
            tokens.append(char)
        elif char in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens
