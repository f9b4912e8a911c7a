"""Grammar parser for AFM documents.

The parser walks the AFM keyword grammar in a single forward pass:

    StartFontMetrics <version>
      <header keywords>
      StartCharMetrics <n> ... EndCharMetrics
      StartKernData
        StartTrackKern <n> ... EndTrackKern
        StartKernPairs[0|1] <n> ... EndKernPairs
      EndKernData
      StartComposites <n> ... EndComposites
    EndFontMetrics

Counts after ``Start*`` keywords are authoritative: exactly that many records
are read, then the matching ``End*`` keyword must follow.

Key components:
- AfmParser: Parses one byte stream into a FontMetrics
- parse_afm: Convenience wrapper accepting bytes or a stream
"""

import io
import logging
from collections.abc import Callable
from typing import Any, BinaryIO

from afmkit.config import ParserConfig
from afmkit.core.conversions import (
    hex_to_string,
    parse_bool,
    parse_float,
    parse_hex_int,
    parse_int,
)
from afmkit.core.keywords import (
    CC,
    CHAR_METRIC_KEYWORDS,
    END_CHAR_METRICS,
    END_COMPOSITES,
    END_FONT_METRICS,
    END_KERN_DATA,
    END_KERN_PAIRS,
    END_TRACK_KERN,
    HEADER_KEYWORDS,
    KERN_PAIR_KP,
    KERN_PAIR_KPH,
    KERN_PAIR_KPX,
    KERN_PAIR_KPY,
    KERN_PAIR_SECTIONS,
    PCC,
    SEMICOLON,
    START_CHAR_METRICS,
    START_COMPOSITES,
    START_FONT_METRICS,
    START_KERN_DATA,
    START_TRACK_KERN,
    TRACK_KERN,
    KeywordSpec,
    ValueKind,
)
from afmkit.core.lexer import ByteLexer
from afmkit.core.tokenizer import (
    COMPOSITE_DELIMITERS,
    METRICS_DELIMITERS,
    METRICS_KEEP,
    LineTokenizer,
)
from afmkit.domain import (
    BoundingBox,
    CharMetric,
    Composite,
    CompositePart,
    FontMetrics,
    KernPair,
    Ligature,
    TrackKern,
)
from afmkit.exceptions import GrammarError, StructuralError

logger = logging.getLogger(__name__)


class _StreamTokens:
    """Gives the lexer the next_token()/line_number shape of LineTokenizer."""

    def __init__(self, lexer: ByteLexer) -> None:
        self._lexer = lexer

    @property
    def line_number(self) -> int:
        return self._lexer.token_line

    def next_token(self) -> str:
        token = self._lexer.read_token()
        if token is None:
            raise StructuralError(
                "Unexpected end of AFM document while reading a value",
                self._lexer.line_number,
            )
        return token


class AfmParser:
    """Parses an AFM document from a binary stream.

    The caller owns the stream; the parser only reads from it and leaves it
    open. A parser is good for one document.

    Example:
        with open("Courier.afm", "rb") as f:
            metrics = AfmParser(f).parse()
    """

    def __init__(self, stream: BinaryIO, config: ParserConfig | None = None) -> None:
        """Initialize the parser.

        Args:
            stream: Readable binary stream positioned at the start of the document
            config: Parser configuration (defaults to full-dataset parsing)
        """
        self._config = config or ParserConfig()
        self._lexer = ByteLexer(stream, read_size=self._config.read_size)
        self._tokens = _StreamTokens(self._lexer)

    def parse(self, reduced_dataset: bool | None = None) -> FontMetrics:
        """Parse the whole document.

        In reduced-dataset mode kerning and composites are not read, and the
        first unrecognized keyword after the character metrics ends the parse
        successfully with what has been read so far.

        Args:
            reduced_dataset: Override for ParserConfig.reduced_dataset

        Returns:
            Parsed font metrics

        Raises:
            AfmParseError: If the document is malformed
            ValidationError: If a value is outside its allowed range
        """
        reduced = self._config.reduced_dataset if reduced_dataset is None else reduced_dataset

        metrics = FontMetrics()
        self._parse_header(metrics)

        char_metrics_read = False
        while True:
            keyword = self._lexer.read_token()
            if keyword is None:
                if reduced and char_metrics_read:
                    logger.debug(
                        "Reduced dataset: document ends on line %d without %s",
                        self._lexer.line_number, END_FONT_METRICS
                    )
                    break
                raise StructuralError(
                    f"Unexpected end of AFM document, expected '{END_FONT_METRICS}'",
                    self._lexer.line_number,
                )
            if keyword == END_FONT_METRICS:
                break

            spec = HEADER_KEYWORDS.get(keyword)
            if spec is not None:
                self._parse_header_value(metrics, spec)
            elif keyword == START_CHAR_METRICS:
                self._parse_char_metrics(metrics)
                char_metrics_read = True
            elif not reduced and keyword == START_COMPOSITES:
                self._parse_composites(metrics)
            elif not reduced and keyword == START_KERN_DATA:
                self._parse_kern_data(metrics)
            elif reduced and char_metrics_read:
                logger.debug(
                    "Reduced dataset: stopping at '%s' on line %d",
                    keyword, self._lexer.token_line
                )
                break
            else:
                raise StructuralError(f"Unknown AFM key '{keyword}'", self._lexer.token_line)

        return metrics

    def _parse_header(self, metrics: FontMetrics) -> None:
        token = self._lexer.read_token()
        if token != START_FONT_METRICS:
            found = "end of document" if token is None else f"'{token}'"
            raise StructuralError(
                f"The AFM file should start with {START_FONT_METRICS} and not {found}",
                self._lexer.token_line,
            )
        metrics.afm_version = self._read_value(ValueKind.FLOAT, self._tokens)

    def _parse_header_value(self, metrics: FontMetrics, spec: KeywordSpec) -> None:
        if spec.kind is ValueKind.COMMENT:
            metrics.add_comment(self._read_line())
        elif spec.kind is ValueKind.TEXT:
            setattr(metrics, spec.target, self._read_line())
        else:
            setattr(metrics, spec.target, self._read_value(spec.kind, self._tokens))

    # Character metrics

    def _parse_char_metrics(self, metrics: FontMetrics) -> None:
        count = self._read_value(ValueKind.INT, self._tokens)
        logger.debug("Reading %d char metrics from line %d", count, self._lexer.token_line)

        char_metrics = [self._parse_char_metric() for _ in range(count)]
        self._expect(END_CHAR_METRICS)
        metrics.char_metrics = char_metrics

    def _parse_char_metric(self) -> CharMetric:
        line = self._read_line()
        tokens = LineTokenizer(
            line,
            delimiters=METRICS_DELIMITERS,
            keep=METRICS_KEEP,
            line_number=self._lexer.token_line,
        )

        fields: dict[str, Any] = {}
        ligatures: list[Ligature] = []
        while tokens.has_next():
            keyword = tokens.next_token()
            spec = CHAR_METRIC_KEYWORDS.get(keyword)
            if spec is None:
                raise GrammarError(
                    f"Unknown CharMetrics command '{keyword}'", tokens.line_number
                )

            value = self._read_value(spec.kind, tokens)
            if spec.kind is ValueKind.LIGATURE:
                ligatures.append(value)
            else:
                fields[spec.target] = value
            self._verify_semicolon(tokens)

        return CharMetric(ligatures=tuple(ligatures), **fields)

    def _verify_semicolon(self, tokens: LineTokenizer) -> None:
        if not tokens.has_next():
            raise GrammarError(
                f"CharMetrics is missing a semicolon after a command: '{tokens.line}'",
                tokens.line_number,
            )
        token = tokens.next_token()
        if token != SEMICOLON:
            raise GrammarError(
                f"Expected semicolon in stream actual='{token}'", tokens.line_number
            )

    # Kerning

    def _parse_kern_data(self, metrics: FontMetrics) -> None:
        while True:
            keyword = self._read_keyword(END_KERN_DATA)
            if keyword == END_KERN_DATA:
                break

            if keyword == START_TRACK_KERN:
                count = self._read_value(ValueKind.INT, self._tokens)
                for _ in range(count):
                    metrics.add_track_kern(self._parse_track_kern())
                self._expect(END_TRACK_KERN)
                logger.debug("Read %d track kerns", count)
            elif keyword in KERN_PAIR_SECTIONS:
                add_pair: Callable[[KernPair], None] = getattr(
                    metrics, KERN_PAIR_SECTIONS[keyword]
                )
                count = self._read_value(ValueKind.INT, self._tokens)
                for _ in range(count):
                    add_pair(self._parse_kern_pair())
                self._expect(END_KERN_PAIRS)
                logger.debug("Read %d kern pairs from %s", count, keyword)
            else:
                raise StructuralError(
                    f"Unknown kerning data type '{keyword}'", self._lexer.token_line
                )

    def _parse_track_kern(self) -> TrackKern:
        # The TrackKern keyword in front of each record is optional
        token = self._tokens.next_token()
        if token == TRACK_KERN:
            token = self._tokens.next_token()

        return TrackKern(
            degree=parse_int(token, self._tokens.line_number),
            min_point_size=self._read_value(ValueKind.FLOAT, self._tokens),
            min_kern=self._read_value(ValueKind.FLOAT, self._tokens),
            max_point_size=self._read_value(ValueKind.FLOAT, self._tokens),
            max_kern=self._read_value(ValueKind.FLOAT, self._tokens),
        )

    def _parse_kern_pair(self) -> KernPair:
        keyword = self._tokens.next_token()
        line = self._lexer.token_line

        if keyword == KERN_PAIR_KP:
            return KernPair(
                first=self._tokens.next_token(),
                second=self._tokens.next_token(),
                x=self._read_value(ValueKind.FLOAT, self._tokens),
                y=self._read_value(ValueKind.FLOAT, self._tokens),
            )
        if keyword == KERN_PAIR_KPH:
            first = hex_to_string(self._tokens.next_token(), line)
            second = hex_to_string(self._tokens.next_token(), line)
            return KernPair(
                first=first,
                second=second,
                x=self._read_value(ValueKind.FLOAT, self._tokens),
                y=self._read_value(ValueKind.FLOAT, self._tokens),
            )
        if keyword == KERN_PAIR_KPX:
            return KernPair(
                first=self._tokens.next_token(),
                second=self._tokens.next_token(),
                x=self._read_value(ValueKind.FLOAT, self._tokens),
            )
        if keyword == KERN_PAIR_KPY:
            return KernPair(
                first=self._tokens.next_token(),
                second=self._tokens.next_token(),
                y=self._read_value(ValueKind.FLOAT, self._tokens),
            )
        raise StructuralError(f"Expected kern pair command, found '{keyword}'", line)

    # Composites

    def _parse_composites(self, metrics: FontMetrics) -> None:
        count = self._read_value(ValueKind.INT, self._tokens)
        for _ in range(count):
            metrics.add_composite(self._parse_composite())
        self._expect(END_COMPOSITES)
        logger.debug("Read %d composites", count)

    def _parse_composite(self) -> Composite:
        line = self._read_line()
        tokens = LineTokenizer(
            line, delimiters=COMPOSITE_DELIMITERS, line_number=self._lexer.token_line
        )

        cc = tokens.next_token()
        if cc != CC:
            raise StructuralError(f"Expected '{CC}' actual='{cc}'", tokens.line_number)
        name = tokens.next_token()
        part_count = self._read_value(ValueKind.INT, tokens)

        parts = []
        for _ in range(part_count):
            pcc = tokens.next_token()
            if pcc != PCC:
                raise StructuralError(f"Expected '{PCC}' actual='{pcc}'", tokens.line_number)
            parts.append(
                CompositePart(
                    name=tokens.next_token(),
                    x_displacement=self._read_value(ValueKind.INT, tokens),
                    y_displacement=self._read_value(ValueKind.INT, tokens),
                )
            )

        return Composite(name=name, parts=tuple(parts))

    # Primitive reads

    def _read_keyword(self, terminator: str) -> str:
        token = self._lexer.read_token()
        if token is None:
            raise StructuralError(
                f"Unexpected end of AFM document, expected '{terminator}'",
                self._lexer.line_number,
            )
        return token

    def _expect(self, keyword: str) -> None:
        token = self._lexer.read_token()
        if token != keyword:
            found = "end of document" if token is None else f"'{token}'"
            raise StructuralError(
                f"Expected '{keyword}' actual {found}", self._lexer.token_line
            )

    def _read_line(self) -> str:
        line = self._lexer.read_rest_of_line()
        if line is None:
            raise StructuralError(
                "Unexpected end of AFM document while reading a line",
                self._lexer.line_number,
            )
        return line

    def _read_value(self, kind: ValueKind, tokens: _StreamTokens | LineTokenizer) -> Any:
        """Read and convert one value of the given kind from a token source."""
        if kind is ValueKind.NAME:
            return tokens.next_token()
        if kind is ValueKind.INT:
            return parse_int(tokens.next_token(), tokens.line_number)
        if kind is ValueKind.HEX_INT:
            return parse_hex_int(tokens.next_token(), tokens.line_number)
        if kind is ValueKind.FLOAT:
            return parse_float(tokens.next_token(), tokens.line_number)
        if kind is ValueKind.BOOL:
            return parse_bool(tokens.next_token(), tokens.line_number)
        if kind is ValueKind.VECTOR:
            x = parse_float(tokens.next_token(), tokens.line_number)
            y = parse_float(tokens.next_token(), tokens.line_number)
            return (x, y)
        if kind is ValueKind.BBOX:
            values = [parse_float(tokens.next_token(), tokens.line_number) for _ in range(4)]
            return BoundingBox(*values)
        if kind is ValueKind.LIGATURE:
            return Ligature(successor=tokens.next_token(), ligature=tokens.next_token())
        raise ValueError(f"Unsupported value kind: {kind.value}")


def parse_afm(
    source: bytes | BinaryIO,
    reduced_dataset: bool | None = None,
    config: ParserConfig | None = None,
) -> FontMetrics:
    """Parse an AFM document.

    Args:
        source: Document bytes or a readable binary stream
        reduced_dataset: Stop early at unknown keywords once char metrics are read;
            None uses the config value
        config: Parser configuration (defaults to full-dataset parsing)

    Returns:
        Parsed font metrics
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    parser = AfmParser(source, config=config)
    return parser.parse(reduced_dataset=reduced_dataset)
