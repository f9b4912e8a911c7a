"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from afmkit.domain import CharMetric, FontMetrics, KernPair

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]afmkit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def _fmt_number(value: float) -> str:
    """Format a metric without a trailing .0 for whole numbers."""
    if value == int(value):
        return str(int(value))
    return f"{value:g}"


def print_font_info(afm_path: str, metrics: FontMetrics) -> None:
    """Print the font header summary and section counts.

    Args:
        afm_path: Path to the AFM file
        metrics: Parsed font metrics
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(afm_path)
    line1.append(f" (AFM {_fmt_number(metrics.afm_version)})")
    console.print(line1)

    rows = [
        ("FontName", metrics.font_name),
        ("FullName", metrics.full_name),
        ("FamilyName", metrics.family_name),
        ("Weight", metrics.weight),
        ("Version", metrics.font_version),
        ("EncodingScheme", metrics.encoding_scheme),
        ("FontBBox", str(metrics.font_bbox) if metrics.font_bbox else None),
        ("ItalicAngle", _fmt_number(metrics.italic_angle)),
        ("IsFixedPitch", str(metrics.is_fixed_pitch).lower()),
        ("CapHeight", _fmt_number(metrics.cap_height)),
        ("XHeight", _fmt_number(metrics.x_height)),
        ("Ascender", _fmt_number(metrics.ascender)),
        ("Descender", _fmt_number(metrics.descender)),
    ]
    console.print()
    for key, value in rows:
        if value is None:
            continue
        line = Text(f"  {key:<16}")
        line.append(value)
        console.print(line)

    kern_pairs = len(metrics.kern_pairs) + len(metrics.kern_pairs0) + len(metrics.kern_pairs1)
    console.print(
        f"\n  {len(metrics.char_metrics)} glyphs {SYM_DOT} {kern_pairs} kern pairs "
        f"{SYM_DOT} {len(metrics.track_kerns)} track kerns "
        f"{SYM_DOT} {len(metrics.composites)} composites"
    )
    console.print(f"  average width {metrics.average_character_width:.1f}")


def print_char_table(char_metrics: list[CharMetric] | tuple[CharMetric, ...], limit: int | None) -> None:
    """Print character metrics as a table.

    Args:
        char_metrics: Metrics to show, in document order
        limit: Maximum number of rows (None for all)
    """
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Code", justify="right")
    table.add_column("Name")
    table.add_column("WX", justify="right")
    table.add_column("BBox")
    table.add_column("Ligatures")

    shown = char_metrics if limit is None else char_metrics[:limit]
    for metric in shown:
        ligatures = ", ".join(f"{lig.successor}→{lig.ligature}" for lig in metric.ligatures)
        table.add_row(
            str(metric.character_code),
            metric.name or "",
            _fmt_number(metric.wx),
            str(metric.bounding_box) if metric.bounding_box else "",
            ligatures,
        )
    console.print(table)

    hidden = len(char_metrics) - len(shown)
    if hidden > 0:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{hidden} more)")


def print_kern_table(pairs: list[KernPair] | tuple[KernPair, ...], title: str) -> None:
    """Print kern pairs as a table.

    Args:
        pairs: Kern pairs to show
        title: Table title, e.g. the section name
    """
    table = Table(title=title, show_edge=False, pad_edge=False)
    table.add_column("First")
    table.add_column("Second")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")

    for pair in pairs:
        table.add_row(pair.first, pair.second, _fmt_number(pair.x), _fmt_number(pair.y))
    console.print(table)


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Messages quote document text, which must not be read as markup
    line = Text(f"\n{SYM_ERR} Error: ", style="bold red")
    line.append(message, style="default")
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
