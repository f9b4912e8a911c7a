"""CLI application entry point for afmkit.

This module provides the main CLI interface using Typer.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from afmkit import __version__
from afmkit.cli.output import (
    console,
    print_char_table,
    print_error,
    print_font_info,
    print_header,
    print_kern_table,
    print_step,
    print_success,
)
from afmkit.config import AfmSettings, LoggingConfig, ParserConfig
from afmkit.domain import FontMetrics
from afmkit.exceptions import AfmError, AfmLoadError
from afmkit.io import MetricsCatalog
from afmkit.utils import ParseLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="afmkit",
    help="Inspect Adobe Font Metrics (AFM) files.",
    add_completion=False,
    no_args_is_help=True,
)

AfmFileArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to the AFM file",
        show_default=False,
    ),
]
ReducedOption = Annotated[
    bool,
    typer.Option(
        "--reduced",
        help="Stop at the first unknown keyword after the char metrics instead of failing",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]


class LogLevel(str, Enum):
    """Levels accepted by --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


LogLevelOption = Annotated[
    LogLevel,
    typer.Option(
        "--log-level",
        help="Log file level",
        case_sensitive=False,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]afmkit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect Adobe Font Metrics (AFM) files."""


def _load_metrics(
    afm_file: Path,
    reduced: bool,
    log_file: Path | None,
    log_level: LogLevel,
) -> FontMetrics:
    """Parse an AFM file, exiting with code 1 on failure.

    Args:
        afm_file: Path to the AFM file
        reduced: Parse in reduced-dataset mode
        log_file: Log file path, logging is only configured when given
        log_level: Level for the log file

    Returns:
        Parsed font metrics
    """
    if not afm_file.exists():
        print_error(
            f"Input file not found: {afm_file}",
            details=f"The file '{afm_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not afm_file.is_file():
        print_error(
            f"Input path is not a file: {afm_file}",
            details="Please provide a path to an AFM file.",
        )
        raise typer.Exit(code=1)

    settings = AfmSettings(
        parser=ParserConfig(reduced_dataset=reduced),
        logging=LoggingConfig(log_file=log_file, file_log_level=log_level.value),
    )

    parse_logger = None
    if settings.logging.log_file is not None:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=True,
        )
        parse_logger = ParseLogger(logger)

    catalog = MetricsCatalog(config=settings.parser, parse_logger=parse_logger)
    try:
        return catalog.add_file(afm_file)
    except AfmLoadError as e:
        print_error(f"Could not parse AFM file: {e.reason}")
        raise typer.Exit(code=1) from None
    except AfmError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def info(
    afm_file: AfmFileArgument,
    reduced: ReducedOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = LogLevel.DEBUG,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Show the font header and section counts of an AFM file.

    Example:
        afmkit info Helvetica.afm
    """
    if not quiet:
        print_header(__version__)
        print_step("Parsing")

    metrics = _load_metrics(afm_file, reduced, log_file, log_level)

    if quiet:
        console.print(metrics.font_name or "", markup=False)
        return

    print_font_info(str(afm_file), metrics)
    print_success("Parsed")


@app.command()
def chars(
    afm_file: AfmFileArgument,
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-n",
            help="Maximum number of glyphs to list (0 for all)",
            min=0,
        ),
    ] = 20,
    reduced: ReducedOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = LogLevel.DEBUG,
) -> None:
    """List character metrics: code, name, width, bounding box and ligatures."""
    metrics = _load_metrics(afm_file, reduced, log_file, log_level)
    print_char_table(metrics.char_metrics, limit=limit or None)


@app.command()
def kerning(
    afm_file: AfmFileArgument,
    glyph: Annotated[
        str | None,
        typer.Option(
            "--glyph",
            "-g",
            help="Only show pairs starting with this glyph",
        ),
    ] = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = LogLevel.DEBUG,
) -> None:
    """List kern pairs, by section.

    Kerning is not read in reduced-dataset mode, so this command has no
    --reduced option.
    """
    metrics = _load_metrics(afm_file, False, log_file, log_level)

    if glyph is not None:
        pairs = metrics.kern_pairs_for(glyph)
        if not pairs:
            console.print(f"No kern pairs for '{glyph}'", markup=False)
            return
        print_kern_table(pairs, title=f"KernPairs for {glyph}")
        return

    sections = [
        ("KernPairs", metrics.kern_pairs),
        ("KernPairs0", metrics.kern_pairs0),
        ("KernPairs1", metrics.kern_pairs1),
    ]
    shown = False
    for title, pairs in sections:
        if pairs:
            print_kern_table(pairs, title=title)
            shown = True

    for track in metrics.track_kerns:
        console.print(
            f"  TrackKern {track.degree}: {track.min_kern:g} at {track.min_point_size:g}pt, "
            f"{track.max_kern:g} at {track.max_point_size:g}pt"
        )
        shown = True

    if not shown:
        console.print("No kerning data")


@app.command()
def dump(
    afm_file: AfmFileArgument,
    indent: Annotated[
        int,
        typer.Option(
            "--indent",
            help="JSON indentation",
            min=0,
        ),
    ] = 2,
    reduced: ReducedOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = LogLevel.DEBUG,
) -> None:
    """Print the parsed metrics as JSON."""
    metrics = _load_metrics(afm_file, reduced, log_file, log_level)
    typer.echo(json.dumps(metrics.to_dict(), indent=indent or None, ensure_ascii=False))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
