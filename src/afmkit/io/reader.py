"""AFM file reader.

This module provides the AfmReader class for loading AFM files from disk
and exposing the parsed FontMetrics.
"""

from collections.abc import Iterator
from pathlib import Path

from afmkit.config import ParserConfig
from afmkit.core.parser import AfmParser
from afmkit.domain import CharMetric, FontMetrics


class AfmReader:
    """Loads an AFM file and gives access to its metrics.

    The file is opened, parsed in one pass and closed again during load();
    the reader keeps only the parsed model.

    Example:
        with AfmReader(Path("Helvetica.afm")) as reader:
            for metric in reader.iter_char_metrics():
                print(metric.name, metric.wx)
    """

    def __init__(self, afm_path: Path, config: ParserConfig | None = None) -> None:
        """Initialize the reader.

        Args:
            afm_path: Path to the AFM file
            config: Parser configuration
        """
        self._afm_path = afm_path
        self._config = config or ParserConfig()
        self._metrics: FontMetrics | None = None

    @property
    def path(self) -> Path:
        return self._afm_path

    def load(self) -> FontMetrics:
        """Read and parse the AFM file.

        Returns:
            The parsed font metrics

        Raises:
            FileNotFoundError: If the file does not exist
            AfmParseError: If the file is not a valid AFM document
        """
        if not self._afm_path.exists():
            raise FileNotFoundError(f"AFM file not found: {self._afm_path}")

        with self._afm_path.open("rb") as stream:
            self._metrics = AfmParser(stream, config=self._config).parse()
        return self._metrics

    @property
    def metrics(self) -> FontMetrics:
        """Return the parsed metrics.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._metrics is None:
            raise RuntimeError("AFM file not loaded. Call load() first.")
        return self._metrics

    @property
    def font_name(self) -> str | None:
        """Return the FontName of the loaded file."""
        return self.metrics.font_name

    @property
    def char_metric_count(self) -> int:
        """Return the number of character metrics read."""
        return len(self.metrics.char_metrics)

    def iter_char_metrics(self) -> Iterator[CharMetric]:
        """Iterate over character metrics in document order.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        yield from self.metrics.char_metrics

    def get_char_metric(self, name: str) -> CharMetric | None:
        """Get the metrics of a glyph by name, or None if absent."""
        return self.metrics.get_char_metric(name)

    def close(self) -> None:
        """Drop the parsed metrics."""
        self._metrics = None

    def __enter__(self) -> "AfmReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
