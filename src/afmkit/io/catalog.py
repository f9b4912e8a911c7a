"""Catalog of parsed fonts indexed by font name.

The catalog loads AFM files from single paths, directories or zip archives
(the standard 14 fonts are commonly shipped as a zip of AFM files) and
indexes them by their FontName.
"""

import time
from collections.abc import Iterator
from pathlib import Path
from zipfile import BadZipFile, ZipFile

from afmkit.config import ParserConfig
from afmkit.core.parser import parse_afm
from afmkit.domain import FontMetrics
from afmkit.exceptions import (
    AfmError,
    AfmLoadError,
    CatalogError,
    DuplicateFontError,
    FontNotLoadedError,
)
from afmkit.io.reader import AfmReader
from afmkit.utils import ParseLogger


class MetricsCatalog:
    """Font metrics indexed by FontName.

    Example:
        catalog = MetricsCatalog()
        catalog.add_directory(Path("afm"))
        width = catalog["Helvetica"].character_width("A")
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        parse_logger: ParseLogger | None = None,
    ) -> None:
        """Initialize an empty catalog.

        Args:
            config: Parser configuration used for every file
            parse_logger: Tracks loading statistics (a default one is created if None)
        """
        self._config = config or ParserConfig()
        self._logger = parse_logger or ParseLogger()
        self._fonts: dict[str, FontMetrics] = {}

    @property
    def parse_logger(self) -> ParseLogger:
        return self._logger

    def add(self, metrics: FontMetrics) -> FontMetrics:
        """Add already-parsed metrics.

        Raises:
            CatalogError: If the metrics have no font name
            DuplicateFontError: If a font with that name is already loaded
        """
        return self._add_all([metrics])[0]

    def add_file(self, path: Path) -> FontMetrics:
        """Load one AFM file and add it.

        Raises:
            AfmLoadError: If the file cannot be read or parsed
            DuplicateFontError: If the font is already loaded
        """
        return self.add(self._load_file(path))

    def add_directory(self, directory: Path, pattern: str = "*.afm") -> list[FontMetrics]:
        """Load every matching file in a directory (not recursive).

        Either every file is added or, if one fails, none are.

        Args:
            directory: Directory to scan
            pattern: Glob pattern for AFM files

        Returns:
            Metrics added, in file name order
        """
        if not directory.is_dir():
            raise AfmLoadError(str(directory), "not a directory")

        loaded = [self._load_file(path) for path in sorted(directory.glob(pattern))]
        return self._add_all(loaded)

    def add_zip(self, path: Path, fonts: list[str] | None = None) -> list[FontMetrics]:
        """Load AFM files stored at the top level of a zip archive.

        Either every selected member is added or, if one fails, none are.

        Args:
            path: Zip file path
            fonts: If given, only members whose file stem is in this list are loaded

        Returns:
            Metrics added, in archive order
        """
        loaded = []
        try:
            archive = ZipFile(path)
        except (OSError, BadZipFile) as e:
            raise AfmLoadError(str(path), str(e)) from e

        with archive:
            for member in archive.namelist():
                if not member.lower().endswith(".afm") or "/" in member:
                    continue

                source = f"{path}!{member}"
                stem = member.rsplit(".", 1)[0]
                if fonts is not None and stem not in fonts:
                    self._logger.log_file_skipped(source, "not requested")
                    continue

                self._logger.log_file_start(source)
                start = time.time()
                try:
                    metrics = parse_afm(archive.read(member), config=self._config)
                except (OSError, BadZipFile, AfmError) as e:
                    self._logger.log_file_error(source, e)
                    raise AfmLoadError(source, str(e)) from e

                self._logger.log_file_complete(source, metrics, (time.time() - start) * 1000)
                loaded.append(metrics)

        return self._add_all(loaded)

    def _load_file(self, path: Path) -> FontMetrics:
        self._logger.log_file_start(str(path))
        start = time.time()

        try:
            metrics = AfmReader(path, config=self._config).load()
        except (OSError, AfmError) as e:
            self._logger.log_file_error(str(path), e)
            raise AfmLoadError(str(path), str(e)) from e

        self._logger.log_file_complete(str(path), metrics, (time.time() - start) * 1000)
        return metrics

    def _add_all(self, loaded: list[FontMetrics]) -> list[FontMetrics]:
        # Names are checked against the catalog and each other before any is added
        seen: set[str] = set()
        for metrics in loaded:
            name = metrics.font_name
            if not name:
                raise CatalogError("Cannot catalog font metrics without a FontName")
            if name in self._fonts or name in seen:
                raise DuplicateFontError(name)
            seen.add(name)

        for metrics in loaded:
            self._fonts[metrics.font_name] = metrics
        return loaded

    def remove(self, name: str) -> FontMetrics:
        """Remove a font and return its metrics.

        Raises:
            FontNotLoadedError: If the font is not in the catalog
        """
        if name not in self._fonts:
            raise FontNotLoadedError(name)
        return self._fonts.pop(name)

    def names(self) -> list[str]:
        """Get the loaded font names in insertion order."""
        return list(self._fonts)

    def __contains__(self, name: object) -> bool:
        return name in self._fonts

    def __getitem__(self, name: str) -> FontMetrics:
        if name not in self._fonts:
            raise FontNotLoadedError(name)
        return self._fonts[name]

    def __len__(self) -> int:
        return len(self._fonts)

    def __iter__(self) -> Iterator[FontMetrics]:
        return iter(self._fonts.values())
