"""Exception hierarchy for afmkit."""


class AfmError(Exception):
    """Base exception for all afmkit errors."""

    pass


class AfmParseError(AfmError):
    """An AFM document could not be parsed.

    Attributes:
        reason: Description of what was expected and what was found
        line: 1-based line number in the document, if known
    """

    def __init__(self, reason: str, line: int | None = None) -> None:
        self.reason = reason
        self.line = line
        if line is None:
            super().__init__(reason)
        else:
            super().__init__(f"line {line}: {reason}")


class StructuralError(AfmParseError):
    """Wrong header, missing terminator, or unknown section keyword."""

    pass


class FormatError(AfmParseError):
    """A value token is not a valid number, boolean or hex string."""

    pass


class GrammarError(AfmParseError):
    """A character metric or composite line is malformed."""

    pass


class ValidationError(AfmError, ValueError):
    """A model field was assigned a value outside its allowed range."""

    def __init__(self, field: str, value: object, allowed: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"The {field} attribute must be in {allowed} and not '{value}'")


class AfmLoadError(AfmError):
    """Error loading an AFM file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load AFM file '{path}': {reason}")


class CatalogError(AfmError):
    """Errors related to the metrics catalog."""

    pass


class DuplicateFontError(CatalogError):
    """A font with the same name is already in the catalog."""

    def __init__(self, font_name: str) -> None:
        self.font_name = font_name
        super().__init__(f"Font '{font_name}' is already loaded")


class FontNotLoadedError(CatalogError, KeyError):
    """Requested font is not in the catalog."""

    def __init__(self, font_name: str) -> None:
        self.font_name = font_name
        super().__init__(f"Font '{font_name}' has not been loaded")

    def __str__(self) -> str:
        return str(self.args[0])
