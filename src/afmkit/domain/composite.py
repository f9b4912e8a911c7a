"""Composite glyphs assembled from positioned parts."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CompositePart:
    """One glyph placed inside a composite.

    Attributes:
        name: Name of the part glyph
        x_displacement: Horizontal offset from the composite origin
        y_displacement: Vertical offset from the composite origin
    """

    name: str
    x_displacement: int
    y_displacement: int


@dataclass(frozen=True, slots=True)
class Composite:
    """A glyph built from other glyphs, e.g. Aacute from A and acute.

    Attributes:
        name: Name of the composite glyph
        parts: Parts in document order
    """

    name: str
    parts: tuple[CompositePart, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "parts": [
                {"name": p.name, "dx": p.x_displacement, "dy": p.y_displacement}
                for p in self.parts
            ],
        }
