"""Per-glyph metrics from the character metrics section of an AFM file."""

from dataclasses import dataclass
from typing import Any

from afmkit.domain.bbox import BoundingBox

# Character code of glyphs that are not in the font's encoding
UNENCODED = -1


@dataclass(frozen=True, slots=True)
class Ligature:
    """A ligature formed when this glyph is followed by ``successor``.

    Attributes:
        successor: Name of the glyph that follows
        ligature: Name of the resulting ligature glyph
    """

    successor: str
    ligature: str


@dataclass(frozen=True, slots=True)
class CharMetric:
    """Metrics of a single glyph, one per character metric line.

    Widths are given in up to three writing directions: the default
    (``wx``/``wy``), direction 0 and direction 1. The paired forms ``w``,
    ``w0``, ``w1`` and the vertical origin vector ``vv`` are None when the
    line does not specify them.

    Attributes:
        character_code: Code in the font's encoding, -1 if unencoded
        name: PostScript glyph name
        wx: Horizontal advance (direction 0 and 1 shared)
        wy: Vertical advance
        w0x: Horizontal advance, direction 0
        w0y: Vertical advance, direction 0
        w1x: Horizontal advance, direction 1
        w1y: Vertical advance, direction 1
        w: (x, y) advance vector
        w0: (x, y) advance vector, direction 0
        w1: (x, y) advance vector, direction 1
        vv: Vector from origin 0 to origin 1
        bounding_box: Glyph bounding box, None if not given
        ligatures: Ligatures starting with this glyph, in document order
    """

    character_code: int = UNENCODED
    name: str | None = None
    wx: float = 0.0
    wy: float = 0.0
    w0x: float = 0.0
    w0y: float = 0.0
    w1x: float = 0.0
    w1y: float = 0.0
    w: tuple[float, float] | None = None
    w0: tuple[float, float] | None = None
    w1: tuple[float, float] | None = None
    vv: tuple[float, float] | None = None
    bounding_box: BoundingBox | None = None
    ligatures: tuple[Ligature, ...] = ()

    @property
    def is_encoded(self) -> bool:
        """True if the glyph has a code in the font's encoding."""
        return self.character_code != UNENCODED

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, leaving out unset vector fields."""
        data: dict[str, Any] = {
            "code": self.character_code,
            "name": self.name,
            "wx": self.wx,
            "wy": self.wy,
        }
        for key in ("w0x", "w0y", "w1x", "w1y"):
            value = getattr(self, key)
            if value:
                data[key] = value
        for key in ("w", "w0", "w1", "vv"):
            value = getattr(self, key)
            if value is not None:
                data[key] = list(value)
        if self.bounding_box is not None:
            data["bbox"] = self.bounding_box.to_dict()
        if self.ligatures:
            data["ligatures"] = [
                {"successor": lig.successor, "ligature": lig.ligature}
                for lig in self.ligatures
            ]
        return data
