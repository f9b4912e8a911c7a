"""Kerning records: glyph pairs and point-size dependent track kerning."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class KernPair:
    """Adjustment applied between two adjacent glyphs.

    All four AFM forms (KP, KPH, KPX, KPY) normalize to this shape; the axis
    a form does not mention is 0.

    Attributes:
        first: Name of the left (or upper) glyph
        second: Name of the right (or lower) glyph
        x: Horizontal displacement in font units
        y: Vertical displacement in font units
    """

    first: str
    second: str
    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"first": self.first, "second": self.second, "x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class TrackKern:
    """Track kerning for one degree of tightness.

    Between ``min_point_size`` and ``max_point_size`` the kern amount varies
    linearly from ``min_kern`` to ``max_kern``; outside that range it stays at
    the nearest end value.

    Attributes:
        degree: Tightness degree (negative is tighter)
        min_point_size: Point size at or below which min_kern applies
        min_kern: Kern amount at min_point_size
        max_point_size: Point size at or above which max_kern applies
        max_kern: Kern amount at max_point_size
    """

    degree: int
    min_point_size: float
    min_kern: float
    max_point_size: float
    max_kern: float

    def kern_at(self, point_size: float) -> float:
        """Get the track kern amount for a point size.

        Args:
            point_size: Font size in points

        Returns:
            Kern amount in points
        """
        if point_size <= self.min_point_size:
            return self.min_kern
        if point_size >= self.max_point_size:
            return self.max_kern

        span = self.max_point_size - self.min_point_size
        t = (point_size - self.min_point_size) / span
        return self.min_kern + t * (self.max_kern - self.min_kern)

    def to_dict(self) -> dict[str, Any]:
        return {
            "degree": self.degree,
            "min_point_size": self.min_point_size,
            "min_kern": self.min_kern,
            "max_point_size": self.max_point_size,
            "max_kern": self.max_kern,
        }
