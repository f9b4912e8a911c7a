"""Axis-aligned bounding box used for fonts and glyphs."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """A rectangle given by its lower-left and upper-right corners.

    Malformed boxes (upper-right below or left of lower-left) are kept as-is;
    their width or height simply comes out negative.

    Attributes:
        lower_left_x: Minimum x in font units
        lower_left_y: Minimum y in font units
        upper_right_x: Maximum x in font units
        upper_right_y: Maximum y in font units
    """

    lower_left_x: float = 0.0
    lower_left_y: float = 0.0
    upper_right_x: float = 0.0
    upper_right_y: float = 0.0

    @property
    def width(self) -> float:
        """Horizontal extent of the box."""
        return self.upper_right_x - self.lower_left_x

    @property
    def height(self) -> float:
        """Vertical extent of the box."""
        return self.upper_right_y - self.lower_left_y

    def contains(self, x: float, y: float) -> bool:
        """Check whether a point lies inside the box, edges included.

        Args:
            x: X coordinate
            y: Y coordinate

        Returns:
            True if the point is inside or on the boundary
        """
        return (
            self.lower_left_x <= x <= self.upper_right_x
            and self.lower_left_y <= y <= self.upper_right_y
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (llx, lly, urx, ury) tuple."""
        return (self.lower_left_x, self.lower_left_y, self.upper_right_x, self.upper_right_y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the four corner coordinates
        """
        return {
            "llx": self.lower_left_x,
            "lly": self.lower_left_y,
            "urx": self.upper_right_x,
            "ury": self.upper_right_y,
        }

    def __str__(self) -> str:
        return (
            f"[{self.lower_left_x},{self.lower_left_y},"
            f"{self.upper_right_x},{self.upper_right_y}]"
        )
