"""Domain models for afmkit.

This module contains the model an AFM document is parsed into. The record
types are frozen dataclasses; FontMetrics is the only mutable type and is
only changed through its ``add_*`` methods while a document is being parsed
or rebuilt.

Key classes:
- FontMetrics: Root of a parsed document
- CharMetric, Ligature: Per-glyph metrics
- KernPair, TrackKern: Kerning data
- Composite, CompositePart: Composite glyph definitions
- BoundingBox: Font and glyph bounding boxes
"""

from afmkit.domain.bbox import BoundingBox
from afmkit.domain.char_metric import UNENCODED, CharMetric, Ligature
from afmkit.domain.composite import Composite, CompositePart
from afmkit.domain.font_metrics import METRIC_SETS, FontMetrics
from afmkit.domain.kerning import KernPair, TrackKern

__all__: list[str] = [
    # Constants
    "METRIC_SETS",
    "UNENCODED",
    # Core types
    "BoundingBox",
    "CharMetric",
    "Ligature",
    "KernPair",
    "TrackKern",
    "Composite",
    "CompositePart",
    "FontMetrics",
]
