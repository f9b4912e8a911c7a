"""Root model holding everything read from one AFM document.

The parser creates an empty FontMetrics, fills it in section by section and
hands it to the caller. Collections are exposed as tuples; the ``add_*``
methods and the ``char_metrics`` setter are the only ways to change them.
"""

from dataclasses import dataclass, field
from typing import Any

from afmkit.domain.bbox import BoundingBox
from afmkit.domain.char_metric import CharMetric
from afmkit.domain.composite import Composite
from afmkit.domain.kerning import KernPair, TrackKern
from afmkit.exceptions import ValidationError

METRIC_SETS = (0, 1, 2)


@dataclass
class FontMetrics:
    """Font-wide metrics plus char metrics, kerning and composites.

    Attributes:
        afm_version: Version from the StartFontMetrics line
        font_name: PostScript font name
        full_name: Human readable full name
        family_name: Font family name
        weight: Weight string, e.g. "Bold"
        font_bbox: Union of all glyph bounding boxes
        font_version: Version of the font program (Version keyword)
        notice: Trademark or copyright notice
        encoding_scheme: Name of the default encoding
        mapping_scheme: Mapping scheme for composite fonts
        esc_char: Escape byte for escape-mapped composite fonts
        character_set: Name of the glyph set
        characters: Number of glyphs declared in the header
        is_base_font: False for composite (Type 0) fonts
        v_vector: Vector from origin 0 to origin 1, if shared by all glyphs
        is_fixed_v: True if v_vector applies to every glyph
        cap_height: Height of flat capitals
        x_height: Height of flat lowercase letters
        ascender: Top of lowercase ascenders
        descender: Bottom of lowercase descenders
        underline_position: Distance from baseline to underline centre
        underline_thickness: Underline stroke width
        italic_angle: Slant in degrees counter-clockwise from vertical
        char_width: Width vector shared by all glyphs of a fixed-pitch font
        is_fixed_pitch: True for monospaced fonts
        standard_horizontal_width: StdHW dominant horizontal stem
        standard_vertical_width: StdVW dominant vertical stem
    """

    afm_version: float = 0.0
    font_name: str | None = None
    full_name: str | None = None
    family_name: str | None = None
    weight: str | None = None
    font_bbox: BoundingBox | None = None
    font_version: str | None = None
    notice: str | None = None
    encoding_scheme: str | None = None
    mapping_scheme: int = 0
    esc_char: int = 0
    character_set: str | None = None
    characters: int = 0
    is_base_font: bool = False
    v_vector: tuple[float, float] | None = None
    is_fixed_v: bool = False
    cap_height: float = 0.0
    x_height: float = 0.0
    ascender: float = 0.0
    descender: float = 0.0
    underline_position: float = 0.0
    underline_thickness: float = 0.0
    italic_angle: float = 0.0
    char_width: tuple[float, float] | None = None
    is_fixed_pitch: bool = False
    standard_horizontal_width: float = 0.0
    standard_vertical_width: float = 0.0

    _metric_sets: int = field(default=0, init=False, repr=False)
    _comments: list[str] = field(default_factory=list, init=False, repr=False)
    _char_metrics: list[CharMetric] = field(default_factory=list, init=False, repr=False)
    _char_metrics_by_name: dict[str, CharMetric] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _track_kerns: list[TrackKern] = field(default_factory=list, init=False, repr=False)
    _composites: list[Composite] = field(default_factory=list, init=False, repr=False)
    _kern_pairs: list[KernPair] = field(default_factory=list, init=False, repr=False)
    _kern_pairs0: list[KernPair] = field(default_factory=list, init=False, repr=False)
    _kern_pairs1: list[KernPair] = field(default_factory=list, init=False, repr=False)

    @property
    def metric_sets(self) -> int:
        """Writing directions described by the file: 0, 1 or 2 (both)."""
        return self._metric_sets

    @metric_sets.setter
    def metric_sets(self, value: int) -> None:
        if value not in METRIC_SETS:
            raise ValidationError("metric_sets", value, "the set {0,1,2}")
        self._metric_sets = value

    # Comments

    @property
    def comments(self) -> tuple[str, ...]:
        return tuple(self._comments)

    def add_comment(self, comment: str) -> None:
        self._comments.append(comment)

    # Character metrics

    @property
    def char_metrics(self) -> tuple[CharMetric, ...]:
        """Char metrics in document order."""
        return tuple(self._char_metrics)

    @char_metrics.setter
    def char_metrics(self, metrics: list[CharMetric] | tuple[CharMetric, ...]) -> None:
        self._char_metrics = []
        self._char_metrics_by_name = {}
        for metric in metrics:
            self.add_char_metric(metric)

    def add_char_metric(self, metric: CharMetric) -> None:
        """Append a char metric; a later glyph with the same name wins the lookup."""
        self._char_metrics.append(metric)
        if metric.name is not None:
            self._char_metrics_by_name[metric.name] = metric

    def get_char_metric(self, name: str) -> CharMetric | None:
        """Look up a char metric by glyph name.

        Args:
            name: Glyph name, e.g. "A" or "fi"

        Returns:
            The last char metric with that name, or None
        """
        return self._char_metrics_by_name.get(name)

    def get_char_metric_by_code(self, code: int) -> CharMetric | None:
        """Look up the first char metric with the given character code."""
        for metric in self._char_metrics:
            if metric.character_code == code:
                return metric
        return None

    def character_width(self, name: str) -> float:
        """Get the horizontal advance of a glyph, 0 if the glyph is unknown."""
        metric = self._char_metrics_by_name.get(name)
        if metric is None:
            return 0.0
        return metric.wx

    def character_height(self, name: str) -> float:
        """Get the vertical advance of a glyph.

        Horizontal fonts usually leave WY at 0, in which case the height of
        the glyph's bounding box is used instead.

        Args:
            name: Glyph name

        Returns:
            WY, the bounding box height, or 0 if the glyph is unknown
        """
        metric = self._char_metrics_by_name.get(name)
        if metric is None:
            return 0.0
        if metric.wy == 0 and metric.bounding_box is not None:
            return metric.bounding_box.height
        return metric.wy

    @property
    def average_character_width(self) -> float:
        """Mean of all positive WX values, 0 if there are none."""
        widths = [m.wx for m in self._char_metrics if m.wx > 0]
        if not widths:
            return 0.0
        return sum(widths) / len(widths)

    # Track kerning

    @property
    def track_kerns(self) -> tuple[TrackKern, ...]:
        return tuple(self._track_kerns)

    @track_kerns.setter
    def track_kerns(self, kerns: list[TrackKern] | tuple[TrackKern, ...]) -> None:
        self._track_kerns = list(kerns)

    def add_track_kern(self, kern: TrackKern) -> None:
        self._track_kerns.append(kern)

    # Composites

    @property
    def composites(self) -> tuple[Composite, ...]:
        return tuple(self._composites)

    @composites.setter
    def composites(self, composites: list[Composite] | tuple[Composite, ...]) -> None:
        self._composites = list(composites)

    def add_composite(self, composite: Composite) -> None:
        self._composites.append(composite)

    # Kern pairs

    @property
    def kern_pairs(self) -> tuple[KernPair, ...]:
        """Pairs from StartKernPairs (both directions)."""
        return tuple(self._kern_pairs)

    @kern_pairs.setter
    def kern_pairs(self, pairs: list[KernPair] | tuple[KernPair, ...]) -> None:
        self._kern_pairs = list(pairs)

    def add_kern_pair(self, pair: KernPair) -> None:
        self._kern_pairs.append(pair)

    @property
    def kern_pairs0(self) -> tuple[KernPair, ...]:
        """Pairs from StartKernPairs0 (writing direction 0)."""
        return tuple(self._kern_pairs0)

    @kern_pairs0.setter
    def kern_pairs0(self, pairs: list[KernPair] | tuple[KernPair, ...]) -> None:
        self._kern_pairs0 = list(pairs)

    def add_kern_pair0(self, pair: KernPair) -> None:
        self._kern_pairs0.append(pair)

    @property
    def kern_pairs1(self) -> tuple[KernPair, ...]:
        """Pairs from StartKernPairs1 (writing direction 1)."""
        return tuple(self._kern_pairs1)

    @kern_pairs1.setter
    def kern_pairs1(self, pairs: list[KernPair] | tuple[KernPair, ...]) -> None:
        self._kern_pairs1 = list(pairs)

    def add_kern_pair1(self, pair: KernPair) -> None:
        self._kern_pairs1.append(pair)

    def kern_pairs_for(self, name: str) -> list[KernPair]:
        """Get the default-direction kern pairs whose first glyph is ``name``."""
        return [pair for pair in self._kern_pairs if pair.first == name]

    def kerning(self, first: str, second: str) -> float:
        """Get the horizontal kern between two glyphs, 0 if no pair exists."""
        for pair in self._kern_pairs:
            if pair.first == first and pair.second == second:
                return pair.x
        return 0.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary.

        Returns:
            Dictionary of header fields plus lists of the sections
        """
        return {
            "afm_version": self.afm_version,
            "metric_sets": self.metric_sets,
            "font_name": self.font_name,
            "full_name": self.full_name,
            "family_name": self.family_name,
            "weight": self.weight,
            "font_bbox": self.font_bbox.to_dict() if self.font_bbox else None,
            "font_version": self.font_version,
            "notice": self.notice,
            "encoding_scheme": self.encoding_scheme,
            "mapping_scheme": self.mapping_scheme,
            "esc_char": self.esc_char,
            "character_set": self.character_set,
            "characters": self.characters,
            "is_base_font": self.is_base_font,
            "v_vector": list(self.v_vector) if self.v_vector else None,
            "is_fixed_v": self.is_fixed_v,
            "cap_height": self.cap_height,
            "x_height": self.x_height,
            "ascender": self.ascender,
            "descender": self.descender,
            "underline_position": self.underline_position,
            "underline_thickness": self.underline_thickness,
            "italic_angle": self.italic_angle,
            "char_width": list(self.char_width) if self.char_width else None,
            "is_fixed_pitch": self.is_fixed_pitch,
            "std_hw": self.standard_horizontal_width,
            "std_vw": self.standard_vertical_width,
            "comments": list(self._comments),
            "char_metrics": [m.to_dict() for m in self._char_metrics],
            "track_kerns": [k.to_dict() for k in self._track_kerns],
            "kern_pairs": [p.to_dict() for p in self._kern_pairs],
            "kern_pairs0": [p.to_dict() for p in self._kern_pairs0],
            "kern_pairs1": [p.to_dict() for p in self._kern_pairs1],
            "composites": [c.to_dict() for c in self._composites],
        }
