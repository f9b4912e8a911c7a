"""AFM keywords and the tables that drive keyword dispatch.

Each table maps the keyword text to a KeywordSpec naming the kind of value
that follows and the model attribute it goes into. Adding a keyword is a new
table entry; the parser has one code path per value kind.
"""

from dataclasses import dataclass
from enum import Enum

# Section keywords
START_FONT_METRICS = "StartFontMetrics"
END_FONT_METRICS = "EndFontMetrics"
START_CHAR_METRICS = "StartCharMetrics"
END_CHAR_METRICS = "EndCharMetrics"
START_KERN_DATA = "StartKernData"
END_KERN_DATA = "EndKernData"
START_TRACK_KERN = "StartTrackKern"
END_TRACK_KERN = "EndTrackKern"
TRACK_KERN = "TrackKern"
START_KERN_PAIRS = "StartKernPairs"
START_KERN_PAIRS0 = "StartKernPairs0"
START_KERN_PAIRS1 = "StartKernPairs1"
END_KERN_PAIRS = "EndKernPairs"
START_COMPOSITES = "StartComposites"
END_COMPOSITES = "EndComposites"

# Composite line keywords
CC = "CC"
PCC = "PCC"

# Kern pair record keywords
KERN_PAIR_KP = "KP"
KERN_PAIR_KPH = "KPH"
KERN_PAIR_KPX = "KPX"
KERN_PAIR_KPY = "KPY"

SEMICOLON = ";"


class ValueKind(str, Enum):
    """What follows a keyword and how it is read."""

    TEXT = "text"  # rest of the line
    COMMENT = "comment"  # rest of the line, appended to the comments
    INT = "int"
    HEX_INT = "hex_int"
    FLOAT = "float"
    BOOL = "bool"
    NAME = "name"  # one token, kept as text
    VECTOR = "vector"  # two floats
    BBOX = "bbox"  # four floats
    LIGATURE = "ligature"  # two names


ARITY: dict[ValueKind, int] = {
    ValueKind.INT: 1,
    ValueKind.HEX_INT: 1,
    ValueKind.FLOAT: 1,
    ValueKind.BOOL: 1,
    ValueKind.NAME: 1,
    ValueKind.VECTOR: 2,
    ValueKind.BBOX: 4,
    ValueKind.LIGATURE: 2,
}


@dataclass(frozen=True, slots=True)
class KeywordSpec:
    """Dispatch entry for one keyword.

    Attributes:
        kind: Kind of value following the keyword
        target: Attribute of the model the value is stored in
    """

    kind: ValueKind
    target: str

    @property
    def arity(self) -> int:
        """Number of tokens the value occupies (0 for line values)."""
        return ARITY.get(self.kind, 0)


HEADER_KEYWORDS: dict[str, KeywordSpec] = {
    "FontName": KeywordSpec(ValueKind.TEXT, "font_name"),
    "FullName": KeywordSpec(ValueKind.TEXT, "full_name"),
    "FamilyName": KeywordSpec(ValueKind.TEXT, "family_name"),
    "Weight": KeywordSpec(ValueKind.TEXT, "weight"),
    "FontBBox": KeywordSpec(ValueKind.BBOX, "font_bbox"),
    "Version": KeywordSpec(ValueKind.TEXT, "font_version"),
    "Notice": KeywordSpec(ValueKind.TEXT, "notice"),
    "EncodingScheme": KeywordSpec(ValueKind.TEXT, "encoding_scheme"),
    "MappingScheme": KeywordSpec(ValueKind.INT, "mapping_scheme"),
    "EscChar": KeywordSpec(ValueKind.INT, "esc_char"),
    "CharacterSet": KeywordSpec(ValueKind.TEXT, "character_set"),
    "Characters": KeywordSpec(ValueKind.INT, "characters"),
    "IsBaseFont": KeywordSpec(ValueKind.BOOL, "is_base_font"),
    "VVector": KeywordSpec(ValueKind.VECTOR, "v_vector"),
    "IsFixedV": KeywordSpec(ValueKind.BOOL, "is_fixed_v"),
    "CapHeight": KeywordSpec(ValueKind.FLOAT, "cap_height"),
    "XHeight": KeywordSpec(ValueKind.FLOAT, "x_height"),
    "Ascender": KeywordSpec(ValueKind.FLOAT, "ascender"),
    "Descender": KeywordSpec(ValueKind.FLOAT, "descender"),
    "StdHW": KeywordSpec(ValueKind.FLOAT, "standard_horizontal_width"),
    "StdVW": KeywordSpec(ValueKind.FLOAT, "standard_vertical_width"),
    "Comment": KeywordSpec(ValueKind.COMMENT, "comments"),
    "UnderlinePosition": KeywordSpec(ValueKind.FLOAT, "underline_position"),
    "UnderlineThickness": KeywordSpec(ValueKind.FLOAT, "underline_thickness"),
    "ItalicAngle": KeywordSpec(ValueKind.FLOAT, "italic_angle"),
    "CharWidth": KeywordSpec(ValueKind.VECTOR, "char_width"),
    "IsFixedPitch": KeywordSpec(ValueKind.BOOL, "is_fixed_pitch"),
    "MetricsSets": KeywordSpec(ValueKind.INT, "metric_sets"),
}

CHAR_METRIC_KEYWORDS: dict[str, KeywordSpec] = {
    "C": KeywordSpec(ValueKind.INT, "character_code"),
    "CH": KeywordSpec(ValueKind.HEX_INT, "character_code"),
    "WX": KeywordSpec(ValueKind.FLOAT, "wx"),
    "W0X": KeywordSpec(ValueKind.FLOAT, "w0x"),
    "W1X": KeywordSpec(ValueKind.FLOAT, "w1x"),
    "WY": KeywordSpec(ValueKind.FLOAT, "wy"),
    "W0Y": KeywordSpec(ValueKind.FLOAT, "w0y"),
    "W1Y": KeywordSpec(ValueKind.FLOAT, "w1y"),
    "W": KeywordSpec(ValueKind.VECTOR, "w"),
    "W0": KeywordSpec(ValueKind.VECTOR, "w0"),
    "W1": KeywordSpec(ValueKind.VECTOR, "w1"),
    "VV": KeywordSpec(ValueKind.VECTOR, "vv"),
    "N": KeywordSpec(ValueKind.NAME, "name"),
    "B": KeywordSpec(ValueKind.BBOX, "bounding_box"),
    "L": KeywordSpec(ValueKind.LIGATURE, "ligatures"),
}

# StartKernPairs variant -> FontMetrics method receiving its pairs
KERN_PAIR_SECTIONS: dict[str, str] = {
    START_KERN_PAIRS: "add_kern_pair",
    START_KERN_PAIRS0: "add_kern_pair0",
    START_KERN_PAIRS1: "add_kern_pair1",
}
