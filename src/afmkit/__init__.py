"""afmkit - Parse Adobe Font Metrics files.

afmkit reads AFM documents (the plain-text metrics files shipped with Type 1
fonts) and turns them into a typed model of widths, bounding boxes, kerning
and composite glyphs, ready for text layout or PDF generation.

Example:
    $ afmkit info Helvetica.afm

Or from Python:

    from afmkit.core import parse_afm

    with open("Helvetica.afm", "rb") as f:
        metrics = parse_afm(f)
"""

import logging

__version__ = "0.1.0"

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__"]
