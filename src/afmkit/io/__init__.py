"""AFM file I/O layer for afmkit.

This module handles opening and closing AFM sources; the parser itself only
reads from streams it is given.

Key responsibilities:
- Load AFM files from disk
- Index loaded fonts by FontName
- Load whole directories or zip archives of AFM files

Key classes:
- AfmReader: Load one AFM file
- MetricsCatalog: Fonts indexed by name
"""

from afmkit.io.catalog import MetricsCatalog
from afmkit.io.reader import AfmReader

__all__ = [
    "AfmReader",
    "MetricsCatalog",
]
