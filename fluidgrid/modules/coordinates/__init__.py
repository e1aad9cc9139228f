"""
#WHERE
    Imported by grid.py (gesture translation, pixel rects) and tests.

#WHAT
    Coordinate Converter: stateless pixel ↔ cell arithmetic.

#INPUT
    Pixel offsets/sizes, resolved column width and row height.

#OUTPUT
    Row/column counts, PixelRect rectangles.
"""

from .converter import CoordinateConverter, PixelRect, Rounding

__all__ = ["CoordinateConverter", "PixelRect", "Rounding"]
