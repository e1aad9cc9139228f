"""
#WHERE
    Imported by config.py, grid.py, main.py and tests.

#WHAT
    Shared default options for the grid layout engine.
"""

from .constants import (
    AUTO,
    MATCH,
    DEFAULT_COLUMNS,
    DEFAULT_MAX_ROWS,
    DEFAULT_MIN_ROWS,
    DEFAULT_SIZE_X,
    DEFAULT_SIZE_Y,
    DEFAULT_MARGINS,
    RESIZE_HANDLES,
)

__all__ = [
    "AUTO",
    "MATCH",
    "DEFAULT_COLUMNS",
    "DEFAULT_MAX_ROWS",
    "DEFAULT_MIN_ROWS",
    "DEFAULT_SIZE_X",
    "DEFAULT_SIZE_Y",
    "DEFAULT_MARGINS",
    "RESIZE_HANDLES",
]
