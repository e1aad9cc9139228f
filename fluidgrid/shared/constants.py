"""
#WHERE
    Imported by config.py (GridConfig defaults), grid.py and main.py.

#WHAT
    Default grid options. Edit here, not in individual module files.

#INPUT / #OUTPUT
    Pure constants, no I/O.
"""

# ── Grid shape ───────────────────────────────────────────────────────────

DEFAULT_COLUMNS: int = 6        # number of columns in the grid
DEFAULT_MIN_COLUMNS: int = 1    # smallest column count the grid scales down to
DEFAULT_MIN_ROWS: int = 1       # rows shown when the grid is empty
DEFAULT_MAX_ROWS: int = 100     # rows scanned by auto-placement

# ── Behaviour ────────────────────────────────────────────────────────────

DEFAULT_PUSHING: bool = True    # push other items out of the way
DEFAULT_FLOATING: bool = True   # float items up so they stack

# ── Item defaults ────────────────────────────────────────────────────────

DEFAULT_SIZE_X: int = 2
DEFAULT_SIZE_Y: int = 1

# ── Pixel sizing ─────────────────────────────────────────────────────────

AUTO = "auto"                   # width / col_width: derive from the container
MATCH = "match"                 # row_height: same as the column width

DEFAULT_WIDTH = AUTO
DEFAULT_COL_WIDTH = AUTO
DEFAULT_ROW_HEIGHT = MATCH
DEFAULT_MARGINS: tuple[int, int] = (10, 10)   # (vertical, horizontal) px
DEFAULT_OUTER_MARGIN: bool = True
DEFAULT_MOBILE_BREAK_POINT: int = 600         # px, width at or below → mobile

# ── Gestures ─────────────────────────────────────────────────────────────

RESIZE_HANDLES: tuple[str, ...] = ("s", "e", "n", "w", "se", "ne", "sw", "nw")
