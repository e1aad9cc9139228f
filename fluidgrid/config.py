"""
#WHERE
    Used by grid.py (FluidGrid owns one GridConfig), main.py and tests.

#WHAT
    Typed grid configuration: every recognised option as a named field,
    the option-merge entry point with its margin normalisation, and the
    resolution of "auto"/"match" pixel sizing against a container width.

#INPUT
    Partial option mappings (snake_case or widget camelCase keys),
    container width in pixels.

#OUTPUT
    GridConfig, DraggableOptions, ResizableOptions instances.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional, Union

from fluidgrid.shared import constants as C

log = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Widget option names → GridConfig field names
_ALIASES = {
    "colWidth":         "col_width",
    "rowHeight":        "row_height",
    "outerMargin":      "outer_margin",
    "isMobile":         "is_mobile",
    "minColumns":       "min_columns",
    "minRows":          "min_rows",
    "maxRows":          "max_rows",
    "defaultSizeX":     "default_size_x",
    "defaultSizeY":     "default_size_y",
    "mobileBreakPoint": "mobile_break_point",
}


def coerce_int(value: Any, default: int = 0) -> int:
    """Lenient integer parse: truncate floats, read leading digits of strings.

    Anything that yields no number (None, "abc", NaN, bools) returns `default`.
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return default
        return int(value)
    if isinstance(value, str):
        m = _LEADING_INT.match(value)
        return int(m.group(1)) if m else default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def normalize_margins(margins: Any) -> list[int]:
    """A two-element sequence keeps its (int-coerced) values, anything else → [0, 0]."""
    if not isinstance(margins, (list, tuple)) or len(margins) != 2:
        return [0, 0]
    return [coerce_int(m) for m in margins]


@dataclass(slots=True)
class DraggableOptions:
    enabled: bool = True
    handle: Optional[str] = None   # selector of the drag handle inside an item


@dataclass(slots=True)
class ResizableOptions:
    enabled: bool = True
    handles: list[str] = field(default_factory=lambda: list(C.RESIZE_HANDLES))


@dataclass
class GridConfig:
    columns: int = C.DEFAULT_COLUMNS
    pushing: bool = C.DEFAULT_PUSHING
    floating: bool = C.DEFAULT_FLOATING
    width: Union[int, float, str] = C.DEFAULT_WIDTH
    col_width: Union[int, float, str] = C.DEFAULT_COL_WIDTH
    row_height: Union[int, float, str] = C.DEFAULT_ROW_HEIGHT
    margins: list[int] = field(default_factory=lambda: list(C.DEFAULT_MARGINS))
    outer_margin: bool = C.DEFAULT_OUTER_MARGIN
    is_mobile: bool = False
    min_columns: int = C.DEFAULT_MIN_COLUMNS
    min_rows: int = C.DEFAULT_MIN_ROWS
    max_rows: int = C.DEFAULT_MAX_ROWS
    default_size_x: int = C.DEFAULT_SIZE_X
    default_size_y: int = C.DEFAULT_SIZE_Y
    mobile_break_point: int = C.DEFAULT_MOBILE_BREAK_POINT
    draggable: DraggableOptions = field(default_factory=DraggableOptions)
    resizable: ResizableOptions = field(default_factory=ResizableOptions)

    # Resolved pixel sizes, filled by resolve() or set directly by the caller
    cur_width: float = 0
    cur_col_width: float = 0
    cur_row_height: float = 0

    def apply_options(self, options: Optional[Mapping[str, Any]]) -> None:
        """Merge a partial options mapping into this config.

        `draggable` / `resizable` sub-mappings update the existing sub-option
        objects. Margins are normalised afterwards whether or not they were
        part of `options`.
        """
        if not options:
            return
        names = {f.name for f in fields(self)}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name in ("draggable", "resizable"):
                self._merge_sub_options(getattr(self, name), value)
            elif name in names:
                setattr(self, name, value)
            else:
                log.debug("Ignoring unknown grid option: %r", key)
        self.margins = normalize_margins(self.margins)
        log.debug("Grid options merged: %s", sorted(options))

    @staticmethod
    def _merge_sub_options(target, value) -> None:
        if isinstance(value, (DraggableOptions, ResizableOptions)):
            value = {f.name: getattr(value, f.name) for f in fields(value)}
        if not isinstance(value, Mapping):
            return
        for key, sub in value.items():
            if hasattr(target, key):
                setattr(target, key, sub)
            else:
                log.debug("Ignoring unknown %s option: %r", type(target).__name__, key)

    def resolve(self, container_width: float = 0) -> None:
        """Resolve "auto"/"match" sizing into cur_width / cur_col_width / cur_row_height."""
        self.cur_width = container_width if self.width == C.AUTO else self.width

        if self.col_width == C.AUTO:
            side = self.margins[1]
            inner = self.cur_width - side if self.outer_margin else self.cur_width + side
            self.cur_col_width = int(inner / self.columns)
        else:
            self.cur_col_width = self.col_width

        if self.row_height == C.MATCH:
            self.cur_row_height = self.cur_col_width
        else:
            self.cur_row_height = self.row_height

        self.is_mobile = self.cur_width <= self.mobile_break_point
        log.debug("Grid resolved: width=%s col=%s row=%s mobile=%s",
                  self.cur_width, self.cur_col_width, self.cur_row_height, self.is_mobile)
