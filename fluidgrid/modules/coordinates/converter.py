"""Pixel ↔ cell arithmetic for the current column width and row height."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class Rounding(Enum):
    NEAREST = "nearest"   # positions
    CEIL = "ceil"         # sizes, so a partial cell still shows its content
    FLOOR = "floor"


@dataclass(slots=True, frozen=True)
class PixelRect:
    top: float
    left: float
    width: float
    height: float

    def to_dict(self) -> dict[str, float]:
        return {"top": self.top, "left": self.left, "width": self.width, "height": self.height}


def _round(value: float, rounding: Rounding) -> int:
    if rounding is Rounding.CEIL:
        return math.ceil(value)
    if rounding is Rounding.FLOOR:
        return math.floor(value)
    # half-up, not Python's half-to-even
    return math.floor(value + 0.5)


@dataclass(slots=True, frozen=True)
class CoordinateConverter:
    col_width: float
    row_height: float
    margins: Sequence[int] = (0, 0)
    outer_margin: bool = True

    @classmethod
    def from_config(cls, config) -> "CoordinateConverter":
        return cls(
            col_width=config.cur_col_width,
            row_height=config.cur_row_height,
            margins=tuple(config.margins),
            outer_margin=config.outer_margin,
        )

    def pixels_to_rows(self, pixels: float, rounding: Rounding = Rounding.NEAREST) -> int:
        if not self.row_height or self.row_height <= 0:
            raise ValueError(f"Row height is not resolved: {self.row_height!r}")
        return _round(pixels / self.row_height, rounding)

    def pixels_to_columns(self, pixels: float, rounding: Rounding = Rounding.NEAREST) -> int:
        if not self.col_width or self.col_width <= 0:
            raise ValueError(f"Column width is not resolved: {self.col_width!r}")
        return _round(pixels / self.col_width, rounding)

    def cell_rect(self, row: int, col: int, size_x: int, size_y: int) -> PixelRect:
        """Rendered pixel rectangle of a footprint, gutters taken off the size."""
        top_margin, side_margin = self.margins
        return PixelRect(
            top=row * self.row_height + (top_margin if self.outer_margin else 0),
            left=col * self.col_width + (side_margin if self.outer_margin else 0),
            width=size_x * self.col_width - side_margin,
            height=size_y * self.row_height - top_margin,
        )

    def grid_pixel_height(self, grid_height: int) -> float:
        top_margin = self.margins[0]
        return grid_height * self.row_height + (top_margin if self.outer_margin else -top_margin)
