"""
#WHERE
    Entry point of the layout engine, used by main.py, tests, and any
    rendering/gesture layer that hosts a grid.

#WHAT
    FluidGrid, the grid state controller: owns the config and occupancy
    store, wires the placement and compaction engines together, and exposes
    the mutation API (insert, remove, resize, reposition, height recompute)
    plus the pixel ↔ cell translation for drag and resize gestures.

#INPUT
    GridConfig / option mappings, GridItem instances, pixel offsets and sizes.

#OUTPUT
    Items positioned without overlap, grid_height, pixel rectangles.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence

import numpy as np

from fluidgrid.config import GridConfig, coerce_int
from fluidgrid.modules.compaction import Compactor, compute_grid_height
from fluidgrid.modules.coordinates import CoordinateConverter, PixelRect, Rounding
from fluidgrid.modules.occupancy import GridItem, OccupancyStore
from fluidgrid.modules.placement import PlacementEngine

log = logging.getLogger(__name__)


class FluidGrid:
    """A grid of non-overlapping items that compacts upward.

    The grid starts unloaded: an initial batch of items keeps the positions
    it was given until mark_loaded() turns on floating after each mutation.
    One caller at a time; every call runs to completion.
    """

    def __init__(self, config: GridConfig | None = None,
                 options: Optional[Mapping[str, Any]] = None) -> None:
        self.config = config or GridConfig()
        self.config.apply_options(options)
        self.store = OccupancyStore()
        self.engine = PlacementEngine(self.store, self.config)
        self.compactor = Compactor(self.engine)
        self.grid_height = self.config.min_rows
        self.moving_item: Optional[GridItem] = None
        self.loaded = False
        self._resize_origin: Optional[tuple] = None

    # ── Configuration ────────────────────────────────────────────────────

    def set_options(self, options: Optional[Mapping[str, Any]]) -> None:
        self.config.apply_options(options)

    def refresh(self, container_width: float = 0) -> None:
        """Resolve pixel sizing for a container width and recompute the height."""
        self.config.resolve(container_width)
        self.recompute_height()

    @property
    def converter(self) -> CoordinateConverter:
        return CoordinateConverter.from_config(self.config)

    def pixels_to_rows(self, pixels: float, rounding: Rounding = Rounding.NEAREST) -> int:
        return self.converter.pixels_to_rows(pixels, rounding)

    def pixels_to_columns(self, pixels: float, rounding: Rounding = Rounding.NEAREST) -> int:
        return self.converter.pixels_to_columns(pixels, rounding)

    # ── Queries ──────────────────────────────────────────────────────────

    def can_occupy(self, item: GridItem, row: int, col: int) -> bool:
        return self.engine.can_occupy(item, row, col)

    def items_at(self, row: int, col: int, size_x: int = 1, size_y: int = 1,
                 exclude=None) -> List[GridItem]:
        return self.engine.items_at(row, col, size_x, size_y, exclude)

    def item_at(self, row: int, col: int, exclude=None) -> Optional[GridItem]:
        if isinstance(exclude, GridItem):
            exclude = (exclude,)
        return self.store.item_at(row, col, exclude)

    @property
    def items(self) -> List[GridItem]:
        return list(self.store)

    def snapshot(self) -> List[dict]:
        return [item.to_dict() for item in self.store]

    def occupancy_matrix(self, rows: Optional[int] = None) -> np.ndarray:
        """Coverage counts, grid_height rows deep unless `rows` is given."""
        rows = max(self.grid_height, self.store.extent()) if rows is None else rows
        return self.store.coverage(self.config.columns, rows)

    def has_overlaps(self) -> bool:
        return bool((self.occupancy_matrix() > 1).any())

    # ── Engine operations ────────────────────────────────────────────────

    def new_item(self, key: str = "", row: Optional[int] = None,
                 col: Optional[int] = None) -> GridItem:
        """An item sized from the grid defaults."""
        return GridItem(row=row, col=col, size_x=self.config.default_size_x,
                        size_y=self.config.default_size_y, key=key)

    def place(self, item: GridItem, row: Optional[int] = None, col: Optional[int] = None,
              ignore: Optional[Sequence[GridItem]] = None) -> None:
        self.engine.place(item, row, col, ignore)

    def auto_place(self, item: GridItem) -> None:
        self.engine.auto_place(item)

    def put_items(self, items: Sequence[GridItem]) -> None:
        for item in items:
            self.engine.place(item)

    def float_all(self) -> int:
        return self.compactor.float_all()

    def recompute_height(self, extra: int = 0) -> int:
        self.grid_height = compute_grid_height(
            self.store, self.config.min_rows, self.config.max_rows, extra
        )
        return self.grid_height

    # ── Mutations ────────────────────────────────────────────────────────

    def insert(self, item: GridItem, row: Optional[int] = None,
               col: Optional[int] = None) -> GridItem:
        """Place, float when loaded, recompute the height."""
        self.engine.place(item, row, col)
        if self.loaded:
            self.compactor.float_all()
        self.recompute_height(item.size_y if self.is_moving(item) else 0)
        return item

    set_position = insert

    def remove(self, item: GridItem) -> bool:
        removed = self.store.remove(item)
        if removed:
            item.old_row = item.old_col = None
            log.debug("removed %r", item)
        self.compactor.float_all()
        self.recompute_height()
        return removed

    def set_size(self, item: GridItem, axis: str, value: Any) -> bool:
        """Resize `item` along "x" or "y". Returns True when the size changed.

        An empty string is ignored; zero, negative or non-numeric values fall
        back to the grid default for that axis.
        """
        axis = axis.lower()
        if axis not in ("x", "y"):
            raise ValueError(f"Unknown size axis: {axis!r}")
        if value == "":
            return False
        size = coerce_int(value)
        if size <= 0:
            size = self.config.default_size_x if axis == "x" else self.config.default_size_y

        attr, old_attr = f"size_{axis}", f"old_size_{axis}"
        old_size = getattr(item, old_attr)
        changed = not (getattr(item, attr) == size and old_size and old_size == size)
        setattr(item, attr, size)
        setattr(item, old_attr, size)
        if not changed:
            return False

        log.debug("resize %r along %s", item, axis)
        # Only a committed item displaces its neighbours
        if item.is_positioned and item.old_row is not None:
            if self.engine.can_occupy(item, item.row, item.col):
                self.engine.move_overlapping(item)
            else:
                self.engine.place(item, item.row, item.col)
        if self.loaded:
            self.compactor.float_all()
        self.recompute_height(item.size_y if self.is_moving(item) else 0)
        return True

    def set_size_x(self, item: GridItem, value: Any) -> bool:
        return self.set_size(item, "x", value)

    def set_size_y(self, item: GridItem, value: Any) -> bool:
        return self.set_size(item, "y", value)

    def mark_loaded(self) -> None:
        self.loaded = True
        self.compactor.float_all()
        self.recompute_height()

    def destroy(self) -> None:
        for item in self.store:
            item.old_row = item.old_col = None
        self.store.clear()
        self.moving_item = None
        self.loaded = False
        self.grid_height = self.config.min_rows

    # ── Gestures ─────────────────────────────────────────────────────────

    def is_moving(self, item: GridItem) -> bool:
        return self.moving_item is item

    def drag_start(self, item: GridItem) -> bool:
        """Begin a drag. Returns False, leaving the grid untouched, when dragging is disabled."""
        if not self.config.draggable.enabled:
            return False
        self.moving_item = item
        self.recompute_height(item.size_y)
        return True

    def drag_move(self, item: GridItem, top: float, left: float) -> None:
        """Track the cell under the dragged element; nothing is committed."""
        item.row = self.pixels_to_rows(top)
        item.col = self.pixels_to_columns(left)

    def drag_stop(self, item: GridItem, top: float, left: float) -> bool:
        """Drop `item` at a pixel offset. Returns True when its cell changed.

        With pushing off the drop is refused (the item goes back to its
        last committed cell) if anything occupies the target footprint.
        """
        origin = (item.old_row, item.old_col)
        row = self.pixels_to_rows(top)
        col = self.pixels_to_columns(left)
        if self.config.pushing is not False or not self.items_at(row, col, item.size_x, item.size_y, item):
            item.row, item.col = row, col
        else:
            item.row, item.col = origin
        self.moving_item = None
        self.insert(item, item.row, item.col)
        self.recompute_height()
        return (item.row, item.col) != origin

    def resize_start(self, item: GridItem) -> bool:
        if not self.config.resizable.enabled:
            return False
        self.moving_item = item
        self._resize_origin = (item.size_x, item.size_y)
        return True

    def resize_move(self, item: GridItem, top: float, left: float,
                    width: float, height: float) -> None:
        """Track the cells under a resized element; nothing is committed."""
        top_margin, side_margin = self.config.margins
        item.row = self.pixels_to_rows(top + top_margin, Rounding.FLOOR)
        item.col = self.pixels_to_columns(left + side_margin, Rounding.FLOOR)
        item.size_x = max(1, self.pixels_to_columns(width, Rounding.CEIL))
        item.size_y = max(1, self.pixels_to_rows(height, Rounding.CEIL))

    def resize_stop(self, item: GridItem) -> bool:
        """Commit a resize gesture. Returns True when the size changed."""
        before = self._resize_origin or (item.old_size_x, item.old_size_y)
        self._resize_origin = None
        self.moving_item = None
        self.insert(item, item.row, item.col)
        self.set_size_y(item, item.size_y)
        self.set_size_x(item, item.size_x)
        return (item.size_x, item.size_y) != before

    # ── Pixels ───────────────────────────────────────────────────────────

    def item_rect(self, item: GridItem) -> PixelRect:
        return self.converter.cell_rect(item.row, item.col, item.size_x, item.size_y)

    def preview_rect(self) -> Optional[PixelRect]:
        """Where the moving item would land, None when nothing is moving."""
        if self.moving_item is None:
            return None
        return self.item_rect(self.moving_item)

    def pixel_height(self) -> float:
        return self.converter.grid_pixel_height(self.grid_height)
