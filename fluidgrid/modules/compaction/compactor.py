"""Float items up into the gaps above them."""

from __future__ import annotations

import logging

from fluidgrid.modules.occupancy import GridItem
from fluidgrid.modules.placement import PlacementEngine

log = logging.getLogger(__name__)


class Compactor:

    def __init__(self, engine: PlacementEngine) -> None:
        self.engine = engine

    @property
    def store(self):
        return self.engine.store

    def float_up(self, item: GridItem) -> bool:
        """Move `item` to the topmost free row above it in its column.

        Returns True when the item moved.
        """
        best_row = None
        row = item.row - 1
        while row > -1:
            if self.store.items_at(row, item.col, item.size_x, item.size_y, (item,)):
                break
            best_row = row
            row -= 1
        if best_row is None:
            return False
        log.debug("float %r up to row %d", item, best_row)
        self.engine.place(item, best_row, item.col)
        return True

    def float_all(self) -> int:
        """Float every anchored item, row-major. Returns how many moved."""
        if self.engine.config.floating is False:
            return 0
        moved = sum(self.float_up(item) for _, _, item in self.store.anchors())
        if moved:
            log.debug("float_all: %d item(s) moved", moved)
        return moved
