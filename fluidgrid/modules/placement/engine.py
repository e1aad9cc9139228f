"""
Collision & placement engine.

Decides where an item may go, finds what it would overlap, and pushes the
overlapped items down out of the way. A push moves an item one row at a
time and re-resolves overlaps at every step, so a chain of stacked items
is pushed along in a single pass.

Placement and push-down call each other. Each step is written as a
generator that yields the sub-steps it needs; `_drive` runs them on an
explicit stack, depth-first and in call order, so arbitrarily long chains
never touch the interpreter recursion limit.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence

from fluidgrid.modules.occupancy import GridItem, OccupancyStore

log = logging.getLogger(__name__)

Step = Iterator["Step"]


class PlacementError(RuntimeError):
    """No free cell for an item within max_rows."""


def _drive(step: Step) -> None:
    stack: List[Step] = [step]
    while stack:
        try:
            sub = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        stack.append(sub)


def _contains(items: Sequence[GridItem], item: GridItem) -> bool:
    return any(i is item for i in items)


class PlacementEngine:
    """Placement over an OccupancyStore, reading columns/max_rows from a live config."""

    def __init__(self, store: OccupancyStore, config) -> None:
        self.store = store
        self.config = config

    # ── Queries ──────────────────────────────────────────────────────────

    def can_occupy(self, item: GridItem, row: int, col: int) -> bool:
        return row > -1 and col > -1 and item.size_x + col <= self.config.columns

    def items_at(self, row: int, col: int, size_x: int = 1, size_y: int = 1,
                 exclude=None) -> List[GridItem]:
        if isinstance(exclude, GridItem):
            exclude = (exclude,)
        return self.store.items_at(row, col, size_x, size_y, exclude)

    # ── Placement ────────────────────────────────────────────────────────

    def auto_place(self, item: GridItem) -> None:
        """Put `item` in the first free cell, scanning row-major up to max_rows."""
        for row in range(self.config.max_rows):
            for col in range(self.config.columns):
                if (self.can_occupy(item, row, col)
                        and not self.store.items_at(row, col, item.size_x, item.size_y, (item,))):
                    self.place(item, row, col)
                    return
        log.error("No free cell for %r in %d rows x %d columns",
                  item, self.config.max_rows, self.config.columns)
        raise PlacementError(
            f"Unable to place {item!r}: no free {item.size_x}x{item.size_y} cell "
            f"within {self.config.max_rows} rows of {self.config.columns} columns"
        )

    def place(self, item: GridItem, row: Optional[int] = None, col: Optional[int] = None,
              ignore: Optional[Sequence[GridItem]] = None) -> None:
        """Put `item` at (row, col), pushing down whatever it overlaps.

        Without a position the item's own position is used, and an item
        with none is auto-placed. Columns are clamped into the grid, negative
        rows to 0. Items in `ignore` are neither displaced nor checked.
        """
        _drive(self._place(item, row, col, ignore))

    def move_overlapping(self, item: GridItem,
                         ignore: Optional[Sequence[GridItem]] = None) -> None:
        """Push down everything overlapping `item`'s current footprint."""
        _drive(self._move_overlapping(item, ignore))

    def push_down(self, items: List[GridItem], target_row: int,
                  ignore: Optional[Sequence[GridItem]] = None) -> None:
        _drive(self._push_down(items, target_row, ignore))

    # ── Steps ────────────────────────────────────────────────────────────

    def _place(self, item, row, col, ignore) -> Step:
        if row is None or col is None:
            if not item.is_positioned:
                self.auto_place(item)
                return
            row = item.row if row is None else row
            col = item.col if col is None else col

        if not self.can_occupy(item, row, col):
            col = max(0, min(self.config.columns - item.size_x, max(0, col)))
            row = max(0, row)

        if item.old_row is not None:
            if item.old_row == row and item.old_col == col and self.store.get(row, col) is item:
                item.row, item.col = row, col
                return
            self.store.discard(item.old_row, item.old_col, item)

        log.debug("place %r -> (%d, %d)", item, row, col)
        item.old_row = item.row = row
        item.old_col = item.col = col

        yield self._move_overlapping(item, ignore)

        self.store.put(item, row, col)

    def _move_overlapping(self, item, ignore) -> Step:
        if ignore:
            if not _contains(ignore, item):
                ignore = [*ignore, item]
        else:
            ignore = [item]
        overlapping = self.store.items_at(item.row, item.col, item.size_x, item.size_y, ignore)
        if overlapping:
            yield self._push_down(overlapping, item.row + item.size_y, ignore)

    def _push_down(self, items, target_row, ignore) -> Step:
        if not items:
            return
        items.sort(key=lambda i: i.row)
        ignore = list(ignore) if ignore else []

        # The topmost conflicting row in each column sets that column's shift
        top_rows: Dict[int, int] = {}
        for item in items:
            top = top_rows.get(item.col)
            if top is None or item.row < top:
                top_rows[item.col] = item.row

        for item in items:
            rows_to_move = target_row - top_rows[item.col]
            log.debug("push %r down %d row(s)", item, rows_to_move)
            yield self._push_item_down(item, item.row + rows_to_move, ignore)
            ignore.append(item)

    def _push_item_down(self, item, new_row, ignore) -> Step:
        if item.row >= new_row:
            return
        while item.row < new_row:
            item.row += 1
            yield self._move_overlapping(item, ignore)
        yield self._place(item, item.row, item.col, ignore)
