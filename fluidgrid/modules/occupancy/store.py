"""
#WHERE
    Owned by FluidGrid (grid.py); queried by the placement and compaction
    engines; the dense views are used by main.py and tests.

#WHAT
    Sparse anchor-only occupancy: row → (col → item). An item is indexed only
    under its top-left cell, so the item covering an arbitrary cell is found
    by walking up and left from that cell until an anchor whose footprint
    reaches the cell turns up.

#INPUT
    GridItem instances and cell coordinates.

#OUTPUT
    Anchored / covering items, row-major iteration, numpy coverage matrices.
"""

from __future__ import annotations

import logging
from typing import Collection, Dict, Iterator, List, Optional, Tuple

import numpy as np

from .models import GridItem

log = logging.getLogger(__name__)


def _excluded(item: GridItem, exclude: Optional[Collection[GridItem]]) -> bool:
    return bool(exclude) and any(item is e for e in exclude)


class OccupancyStore:
    """Rows and columns are created lazily and dropped once empty."""

    def __init__(self) -> None:
        self._rows: Dict[int, Dict[int, GridItem]] = {}

    # ── Anchors ──────────────────────────────────────────────────────────

    def get(self, row: int, col: int) -> Optional[GridItem]:
        """Item anchored exactly at (row, col)."""
        cols = self._rows.get(row)
        return cols.get(col) if cols else None

    def put(self, item: GridItem, row: int, col: int) -> None:
        assert row >= 0 and col >= 0, f"negative anchor ({row}, {col})"
        assert item.size_x >= 1 and item.size_y >= 1, f"empty footprint {item!r}"
        self._rows.setdefault(row, {})[col] = item

    def discard(self, row: int, col: int, item: GridItem) -> bool:
        """Vacate (row, col) only if `item` is the one anchored there."""
        cols = self._rows.get(row)
        if not cols or cols.get(col) is not item:
            return False
        del cols[col]
        if not cols:
            del self._rows[row]
        return True

    def remove(self, item: GridItem) -> bool:
        """Vacate the first anchor holding `item`, scanning row-major."""
        for row, col, anchored in self.anchors():
            if anchored is item:
                return self.discard(row, col, item)
        log.debug("remove: %r not in grid", item)
        return False

    def clear(self) -> None:
        self._rows.clear()

    # ── Iteration ────────────────────────────────────────────────────────

    def anchors(self) -> Iterator[Tuple[int, int, GridItem]]:
        """(row, col, item) for every anchor, row-major.

        Row and column indices are snapshotted; each cell is re-read before it
        is yielded, so callers may move items while iterating.
        """
        for row in self.row_indices():
            for col in self.cols_in_row(row):
                item = self.get(row, col)
                if item is not None:
                    yield row, col, item

    def row_indices(self) -> List[int]:
        return sorted(self._rows)

    def cols_in_row(self, row: int) -> List[int]:
        return sorted(self._rows.get(row, ()))

    def __iter__(self) -> Iterator[GridItem]:
        return (item for _, _, item in self.anchors())

    def __len__(self) -> int:
        return sum(len(cols) for cols in self._rows.values())

    def __contains__(self, item: object) -> bool:
        return any(anchored is item for anchored in self)

    # ── Collision queries ────────────────────────────────────────────────

    def item_at(self, row: int, col: int,
                exclude: Optional[Collection[GridItem]] = None) -> Optional[GridItem]:
        """Item whose footprint covers (row, col), skipping `exclude`."""
        reach_y = 1
        while row > -1:
            cols = self._rows.get(row)
            if cols:
                reach_x = 1
                c = col
                while c > -1:
                    item = cols.get(c)
                    if (item is not None and item.size_x >= reach_x
                            and item.size_y >= reach_y and not _excluded(item, exclude)):
                        return item
                    reach_x += 1
                    c -= 1
            row -= 1
            reach_y += 1
        return None

    def items_at(self, row: int, col: int, size_x: int = 1, size_y: int = 1,
                 exclude: Optional[Collection[GridItem]] = None) -> List[GridItem]:
        """Distinct items intersecting the size_x × size_y rectangle at (row, col)."""
        if not size_x or not size_y:
            size_x = size_y = 1
        found: List[GridItem] = []
        for h in range(size_y):
            for w in range(size_x):
                item = self.item_at(row + h, col + w, exclude)
                if item is not None and not any(item is f for f in found):
                    found.append(item)
        return found

    # ── Dense views ──────────────────────────────────────────────────────

    def extent(self) -> int:
        """One past the lowest row covered by any anchored footprint."""
        return max((row + item.size_y for row, _, item in self.anchors()), default=0)

    def coverage(self, columns: int, rows: Optional[int] = None) -> np.ndarray:
        """(rows, columns) int matrix counting the footprints over each cell.

        Any value above 1 is an overlap. Footprints reaching past `columns`
        are cut at the grid edge.
        """
        rows = self.extent() if rows is None else rows
        counts = np.zeros((rows, columns), dtype=np.int32)
        for row, col, item in self.anchors():
            counts[row:row + item.size_y, col:col + item.size_x] += 1
        return counts

    def label_matrix(self, columns: int, rows: Optional[int] = None) -> Tuple[np.ndarray, List[GridItem]]:
        """(rows, columns) matrix of 1-based item indices (0 = free) plus the index order."""
        rows = self.extent() if rows is None else rows
        labels = np.zeros((rows, columns), dtype=np.int32)
        order: List[GridItem] = []
        for row, col, item in self.anchors():
            order.append(item)
            labels[row:row + item.size_y, col:col + item.size_x] = len(order)
        return labels, order
