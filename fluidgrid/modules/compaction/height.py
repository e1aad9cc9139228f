"""Grid height from the occupied extent."""

from __future__ import annotations

from fluidgrid.modules.occupancy import OccupancyStore


def clamp_height(max_height: int, max_rows: int) -> int:
    """Clamp to max_rows while there is slack, otherwise let the grid grow past it.

    With max_height == max_rows there is no slack, so the result is
    max(max_rows, max_height); both branches agree on that value.
    """
    if max_rows - max_height > 0:
        return min(max_rows, max_height)
    return max(max_rows, max_height)


def compute_grid_height(store: OccupancyStore, min_rows: int, max_rows: int, extra: int = 0) -> int:
    """max(min_rows, row + extra + size_y over all anchors), then clamp_height."""
    max_height = min_rows
    for row, _, item in store.anchors():
        max_height = max(max_height, row + extra + item.size_y)
    return clamp_height(max_height, max_rows)
