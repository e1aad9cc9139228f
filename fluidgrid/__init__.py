"""
FluidGrid
=========
Places rectangular items on a grid of fixed columns and growing rows:
no two items overlap, items float up to close gaps, and pixel offsets from
drag/resize gestures are translated into cells.

Example:
    from fluidgrid import FluidGrid, GridItem

    grid = FluidGrid(options={"columns": 6, "maxRows": 20})
    a = grid.insert(GridItem(size_x=2, size_y=1), 0, 0)
    b = grid.insert(GridItem(size_x=2, size_y=1), 0, 0)   # a is pushed to row 1
"""

from .config import GridConfig, DraggableOptions, ResizableOptions, normalize_margins
from .grid import FluidGrid
from .modules.coordinates import CoordinateConverter, PixelRect, Rounding
from .modules.occupancy import GridItem, OccupancyStore
from .modules.placement import PlacementEngine, PlacementError
from .modules.compaction import Compactor, clamp_height, compute_grid_height

__version__ = "0.1.0"

__all__ = [
    "FluidGrid",
    "GridConfig",
    "DraggableOptions",
    "ResizableOptions",
    "normalize_margins",
    "GridItem",
    "OccupancyStore",
    "PlacementEngine",
    "PlacementError",
    "Compactor",
    "clamp_height",
    "compute_grid_height",
    "CoordinateConverter",
    "PixelRect",
    "Rounding",
]
