"""
#WHERE
    Imported by the placement and compaction engines, grid.py, main.py, tests.

#WHAT
    Grid Occupancy Store: GridItem model and the sparse anchor-only store.
"""

from .models import GridItem
from .store import OccupancyStore

__all__ = ["GridItem", "OccupancyStore"]
