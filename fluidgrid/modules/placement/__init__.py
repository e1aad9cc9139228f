"""
#WHERE
    Imported by grid.py, the compaction engine and tests.

#WHAT
    Collision & Placement Engine: fit predicate, overlap query,
    auto/explicit placement and cascading push-down.

#INPUT
    GridItem, target cell, OccupancyStore, live GridConfig.

#OUTPUT
    Items committed to the store; PlacementError on exhaustion.
"""

from .engine import PlacementEngine, PlacementError

__all__ = ["PlacementEngine", "PlacementError"]
