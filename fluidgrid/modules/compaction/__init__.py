"""
#WHERE
    Imported by grid.py and tests.

#WHAT
    Compaction Engine: float-up compaction and the grid height policy.
"""

from .compactor import Compactor
from .height import clamp_height, compute_grid_height

__all__ = ["Compactor", "clamp_height", "compute_grid_height"]
