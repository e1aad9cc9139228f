"""Layout engine modules: coordinates, occupancy, placement, compaction."""
