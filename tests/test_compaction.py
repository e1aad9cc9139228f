"""Tests for compaction - floating items up and the grid height policy."""

import pytest
from fluidgrid.config import GridConfig
from fluidgrid.modules.compaction import Compactor, clamp_height, compute_grid_height
from fluidgrid.modules.occupancy import GridItem, OccupancyStore
from fluidgrid.modules.placement import PlacementEngine


class TestFloat:

    def setup_method(self):
        self.config = GridConfig(columns=6, floating=True)
        self.engine = PlacementEngine(OccupancyStore(), self.config)
        self.compactor = Compactor(self.engine)

    def _put(self, row, col, size_x=1, size_y=1):
        item = GridItem(size_x=size_x, size_y=size_y)
        self.engine.place(item, row, col)
        return item

    def test_item_floats_to_top(self):
        item = self._put(3, 0)
        assert self.compactor.float_all() == 1
        assert (item.row, item.col) == (0, 0)
        assert self.engine.store.get(0, 0) is item
        assert self.engine.store.get(3, 0) is None

    def test_float_stops_under_blocker(self):
        self._put(0, 0)
        item = self._put(3, 0)
        self.compactor.float_all()
        assert item.row == 1

    def test_wide_item_blocked_by_any_column(self):
        self._put(0, 1)
        wide = self._put(2, 0, size_x=2)
        self.compactor.float_all()
        assert (wide.row, wide.col) == (1, 0)

    def test_row_major_order_stacks_items(self):
        upper = self._put(2, 0)
        lower = self._put(4, 0)
        self.compactor.float_all()
        assert (upper.row, lower.row) == (0, 1)

    def test_float_up_reports_no_move(self):
        item = self._put(0, 3)
        assert self.compactor.float_up(item) is False
        assert item.row == 0

    def test_disabled_floating(self):
        self.config.floating = False
        item = self._put(3, 0)
        assert self.compactor.float_all() == 0
        assert item.row == 3

    def test_float_all_idempotent(self):
        self._put(2, 0, size_x=2)
        self._put(5, 1, size_x=3, size_y=2)
        self._put(4, 4)
        self._put(9, 5, size_y=3)
        self.compactor.float_all()
        first = [item.to_dict() for item in self.engine.store]
        assert self.compactor.float_all() == 0
        assert [item.to_dict() for item in self.engine.store] == first


class TestHeight:

    @pytest.mark.parametrize("max_height, max_rows, expected", [
        (5, 10, 5),      # slack: clamp toward max_rows
        (12, 10, 12),    # content past the cap grows the grid
        (10, 10, 10),    # boundary: no slack
        (1, 1, 1),
    ])
    def test_clamp_height(self, max_height, max_rows, expected):
        assert clamp_height(max_height, max_rows) == expected

    def test_empty_store_uses_min_rows(self):
        assert compute_grid_height(OccupancyStore(), min_rows=3, max_rows=100) == 3

    def test_min_rows_above_max_rows(self):
        assert compute_grid_height(OccupancyStore(), min_rows=5, max_rows=3) == 5

    def test_lowest_footprint_sets_height(self):
        store = OccupancyStore()
        store.put(GridItem(row=2, col=0, size_y=3), 2, 0)
        store.put(GridItem(row=4, col=1, size_y=1), 4, 1)
        assert compute_grid_height(store, min_rows=1, max_rows=100) == 5

    def test_extra_rows(self):
        store = OccupancyStore()
        store.put(GridItem(row=2, col=0, size_y=2), 2, 0)
        assert compute_grid_height(store, min_rows=1, max_rows=100, extra=2) == 6

    def test_grows_past_max_rows(self):
        store = OccupancyStore()
        store.put(GridItem(row=10, col=0, size_y=2), 10, 0)
        assert compute_grid_height(store, min_rows=1, max_rows=10) == 12
