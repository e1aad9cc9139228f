"""Tests for the occupancy store - anchors and backward-scan lookups."""

import numpy as np
from fluidgrid.modules.occupancy import GridItem, OccupancyStore


def _stored(store, row, col, size_x=1, size_y=1, key=""):
    item = GridItem(row=row, col=col, size_x=size_x, size_y=size_y, key=key)
    store.put(item, row, col)
    return item


class TestAnchors:

    def setup_method(self):
        self.store = OccupancyStore()

    def test_put_and_get(self):
        item = _stored(self.store, 2, 3)
        assert self.store.get(2, 3) is item
        assert self.store.get(3, 2) is None
        assert len(self.store) == 1
        assert item in self.store

    def test_discard_only_matching_item(self):
        item = _stored(self.store, 0, 0)
        other = GridItem(size_x=1, size_y=1)
        assert self.store.discard(0, 0, other) is False
        assert self.store.discard(0, 0, item) is True
        assert self.store.get(0, 0) is None
        assert len(self.store) == 0

    def test_remove_scans_for_item(self):
        item = _stored(self.store, 5, 1)
        assert self.store.remove(item) is True
        assert item not in self.store

    def test_redundant_remove_is_noop(self):
        item = GridItem()
        assert self.store.remove(item) is False
        _stored(self.store, 0, 0)
        assert self.store.remove(item) is False
        assert len(self.store) == 1

    def test_anchors_row_major(self):
        c = _stored(self.store, 3, 0, key="c")
        b = _stored(self.store, 1, 4, key="b")
        a = _stored(self.store, 1, 2, key="a")
        assert [item for _, _, item in self.store.anchors()] == [a, b, c]
        assert list(self.store) == [a, b, c]

    def test_item_dict_views(self):
        item = GridItem.from_dict({"row": 1, "col": 2, "sizeX": 3, "sizeY": 4}, key="w")
        assert item.to_dict() == {"row": 1, "col": 2, "size_x": 3, "size_y": 4}
        assert item.key == "w"
        assert GridItem.from_dict({}).is_positioned is False

    def test_equal_items_are_distinct(self):
        a = _stored(self.store, 0, 0)
        b = GridItem(row=0, col=0)
        assert a is not b
        assert a != b
        assert b not in self.store


class TestItemAt:

    def setup_method(self):
        self.store = OccupancyStore()
        self.big = _stored(self.store, 1, 1, size_x=3, size_y=2, key="big")

    def test_anchor_cell(self):
        assert self.store.item_at(1, 1) is self.big

    def test_covered_cell_found_by_scanning_back(self):
        assert self.store.item_at(2, 3) is self.big
        assert self.store.item_at(1, 2) is self.big

    def test_cells_outside_footprint(self):
        assert self.store.item_at(3, 1) is None   # below
        assert self.store.item_at(2, 4) is None   # right
        assert self.store.item_at(1, 0) is None   # left
        assert self.store.item_at(0, 2) is None   # above

    def test_exclude_skips_item(self):
        assert self.store.item_at(2, 3, exclude=[self.big]) is None

    def test_scan_continues_past_excluded(self):
        small = _stored(self.store, 0, 0, size_x=2, size_y=3)
        # (2, 1) is covered by both; excluding big leaves small
        assert self.store.item_at(2, 1, exclude=[self.big]) is small

    def test_items_at_distinct(self):
        other = _stored(self.store, 0, 5)
        found = self.store.items_at(0, 0, 6, 3)
        assert found == [other, self.big]   # first hit order, row by row

    def test_items_at_exclude(self):
        assert self.store.items_at(1, 1, 2, 2, exclude=[self.big]) == []

    def test_zero_size_query_checks_one_cell(self):
        assert self.store.items_at(2, 3, 0, 0) == [self.big]


class TestDenseViews:

    def test_coverage_counts_footprints(self):
        store = OccupancyStore()
        _stored(store, 0, 0, size_x=2, size_y=1)
        _stored(store, 1, 1, size_x=1, size_y=2)
        cov = store.coverage(columns=4)
        assert cov.shape == (3, 4)
        expected = np.array([
            [1, 1, 0, 0],
            [0, 1, 0, 0],
            [0, 1, 0, 0],
        ])
        np.testing.assert_array_equal(cov, expected)

    def test_coverage_reveals_overlap(self):
        store = OccupancyStore()
        _stored(store, 0, 0, size_x=2, size_y=2)
        _stored(store, 1, 1, size_x=2, size_y=2)
        cov = store.coverage(columns=3)
        assert cov[1, 1] == 2
        assert (cov > 1).sum() == 1

    def test_extent(self):
        store = OccupancyStore()
        assert store.extent() == 0
        _stored(store, 4, 0, size_y=3)
        assert store.extent() == 7

    def test_label_matrix(self):
        store = OccupancyStore()
        a = _stored(store, 0, 1, key="a")
        b = _stored(store, 1, 0, size_x=2, key="b")
        labels, order = store.label_matrix(columns=2, rows=2)
        assert order == [a, b]
        np.testing.assert_array_equal(labels, [[0, 1], [2, 2]])
