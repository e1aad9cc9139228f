"""Tests for the command-line demo."""

import argparse
import json

import pytest
from main import main, parse_item


class TestParseItem:

    def test_size_only(self):
        item = parse_item("2x3", 0)
        assert (item.size_x, item.size_y) == (2, 3)
        assert item.row is None
        assert item.key == "A"

    def test_size_and_position(self):
        item = parse_item("1x1@4,2", 1)
        assert (item.row, item.col) == (4, 2)
        assert item.key == "B"

    def test_malformed_item(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_item("2by3", 0)


class TestMain:

    def _run(self, capsys, *argv):
        code = main(list(argv))
        out = capsys.readouterr().out
        return code, out

    def test_push_scenario(self, capsys):
        code, out = self._run(capsys, "--item", "2x1@0,0", "--item", "2x1@0,0")
        assert code == 0
        assert "  0 | BB...." in out
        assert "  1 | AA...." in out
        payload = json.loads(out[out.index("{"):])
        assert payload["grid_height"] == 2

    def test_floats_after_loading(self, capsys):
        code, out = self._run(capsys, "--item", "1x1@3,0")
        assert code == 0
        payload = json.loads(out[out.index("{"):])
        assert payload["items"][0]["row"] == 0

    def test_no_floating_flag(self, capsys):
        code, out = self._run(capsys, "--no-floating", "--item", "1x1@3,0")
        payload = json.loads(out[out.index("{"):])
        assert payload["items"][0]["row"] == 3
        assert payload["grid_height"] == 4

    def test_pixel_rects_with_width(self, capsys):
        code, out = self._run(capsys, "--columns", "4", "--item", "1x1", "--width", "410")
        payload = json.loads(out[out.index("{"):])
        assert payload["items"][0]["rect"] == {"top": 10, "left": 10, "width": 90, "height": 90}
        assert payload["pixel_height"] == 110

    def test_exhaustion_exit_code(self, capsys):
        code, _ = self._run(capsys, "--columns", "2", "--max-rows", "1", "--item", "2x1", "--item", "1x1")
        assert code == 1

    def test_bad_item_exit_code(self, capsys):
        code, _ = self._run(capsys, "--item", "nope")
        assert code == 2
