#!/usr/bin/env python3
"""Grid layout demo: place items, compact, print the result."""

import argparse
import json
import logging
import re
import sys

from fluidgrid import FluidGrid, GridConfig, GridItem, PlacementError

log = logging.getLogger(__name__)

_ITEM_PATTERN = re.compile(r"^(\d+)x(\d+)(?:@(-?\d+),(-?\d+))?$")


def parse_item(text: str, index: int) -> GridItem:
    """'WxH' or 'WxH@row,col' → GridItem."""
    m = _ITEM_PATTERN.match(text.strip())
    if not m:
        raise argparse.ArgumentTypeError(f"bad item {text!r}, expected WxH or WxH@row,col")
    size_x, size_y, row, col = m.groups()
    return GridItem(
        row=int(row) if row is not None else None,
        col=int(col) if col is not None else None,
        size_x=int(size_x),
        size_y=int(size_y),
        key=chr(ord("A") + index % 26),
    )


def render(grid: FluidGrid) -> str:
    """ASCII view: one character per cell, '.' for free cells."""
    labels, order = grid.store.label_matrix(grid.config.columns, max(grid.grid_height, grid.store.extent()))
    lines = []
    for r, row in enumerate(labels):
        cells = "".join(order[v - 1].key[:1] or "#" if v else "." for v in row)
        lines.append(f"{r:3d} | {cells}")
    return "\n".join(lines)


def _args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Collision-free grid layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python main.py --item 2x1@0,0 --item 2x1@0,0\n"
            "  python main.py --columns 4 --item 1x1@3,0 --item 2x2 --width 400\n"
        ),
    )
    p.add_argument("--columns", type=int, default=6)
    p.add_argument("--min-rows", type=int, default=1)
    p.add_argument("--max-rows", type=int, default=100)
    p.add_argument("--item", action="append", default=[], metavar="WxH[@row,col]")
    p.add_argument("--no-floating", dest="floating", action="store_false", default=True)
    p.add_argument("--no-pushing", dest="pushing", action="store_false", default=True)
    p.add_argument("--width", type=float, default=None, help="container width in px")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = _args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s  %(levelname)-8s  %(message)s", datefmt="%H:%M:%S")

    config = GridConfig(columns=args.columns, min_rows=args.min_rows, max_rows=args.max_rows,
                        floating=args.floating, pushing=args.pushing)
    grid = FluidGrid(config)
    try:
        items = [parse_item(text, i) for i, text in enumerate(args.item)]
    except argparse.ArgumentTypeError as exc:
        log.error("%s", exc)
        return 2

    try:
        for item in items:
            grid.insert(item, item.row, item.col)
        grid.mark_loaded()
    except PlacementError as exc:
        log.error("%s", exc)
        return 1

    log.info("%d item(s) placed, grid height %d", len(items), grid.grid_height)
    print(render(grid))
    out = {"grid_height": grid.grid_height,
           "items": [{"key": item.key, **item.to_dict()} for item in grid.items]}
    if args.width is not None:
        grid.refresh(args.width)
        out["pixel_height"] = grid.pixel_height()
        for entry, item in zip(out["items"], grid.items):
            entry["rect"] = grid.item_rect(item).to_dict()
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
