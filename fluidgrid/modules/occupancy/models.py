"""
#WHERE
    Used by store.py, the placement and compaction engines, grid.py,
    main.py and tests.

#WHAT
    A rectangle placed on the grid. Compared by identity: two items with
    the same fields are still two items.

#INPUT
    Anchor cell (row, col) and size in cells.

#OUTPUT
    GridItem dataclass instances, dict views via to_dict().
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(slots=True, eq=False)
class GridItem:
    row: Optional[int] = None
    col: Optional[int] = None
    size_x: int = 1
    size_y: int = 1
    key: str = ""
    # Last committed anchor; None until the item has been placed once
    old_row: Optional[int] = None
    old_col: Optional[int] = None
    # Last committed size, used to detect real size changes
    old_size_x: Optional[int] = None
    old_size_y: Optional[int] = None

    @property
    def is_positioned(self) -> bool:
        return self.row is not None and self.col is not None

    def to_dict(self) -> dict[str, Any]:
        return {"row": self.row, "col": self.col, "size_x": self.size_x, "size_y": self.size_y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], key: str = "") -> "GridItem":
        return cls(
            row=data.get("row"),
            col=data.get("col"),
            size_x=data.get("size_x", data.get("sizeX", 1)),
            size_y=data.get("size_y", data.get("sizeY", 1)),
            key=data.get("key", key),
        )

    def __repr__(self) -> str:
        label = f"{self.key!r} " if self.key else ""
        return f"GridItem({label}{self.size_x}x{self.size_y} @ {self.row},{self.col})"
