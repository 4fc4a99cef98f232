"""Grid layout and interlocking edge assignment.

Every cell of an R x C grid gets four edge codes. Border edges are flat and
each interior edge is a tab on one side and a blank on the other, so that
neighbouring pieces always interlock. The assignment is a closed-form
checkerboard and identical inputs always give identical edges.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Tuple


class EdgeType(IntEnum):
    """Edge code of one side of a piece."""

    FLAT = 0
    TAB = 1
    BLANK = -1

    def complement(self) -> "EdgeType":
        """Return the edge code that interlocks with this one."""
        return EdgeType(-self.value)


@dataclass(frozen=True)
class EdgeSet:
    """Edge codes of a piece in clockwise order, starting at the top."""

    top: EdgeType
    right: EdgeType
    bottom: EdgeType
    left: EdgeType

    def as_tuple(self) -> Tuple[EdgeType, EdgeType, EdgeType, EdgeType]:
        """Return edges as (top, right, bottom, left)."""
        return (self.top, self.right, self.bottom, self.left)


def _parity(row: int, col: int) -> EdgeType:
    """Checkerboard sample shared by the two cells on either side of an edge."""
    return EdgeType.TAB if (row + col) % 2 == 0 else EdgeType.BLANK


@dataclass(frozen=True)
class Grid:
    """Fixed rows x cols puzzle grid.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
    """

    rows: int = 4
    cols: int = 4

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {self.rows}x{self.cols}")

    @property
    def piece_count(self) -> int:
        """Number of cells (and pieces) in the grid."""
        return self.rows * self.cols

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_valid_slot(self, slot: int) -> bool:
        return 0 <= slot < self.piece_count

    def slot_of(self, row: int, col: int) -> int:
        """Linear slot index of a cell."""
        if not self.contains(row, col):
            raise ValueError(f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} grid")
        return row * self.cols + col

    def cell_of(self, slot: int) -> Tuple[int, int]:
        """(row, col) of a linear slot index."""
        if not self.is_valid_slot(slot):
            raise ValueError(f"Slot {slot} is outside the {self.rows}x{self.cols} grid")
        return divmod(slot, self.cols)

    def slots(self) -> Iterator[int]:
        return iter(range(self.piece_count))

    def edges_of(self, row: int, col: int) -> EdgeSet:
        """Compute the edge codes of a cell.

        Args:
            row: Cell row (0 is the top row).
            col: Cell column (0 is the left column).

        Returns:
            EdgeSet with FLAT on border sides and complementary TAB/BLANK
            codes on interior sides.
        """
        if not self.contains(row, col):
            raise ValueError(f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} grid")

        return EdgeSet(
            top=EdgeType.FLAT if row == 0 else _parity(row - 1, col),
            right=EdgeType.FLAT if col == self.cols - 1 else _parity(row, col),
            bottom=EdgeType.FLAT if row == self.rows - 1 else _parity(row, col).complement(),
            left=EdgeType.FLAT if col == 0 else _parity(row, col - 1).complement(),
        )

    def edges_for_slot(self, slot: int) -> EdgeSet:
        row, col = self.cell_of(slot)
        return self.edges_of(row, col)
