"""Board - 72 cells of a diamond stored in one contiguous list."""

from __future__ import annotations

from collections.abc import Iterator

from diamond.core.cell import Cell
from diamond.core.types import (
    CELL_COUNT,
    HALF_HEIGHT,
    ROW_COUNT,
    Offset,
    column_range,
    is_valid_location,
    iter_locations,
    sum_through,
)

# Cells in rows 0..7.
_UPPER_CELLS = sum_through(1, HALF_HEIGHT)


class Board:
    """Fixed-capacity diamond board with closed-form cell addressing."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Cell] = [Cell() for _ in range(CELL_COUNT)]

    # -- Addressing ---------------------------------------------------------

    @staticmethod
    def at(row: int, col: int) -> Offset:
        """Storage offset of (row, col).

        Rows up to 8 start after the triangular count of all shorter rows.
        Lower rows start after the full upper half plus the shrinking rows
        8..row-1, and their columns are rebased to start at zero.
        """
        if not is_valid_location(row, col):
            raise ValueError(f"Invalid location: row={row}, col={col}")
        if row <= HALF_HEIGHT:
            return sum_through(1, row) + col
        return (
            _UPPER_CELLS
            + sum_through(2 * HALF_HEIGHT + 1 - row, HALF_HEIGHT)
            + col
            - (row - HALF_HEIGHT)
        )

    # -- Element access -----------------------------------------------------

    def __getitem__(self, offset: Offset) -> Cell:
        return self._cells[offset]

    def __len__(self) -> int:
        return len(self._cells)

    def cell(self, row: int, col: int) -> Cell:
        """Cell stored at (row, col)."""
        return self._cells[self.at(row, col)]

    def locations(self) -> Iterator[tuple[int, int, Offset, Cell]]:
        """Yield (row, col, offset, cell) for every cell of the diamond."""
        for row, col in iter_locations():
            offset = self.at(row, col)
            yield row, col, offset, self._cells[offset]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(ROW_COUNT):
            cols = column_range(row)
            cells = "".join(str(self.cell(row, col)) for col in cols)
            rows.append(" " * cols.start + cells)
        return "\n".join(rows)
