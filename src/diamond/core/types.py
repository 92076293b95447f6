"""Offset type alias and diamond coordinate helpers.

The board is two stacked triangles sharing their widest edge::

    *            row 0   columns 0..0
    **           row 1   columns 0..1
    ...
    ********     row 7   columns 0..7
    ********     row 8   columns 0..7
     *******     row 9   columns 1..7
    ...
           *     row 15  columns 7..7

Cells are numbered row by row, left to right, giving offsets 0..71.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final, TypeAlias

Offset: TypeAlias = int  # 0–71

ROW_COUNT: Final = 16
HALF_HEIGHT: Final = 8
ROW_WIDTH: Final = 8
CELL_COUNT: Final = 72


def sum_through(a: int, b: int) -> int:
    """Sum of a, a+1, ..., b in closed form; 0 for the empty range a == b+1."""
    return (b - a + 1) * (a + b) // 2


def column_range(row: int) -> range:
    """Valid columns of *row*: growing in the upper half, shrinking below."""
    if not 0 <= row < ROW_COUNT:
        raise ValueError(f"Row out of range: {row}")
    if row < HALF_HEIGHT:
        return range(0, row + 1)
    return range(row - HALF_HEIGHT, ROW_WIDTH)


def is_valid_location(row: int, col: int) -> bool:
    """Check whether (row, col) lies inside the diamond."""
    if not 0 <= row < ROW_COUNT:
        return False
    return col in column_range(row)


def iter_locations() -> Iterator[tuple[int, int]]:
    """Every valid (row, col) pair, row-major with increasing column."""
    for row in range(ROW_COUNT):
        for col in column_range(row):
            yield row, col
