"""Core domain layer — diamond board addressing with zero external dependencies.

Quick start::

    from diamond.core import Board, Verifier

    board = Board()
    report = Verifier(board).run()
    assert report.passed
    cell = board[board.at(9, 1)]
"""

from diamond.core.board import Board
from diamond.core.cell import Cell
from diamond.core.enums import Color, VerificationState
from diamond.core.piece import Piece
from diamond.core.types import (
    CELL_COUNT,
    HALF_HEIGHT,
    ROW_COUNT,
    ROW_WIDTH,
    Offset,
    column_range,
    is_valid_location,
    iter_locations,
    sum_through,
)
from diamond.core.verifier import AdjacencyViolation, VerificationReport, Verifier

__all__ = [
    # Enums
    "Color",
    "VerificationState",
    # Types / helpers
    "CELL_COUNT",
    "HALF_HEIGHT",
    "ROW_COUNT",
    "ROW_WIDTH",
    "Offset",
    "column_range",
    "is_valid_location",
    "iter_locations",
    "sum_through",
    # Domain objects
    "Board",
    "Cell",
    "Piece",
    # Verification
    "AdjacencyViolation",
    "VerificationReport",
    "Verifier",
]
