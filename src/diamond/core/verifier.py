"""Exhaustive contiguity check of the board address translator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from diamond.core.board import Board
from diamond.core.enums import VerificationState
from diamond.core.types import HALF_HEIGHT, ROW_COUNT, ROW_WIDTH, Offset

_LOGGER = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_FAILED = 1

AddressTranslator = Callable[[int, int], Offset]
TraceCallback = Callable[[str], None]


class AdjacencyViolation(Exception):
    """Raised when consecutive coordinates map to non-consecutive offsets."""

    def __init__(self, row: int, col: int, expected: Offset, actual: Offset) -> None:
        super().__init__(
            f"R: {row}, C: {col} mapped to {actual}, expected {expected}"
        )
        self.row = row
        self.col = col
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True, slots=True)
class VerificationReport:
    """Outcome of a finished verification run."""

    state: VerificationState
    checked: int
    violation: AdjacencyViolation | None = None

    @property
    def passed(self) -> bool:
        return self.state == VerificationState.PASSED

    @property
    def exit_code(self) -> int:
        return EXIT_PASSED if self.passed else EXIT_FAILED


class Verifier:
    """Walks every diamond coordinate and asserts offsets advance by one.

    The upper half (rows 0..7, columns 0..row) is walked first, then the
    lower half (rows 8..15, columns row-8..7), with a single running previous
    offset so the seam between (7, 7) and (8, 0) is checked as well. The walk
    stops at the first violation. The first offset must be 0, so a passing
    walk covers exactly the storage slots 0..71. Piece data is never touched.
    """

    __slots__ = ("_translate", "_emit", "_state", "_previous", "_checked")

    def __init__(
        self,
        board: Board,
        *,
        translate: AddressTranslator | None = None,
        emit: TraceCallback | None = None,
    ) -> None:
        self._translate = translate or board.at
        self._emit = emit or print
        self._state = VerificationState.NOT_STARTED
        self._previous: Offset | None = None
        self._checked = 0

    @property
    def state(self) -> VerificationState:
        return self._state

    def run(self) -> VerificationReport:
        """Run both phases once and report PASSED or FAILED."""
        if self._state.is_terminal:
            raise RuntimeError(f"Verifier already ran ({self._state.name})")
        if self._state == VerificationState.RUNNING:
            raise RuntimeError("Verifier is already running")

        self._set_state(VerificationState.RUNNING)
        self._emit("Performing sanity checks...")
        try:
            for row in range(HALF_HEIGHT):
                for col in range(row + 1):
                    self._check(row, col)
            for row in range(HALF_HEIGHT, ROW_COUNT):
                for col in range(row - HALF_HEIGHT, ROW_WIDTH):
                    self._check(row, col)
        except AdjacencyViolation as exc:
            _LOGGER.warning("Adjacency violation: %s", exc)
            self._fail()
            return VerificationReport(self._state, self._checked, exc)
        except Exception:
            _LOGGER.exception(
                "Address translation failed after %d cells", self._checked
            )
            self._fail()
            raise

        self._emit("Sanity checks PASSED.")
        self._set_state(VerificationState.PASSED)
        return VerificationReport(self._state, self._checked)

    def _check(self, row: int, col: int) -> None:
        offset = self._translate(row, col)
        self._checked += 1
        self._emit(f"R: {row}, C: {col}, P={offset}")
        # The walk must start at the first storage slot.
        expected = 0 if self._previous is None else self._previous + 1
        if offset != expected:
            raise AdjacencyViolation(row, col, expected, offset)
        self._previous = offset

    def _fail(self) -> None:
        self._emit("Sanity check FAILED!")
        self._set_state(VerificationState.FAILED)

    def _set_state(self, state: VerificationState) -> None:
        _LOGGER.debug("Verifier %s -> %s", self._state.name, state.name)
        self._state = state
