"""Core enumerations for the diamond board domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Piece color."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class VerificationState(IntEnum):
    """Lifecycle of a single verification run."""

    NOT_STARTED = 0
    RUNNING = 1
    PASSED = 2
    FAILED = 3

    @property
    def is_terminal(self) -> bool:
        return self in (VerificationState.PASSED, VerificationState.FAILED)
