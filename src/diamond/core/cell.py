"""Storage slot holding at most one piece."""

from __future__ import annotations

from dataclasses import dataclass

from diamond.core.piece import Piece


@dataclass(slots=True)
class Cell:
    """Mutable board slot: either empty or occupied by a single piece."""

    piece: Piece | None = None

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    def __str__(self) -> str:
        return "." if self.piece is None else str(self.piece)
