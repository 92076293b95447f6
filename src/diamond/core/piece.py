"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from diamond.core.enums import Color

_CHARS: dict[Color, str] = {
    Color.WHITE: "W",
    Color.BLACK: "B",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a board piece."""

    color: Color

    def __str__(self) -> str:
        """Single character, 'W' for white and 'B' for black."""
        return _CHARS[self.color]
