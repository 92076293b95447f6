"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from diamond.core.board import Board


@pytest.fixture
def board() -> Board:
    """A freshly constructed, empty board."""
    return Board()


@pytest.fixture
def trace() -> list[str]:
    """Collector for verifier diagnostic lines."""
    return []
