"""Application entry point."""

from __future__ import annotations

import logging
import sys

from diamond.core.board import Board
from diamond.core.verifier import Verifier


def run() -> int:
    """Verify a freshly built board and return the process exit code."""
    board = Board()
    report = Verifier(board).run()
    return report.exit_code


def main() -> None:
    """Run the board sanity checks."""
    logging.basicConfig(level=logging.WARNING)
    sys.exit(run())


if __name__ == "__main__":
    main()
