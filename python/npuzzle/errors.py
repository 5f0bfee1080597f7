"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by ``npuzzle``."""


class InvalidBoardError(PuzzleError, ValueError):
    """Board input is not a square permutation of ``0..N²-1``."""


class SearchBudgetExceeded(PuzzleError, RuntimeError):
    """The solver expanded more nodes than it was allowed to."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Search gave up after expanding {limit} nodes.")
        self.limit = limit
