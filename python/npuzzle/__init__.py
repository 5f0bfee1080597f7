"""Optimal sliding-tile puzzle solver."""

from npuzzle.engine.solver import Solver, SolverResult
from npuzzle.errors import InvalidBoardError, PuzzleError, SearchBudgetExceeded
from npuzzle.models.board import Board, Direction

__all__ = [
    "Board",
    "Direction",
    "InvalidBoardError",
    "PuzzleError",
    "SearchBudgetExceeded",
    "Solver",
    "SolverResult",
]
