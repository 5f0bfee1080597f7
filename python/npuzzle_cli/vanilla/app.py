"""Vanilla terminal frontend — no third-party dependencies.

Prints plain text in the classic puzzle format: the move count followed by
every board of the solution, or ``No solution possible``.
"""

from __future__ import annotations

from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board


def _print_inspection(board: Board) -> None:
    print("Initial board:")
    print(board)
    print(f"Hamming = {board.hamming()}")
    print(f"Manhattan = {board.manhattan()}")
    print(f"Goal board? {str(board.is_goal()).lower()}\n")

    twin = board.twin()
    print("Twin board:")
    print(twin if twin is not None else "none\n")

    print("Neighbors: ")
    for neighbor in board.neighbors():
        print(neighbor)


def _print_solution(solver: Solver) -> None:
    if not solver.is_solvable():
        print("No solution possible")
        return

    print(f"Minimum number of moves = {solver.moves()}")
    for board in solver.solution() or ():
        print(board)


def run(board: Board, inspect: bool = False, max_expansions: int | None = None) -> None:
    """Print a report for *board*: diagnostics if *inspect*, else its solution."""
    if inspect:
        _print_inspection(board)
        return
    _print_solution(Solver(board, max_expansions=max_expansions))
