"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from npuzzle.models.board import Board


class BoardGenerator:
    """Creates solvable puzzles by walking the blank away from the goal."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal board (all tiles in order, blank bottom-right)."""
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}.")
        tiles = tuple(range(1, size * size)) + (0,)
        return Board(size=size, tiles=tiles)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random | None = None) -> Board:
        """Return *board* after *steps* random slides.

        The walk never immediately undoes its previous slide, so the result
        is reachable from *board* in at most *steps* moves.
        """
        rng = rng or random.Random()
        prev: Board | None = None
        for _ in range(steps):
            neighbors = board.neighbors()
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(size: int, steps: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board of the given size.

        The result is never the goal board unless *size* is 1.
        """
        rng = random.Random(seed)
        goal = BoardGenerator.solved(size)
        if size == 1:
            return goal
        if steps is None:
            steps = size * size * 100

        board = BoardGenerator.scramble(goal, steps, rng)
        while board.is_goal():
            board = BoardGenerator.scramble(goal, max(steps, 1), rng)
        return board
