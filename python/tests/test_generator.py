"""Board generator tests."""

from __future__ import annotations

import random

import pytest

from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board


def test_solved_board() -> None:
    assert BoardGenerator.solved(3) == Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    assert BoardGenerator.solved(1) == Board.from_rows([[0]])
    assert BoardGenerator.solved(5).is_goal()


def test_solved_rejects_bad_size() -> None:
    with pytest.raises(ValueError):
        BoardGenerator.solved(0)


def test_scramble_zero_steps_is_identity() -> None:
    goal = BoardGenerator.solved(3)

    assert BoardGenerator.scramble(goal, 0, random.Random(1)) == goal


@pytest.mark.parametrize("steps", [1, 3, 7, 11])
def test_scramble_stays_within_step_count(steps: int) -> None:
    board = BoardGenerator.scramble(BoardGenerator.solved(3), steps, random.Random(steps))
    solver = Solver(board)

    assert solver.is_solvable()
    assert solver.moves() <= steps
    assert solver.moves() % 2 == steps % 2


def test_generate_is_seeded() -> None:
    assert BoardGenerator.generate(4, seed=42) == BoardGenerator.generate(4, seed=42)


@pytest.mark.parametrize("size", [2, 3, 4, 6])
def test_generate_never_returns_goal(size: int) -> None:
    board = BoardGenerator.generate(size, steps=2, seed=size)

    assert board.dimension() == size
    assert not board.is_goal()
    assert sorted(board.tiles) == list(range(size * size))


def test_generate_single_tile() -> None:
    assert BoardGenerator.generate(1).is_goal()
