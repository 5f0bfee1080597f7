"""Command-line interface tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from npuzzle_cli.main import app

PUZZLES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures" / "puzzles"

runner = CliRunner()


def _run(*args: str):
    return runner.invoke(app, [str(a) for a in args])


# -- vanilla ------------------------------------------------------------------


def test_solve_prints_moves_and_boards() -> None:
    result = _run(PUZZLES_DIR / "puzzle04.txt")

    assert result.exit_code == 0, result.output
    assert result.output.startswith("Minimum number of moves = 4\n")
    assert result.output.count("3\n") == 5
    assert " 1  2  3 \n 4  5  6 \n 7  8  0 \n" in result.output


def test_solve_goal_board() -> None:
    result = _run(PUZZLES_DIR / "puzzle00.txt")

    assert result.exit_code == 0, result.output
    assert "Minimum number of moves = 0" in result.output


def test_unsolvable_board() -> None:
    result = _run(PUZZLES_DIR / "puzzle3x3-unsolvable.txt")

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "No solution possible"


def test_inspect() -> None:
    result = _run(PUZZLES_DIR / "puzzle04.txt", "--inspect")

    assert result.exit_code == 0, result.output
    assert "Hamming = 4" in result.output
    assert "Manhattan = 4" in result.output
    assert "Goal board? false" in result.output
    assert "Twin board:\n3\n 0  3  1 \n" in result.output
    assert "Neighbors:" in result.output


def test_random_board() -> None:
    result = _run("--random", "3", "--steps", "6", "--seed", "1")

    assert result.exit_code == 0, result.output
    assert "Minimum number of moves = " in result.output


# -- rich ---------------------------------------------------------------------


def test_rich_frontend_solution() -> None:
    result = _run(PUZZLES_DIR / "puzzle04.txt", "-f", "rich")

    assert result.exit_code == 0, result.output
    assert "Minimum number of moves: 4" in result.output


def test_rich_frontend_unsolvable() -> None:
    result = _run(PUZZLES_DIR / "puzzle3x3-unsolvable.txt", "-f", "rich")

    assert result.exit_code == 0, result.output
    assert "No solution possible" in result.output


def test_rich_frontend_inspect() -> None:
    result = _run(PUZZLES_DIR / "puzzle04.txt", "-f", "rich", "--inspect")

    assert result.exit_code == 0, result.output
    assert "Manhattan" in result.output


# -- errors -------------------------------------------------------------------


@pytest.mark.parametrize(
    "content", ["", "3\n1 2 3\n", "2\n1 1 2 0\n", "two\n"],
    ids=["empty", "short", "duplicate", "token"],
)
def test_invalid_puzzle_file(tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.txt"
    path.write_text(content)

    result = _run(path)

    assert result.exit_code == 2


def test_missing_input() -> None:
    assert _run().exit_code == 2


def test_search_budget_exceeded() -> None:
    result = _run(PUZZLES_DIR / "puzzle04.txt", "--max-expansions", "1")

    assert result.exit_code == 1
    assert "gave up after expanding 1 nodes" in result.output
