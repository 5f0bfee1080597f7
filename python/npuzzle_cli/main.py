"""Sliding Puzzle Solver.

Usage::

    npuzzle puzzle04.txt              # solve a puzzle file
    npuzzle puzzle04.txt -f rich      # Rich terminal report
    npuzzle --random 3 --seed 7       # solve a generated 3×3 board
    npuzzle puzzle04.txt --inspect    # Hamming, Manhattan, twin, neighbors
"""

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.reader import PuzzleReader
from npuzzle.errors import InvalidBoardError, SearchBudgetExceeded
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle_cli.vanilla.app",
    Frontend.rich: "npuzzle_cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _load_board(
    puzzle_file: Path | None,
    random_size: int | None,
    steps: int | None,
    seed: int | None,
) -> Board:
    if random_size is not None:
        board = BoardGenerator.generate(random_size, steps=steps, seed=seed)
        logger.debug("Generated %dx%d board (seed=%s)", random_size, random_size, seed)
        return board

    if puzzle_file is None:
        raise typer.BadParameter(
            "Give a PUZZLE_FILE or use --random.", param_hint="PUZZLE_FILE"
        )
    try:
        return PuzzleReader.load(puzzle_file)
    except InvalidBoardError as e:
        raise typer.BadParameter(f"{puzzle_file}: {e}", param_hint="PUZZLE_FILE") from e


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle_file: Optional[Path] = typer.Argument(
        None,
        exists=True, dir_okay=False, readable=True,
        help="Puzzle file: N followed by N×N tiles, 0 for the blank.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Report renderer.",
    ),
    random_size: Optional[int] = typer.Option(
        None, "--random",
        min=1, max=8,
        help="Solve a random board of this size instead of a file.",
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps",
        min=0,
        help="Scramble length for --random.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --random.",
    ),
    inspect: bool = typer.Option(
        False, "--inspect",
        help="Show board diagnostics instead of solving.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        help="Give up after expanding this many search nodes.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Find a minimum-move solution to a sliding-tile puzzle."""
    _configure_logging(verbose)
    board = _load_board(puzzle_file, random_size, steps, seed)

    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        mod.run(board, inspect=inspect, max_expansions=max_expansions)
    except SearchBudgetExceeded as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
