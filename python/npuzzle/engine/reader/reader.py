"""Reads puzzle boards from the plain-text puzzle format.

The format is a list of whitespace-separated integers: the board size N
followed by the N×N tiles in row-major order, 0 marking the blank::

    3
     0  1  3
     4  2  5
     7  8  6
"""

from __future__ import annotations

from pathlib import Path

from npuzzle.errors import InvalidBoardError
from npuzzle.models.board import Board


class PuzzleReader:
    """Stateless reader — all methods are static."""

    @staticmethod
    def parse(text: str) -> Board:
        """Parse *text* into a validated :class:`Board`."""
        tokens = text.split()
        if not tokens:
            raise InvalidBoardError("Puzzle input is empty.")

        values: list[int] = []
        for pos, token in enumerate(tokens, 1):
            try:
                values.append(int(token))
            except ValueError:
                raise InvalidBoardError(
                    f"Token {pos} ({token!r}) is not an integer."
                ) from None

        size, tiles = values[0], values[1:]
        return Board.from_flat(size, tiles)

    @staticmethod
    def load(path: Path | str) -> Board:
        return PuzzleReader.parse(Path(path).read_text())

    @staticmethod
    def dumps(board: Board) -> str:
        return str(board)
