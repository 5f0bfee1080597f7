"""Board model for the sliding-tile puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.errors import InvalidBoardError


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides in each direction.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right→ blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Neighbor order: tile from the left, from above, from the right, from below.
_NEIGHBOR_ORDER = (Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP)


@dataclass(frozen=True)
class Board:
    """An immutable N×N puzzle layout.

    Tiles are stored as a flat row-major tuple; 0 represents the blank.
    The goal places tile ``v`` at index ``v - 1`` and the blank last.

    The constructor trusts its input.  Use :meth:`from_rows` or
    :meth:`from_flat` for anything that comes from outside the engine.
    """

    size: int
    tiles: tuple[int, ...]
    _blank: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_blank", self.tiles.index(0))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 1:
            raise InvalidBoardError(f"Board size must be positive, got {size}.")
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if any(isinstance(v, bool) or not isinstance(v, int) for v in flat):
            raise InvalidBoardError("Tiles must be integers.")
        if sorted(flat) != list(range(size * size)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        return cls(size=size, tiles=tuple(flat))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a 2D arrangement of tiles."""
        size = len(rows)
        if size == 0:
            raise InvalidBoardError("Board must have at least one row.")
        flat: list[int] = []
        for r, row in enumerate(rows):
            if len(row) != size:
                raise InvalidBoardError(
                    f"Row {r} has {len(row)} tiles, expected {size}."
                )
            flat.extend(row)
        return cls.from_flat(size, flat)

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self._blank, self.size)

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        n = self.size
        return tuple(self.tiles[r * n : (r + 1) * n] for r in range(n))

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        idx = row * self.size + col
        val = self.tiles[idx]
        if val == 0:
            return idx == len(self.tiles) - 1
        return val == idx + 1

    # -- heuristics -----------------------------------------------------------

    def hamming(self) -> int:
        """Number of tiles, blank excluded, out of their goal position."""
        return sum(1 for i, v in enumerate(self.tiles) if v and v != i + 1)

    def manhattan(self) -> int:
        """Sum of grid distances from each tile to its goal position."""
        n = self.size
        total = 0
        for i, v in enumerate(self.tiles):
            if v:
                g = v - 1
                total += abs(i // n - g // n) + abs(i % n - g % n)
        return total

    def is_goal(self) -> bool:
        return self.manhattan() == 0

    # -- transformations ------------------------------------------------------

    def twin(self) -> Board | None:
        """Return the board with one pair of adjacent tiles in a row swapped.

        The pair is the first one, scanning rows top to bottom, where
        neither tile is the blank.  Exactly one of a board and its twin
        can reach the goal.  A 1×1 board has no twin.
        """
        n = self.size
        for base in range(0, n * n, n):
            for i in range(base, base + n - 1):
                if self.tiles[i] and self.tiles[i + 1]:
                    tiles = list(self.tiles)
                    tiles[i], tiles[i + 1] = tiles[i + 1], tiles[i]
                    return Board(size=n, tiles=tuple(tiles))
        return None

    def slide(self, direction: Direction) -> Board | None:
        """Slide the tile next to the blank in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns ``None`` when there is no such tile.
        """
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        target = tr * self.size + tc
        tiles = list(self.tiles)
        tiles[self._blank], tiles[target] = tiles[target], 0
        return Board(size=self.size, tiles=tuple(tiles))

    def neighbors(self) -> list[Board]:
        """All boards one slide away, in a fixed order."""
        boards: list[Board] = []
        for direction in _NEIGHBOR_ORDER:
            board = self.slide(direction)
            if board is not None:
                boards.append(board)
        return boards

    def direction_to(self, other: Board) -> Direction | None:
        """Return the slide that turns this board into *other*, if any."""
        if other.size != self.size:
            return None
        for direction in _NEIGHBOR_ORDER:
            if self.slide(direction) == other:
                return direction
        return None

    # -- formatting -----------------------------------------------------------

    def __str__(self) -> str:
        lines = [str(self.size)]
        for row in self.rows:
            lines.append("".join(f"{v:2d} " for v in row))
        return "\n".join(lines) + "\n"
