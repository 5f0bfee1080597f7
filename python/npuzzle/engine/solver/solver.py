"""Sliding puzzle solver.

A* search with the Manhattan heuristic.  Solvability is decided without
computing permutation parity: the initial board and its twin are searched
in one shared frontier, and whichever reaches the goal first wins.  Exactly
one of the two can.

Search nodes are kept in an arena and refer to their predecessor by index.
Every node stays alive until the run ends, so memory grows with the number
of generated nodes.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from enum import Enum

from npuzzle.errors import SearchBudgetExceeded
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)

NO_PREDECESSOR = -1


class Origin(Enum):
    """Which seed a search node descends from."""

    REAL = "real"
    TWIN = "twin"


@dataclass(frozen=True)
class SearchNode:
    board: Board
    predecessor: int
    moves: int
    priority: int
    origin: Origin


@dataclass(frozen=True)
class SolverResult:
    """Outcome of one search run."""

    solvable: bool
    moves: int
    solution: tuple[Board, ...] | None
    expanded: int = 0
    generated: int = 0


class Solver:
    """Finds a minimum-move solution for *initial*.

    The search runs once, on the first call to :meth:`solve` or any of the
    query methods, and its result is cached.

    ``max_expansions`` bounds the number of nodes taken off the frontier;
    :class:`SearchBudgetExceeded` is raised when the bound is passed.
    """

    def __init__(self, initial: Board, max_expansions: int | None = None) -> None:
        self.initial = initial
        self.max_expansions = max_expansions
        self._result: SolverResult | None = None

    # -- public API -----------------------------------------------------------

    def solve(self) -> SolverResult:
        if self._result is None:
            self._result = self._search()
        return self._result

    def is_solvable(self) -> bool:
        return self.solve().solvable

    def moves(self) -> int:
        """Minimum number of moves, or -1 if the board is unsolvable."""
        return self.solve().moves

    def solution(self) -> tuple[Board, ...] | None:
        """Boards from the initial one to the goal, or ``None`` if unsolvable."""
        return self.solve().solution

    def directions(self) -> list[Direction] | None:
        """Tile moves that replay :meth:`solution` from the initial board."""
        boards = self.solution()
        if boards is None:
            return None
        steps: list[Direction] = []
        for prev, cur in zip(boards, boards[1:]):
            direction = prev.direction_to(cur)
            assert direction is not None, "solution boards must be one move apart"
            steps.append(direction)
        return steps

    # -- search ---------------------------------------------------------------

    def _search(self) -> SolverResult:
        nodes: list[SearchNode] = []
        frontier: list[tuple[int, int, int]] = []
        counter = itertools.count()

        def push(board: Board, predecessor: int, moves: int, origin: Origin) -> None:
            node = SearchNode(
                board=board,
                predecessor=predecessor,
                moves=moves,
                priority=moves + board.manhattan(),
                origin=origin,
            )
            nodes.append(node)
            heapq.heappush(frontier, (node.priority, next(counter), len(nodes) - 1))

        logger.debug(
            "Solving %dx%d board (manhattan=%d)",
            self.initial.size, self.initial.size, self.initial.manhattan(),
        )

        push(self.initial, NO_PREDECESSOR, 0, Origin.REAL)
        twin = self.initial.twin()
        if twin is not None:
            push(twin, NO_PREDECESSOR, 0, Origin.TWIN)

        expanded = 0
        while True:
            _, _, handle = heapq.heappop(frontier)
            cur = nodes[handle]
            if cur.board.is_goal():
                break

            if self.max_expansions is not None and expanded >= self.max_expansions:
                logger.warning(
                    "Search budget of %d expansions exhausted (%d nodes generated)",
                    self.max_expansions, len(nodes),
                )
                raise SearchBudgetExceeded(self.max_expansions)
            expanded += 1

            previous = (
                nodes[cur.predecessor].board
                if cur.predecessor != NO_PREDECESSOR
                else None
            )
            for board in cur.board.neighbors():
                if board != previous:
                    push(board, handle, cur.moves + 1, cur.origin)

        logger.debug(
            "Goal reached from %s seed after %d moves (%d expanded, %d generated)",
            cur.origin.value, cur.moves, expanded, len(nodes),
        )

        if cur.origin is Origin.TWIN:
            return SolverResult(
                solvable=False,
                moves=-1,
                solution=None,
                expanded=expanded,
                generated=len(nodes),
            )
        return SolverResult(
            solvable=True,
            moves=cur.moves,
            solution=_reconstruct(nodes, handle),
            expanded=expanded,
            generated=len(nodes),
        )


def _reconstruct(nodes: list[SearchNode], handle: int) -> tuple[Board, ...]:
    path: list[Board] = []
    while handle != NO_PREDECESSOR:
        node = nodes[handle]
        path.append(node.board)
        handle = node.predecessor
    path.reverse()
    return tuple(path)
