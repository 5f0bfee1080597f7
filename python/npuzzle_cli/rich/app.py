"""Rich terminal frontend — tables, colours, and panels.

Renders the same report as the vanilla frontend, one panel per board of
the solution with the tile move that led to it.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str, style: str = "bright_blue") -> Panel:
    return Panel(
        Align.center(_render_board(board)),
        title=title,
        border_style=style,
        padding=(0, 1),
        expand=False,
    )


# -- screens ------------------------------------------------------------------


def _draw_inspection(board: Board) -> None:
    size = board.size

    stats = Table(show_header=False, box=rich.box.SIMPLE, padding=(0, 1))
    stats.add_column(style="dim")
    stats.add_column(style="bold yellow")
    stats.add_row("Hamming", str(board.hamming()))
    stats.add_row("Manhattan", str(board.manhattan()))
    stats.add_row("Goal board?", "yes" if board.is_goal() else "no")

    panels = [_board_panel(board, "[bold cyan]Initial[/bold cyan]", "cyan")]
    twin = board.twin()
    if twin is not None:
        panels.append(_board_panel(twin, "[bold yellow]Twin[/bold yellow]", "yellow"))
    for i, neighbor in enumerate(board.neighbors(), 1):
        panels.append(_board_panel(neighbor, f"[dim]Neighbor {i}[/dim]", "dim"))

    console.print(
        Panel(
            Group(Align.center(stats), Columns(panels)),
            title=f"[bold]Inspect  {size}×{size}[/bold]",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )


def _draw_solution(solver: Solver) -> None:
    board = solver.initial
    size = board.size

    if not solver.is_solvable():
        console.print(
            Panel(
                Group(
                    Align.center(_render_board(board)),
                    Align.center(Text("\nNo solution possible", style="bold red")),
                ),
                title=f"[bold red]Unsolvable  {size}×{size}[/bold red]",
                border_style="red",
                padding=(1, 2),
                expand=False,
            )
        )
        return

    boards = solver.solution() or ()
    directions = solver.directions() or []
    panels = [_board_panel(boards[0], "[bold cyan]Start[/bold cyan]", "cyan")]
    for i, (step, direction) in enumerate(zip(boards[1:], directions), 1):
        style = "bold green" if step.is_goal() else "bright_blue"
        panels.append(_board_panel(step, f"{i}  [dim]({direction.value})[/dim]", style))

    summary = Text()
    summary.append("  Minimum number of moves: ", style="dim")
    summary.append(str(solver.moves()), style="bold yellow")

    console.print(Columns(panels))
    console.print(summary)


# -- entry point --------------------------------------------------------------


def run(board: Board, inspect: bool = False, max_expansions: int | None = None) -> None:
    """Render a report for *board*: diagnostics if *inspect*, else its solution."""
    if inspect:
        _draw_inspection(board)
        return
    _draw_solution(Solver(board, max_expansions=max_expansions))
