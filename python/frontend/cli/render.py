"""Rich rendering of boards and search results."""

from __future__ import annotations

import rich.box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.search import SearchResult
from npuzzle.models.board import Board, Direction


def render_board(board: Board, goal: Board | None = None) -> Table:
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

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif goal is not None and goal.get(r, c) == val:
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_moves(moves: list[Direction]) -> Text:
    text = Text()
    for i, direction in enumerate(moves):
        if i:
            text.append(" ")
        text.append(direction.value, style="cyan")
    return text


def render_summary(result: SearchResult) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column(justify="right")
    table.add_row("Outcome", result.outcome.value)
    table.add_row("Moves", str(result.moves))
    table.add_row("Total states", str(result.total_states))
    table.add_row("Max states", str(result.max_states))
    table.add_row("Steps", str(result.steps))
    table.add_row("Time", f"{result.elapsed:.3f}s")
    mode = "bidirectional" if result.bidirectional else "A*"
    return Panel(
        table,
        title=f"[bold cyan]Search ({mode})[/bold cyan]",
        border_style="cyan",
        expand=False,
    )


def print_path(console: Console, path: list[Board], goal: Board) -> None:
    for i, board in enumerate(path):
        label = Text(f"Step {i}", style="dim")
        console.print(Group(label, render_board(board, goal)))
