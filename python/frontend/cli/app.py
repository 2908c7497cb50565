"""Command line front end for the solver.

Reads a board from a file, from stdin, or generates a random one, then
prints the solution path and search statistics with ``rich``.
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from npuzzle.config import DEFAULT_HEURISTIC, SearchLimits
from npuzzle.engine.gameplay import MoveReplay
from npuzzle.engine.generator import BoardGenerator, canonical_goal, is_solvable
from npuzzle.engine.heuristics import HeuristicName
from npuzzle.engine.search import SearchOutcome, solve_board
from npuzzle.io import parse_board
from npuzzle.models.board import Board
from npuzzle.models.errors import NPuzzleError

from frontend.cli.render import print_path, render_board, render_moves, render_summary

console = Console(highlight=False)

app = typer.Typer(add_completion=False)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_board(
    file: Optional[Path], random_size: Optional[int], swaps: int, seed: Optional[int]
) -> Board:
    if file is not None:
        return parse_board(file.read_text())
    if random_size is not None:
        rng = random.Random(seed)
        return BoardGenerator.generate(random_size, swaps, rng)
    return parse_board(sys.stdin.read())


# -- CLI entry point ----------------------------------------------------------


@app.command()
def main(
    file: Optional[Path] = typer.Option(
        None, "-f", "--file",
        exists=True, dir_okay=False,
        help="Read the board from FILE.",
    ),
    random_size: Optional[int] = typer.Option(
        None, "-r", "--random",
        min=1,
        help="Generate a random solvable board of size SIZE.",
    ),
    heuristic: HeuristicName = typer.Option(
        HeuristicName(DEFAULT_HEURISTIC), "-e", "--heuristic",
        help="Heuristic used by A*.",
    ),
    swaps: int = typer.Option(
        0, "--swaps",
        min=0,
        help="Random slides applied with --random (0 picks a random count).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    bidirectional: bool = typer.Option(
        False, "-b", "--bidirectional",
        help="Search from both ends and stop when the searches meet.",
    ),
    max_steps: Optional[int] = typer.Option(
        None, "--max-steps",
        min=1,
        help="Give up after this many expansions.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Print only the summary.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve an n-puzzle towards the spiral goal."""
    _configure_logging(verbose)

    try:
        board = _read_board(file, random_size, swaps, seed)
    except NPuzzleError as exc:
        console.print(f"[red]Invalid board:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    goal = canonical_goal(board.size)
    if not quiet:
        console.print(render_board(board, goal))

    if not is_solvable(board):
        console.print("[red]This puzzle is unsolvable.[/red]")
        raise typer.Exit(code=1)

    result = solve_board(
        board,
        heuristic=heuristic.value,
        bidirectional=bidirectional,
        limits=SearchLimits(max_steps=max_steps),
    )

    if result.outcome is SearchOutcome.SOLVED and not quiet:
        print_path(console, result.path, goal)
        console.print(render_moves(MoveReplay.directions(result.path)))
    console.print(render_summary(result))

    if result.outcome is not SearchOutcome.SOLVED:
        console.print(f"[yellow]No solution found ({result.outcome.value}).[/yellow]")
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
