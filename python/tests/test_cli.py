"""Command line behaviour, driven through typer's test runner."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from frontend.cli.app import app
from npuzzle.engine.generator import canonical_goal
from npuzzle.io import dump_board
from npuzzle.models.board import Board

runner = CliRunner()

FOUR_AWAY = Board.from_rows(
    [[1, 2, 3, 4], [12, 13, 5, 6], [11, 15, 14, 0], [10, 9, 8, 7]]
)
TEN_AWAY = Board.from_rows([[8, 4, 1], [7, 0, 3], [6, 2, 5]])


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "board.txt"
    path.write_text(text)
    return path


def test_solve_file(tmp_path: Path) -> None:
    path = _write(tmp_path, dump_board(FOUR_AWAY))
    result = runner.invoke(app, ["-f", str(path)])
    assert result.exit_code == 0, result.output
    assert "Moves" in result.output
    assert "Step 4" in result.output
    assert "solved" in result.output


def test_solve_stdin() -> None:
    result = runner.invoke(app, ["-q"], input=dump_board(canonical_goal(3)))
    assert result.exit_code == 0, result.output
    assert "Step 0" not in result.output
    assert "Total states" in result.output


def test_random_board() -> None:
    args = ["-r", "3", "--swaps", "30", "--seed", "5", "-q"]
    result = runner.invoke(app, args)
    assert result.exit_code == 0, result.output
    assert "Max states" in result.output


def test_bidirectional_flag(tmp_path: Path) -> None:
    path = _write(tmp_path, dump_board(TEN_AWAY))
    result = runner.invoke(app, ["-f", str(path), "-b", "-e", "tiles_out"])
    assert result.exit_code == 0, result.output
    assert "bidirectional" in result.output


def test_unsolvable(tmp_path: Path) -> None:
    path = _write(tmp_path, "3\n2 1 3\n8 0 4\n7 6 5\n")
    result = runner.invoke(app, ["-f", str(path)])
    assert result.exit_code == 1
    assert "unsolvable" in result.output


def test_invalid_board(tmp_path: Path) -> None:
    path = _write(tmp_path, "3\n1 1 3\n8 0 4\n7 6 5\n")
    result = runner.invoke(app, ["-f", str(path)])
    assert result.exit_code == 1
    assert "Invalid board" in result.output


def test_step_limit(tmp_path: Path) -> None:
    path = _write(tmp_path, dump_board(TEN_AWAY))
    result = runner.invoke(app, ["-f", str(path), "--max-steps", "1", "-q"])
    assert result.exit_code == 2
    assert "limit_reached" in result.output


def test_unknown_heuristic(tmp_path: Path) -> None:
    path = _write(tmp_path, dump_board(TEN_AWAY))
    result = runner.invoke(app, ["-f", str(path), "-e", "euclid"])
    assert result.exit_code != 0
