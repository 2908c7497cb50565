"""Text format for boards.

Example::

    # This puzzle is solvable
    3
    1 2 3
    8 0 4
    7 6 5

Everything after a ``#`` is a comment. The first data line holds the size,
followed by one line of tiles per row.
"""

from __future__ import annotations

from pathlib import Path

from npuzzle.models.board import Board
from npuzzle.models.errors import BoardParseError


def _data_lines(text: str) -> list[tuple[int, list[str]]]:
    lines: list[tuple[int, list[str]]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        fields = raw.split("#", 1)[0].split()
        if fields:
            lines.append((lineno, fields))
    return lines


def _to_int(token: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise BoardParseError(f"expected an integer, got {token!r}", lineno) from None


def parse_board(text: str) -> Board:
    """Parse and validate a board; raise on syntax or content errors."""
    lines = _data_lines(text)
    if not lines:
        raise BoardParseError("no board size found")

    lineno, fields = lines[0]
    if len(fields) != 1:
        raise BoardParseError("the first line must hold only the board size", lineno)
    size = _to_int(fields[0], lineno)
    if size < 1:
        raise BoardParseError(f"board size must be positive, got {size}", lineno)

    rows = lines[1:]
    if len(rows) != size:
        raise BoardParseError(f"expected {size} rows of tiles, found {len(rows)}")

    flat: list[int] = []
    for lineno, fields in rows:
        if len(fields) != size:
            raise BoardParseError(
                f"expected {size} tiles in the row, found {len(fields)}", lineno
            )
        flat.extend(_to_int(token, lineno) for token in fields)

    board = Board.from_flat(size, flat)
    board.validate()
    return board


def load_board(path: Path | str) -> Board:
    return parse_board(Path(path).read_text())


def dump_board(board: Board) -> str:
    """Serialise *board* in the format :func:`parse_board` reads."""
    width = len(str(board.size * board.size - 1))
    lines = [str(board.size)]
    for row in board.rows():
        lines.append(" ".join(f"{v:>{width}}" for v in row))
    return "\n".join(lines) + "\n"
