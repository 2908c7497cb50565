"""Board model for the n-puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from npuzzle.config import BLANK
from npuzzle.models.errors import IncorrectBoardError

Position = tuple[int, int]


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def blank_offset(self) -> Position:
        """Offset of the blank when a tile slides this way.

        ``UP`` moves the tile below the blank, so the blank shifts down.
        """
        return _BLANK_OFFSETS[self]

    @classmethod
    def from_blank_offset(cls, offset: Position) -> Direction:
        for direction, value in _BLANK_OFFSETS.items():
            if value == offset:
                return direction
        raise ValueError(f"{offset} is not a single-cell offset.")


_BLANK_OFFSETS: dict[Direction, Position] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass
class Board:
    """A size×size puzzle board.

    Cells live in one flat row-major list; ``cells[row * size + col]``
    is the tile at ``(row, col)``. 0 represents the blank.
    """

    size: int
    cells: list[int]
    blank_pos: Position

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 8, 0, 4, 7, 6, 5])
        """
        if len(flat) != size * size:
            raise IncorrectBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        cells = list(flat)
        blank_pos: Position = (0, 0)
        if BLANK in cells:
            blank_pos = divmod(cells.index(BLANK), size)
        return cls(size=size, cells=cells, blank_pos=blank_pos)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise IncorrectBoardError(
                    f"Row {r} has {len(row)} tiles, expected {size}."
                )
        return cls.from_flat(size, [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    def index(self, row: int, col: int) -> int:
        return row * self.size + col

    def get(self, row: int, col: int) -> int:
        return self.cells[row * self.size + col]

    def set(self, row: int, col: int, value: int) -> None:
        self.cells[row * self.size + col] = value
        if value == BLANK:
            self.blank_pos = (row, col)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def rows(self) -> list[list[int]]:
        n = self.size
        return [self.cells[r * n : (r + 1) * n] for r in range(n)]

    def copy(self) -> Board:
        return Board(size=self.size, cells=self.cells[:], blank_pos=self.blank_pos)

    # -- validation -----------------------------------------------------------

    def validate(self) -> None:
        """Raise :class:`IncorrectBoardError` unless every tile appears once."""
        total = self.size * self.size
        if self.size < 1:
            raise IncorrectBoardError(f"Board size must be positive, got {self.size}.")
        if len(self.cells) != total:
            raise IncorrectBoardError(
                f"Wrong number of tiles: found {len(self.cells)}, expected {total}."
            )
        seen = [False] * total
        for value in self.cells:
            if not 0 <= value < total:
                raise IncorrectBoardError(
                    f"Tile {value} is out of bounds for a "
                    f"{self.size}×{self.size} board."
                )
            if seen[value]:
                raise IncorrectBoardError(f"Tile {value} appears more than once.")
            seen[value] = True
        if self.get(*self.blank_pos) != BLANK:
            raise IncorrectBoardError(
                f"blank_pos {self.blank_pos} does not hold the blank tile."
            )
