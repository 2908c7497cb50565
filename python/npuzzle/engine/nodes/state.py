"""Search node: a board snapshot plus search bookkeeping."""

from __future__ import annotations

from npuzzle.config import BLANK
from npuzzle.models.board import Board, Position


class State:
    """One board arrangement reached by the search.

    Equality and hashing look at the cells only; ``cost``, ``heuristic``
    and ``parent`` are bookkeeping. ``parent`` is the arena index of the
    state this one was expanded from (``None`` for a root), resolved
    through the owning :class:`~npuzzle.engine.nodes.pool.NodePool`.
    """

    __slots__ = (
        "index",
        "size",
        "cells",
        "cost",
        "heuristic",
        "total_estimate",
        "blank_pos",
        "hash_value",
        "parent",
        "live",
    )

    def __init__(self, size: int, index: int = -1) -> None:
        self.index = index
        self.size = size
        self.cells: list[int] = [BLANK] * (size * size)
        self.cost: int = 0
        self.heuristic: int = 0
        self.total_estimate: int = 0
        self.blank_pos: Position = (0, 0)
        self.hash_value: int = 0
        self.parent: int | None = None
        self.live: bool = False

    @classmethod
    def from_board(cls, board: Board) -> State:
        """Build a free-standing state (not owned by any pool)."""
        state = cls(board.size)
        state.load_board(board)
        return state

    def load_board(self, board: Board) -> None:
        self.cells[:] = board.cells
        self.blank_pos = board.blank_pos
        self.rehash()

    def copy_from(self, other: State) -> None:
        """Overwrite this slot with *other*'s board and bookkeeping."""
        self.cells[:] = other.cells
        self.cost = other.cost
        self.heuristic = other.heuristic
        self.total_estimate = other.total_estimate
        self.blank_pos = other.blank_pos
        self.hash_value = other.hash_value
        self.parent = other.parent

    def to_board(self) -> Board:
        return Board(size=self.size, cells=self.cells[:], blank_pos=self.blank_pos)

    # -- cell access ----------------------------------------------------------

    def __getitem__(self, pos: Position) -> int:
        row, col = pos
        return self.cells[row * self.size + col]

    def __setitem__(self, pos: Position, value: int) -> None:
        row, col = pos
        self.cells[row * self.size + col] = value

    # -- hashing / equality ---------------------------------------------------

    def rehash(self) -> None:
        self.hash_value = hash(tuple(self.cells))

    def __hash__(self) -> int:
        return self.hash_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __repr__(self) -> str:
        return (
            f"State(index={self.index}, cost={self.cost}, "
            f"heuristic={self.heuristic}, cells={self.cells})"
        )
