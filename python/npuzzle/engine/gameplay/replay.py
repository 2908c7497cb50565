"""Replays slide moves on a board and turns board paths into moves."""

from __future__ import annotations

from npuzzle.engine.generator import canonical_goal
from npuzzle.models.board import Board, Direction, Position
from npuzzle.models.errors import InvalidPathError


class MoveReplay:
    """Applies moves to a private copy of a board and tracks the goal."""

    def __init__(self, board: Board, goal: Board | None = None) -> None:
        self.board = board.copy()
        self.goal = goal if goal is not None else canonical_goal(board.size)
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board, goal: Board | None = None) -> MoveReplay:
        return cls(board, goal)

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        br, bc = self.board.blank_pos
        dr, dc = direction.blank_offset
        tr, tc = br + dr, bc + dc

        if not self.board.in_bounds(tr, tc):
            return False

        self._swap(self.board, (tr, tc))
        self.moves += 1
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.cells == self.goal.cells

    # -- path conversion ------------------------------------------------------

    @staticmethod
    def direction_between(before: Board, after: Board) -> Direction:
        """Return the single move turning *before* into *after*."""
        br, bc = before.blank_pos
        ar, ac = after.blank_pos
        offset = (ar - br, ac - bc)
        if abs(offset[0]) + abs(offset[1]) != 1:
            raise InvalidPathError(
                f"Blank jumped from {before.blank_pos} to {after.blank_pos}."
            )
        expected = before.copy()
        MoveReplay._swap(expected, (ar, ac))
        if expected.cells != after.cells:
            raise InvalidPathError(
                f"Boards {before.cells} and {after.cells} are not one slide apart."
            )
        return Direction.from_blank_offset(offset)

    @staticmethod
    def directions(path: list[Board]) -> list[Direction]:
        """Moves leading along *path*, one fewer than there are boards."""
        return [
            MoveReplay.direction_between(before, after)
            for before, after in zip(path, path[1:])
        ]

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target: Position) -> None:
        br, bc = board.blank_pos
        tr, tc = target
        board.set(br, bc, board.get(tr, tc))
        board.set(tr, tc, 0)
