"""Spiral ("snail") ordering of board cells.

The goal board numbers its tiles along an inward clockwise spiral that
starts at the top-left corner, and the blank ends up on the spiral's
last cell. Solvability is judged on the same ordering: consecutive spiral
cells are grid neighbours, so a blank slide never changes the parity of
the inversions counted along it.
"""

from __future__ import annotations

from npuzzle.config import BLANK
from npuzzle.models.board import Board, Position


def spiral_order(size: int) -> list[Position]:
    """Cells in spiral order: right, down, left, up, shrinking each time.

    >>> spiral_order(2)
    [(0, 0), (0, 1), (1, 1), (1, 0)]
    """
    order: list[Position] = []
    top, bottom, left, right = 0, size - 1, 0, size - 1
    while top <= bottom and left <= right:
        for c in range(left, right + 1):
            order.append((top, c))
        top += 1
        for r in range(top, bottom + 1):
            order.append((r, right))
        right -= 1
        if top <= bottom:
            for c in range(right, left - 1, -1):
                order.append((bottom, c))
            bottom -= 1
        if left <= right:
            for r in range(bottom, top - 1, -1):
                order.append((r, left))
            left += 1
    return order


def snail_values(board: Board) -> list[int]:
    """The board's tiles read along :func:`spiral_order`."""
    return [board.get(r, c) for r, c in spiral_order(board.size)]


def canonical_goal(size: int) -> Board:
    """Return the solved board: 1..size²-1 along the spiral, blank last."""
    cells = [BLANK] * (size * size)
    order = spiral_order(size)
    for value, (r, c) in enumerate(order[:-1], start=1):
        cells[r * size + c] = value
    return Board.from_flat(size, cells)


def count_inversions(values: list[int]) -> int:
    tiles = [v for v in values if v != BLANK]
    inversions = 0
    for i in range(len(tiles)):
        for j in range(i + 1, len(tiles)):
            if tiles[i] > tiles[j]:
                inversions += 1
    return inversions


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach :func:`canonical_goal`."""
    return count_inversions(snail_values(board)) % 2 == 0
