"""Generates solvable n-puzzle boards."""

from __future__ import annotations

import logging
import random

from npuzzle.config import BLANK, MAX_RANDOM_SLIDES
from npuzzle.engine.generator.snail import canonical_goal
from npuzzle.models.board import Board, Position

logger = logging.getLogger(__name__)

# Blank offsets (row, col) picked from uniformly: down, right, up, left.
_OFFSETS: tuple[Position, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


class BoardGenerator:
    """Creates solvable puzzles by sliding tiles away from the goal."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board."""
        return canonical_goal(size)

    @staticmethod
    def scramble(board: Board, attempts: int, rng: random.Random) -> None:
        """Try *attempts* random blank slides on *board* in-place.

        A direction leading off the grid is skipped but still counts as an
        attempt, so the same seed and count always give the same board.
        """
        for _ in range(attempts):
            dr, dc = _OFFSETS[rng.randrange(4)]
            br, bc = board.blank_pos
            tr, tc = br + dr, bc + dc
            if board.in_bounds(tr, tc):
                BoardGenerator._swap(board, (tr, tc))

    @staticmethod
    def generate(
        size: int,
        swap_count: int = 0,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* board of the given size.

        With ``swap_count == 0`` the number of attempts is drawn from
        ``[0, MAX_RANDOM_SLIDES)``.
        """
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}.")
        if swap_count < 0:
            raise ValueError(f"swap_count must be >= 0, got {swap_count}.")
        rng = rng if rng is not None else random.Random()
        if swap_count == 0:
            swap_count = rng.randrange(MAX_RANDOM_SLIDES)
        logger.debug("Generating %d×%d board with %d slides", size, size, swap_count)

        board = BoardGenerator.solved(size)
        BoardGenerator.scramble(board, swap_count, rng)
        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target: Position) -> None:
        br, bc = board.blank_pos
        tr, tc = target
        board.set(br, bc, board.get(tr, tc))
        board.set(tr, tc, BLANK)
