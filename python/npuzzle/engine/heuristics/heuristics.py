"""Distance estimators plugged into the solver.

A heuristic is any callable taking a flat board buffer (row-major cells)
and returning an estimate >= 0 of the slides left to reach its target.
The solver does not check the estimate: for optimal paths it must never
overestimate.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import StrEnum

from npuzzle.config import BLANK
from npuzzle.models.board import Board
from npuzzle.models.errors import UnknownHeuristicError

Heuristic = Callable[[Sequence[int]], int]


class HeuristicName(StrEnum):
    manhattan = "manhattan"
    misplaced_tiles = "misplaced_tiles"
    tiles_out = "tiles_out"


class _TargetHeuristic:
    """Base for heuristics measured against a fixed target board."""

    def __init__(self, target: Board) -> None:
        self.size = target.size
        self.target = target.cells[:]
        # _rows[v], _cols[v]: where tile v sits on the target.
        self._rows = [0] * len(self.target)
        self._cols = [0] * len(self.target)
        for idx, value in enumerate(self.target):
            self._rows[value], self._cols[value] = divmod(idx, self.size)

    def __call__(self, cells: Sequence[int]) -> int:
        raise NotImplementedError


class Manhattan(_TargetHeuristic):
    """Sum over tiles of the row and column distance to the target cell."""

    def __call__(self, cells: Sequence[int]) -> int:
        n = self.size
        rows, cols = self._rows, self._cols
        dist = 0
        for idx, tile in enumerate(cells):
            if tile == BLANK:
                continue
            r, c = divmod(idx, n)
            dist += abs(r - rows[tile]) + abs(c - cols[tile])
        return dist


class MisplacedTiles(_TargetHeuristic):
    """Number of tiles not on their target cell."""

    def __call__(self, cells: Sequence[int]) -> int:
        target = self.target
        return sum(
            1 for idx, tile in enumerate(cells) if tile != BLANK and tile != target[idx]
        )


class TilesOut(_TargetHeuristic):
    """Tiles outside their target row plus tiles outside their target column."""

    def __call__(self, cells: Sequence[int]) -> int:
        n = self.size
        rows, cols = self._rows, self._cols
        out = 0
        for idx, tile in enumerate(cells):
            if tile == BLANK:
                continue
            r, c = divmod(idx, n)
            out += (r != rows[tile]) + (c != cols[tile])
        return out


_REGISTRY: dict[HeuristicName, type[_TargetHeuristic]] = {
    HeuristicName.manhattan: Manhattan,
    HeuristicName.misplaced_tiles: MisplacedTiles,
    HeuristicName.tiles_out: TilesOut,
}


def make_heuristic(name: str, target: Board) -> Heuristic:
    """Build the heuristic registered as *name*, measured against *target*."""
    try:
        cls = _REGISTRY[HeuristicName(name.lower())]
    except ValueError:
        available = ", ".join(h.value for h in HeuristicName)
        raise UnknownHeuristicError(
            f"No such heuristic {name!r}. Available: {available}."
        ) from None
    return cls(target)
