"""Closed set of expanded states, keyed by board hash."""

from __future__ import annotations

from npuzzle.engine.nodes.pool import NodePool
from npuzzle.engine.nodes.state import State


class VisitedSet:
    """Maps a board hash to the arena indices of states with that hash.

    Hash collisions are resolved by comparing cells, so :meth:`find`
    accepts any state with the right board, including one owned by
    another solver's pool, and hands back the stored instance.
    """

    def __init__(self, pool: NodePool) -> None:
        self._pool = pool
        self._buckets: dict[int, list[int]] = {}
        self._count = 0

    def find(self, state: State) -> State | None:
        for index in self._buckets.get(state.hash_value, ()):
            stored = self._pool[index]
            if stored == state:
                return stored
        return None

    def add(self, state: State) -> State:
        """Insert *state* unless an equal one is stored; return the stored one."""
        stored = self.find(state)
        if stored is not None:
            return stored
        self._buckets.setdefault(state.hash_value, []).append(state.index)
        self._count += 1
        return state

    def __contains__(self, state: State) -> bool:
        return self.find(state) is not None

    def __len__(self) -> int:
        return self._count
