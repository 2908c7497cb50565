"""Best-first open list over pool-owned states."""

from __future__ import annotations

import heapq
import itertools

from npuzzle.engine.nodes.pool import NodePool
from npuzzle.engine.nodes.state import State


class Frontier:
    """Priority queue of arena indices.

    Lowest ``total_estimate`` comes out first. On equal estimates the
    state with the larger ``cost`` wins, then the one pushed earlier.
    """

    def __init__(self, pool: NodePool) -> None:
        self._pool = pool
        self._heap: list[tuple[int, int, int, int]] = []
        self._counter = itertools.count()

    def push(self, state: State) -> None:
        heapq.heappush(
            self._heap,
            (state.total_estimate, -state.cost, next(self._counter), state.index),
        )

    def pop(self) -> State:
        """Remove and return the best state. Raises IndexError when empty."""
        *_, index = heapq.heappop(self._heap)
        return self._pool[index]

    def peek(self) -> State:
        return self._pool[self._heap[0][-1]]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
