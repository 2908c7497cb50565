"""Arena allocator for search states.

States are created in chunks and handed out by index. A slot keeps its
index and its object identity until the pool is dropped, so the frontier
and the visited set can hold plain integers into the arena while it keeps
growing. Released slots go on a free list and are reused first.
"""

from __future__ import annotations

import logging

from npuzzle.config import POOL_CHUNK_NODES
from npuzzle.engine.nodes.state import State
from npuzzle.models.errors import PoolAllocationError, PoolError

logger = logging.getLogger(__name__)


class NodePool:
    """Owns every :class:`State` a solver creates."""

    def __init__(
        self,
        size: int,
        chunk_size: int = POOL_CHUNK_NODES,
        max_nodes: int | None = None,
    ) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}.")
        self.size = size
        self.chunk_size = chunk_size
        self.max_nodes = max_nodes
        self._slots: list[State] = []
        self._free: list[int] = []
        self._next = 0
        self._live = 0

    # -- allocation -----------------------------------------------------------

    def allocate(self) -> State:
        """Return a live slot. Its board is stale: the caller must fill it."""
        if self._free:
            state = self._slots[self._free.pop()]
        else:
            if self._next == len(self._slots):
                self._grow()
            state = self._slots[self._next]
            self._next += 1
        state.live = True
        self._live += 1
        return state

    def release(self, state: State) -> None:
        """Give *state* back to the pool.

        Only valid for a state nothing else references yet, i.e. a freshly
        generated duplicate that never reached the frontier or visited set.
        """
        slots = self._slots
        if not 0 <= state.index < len(slots) or slots[state.index] is not state:
            raise PoolError(f"{state!r} does not belong to this pool.")
        if not state.live:
            raise PoolError(f"Slot {state.index} was already released.")
        state.live = False
        state.parent = None
        self._free.append(state.index)
        self._live -= 1

    def _grow(self) -> None:
        start = len(self._slots)
        count = self.chunk_size
        if self.max_nodes is not None:
            count = min(count, self.max_nodes - start)
            if count <= 0:
                raise PoolAllocationError(
                    f"Node pool exhausted: {self.max_nodes} states allocated."
                )
        try:
            self._slots.extend(State(self.size, start + i) for i in range(count))
        except MemoryError as exc:
            raise PoolAllocationError(
                f"Could not grow node pool beyond {start} states."
            ) from exc
        logger.debug("Node pool grew to %d slots", len(self._slots))

    # -- queries --------------------------------------------------------------

    def __getitem__(self, index: int) -> State:
        return self._slots[index]

    def __len__(self) -> int:
        return self._live

    @property
    def capacity(self) -> int:
        return len(self._slots)
