"""Engine-wide constants and search limits."""

from __future__ import annotations

from dataclasses import dataclass

BLANK = 0

# Upper bound (exclusive) on random slides when a generator is asked for 0.
MAX_RANDOM_SLIDES = 1400

# States pre-allocated each time the node pool grows.
POOL_CHUNK_NODES = 1024

DEFAULT_HEURISTIC = "manhattan"


@dataclass(frozen=True)
class SearchLimits:
    """Work bounds applied by the search drivers, ``None`` means unbounded."""

    max_steps: int | None = None
    time_limit: float | None = None
