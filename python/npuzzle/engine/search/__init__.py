from npuzzle.engine.search.driver import (
    BidirectionalSearch,
    SearchOutcome,
    SearchResult,
    search,
    solve_board,
)

__all__ = [
    "BidirectionalSearch",
    "SearchOutcome",
    "SearchResult",
    "search",
    "solve_board",
]
