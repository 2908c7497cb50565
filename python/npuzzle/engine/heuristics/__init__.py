from npuzzle.engine.heuristics.heuristics import (
    Heuristic,
    HeuristicName,
    Manhattan,
    MisplacedTiles,
    TilesOut,
    make_heuristic,
)

__all__ = [
    "Heuristic",
    "HeuristicName",
    "Manhattan",
    "MisplacedTiles",
    "TilesOut",
    "make_heuristic",
]
