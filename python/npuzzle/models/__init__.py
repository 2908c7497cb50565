from npuzzle.models.board import Board, Direction, Position
from npuzzle.models.errors import (
    BoardParseError,
    IncorrectBoardError,
    InvalidPathError,
    NodeNotVisitedError,
    NPuzzleError,
    PoolAllocationError,
    PoolError,
    UnknownHeuristicError,
)

__all__ = [
    "Board",
    "BoardParseError",
    "Direction",
    "IncorrectBoardError",
    "InvalidPathError",
    "NodeNotVisitedError",
    "NPuzzleError",
    "PoolAllocationError",
    "PoolError",
    "Position",
    "UnknownHeuristicError",
]
