"""Exceptions raised by the n-puzzle engine."""

from __future__ import annotations


class NPuzzleError(Exception):
    """Base class for every error raised by this package."""


class BoardParseError(NPuzzleError, ValueError):
    """The board text could not be parsed."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class IncorrectBoardError(NPuzzleError, ValueError):
    """The board parsed fine but its tiles are not a valid puzzle."""


class PoolError(NPuzzleError):
    """The node pool was used against its contract."""


class PoolAllocationError(PoolError, MemoryError):
    """The node pool could not hand out another slot."""


class NodeNotVisitedError(NPuzzleError, LookupError):
    """A path was requested for a board the solver never expanded."""


class InvalidPathError(NPuzzleError, ValueError):
    """Two consecutive boards of a path are not one slide apart."""


class UnknownHeuristicError(NPuzzleError, KeyError):
    """No heuristic is registered under the requested name."""
