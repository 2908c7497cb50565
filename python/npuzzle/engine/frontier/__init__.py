from npuzzle.engine.frontier.frontier import Frontier
from npuzzle.engine.frontier.visited import VisitedSet

__all__ = ["Frontier", "VisitedSet"]
