from npuzzle.engine.nodes.pool import NodePool
from npuzzle.engine.nodes.state import State

__all__ = ["NodePool", "State"]
