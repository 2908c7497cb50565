from npuzzle.engine.gameplay.replay import MoveReplay

__all__ = ["MoveReplay"]
