from npuzzle.engine.generator.generator import BoardGenerator
from npuzzle.engine.generator.snail import (
    canonical_goal,
    count_inversions,
    is_solvable,
    snail_values,
    spiral_order,
)

__all__ = [
    "BoardGenerator",
    "canonical_goal",
    "count_inversions",
    "is_solvable",
    "snail_values",
    "spiral_order",
]
