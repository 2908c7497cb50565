"""Outer search loops: plain A* and the two-solver bidirectional run."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from time import perf_counter

from npuzzle.config import DEFAULT_HEURISTIC, SearchLimits
from npuzzle.engine.generator import canonical_goal
from npuzzle.engine.heuristics import Heuristic, make_heuristic
from npuzzle.engine.solver import Solver, SolverStatus
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)

HeuristicFactory = Callable[[Board], Heuristic]


class SearchOutcome(Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    LIMIT_REACHED = "limit_reached"


@dataclass
class SearchResult:
    outcome: SearchOutcome
    path: list[Board] = field(default_factory=list)
    total_states: int = 0
    max_states: int = 0
    steps: int = 0
    elapsed: float = 0.0
    bidirectional: bool = False

    @property
    def solved(self) -> bool:
        return self.outcome is SearchOutcome.SOLVED

    @property
    def moves(self) -> int:
        return max(len(self.path) - 1, 0)


class _Budget:
    """Tracks step and wall-clock limits for one run."""

    def __init__(self, limits: SearchLimits) -> None:
        self.limits = limits
        self.t0 = perf_counter()
        self.steps = 0

    def spend(self) -> bool:
        """Count one step; False once a limit is exceeded."""
        self.steps += 1
        max_steps = self.limits.max_steps
        if max_steps is not None and self.steps > max_steps:
            return False
        time_limit = self.limits.time_limit
        if time_limit is not None and self.elapsed > time_limit:
            return False
        return True

    @property
    def elapsed(self) -> float:
        return perf_counter() - self.t0


def search(
    start: Board,
    goal: Board,
    heuristic: Heuristic,
    limits: SearchLimits | None = None,
) -> SearchResult:
    """Run one solver from *start* until it reaches *goal* or gives up."""
    budget = _Budget(limits or SearchLimits())
    solver = Solver(start, goal, heuristic)

    status = solver.status
    while status is SolverStatus.RUNNING:
        if not budget.spend():
            return _finish(SearchOutcome.LIMIT_REACHED, [], budget, solver)
        status = solver.step()

    if status is SolverStatus.SOLVED:
        return _finish(SearchOutcome.SOLVED, solver.reconstruct_path(), budget, solver)
    return _finish(SearchOutcome.EXHAUSTED, [], budget, solver)


class BidirectionalSearch:
    """Steps a start-rooted and a goal-rooted solver in turn until they meet.

    The stitched path is checked after every single step. It is not
    guaranteed to be the cheapest path, only a valid one.
    """

    def __init__(
        self,
        start: Board,
        goal: Board,
        heuristic_factory: HeuristicFactory,
        limits: SearchLimits | None = None,
    ) -> None:
        self.limits = limits or SearchLimits()
        self.forward = Solver(start, goal, heuristic_factory(goal))
        self.backward = Solver(goal, start, heuristic_factory(start))

    def run(self) -> SearchResult:
        budget = _Budget(self.limits)
        forward, backward = self.forward, self.backward

        while True:
            running = [
                s for s in (forward, backward) if s.status is SolverStatus.RUNNING
            ]
            if not running:
                return self._finish(SearchOutcome.EXHAUSTED, [], budget)

            for solver in running:
                if not budget.spend():
                    return self._finish(SearchOutcome.LIMIT_REACHED, [], budget)
                status = solver.step()

                path = Solver.stitch_bidirectional(forward, backward)
                if path:
                    return self._finish(SearchOutcome.SOLVED, path, budget)

                if status is SolverStatus.SOLVED:
                    path = solver.reconstruct_path()
                    if solver is backward:
                        path.reverse()
                    return self._finish(SearchOutcome.SOLVED, path, budget)

    def _finish(
        self, outcome: SearchOutcome, path: list[Board], budget: _Budget
    ) -> SearchResult:
        forward, backward = self.forward, self.backward
        result = SearchResult(
            outcome=outcome,
            path=path,
            total_states=forward.total_states + backward.total_states,
            max_states=forward.max_states + backward.max_states,
            steps=forward.steps + backward.steps,
            elapsed=budget.elapsed,
            bidirectional=True,
        )
        logger.info(
            "Bidirectional search %s: %d moves, %d states, %.3fs",
            outcome.value,
            result.moves,
            result.total_states,
            result.elapsed,
        )
        return result


def _finish(
    outcome: SearchOutcome, path: list[Board], budget: _Budget, solver: Solver
) -> SearchResult:
    result = SearchResult(
        outcome=outcome,
        path=path,
        total_states=solver.total_states,
        max_states=solver.max_states,
        steps=solver.steps,
        elapsed=budget.elapsed,
    )
    logger.info(
        "Search %s: %d moves, %d states, %.3fs",
        outcome.value,
        result.moves,
        result.total_states,
        result.elapsed,
    )
    return result


def solve_board(
    start: Board,
    heuristic: str = DEFAULT_HEURISTIC,
    bidirectional: bool = False,
    limits: SearchLimits | None = None,
) -> SearchResult:
    """Solve *start* towards the spiral goal with a heuristic chosen by name."""
    goal = canonical_goal(start.size)
    if bidirectional:
        return BidirectionalSearch(
            start, goal, lambda target: make_heuristic(heuristic, target), limits
        ).run()
    return search(start, goal, make_heuristic(heuristic, goal), limits)
