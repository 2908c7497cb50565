"""Solver test suite.

Boards are pre-generated JSON fixtures under ``<project_root>/fixtures/``,
each built by sliding the blank ``depth`` times away from the spiral goal.
Every test is killed after the timeout configured in ``pyproject.toml``.
Returned paths are replayed move by move to verify correctness.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from npuzzle.engine.gameplay import MoveReplay
from npuzzle.engine.generator import canonical_goal
from npuzzle.engine.heuristics import HeuristicName, Manhattan, make_heuristic
from npuzzle.engine.nodes import NodePool, State
from npuzzle.engine.solver import Solver, SolverStatus
from npuzzle.models.board import Board
from npuzzle.models.errors import IncorrectBoardError, NodeNotVisitedError

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_BOARDS = _load("3x3.json") + _load("4x4.json") + _load("5x5.json")
_BOARDS_3x3 = _load("3x3.json")

GOAL_3X3 = canonical_goal(3)
# B -> A -> goal: two slides.
B = Board.from_rows([[0, 1, 3], [8, 2, 4], [7, 6, 5]])
A = Board.from_rows([[1, 0, 3], [8, 2, 4], [7, 6, 5]])


# -- helpers ------------------------------------------------------------------


def _board_from_data(data: dict) -> Board:
    return Board.from_rows([row[:] for row in data["tiles"]])


def _assert_path(start: Board, goal: Board, path: list[Board]) -> None:
    """Verify *path* runs from *start* to *goal* one legal slide at a time."""
    assert path, "empty path"
    assert path[0] == start
    assert path[-1] == goal

    game = MoveReplay.from_board(start, goal)
    for i, direction in enumerate(MoveReplay.directions(path)):
        ok = game.move(direction)
        assert ok, f"Move {i} ({direction.value}) was invalid"
        assert game.board == path[i + 1]
    assert game.is_won


def _solver(start: Board, goal: Board = GOAL_3X3) -> Solver:
    return Solver(start, goal, Manhattan(goal))


# -- solving ------------------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_solve_fixture(board_data: dict) -> None:
    start = _board_from_data(board_data)
    goal = canonical_goal(start.size)
    solver = _solver(start, goal)

    assert solver.solve() is SolverStatus.SOLVED
    path = solver.reconstruct_path()
    _assert_path(start, goal, path)

    # Manhattan is admissible, so the path is never longer than the scramble.
    moves = len(path) - 1
    assert moves <= board_data["depth"]
    assert moves % 2 == board_data["depth"] % 2


@pytest.mark.parametrize("name", list(HeuristicName))
@pytest.mark.parametrize("board_data", _BOARDS_3x3, ids=_ids)
def test_every_heuristic_finds_optimal_3x3(board_data: dict, name: HeuristicName) -> None:
    start = _board_from_data(board_data)
    reference = _solver(start)
    reference.solve()

    solver = Solver(start, GOAL_3X3, make_heuristic(name, GOAL_3X3))
    assert solver.solve() is SolverStatus.SOLVED
    path = solver.reconstruct_path()
    _assert_path(start, GOAL_3X3, path)
    assert len(path) == len(reference.reconstruct_path())


def test_pluggable_zero_heuristic() -> None:
    start = _board_from_data(_BOARDS_3x3[3])
    solver = Solver(start, GOAL_3X3, lambda cells: 0)
    assert solver.solve() is SolverStatus.SOLVED
    assert len(solver.reconstruct_path()) - 1 == _BOARDS_3x3[3]["depth"]


def test_start_is_goal() -> None:
    solver = _solver(GOAL_3X3)
    assert solver.step() is SolverStatus.SOLVED
    assert solver.reconstruct_path() == [GOAL_3X3]
    assert solver.total_states == 0


def test_unsolvable_board_is_exhausted() -> None:
    start = Board.from_rows([[2, 1], [0, 3]])
    goal = canonical_goal(2)
    solver = _solver(start, goal)
    assert solver.solve() is SolverStatus.EXHAUSTED
    # 4!/2 boards share the start's parity class.
    assert solver.visited_size == 12
    assert solver.step() is SolverStatus.EXHAUSTED


def test_mismatched_sizes() -> None:
    with pytest.raises(IncorrectBoardError):
        Solver(GOAL_3X3, canonical_goal(4), lambda cells: 0)


# -- stepping -----------------------------------------------------------------


def test_first_step_expands_root() -> None:
    solver = _solver(B)
    assert solver.step() is SolverStatus.RUNNING
    assert solver.last_node.to_board() == B
    # Blank in the corner: two neighbours.
    assert solver.total_states == 2
    assert solver.frontier_size == 2
    assert solver.visited_size == 1
    assert solver.max_states == 3


def test_duplicates_go_back_to_pool() -> None:
    pool = NodePool(3, chunk_size=16)
    solver = Solver(B, GOAL_3X3, Manhattan(GOAL_3X3), pool=pool)
    solver.step()
    solver.step()
    # Expanding A regenerated B, which was already visited.
    assert solver.last_node.to_board() == A
    assert solver.total_states == 2 + 2
    assert len(pool) == 1 + 2 + 2


def test_solve_respects_max_steps() -> None:
    start = _board_from_data(_BOARDS_3x3[-1])
    solver = _solver(start)
    assert solver.solve(max_steps=2) is SolverStatus.RUNNING
    assert solver.steps == 2


def test_counters_grow() -> None:
    start = _board_from_data(_BOARDS_3x3[-1])
    solver = _solver(start)
    solver.solve()
    assert solver.total_states >= solver.visited_size - 1
    assert solver.max_states >= solver.visited_size


def test_expand_builds_neighbours() -> None:
    solver = _solver(GOAL_3X3)
    root = State.from_board(GOAL_3X3)
    root.index = 0
    root.cost = 4
    neighbours = solver.expand(root)
    assert len(neighbours) == 4
    for node in neighbours:
        assert node.cost == 5
        assert node.parent == 0
        assert node.total_estimate == node.cost + node.heuristic
        assert node[node.blank_pos] == 0
        assert hash(node) == hash(State.from_board(node.to_board()))
    # Right, left, up, down.
    assert [n.blank_pos for n in neighbours] == [(1, 2), (1, 0), (0, 1), (2, 1)]
    assert solver.expand(root) is neighbours


# -- path reconstruction ------------------------------------------------------


def test_reconstruct_before_any_step() -> None:
    assert _solver(B).reconstruct_path() == []


def test_reconstruct_unknown_node() -> None:
    solver = _solver(B)
    solver.step()
    with pytest.raises(NodeNotVisitedError):
        solver.reconstruct_path(State.from_board(GOAL_3X3))


def test_reconstruct_uses_stored_instance() -> None:
    solver = _solver(B)
    solver.solve()
    probe = State.from_board(A)
    assert solver.reconstruct_path(probe) == [B, A]


# -- bidirectional stitching --------------------------------------------------


def _meeting_pair() -> tuple[Solver, Solver]:
    forward = Solver(B, GOAL_3X3, Manhattan(GOAL_3X3))
    backward = Solver(GOAL_3X3, B, Manhattan(B))
    forward.step()
    forward.step()
    backward.step()
    return forward, backward


def test_no_collision_yet() -> None:
    forward, backward = _meeting_pair()
    assert not forward.collides_with(backward)
    assert not backward.collides_with(forward)
    assert Solver.stitch_bidirectional(forward, backward) == []


def test_stitch_at_single_shared_node() -> None:
    forward, backward = _meeting_pair()
    backward.step()
    assert forward.collides_with(backward)

    path = Solver.stitch_bidirectional(forward, backward)
    assert path == [B, A, GOAL_3X3]
    assert path.count(A) == 1
    _assert_path(B, GOAL_3X3, path)


def test_stitch_arguments_swapped() -> None:
    forward, backward = _meeting_pair()
    backward.step()
    assert Solver.stitch_bidirectional(backward, forward) == [GOAL_3X3, A, B]


def test_stitch_when_only_backward_collides(monkeypatch) -> None:
    forward, backward = _meeting_pair()
    backward.step()
    monkeypatch.setattr(forward, "collides_with", lambda other: False)
    assert Solver.stitch_bidirectional(forward, backward) == [B, A, GOAL_3X3]


def test_unstarted_solver_never_collides() -> None:
    forward, backward = _meeting_pair()
    fresh = _solver(A)
    assert not fresh.collides_with(forward)
    assert Solver.stitch_bidirectional(fresh, backward) == []
