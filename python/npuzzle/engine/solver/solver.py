"""Step-wise A* solver for the n-puzzle."""

from __future__ import annotations

import logging
from enum import Enum

from npuzzle.config import BLANK
from npuzzle.engine.frontier import Frontier, VisitedSet
from npuzzle.engine.heuristics import Heuristic
from npuzzle.engine.nodes import NodePool, State
from npuzzle.models.board import Board
from npuzzle.models.errors import IncorrectBoardError, NodeNotVisitedError

logger = logging.getLogger(__name__)

# Blank offsets (row, col) tried by expand(): right, left, up, down.
_OFFSETS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))


class SolverStatus(Enum):
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class Solver:
    """A* search advanced one expansion per :meth:`step` call.

    The solver owns its node pool, frontier and visited set. Two solvers
    share nothing, so a bidirectional driver can run one from the start
    and one from the goal and poll :meth:`collides_with` between steps.
    """

    def __init__(
        self,
        start: Board,
        goal: Board,
        heuristic: Heuristic,
        *,
        pool: NodePool | None = None,
    ) -> None:
        if start.size != goal.size:
            raise IncorrectBoardError(
                f"Start board is {start.size}×{start.size} but goal is "
                f"{goal.size}×{goal.size}."
            )
        self.size = start.size
        self._heuristic = heuristic
        self._pool = pool if pool is not None else NodePool(self.size)
        self._frontier = Frontier(self._pool)
        self._visited = VisitedSet(self._pool)
        self._goal = State.from_board(goal)
        self._next_nodes: list[State] = []
        self._last: State | None = None

        self.status = SolverStatus.RUNNING
        self.total_states = 0
        self.max_states = 0
        self.steps = 0

        root = self._pool.allocate()
        root.load_board(start)
        root.cost = 0
        root.heuristic = heuristic(root.cells)
        root.total_estimate = root.heuristic
        root.parent = None
        self._frontier.push(root)

    # -- stepping -------------------------------------------------------------

    def step(self) -> SolverStatus:
        """Expand the best frontier state and report where the search stands."""
        if self.status is not SolverStatus.RUNNING:
            return self.status
        if not self._frontier:
            self.status = SolverStatus.EXHAUSTED
            logger.debug(
                "Frontier exhausted after %d steps (%d states)",
                self.steps,
                self.total_states,
            )
            return self.status

        top = self._frontier.pop()
        self._last = top
        self.steps += 1

        if top.heuristic == 0 and top == self._goal:
            self._visited.add(top)
            self.status = SolverStatus.SOLVED
            logger.debug(
                "Goal reached at cost %d after %d steps", top.cost, self.steps
            )
            return self.status

        # The same board may sit in the frontier twice; expand it only once.
        if top not in self._visited:
            for node in self.expand(top):
                if node in self._visited:
                    self._pool.release(node)
                else:
                    self.total_states += 1
                    self._frontier.push(node)
            self._visited.add(top)

        self.max_states = max(
            self.max_states, len(self._frontier) + len(self._visited)
        )
        return self.status

    def solve(self, max_steps: int | None = None) -> SolverStatus:
        """Step until solved or exhausted, or until *max_steps* more steps ran."""
        remaining = max_steps
        while self.status is SolverStatus.RUNNING:
            if remaining is not None:
                if remaining <= 0:
                    break
                remaining -= 1
            self.step()
        return self.status

    def expand(self, top: State) -> list[State]:
        """Return every state one blank slide away from *top*.

        The returned list is reused by the next call.
        """
        n = self.size
        br, bc = top.blank_pos
        old = br * n + bc
        self._next_nodes.clear()
        for dr, dc in _OFFSETS:
            nr, nc = br + dr, bc + dc
            if not (0 <= nr < n and 0 <= nc < n):
                continue
            node = self._pool.allocate()
            node.copy_from(top)
            new = nr * n + nc
            node.cells[old] = node.cells[new]
            node.cells[new] = BLANK
            node.cost = top.cost + 1
            node.heuristic = self._heuristic(node.cells)
            node.total_estimate = node.cost + node.heuristic
            node.blank_pos = (nr, nc)
            node.parent = top.index
            node.rehash()
            self._next_nodes.append(node)
        return self._next_nodes

    # -- queries --------------------------------------------------------------

    @property
    def last_node(self) -> State | None:
        """The state popped by the most recent step."""
        return self._last

    @property
    def frontier_size(self) -> int:
        return len(self._frontier)

    @property
    def visited_size(self) -> int:
        return len(self._visited)

    def find_visited(self, state: State) -> State | None:
        return self._visited.find(state)

    def reconstruct_path(self, node: State | None = None) -> list[Board]:
        """Boards from the root to *node* (default: the last popped state)."""
        if node is None:
            node = self._last
            if node is None:
                return []
        stored = self._visited.find(node)
        if stored is None:
            raise NodeNotVisitedError(
                f"Board {node.cells} was never expanded by this solver."
            )
        path: list[Board] = []
        current: State | None = stored
        while current is not None:
            path.append(current.to_board())
            current = None if current.parent is None else self._pool[current.parent]
        path.reverse()
        return path

    # -- bidirectional --------------------------------------------------------

    def collides_with(self, other: Solver) -> bool:
        """True once this solver's last state has been expanded by *other*.

        Only says the two searches touched; the stitched path is not
        guaranteed to be the cheapest one.
        """
        return self._last is not None and other.find_visited(self._last) is not None

    @staticmethod
    def stitch_bidirectional(forward: Solver, backward: Solver) -> list[Board]:
        """Join a start-rooted and a goal-rooted search at their meeting board.

        Returns the boards from *forward*'s root to *backward*'s root, or
        ``[]`` while the searches have not met yet.
        """
        if forward.collides_with(backward):
            tail = backward.reconstruct_path(forward.last_node)
            tail.pop()
            tail.reverse()
            logger.debug("Searches met at cost %d", forward.last_node.cost)
            return forward.reconstruct_path() + tail
        if backward.collides_with(forward):
            path = Solver.stitch_bidirectional(backward, forward)
            path.reverse()
            return path
        return []
