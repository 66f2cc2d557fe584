"""
Solver Module - Bounded breadth-first search for shortest solutions.

Nodes are grid states, edges are single clicks on non-gray tiles.
Two independent bounds keep the cost of a search fixed:

    max_moves:  states already at this depth are not expanded
    max_states: at most this many states are taken off the queue

Running out of either bound without reaching a solved grid is a normal
"not found" outcome.
"""

import logging
import time
from collections import deque
from typing import Deque, Dict, Optional, Set, Tuple

from .board import GRID_SIZE, GridState, TargetCorners, is_solved
from .effects import apply_effect
from .move import Move, MoveSequence, replay
from .solution import LIMIT_MOVES, LIMIT_STATES, Solution, SolutionMetrics

logger = logging.getLogger(__name__)

DEFAULT_MAX_MOVES = 15
DEFAULT_MAX_STATES = 50000

_MOVES: Dict[Tuple[int, int], Move] = {
    (r, c): Move(r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE)
}


class BreadthFirstSolver:
    """
    Shortest-solution search over the click graph.

    States are expanded in non-decreasing depth order and each distinct
    grid is visited once, so the first solved grid reached gives a
    shortest move sequence. Clicks are tried in row-major order.

    Parameters:
        max_moves: Move-depth limit (default 15)
        max_states: Ceiling on states examined (default 50000)
    """
    name = "bfs"

    def __init__(self, max_moves: int = DEFAULT_MAX_MOVES,
                 max_states: int = DEFAULT_MAX_STATES):
        if max_moves < 0:
            raise ValueError(f"max_moves must be non-negative, got {max_moves}")
        if max_states < 1:
            raise ValueError(f"max_states must be positive, got {max_states}")
        self.max_moves = max_moves
        self.max_states = max_states

    def solve(self, grid: GridState, corners: TargetCorners) -> Solution:
        """
        Search for a shortest click sequence solving the grid.

        Args:
            grid: Starting grid
            corners: Target corner colors

        Returns:
            Solution; found is False if the bounds were exhausted
        """
        start_time = time.perf_counter()
        metrics = SolutionMetrics()

        if is_solved(grid, corners):
            return self._build_solution(grid, (), True, metrics, start_time)

        visited: Set[GridState] = {grid}
        queue: Deque[Tuple[GridState, MoveSequence]] = deque([(grid, ())])

        while queue:
            if metrics.states_explored >= self.max_states:
                metrics.limit_hit = LIMIT_STATES
                break

            state, path = queue.popleft()
            metrics.states_explored += 1

            depth = len(path)
            if depth >= self.max_moves:
                metrics.limit_hit = LIMIT_MOVES
                continue
            metrics.max_depth_reached = max(metrics.max_depth_reached, depth)

            for row, col in state.actionable_positions():
                successor = apply_effect(state, row, col)
                if successor in visited:
                    continue
                visited.add(successor)
                metrics.states_queued += 1

                successor_path = path + (_MOVES[(row, col)],)
                if is_solved(successor, corners):
                    return self._build_solution(grid, successor_path, True, metrics, start_time)
                queue.append((successor, successor_path))

        return self._build_solution(grid, (), False, metrics, start_time)

    def _build_solution(
        self,
        grid: GridState,
        moves: MoveSequence,
        found: bool,
        metrics: SolutionMetrics,
        start_time: float,
    ) -> Solution:
        """Build Solution object from search results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000

        if found:
            logger.debug(
                f"Solved in {len(moves)} moves: explored {metrics.states_explored} states "
                f"in {metrics.computation_time_ms:.1f}ms"
            )
        else:
            logger.debug(
                f"No solution within {self.max_moves} moves / {self.max_states} states "
                f"(explored {metrics.states_explored}, limit hit: {metrics.limit_hit})"
            )

        return Solution(
            moves=moves,
            found=found,
            board_states=replay(grid, moves) if found else [],
            metrics=metrics,
        )


def find_solution(
    grid: GridState,
    corners: TargetCorners,
    max_moves: int = DEFAULT_MAX_MOVES,
    max_states: int = DEFAULT_MAX_STATES,
) -> Optional[MoveSequence]:
    """
    Find a shortest click sequence that solves the grid.

    Returns:
        Tuple of Moves (empty if already solved), or None if no
        solution exists within the bounds
    """
    solution = BreadthFirstSolver(max_moves=max_moves, max_states=max_states).solve(grid, corners)
    return solution.moves if solution.found else None


__all__ = [
    "DEFAULT_MAX_MOVES",
    "DEFAULT_MAX_STATES",
    "BreadthFirstSolver",
    "find_solution",
]
