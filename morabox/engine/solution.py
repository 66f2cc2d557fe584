"""
Solution Module - Result of a solver run.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import GridState
from .move import Move, tile_numbers

# Values of SolutionMetrics.limit_hit
LIMIT_MOVES = "moves"
LIMIT_STATES = "states"


@dataclass
class SolutionMetrics:
    """
    Performance metrics for a search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of states taken off the queue
        states_queued: Number of distinct states discovered
        max_depth_reached: Deepest move count expanded
        limit_hit: Which bound cut the search short, if any
            ("moves" or "states")
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    states_queued: int = 0
    max_depth_reached: int = 0
    limit_hit: Optional[str] = None


@dataclass
class Solution:
    """
    Result of a solver run.

    Attributes:
        moves: Shortest click sequence, empty if the start was solved
        found: False when no solution exists within the bounds
        board_states: Grid after each move (first is the start grid)
        metrics: Performance statistics
    """
    moves: Tuple[Move, ...] = ()
    found: bool = False
    board_states: List[GridState] = field(default_factory=list)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def tile_numbers(self) -> List[int]:
        """Moves as 1-based tile numbers."""
        return tile_numbers(self.moves)


__all__ = [
    "LIMIT_MOVES",
    "LIMIT_STATES",
    "Solution",
    "SolutionMetrics",
]
