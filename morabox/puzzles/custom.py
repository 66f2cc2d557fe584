"""
Custom Module - Validation for player-built puzzles.
"""

from dataclasses import dataclass
from typing import Optional

from ..engine import GridState, TargetCorners, find_solution, is_solved
from .puzzle import Puzzle

STATUS_OK = "ok"
STATUS_ALREADY_SOLVED = "already_solved"
STATUS_UNSOLVABLE = "unsolvable"

CUSTOM_MAX_MOVES = 20


@dataclass(frozen=True)
class CustomPuzzleResult:
    """
    Outcome of checking a custom layout.

    Attributes:
        status: STATUS_OK, STATUS_ALREADY_SOLVED or STATUS_UNSOLVABLE
        puzzle: The playable puzzle when status is STATUS_OK
    """
    status: str
    puzzle: Optional[Puzzle] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def build_custom_puzzle(
    grid: GridState,
    corners: TargetCorners,
    max_moves: int = CUSTOM_MAX_MOVES,
) -> CustomPuzzleResult:
    """
    Turn a custom layout into a playable puzzle.

    A layout is rejected if it starts solved or if the solver finds no
    solution within max_moves.
    """
    if is_solved(grid, corners):
        return CustomPuzzleResult(status=STATUS_ALREADY_SOLVED)

    solution = find_solution(grid, corners, max_moves=max_moves)
    if solution is None:
        return CustomPuzzleResult(status=STATUS_UNSOLVABLE)

    return CustomPuzzleResult(
        status=STATUS_OK,
        puzzle=Puzzle(grid=grid, target_corners=corners, solution=solution),
    )


__all__ = [
    "STATUS_OK",
    "STATUS_ALREADY_SOLVED",
    "STATUS_UNSOLVABLE",
    "CustomPuzzleResult",
    "build_custom_puzzle",
]
