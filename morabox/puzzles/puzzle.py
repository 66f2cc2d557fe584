"""
Puzzle Module - Puzzle value type.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..engine import GridState, Move, MoveSequence, TargetCorners


@dataclass(frozen=True)
class Puzzle:
    """
    A starting grid with its target corners.

    The solution is computed once, when the puzzle is built, and never
    recomputed implicitly.

    Attributes:
        grid: Starting grid
        target_corners: Target color per corner
        solution: Shortest click sequence, or None if none was found
            within the solver bounds
        difficulty: Tier name, or None for custom/decoded puzzles
        puzzle_number: Daily ordinal, None outside the daily variant
    """
    grid: GridState
    target_corners: TargetCorners
    solution: Optional[MoveSequence] = None
    difficulty: Optional[str] = None
    puzzle_number: Optional[int] = None

    @property
    def optimal_moves(self) -> Optional[int]:
        """Length of the shortest solution, if known."""
        return len(self.solution) if self.solution is not None else None

    @property
    def share_code(self) -> str:
        """13-digit share code for this puzzle."""
        from .codec import encode
        return encode(self.grid, self.target_corners)

    def is_perfect(self, move_count: int) -> bool:
        """True if a player solved it in exactly the optimal number of moves."""
        return self.solution is not None and move_count == len(self.solution)

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain JSON-compatible snapshot.

        Colors become names and moves become [row, col] pairs, so an
        external store can persist the puzzle as-is.
        """
        return {
            "grid": self.grid.to_names(),
            "target_corners": self.target_corners.to_names(),
            "solution": (
                [list(move.as_pair()) for move in self.solution]
                if self.solution is not None else None
            ),
            "difficulty": self.difficulty,
            "puzzle_number": self.puzzle_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Puzzle":
        """
        Rebuild a Puzzle from to_dict() output.

        Raises:
            ValueError: If the grid, corners or moves are malformed
            KeyError: If grid or target_corners is missing
        """
        solution = data.get("solution")
        return cls(
            grid=GridState.from_rows(data["grid"]),
            target_corners=TargetCorners.from_tuple(data["target_corners"]),
            solution=(
                tuple(Move(int(row), int(col)) for row, col in solution)
                if solution is not None else None
            ),
            difficulty=data.get("difficulty"),
            puzzle_number=data.get("puzzle_number"),
        )


__all__ = ["Puzzle"]
