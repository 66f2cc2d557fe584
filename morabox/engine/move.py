"""
Move Module - A single tile click and helpers for click sequences.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .board import GRID_SIZE, GridState, in_bounds

MoveSequence = Tuple["Move", ...]


@dataclass(frozen=True)
class Move:
    """
    Represents one click on the grid.

    Attributes:
        row: Row index (0-2)
        col: Column index (0-2)
    """
    row: int
    col: int

    def __post_init__(self):
        if not in_bounds(self.row, self.col):
            raise ValueError(f"Position out of range: ({self.row}, {self.col})")

    @classmethod
    def from_tile_number(cls, tile: int) -> "Move":
        """
        Create a Move from its 1-based tile number.

        Args:
            tile: Tile number 1-9, row-major

        Raises:
            ValueError: If tile is outside 1-9
        """
        if not 1 <= tile <= GRID_SIZE * GRID_SIZE:
            raise ValueError(f"Tile number out of range: {tile}")
        return cls(row=(tile - 1) // GRID_SIZE, col=(tile - 1) % GRID_SIZE)

    @property
    def tile_number(self) -> int:
        """1-based tile number used for display and history."""
        return self.row * GRID_SIZE + self.col + 1

    def as_pair(self) -> Tuple[int, int]:
        return (self.row, self.col)


def tile_numbers(moves: Iterable[Move]) -> List[int]:
    """Convert a move sequence to its 1-based tile numbers."""
    return [move.tile_number for move in moves]


def parse_tile_numbers(text: str) -> MoveSequence:
    """
    Parse a hyphen-joined list of tile numbers, e.g. "1-4-7".

    An empty string is the empty sequence.

    Raises:
        ValueError: On a malformed token or tile out of range
    """
    text = text.strip()
    if not text:
        return ()
    moves = []
    for token in text.split("-"):
        token = token.strip()
        if not token.isdigit():
            raise ValueError(f"Invalid tile number: {token!r}")
        moves.append(Move.from_tile_number(int(token)))
    return tuple(moves)


def replay(grid: GridState, moves: Sequence[Move]) -> List[GridState]:
    """
    Apply moves in order.

    Returns:
        Grid after each move; the first entry is the input grid
    """
    states = [grid]
    for move in moves:
        grid = grid.apply_move(move)
        states.append(grid)
    return states


__all__ = [
    "Move",
    "MoveSequence",
    "tile_numbers",
    "parse_tile_numbers",
    "replay",
]
