"""
Board Module - Immutable 3x3 grid and target corners for the puzzle box.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union, TYPE_CHECKING

from .color import Color

if TYPE_CHECKING:
    from .move import Move

GRID_SIZE = 3

# (row, col) of topLeft, topRight, bottomLeft, bottomRight
CORNER_POSITIONS: Tuple[Tuple[int, int], ...] = ((0, 0), (0, 2), (2, 0), (2, 2))

CellLike = Union[Color, str]


def in_bounds(row: int, col: int) -> bool:
    """True if (row, col) lies on the 3x3 grid."""
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


@dataclass(frozen=True)
class GridState:
    """
    Immutable grid state representation.

    Uses tuple-of-tuples for hashability, so states can be used
    directly as keys of the solver's visited set. Build instances
    with from_rows() or from_flat(), which validate shape and colors;
    the bare constructor is reserved for already-valid cells.

    Attributes:
        cells: 3 rows of 3 Colors, row-major
    """
    cells: Tuple[Tuple[Color, ...], ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[CellLike]]) -> "GridState":
        """
        Create GridState from a 2D list of Colors or color names.

        Args:
            rows: 3 rows of 3 cells each

        Returns:
            GridState instance

        Raises:
            ValueError: On bad shape or unknown color name
        """
        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}, got {rows!r}")
        return cls(cells=tuple(tuple(Color.parse(cell) for cell in row) for row in rows))

    @classmethod
    def from_flat(cls, cells: Sequence[CellLike]) -> "GridState":
        """Create GridState from 9 cells in row-major order."""
        if len(cells) != GRID_SIZE * GRID_SIZE:
            raise ValueError(f"Expected {GRID_SIZE * GRID_SIZE} cells, got {len(cells)}")
        return cls.from_rows(
            [cells[r * GRID_SIZE:(r + 1) * GRID_SIZE] for r in range(GRID_SIZE)]
        )

    def get_cell(self, row: int, col: int) -> Color:
        """
        Get color at a specific position.

        Raises:
            ValueError: If the position is off the grid
        """
        if not in_bounds(row, col):
            raise ValueError(f"Position out of range: ({row}, {col})")
        return self.cells[row][col]

    def with_cell(self, row: int, col: int, color: Color) -> "GridState":
        """Return a copy with one cell replaced."""
        rows = self.to_list()
        rows[row][col] = color
        return GridState(cells=tuple(tuple(r) for r in rows))

    def flat(self) -> Tuple[Color, ...]:
        """All 9 cells, row-major."""
        return tuple(cell for row in self.cells for cell in row)

    def actionable_positions(self) -> List[Tuple[int, int]]:
        """Row-major list of positions holding a non-gray tile."""
        return [
            (r, c)
            for r in range(GRID_SIZE)
            for c in range(GRID_SIZE)
            if self.cells[r][c].is_actionable
        ]

    def diff(self, other: "GridState") -> List[Tuple[int, int]]:
        """
        Find cells that differ between this grid and another.

        Returns:
            List of (row, col) tuples where cells differ
        """
        if not isinstance(other, GridState):
            raise TypeError("Can only diff against another GridState")

        return [
            (r, c)
            for r in range(GRID_SIZE)
            for c in range(GRID_SIZE)
            if self.cells[r][c] != other.cells[r][c]
        ]

    def apply_move(self, move: "Move") -> "GridState":
        """
        Apply a click to create a new grid state.

        Original grid is unchanged.
        """
        from .effects import apply_effect
        return apply_effect(self, move.row, move.col)

    def is_solved(self, corners: "TargetCorners") -> bool:
        """Convenience alias for is_solved(self, corners)."""
        return is_solved(self, corners)

    def to_list(self) -> List[List[Color]]:
        """Convert to a mutable 2D list."""
        return [list(row) for row in self.cells]

    def to_names(self) -> List[List[str]]:
        """2D list of color names, suitable for JSON."""
        return [[cell.value for cell in row] for row in self.cells]

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{cell.value:<6}" for cell in row).rstrip() for row in self.cells)


@dataclass(frozen=True)
class TargetCorners:
    """
    Target color for each grid corner.

    Attributes:
        top_left: Target for (0, 0)
        top_right: Target for (0, 2)
        bottom_left: Target for (2, 0)
        bottom_right: Target for (2, 2)
    """
    top_left: Color
    top_right: Color
    bottom_left: Color
    bottom_right: Color

    @classmethod
    def uniform(cls, color: CellLike) -> "TargetCorners":
        """All four corners share one color."""
        color = Color.parse(color)
        return cls(color, color, color, color)

    @classmethod
    def from_tuple(cls, colors: Iterable[CellLike]) -> "TargetCorners":
        """Build from (topLeft, topRight, bottomLeft, bottomRight)."""
        values = [Color.parse(c) for c in colors]
        if len(values) != 4:
            raise ValueError(f"Expected 4 corner colors, got {len(values)}")
        return cls(*values)

    def as_tuple(self) -> Tuple[Color, Color, Color, Color]:
        """Corners in (topLeft, topRight, bottomLeft, bottomRight) order."""
        return (self.top_left, self.top_right, self.bottom_left, self.bottom_right)

    def to_names(self) -> List[str]:
        return [c.value for c in self.as_tuple()]


def is_solved(grid: GridState, corners: TargetCorners) -> bool:
    """
    Check whether all four corners match their targets.

    Non-corner cells are never examined.
    """
    cells = grid.cells
    return (
        cells[0][0] == corners.top_left
        and cells[0][2] == corners.top_right
        and cells[2][0] == corners.bottom_left
        and cells[2][2] == corners.bottom_right
    )


__all__ = [
    "GRID_SIZE",
    "CORNER_POSITIONS",
    "GridState",
    "TargetCorners",
    "in_bounds",
    "is_solved",
]
