"""
Engine Package - Simulation and search core for the puzzle box.

Public API:
    - Color: The ten tile colors
    - GridState: Immutable 3x3 grid
    - TargetCorners: Target color per corner
    - Move: One click, with 1-based tile numbering
    - apply_effect(): Tile effect evaluator
    - is_solved(): Solved predicate (corners only)
    - BreadthFirstSolver / find_solution(): Bounded shortest-solution search
    - Solution / SolutionMetrics: Search results

Usage:
    from morabox.engine import GridState, TargetCorners, find_solution

    grid = GridState.from_rows([
        ["white", "gray", "white"],
        ["gray", "white", "gray"],
        ["gray", "gray", "white"],
    ])
    corners = TargetCorners.uniform("white")

    moves = find_solution(grid, corners, max_moves=10)
    if moves is not None:
        print("-".join(str(m.tile_number) for m in moves))
"""

from .color import Color
from .board import (
    CORNER_POSITIONS,
    GRID_SIZE,
    GridState,
    TargetCorners,
    in_bounds,
    is_solved,
)
from .move import Move, MoveSequence, parse_tile_numbers, replay, tile_numbers
from .effects import apply_effect, get_effect, mimicked_color, opposite, register_effect
from .solution import Solution, SolutionMetrics
from .solver import (
    DEFAULT_MAX_MOVES,
    DEFAULT_MAX_STATES,
    BreadthFirstSolver,
    find_solution,
)

__all__ = [
    # Data structures
    "Color",
    "GridState",
    "TargetCorners",
    "Move",
    "MoveSequence",
    "Solution",
    "SolutionMetrics",
    "GRID_SIZE",
    "CORNER_POSITIONS",
    # Rules
    "apply_effect",
    "get_effect",
    "register_effect",
    "mimicked_color",
    "opposite",
    "in_bounds",
    "is_solved",
    # Search
    "BreadthFirstSolver",
    "find_solution",
    "DEFAULT_MAX_MOVES",
    "DEFAULT_MAX_STATES",
    # Sequences
    "tile_numbers",
    "parse_tile_numbers",
    "replay",
]
