"""
Effects Module - Tile effect evaluator.

Each color's rule is registered with @register_effect. Rules are pure:
they read the input GridState and return a new one. Every rule except
blue lives in the basic registry; blue borrows a basic rule, so a blue
click never dispatches back to blue and never recurses deeper than one
level.
"""

from collections import Counter
from typing import Callable, Dict, List, Optional, Tuple

from .board import GRID_SIZE, GridState, in_bounds
from .color import Color

EffectFn = Callable[[GridState, int, int], GridState]

# Basic rules: every color except blue
_BASIC_EFFECTS: Dict[Color, EffectFn] = {}

# Clockwise neighbour offsets starting directly above
_CLOCKWISE_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1),
)

_ORTHOGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

_CENTER = (1, 1)


def register_effect(color: Color) -> Callable[[EffectFn], EffectFn]:
    """
    Decorator to register the rule for one basic color.

    Usage:
        @register_effect(Color.YELLOW)
        def _yellow(grid, row, col):
            ...
    """
    if color is Color.BLUE:
        raise ValueError("Blue mimics the center tile and has no basic rule")

    def decorator(fn: EffectFn) -> EffectFn:
        if color in _BASIC_EFFECTS:
            raise RuntimeError(f"Effect already registered for {color.value}")
        _BASIC_EFFECTS[color] = fn
        return fn
    return decorator


def _freeze(rows: List[List[Color]]) -> GridState:
    return GridState(cells=tuple(tuple(row) for row in rows))


def _swap(grid: GridState, a: Tuple[int, int], b: Tuple[int, int]) -> GridState:
    rows = grid.to_list()
    (ar, ac), (br, bc) = a, b
    rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
    return _freeze(rows)


def opposite(row: int, col: int) -> Tuple[int, int]:
    """Point reflection through the grid center."""
    return (GRID_SIZE - 1 - row, GRID_SIZE - 1 - col)


@register_effect(Color.GRAY)
def _gray(grid: GridState, row: int, col: int) -> GridState:
    return grid


@register_effect(Color.WHITE)
def _white(grid: GridState, row: int, col: int) -> GridState:
    """Toggle the tile and its orthogonal neighbours between white and gray."""
    rows = grid.to_list()
    for dr, dc in ((0, 0),) + _ORTHOGONAL_OFFSETS:
        r, c = row + dr, col + dc
        if not in_bounds(r, c):
            continue
        cell = grid.cells[r][c]
        if cell is Color.WHITE:
            rows[r][c] = Color.GRAY
        elif cell is Color.GRAY:
            rows[r][c] = Color.WHITE
    return _freeze(rows)


@register_effect(Color.YELLOW)
def _yellow(grid: GridState, row: int, col: int) -> GridState:
    """Swap with the tile above."""
    if row == 0:
        return grid
    return _swap(grid, (row, col), (row - 1, col))


@register_effect(Color.PURPLE)
def _purple(grid: GridState, row: int, col: int) -> GridState:
    """Swap with the tile below."""
    if row == GRID_SIZE - 1:
        return grid
    return _swap(grid, (row, col), (row + 1, col))


@register_effect(Color.GREEN)
def _green(grid: GridState, row: int, col: int) -> GridState:
    """Swap with the point-reflected tile."""
    if (row, col) == _CENTER:
        return grid
    return _swap(grid, (row, col), opposite(row, col))


@register_effect(Color.PINK)
def _pink(grid: GridState, row: int, col: int) -> GridState:
    """Rotate the surrounding ring one step clockwise."""
    ring = [
        (row + dr, col + dc)
        for dr, dc in _CLOCKWISE_OFFSETS
        if in_bounds(row + dr, col + dc)
    ]
    if len(ring) < 2:
        return grid

    rows = grid.to_list()
    for i, (r, c) in enumerate(ring):
        pr, pc = ring[i - 1]
        rows[r][c] = grid.cells[pr][pc]
    return _freeze(rows)


@register_effect(Color.ORANGE)
def _orange(grid: GridState, row: int, col: int) -> GridState:
    """Take the strict majority color of the orthogonal neighbours."""
    counts = Counter(
        grid.cells[row + dr][col + dc]
        for dr, dc in _ORTHOGONAL_OFFSETS
        if in_bounds(row + dr, col + dc)
    )
    ranked = counts.most_common(2)
    if len(ranked) > 1 and ranked[0][1] == ranked[1][1]:
        return grid
    return grid.with_cell(row, col, ranked[0][0])


@register_effect(Color.BLACK)
def _black(grid: GridState, row: int, col: int) -> GridState:
    """Rotate the clicked row one step to the right."""
    rows = grid.to_list()
    old = grid.cells[row]
    rows[row] = [old[-1]] + list(old[:-1])
    return _freeze(rows)


@register_effect(Color.RED)
def _red(grid: GridState, row: int, col: int) -> GridState:
    """White becomes black and black becomes red, everywhere at once."""
    substitution = {Color.WHITE: Color.BLACK, Color.BLACK: Color.RED}
    return _freeze([[substitution.get(cell, cell) for cell in r] for r in grid.cells])


def _marker_destination(mimicked: Color, row: int, col: int) -> Tuple[int, int]:
    """Where the blue marker ends up after mimicking a color at (row, col)."""
    if mimicked is Color.YELLOW and row > 0:
        return (row - 1, col)
    if mimicked is Color.PURPLE and row < GRID_SIZE - 1:
        return (row + 1, col)
    if mimicked is Color.GREEN and (row, col) != _CENTER:
        return opposite(row, col)
    if mimicked is Color.BLACK:
        return (row, (col + 1) % GRID_SIZE)
    return (row, col)


def mimicked_color(grid: GridState) -> Optional[Color]:
    """
    Color a blue tile would mimic on this grid.

    Returns:
        The center color, or None when the center is blue or gray
    """
    center = grid.cells[_CENTER[0]][_CENTER[1]]
    if center is Color.BLUE or center is Color.GRAY:
        return None
    return center


def _blue(grid: GridState, row: int, col: int) -> GridState:
    """
    Mimic the center tile's rule at the clicked position.

    The clicked cell is first given the center color, the basic rule
    for that color is applied, then the blue marker is written back at
    the cell the mimicked rule moved the clicked tile to. A mimicked
    white toggle keeps its result and gets no marker.
    """
    mimicked = mimicked_color(grid)
    if mimicked is None:
        return grid

    result = _BASIC_EFFECTS[mimicked](grid.with_cell(row, col, mimicked), row, col)
    if mimicked is Color.WHITE:
        return result

    dest_row, dest_col = _marker_destination(mimicked, row, col)
    return result.with_cell(dest_row, dest_col, Color.BLUE)


_EFFECTS: Dict[Color, EffectFn] = dict(_BASIC_EFFECTS)
_EFFECTS[Color.BLUE] = _blue

_missing = set(Color) - set(_EFFECTS)
if _missing:
    raise RuntimeError(f"No effect registered for: {sorted(c.value for c in _missing)}")


def get_effect(color: Color) -> EffectFn:
    """
    Get the rule registered for a color.

    Rules take (grid, row, col) and return a new grid. Unlike
    apply_effect(), a rule does not check which color sits at the
    position, so it can be applied to any tile.
    """
    return _EFFECTS[color]


def apply_effect(grid: GridState, row: int, col: int) -> GridState:
    """
    Apply the clicked tile's effect.

    The input grid is never mutated. Clicking gray returns the grid
    unchanged; callers should treat gray tiles as disabled.

    Args:
        grid: Current grid
        row: Clicked row (0-2)
        col: Clicked column (0-2)

    Returns:
        New grid state

    Raises:
        ValueError: If (row, col) is off the grid
    """
    if not in_bounds(row, col):
        raise ValueError(f"Position out of range: ({row}, {col})")
    return _EFFECTS[grid.cells[row][col]](grid, row, col)


__all__ = [
    "apply_effect",
    "get_effect",
    "register_effect",
    "mimicked_color",
    "opposite",
]
