"""
Generator Module - Generate-and-test puzzle builder.

Each attempt picks target corners for the tier, fills the rest of the
grid from the tier palette, scrambles it with random clicks and keeps
the result only if the solver finds a shortest solution whose length
falls inside the tier's range. After MAX_ATTEMPTS rejected candidates
the fixed fallback puzzle is returned, so callers always get a puzzle.

All randomness is drawn from the supplied source in a fixed order
(corners, split coin, the five free cells row-major, scramble jitter,
one draw per scramble click), which keeps seeded output reproducible.
"""

import logging
from typing import List, Optional, Tuple, Union

from ..engine import (
    DEFAULT_MAX_STATES,
    CORNER_POSITIONS,
    GRID_SIZE,
    BreadthFirstSolver,
    Color,
    GridState,
    TargetCorners,
    apply_effect,
    find_solution,
    is_solved,
)
from .puzzle import Puzzle
from .random_source import RandomSource, pick, pick_distinct
from .tiers import (
    EASY,
    PATTERN_DIAGONAL,
    PATTERN_DISTINCT,
    PATTERN_SPLIT,
    PATTERN_UNIFORM,
    SCRAMBLE_JITTER,
    Tier,
    get_tier,
)

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 200

FALLBACK_MAX_MOVES = 10

FALLBACK_CORNERS = TargetCorners.uniform(Color.WHITE)

FALLBACK_GRID = GridState.from_rows([
    [Color.WHITE, Color.GRAY, Color.WHITE],
    [Color.GRAY, Color.WHITE, Color.GRAY],
    [Color.GRAY, Color.GRAY, Color.WHITE],
])


def choose_corners(tier: Tier, rng: RandomSource) -> TargetCorners:
    """
    Pick target corners following the tier's pattern.

    uniform:  one color on all four corners
    split:    two colors, top/bottom or left/right halves
    diagonal: two colors, each on one diagonal
    distinct: four different colors
    """
    pool = tier.target_palette

    if tier.corner_pattern == PATTERN_UNIFORM:
        return TargetCorners.uniform(pick(pool, rng))

    if tier.corner_pattern == PATTERN_SPLIT:
        a, b = pick_distinct(pool, 2, rng)
        if rng.random() < 0.5:
            return TargetCorners(top_left=a, top_right=a, bottom_left=b, bottom_right=b)
        return TargetCorners(top_left=a, top_right=b, bottom_left=a, bottom_right=b)

    if tier.corner_pattern == PATTERN_DIAGONAL:
        a, b = pick_distinct(pool, 2, rng)
        return TargetCorners(top_left=a, top_right=b, bottom_left=b, bottom_right=a)

    if tier.corner_pattern == PATTERN_DISTINCT:
        a, b, c, d = pick_distinct(pool, 4, rng)
        return TargetCorners(top_left=a, top_right=b, bottom_left=c, bottom_right=d)

    raise ValueError(f"Unknown corner pattern: {tier.corner_pattern}")


def build_solved_grid(tier: Tier, corners: TargetCorners, rng: RandomSource) -> GridState:
    """Grid with the target colors on its corners and palette colors elsewhere."""
    targets = dict(zip(CORNER_POSITIONS, corners.as_tuple()))
    rows: List[List[Color]] = []
    for r in range(GRID_SIZE):
        row = []
        for c in range(GRID_SIZE):
            row.append(targets[(r, c)] if (r, c) in targets else pick(tier.palette, rng))
        rows.append(row)
    return GridState.from_rows(rows)


def scramble(grid: GridState, clicks: int, rng: RandomSource) -> GridState:
    """
    Click random non-gray tiles.

    Stops early if every tile has turned gray.
    """
    for _ in range(clicks):
        clickable = grid.actionable_positions()
        if not clickable:
            break
        row, col = pick(clickable, rng)
        grid = apply_effect(grid, row, col)
    return grid


def fallback_puzzle(puzzle_number: Optional[int] = None) -> Puzzle:
    """The fixed puzzle used when generation gives up."""
    return Puzzle(
        grid=FALLBACK_GRID,
        target_corners=FALLBACK_CORNERS,
        solution=find_solution(FALLBACK_GRID, FALLBACK_CORNERS, max_moves=FALLBACK_MAX_MOVES),
        difficulty=EASY.name,
        puzzle_number=puzzle_number,
    )


def _attempt(tier: Tier, rng: RandomSource,
             solver: BreadthFirstSolver) -> Tuple[Optional[Puzzle], str]:
    """Build and test one candidate. Returns (puzzle or None, reason)."""
    corners = choose_corners(tier, rng)
    grid = build_solved_grid(tier, corners, rng)
    clicks = tier.scramble_moves + int(rng.random() * SCRAMBLE_JITTER)
    grid = scramble(grid, clicks, rng)

    if is_solved(grid, corners):
        return None, "scramble left the grid solved"

    solution = solver.solve(grid, corners)
    if not solution.found:
        return None, f"no solution within {tier.max_moves} moves"
    if not tier.accepts(solution.move_count):
        return None, f"solution length {solution.move_count} outside [{tier.min_moves}, {tier.max_moves}]"

    puzzle = Puzzle(
        grid=grid,
        target_corners=corners,
        solution=solution.moves,
        difficulty=tier.name,
    )
    return puzzle, "accepted"


def generate(
    tier: Union[Tier, str],
    rng: RandomSource,
    max_attempts: int = MAX_ATTEMPTS,
    max_states: int = DEFAULT_MAX_STATES,
) -> Puzzle:
    """
    Generate a solvable puzzle for a difficulty tier.

    Args:
        tier: Difficulty tier or tier name
        rng: Random source; seeded sources give reproducible puzzles
        max_attempts: Candidates to try before using the fallback
        max_states: Solver state ceiling per candidate

    Returns:
        Puzzle whose solution is a shortest solution with a length in
        the tier's range, or the fallback puzzle
    """
    if isinstance(tier, str):
        tier = get_tier(tier)
    solver = BreadthFirstSolver(max_moves=tier.max_moves, max_states=max_states)

    for attempt in range(1, max_attempts + 1):
        puzzle, reason = _attempt(tier, rng, solver)
        if puzzle is not None:
            logger.info(
                f"Generated {tier.name} puzzle on attempt {attempt}: "
                f"{puzzle.optimal_moves} moves"
            )
            return puzzle
        logger.debug(f"Attempt {attempt} rejected: {reason}")

    logger.warning(f"No {tier.name} puzzle after {max_attempts} attempts, using fallback")
    return fallback_puzzle()


__all__ = [
    "MAX_ATTEMPTS",
    "FALLBACK_GRID",
    "FALLBACK_CORNERS",
    "choose_corners",
    "build_solved_grid",
    "scramble",
    "fallback_puzzle",
    "generate",
]
