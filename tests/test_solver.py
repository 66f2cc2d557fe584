"""
Tests for grid state, the solved predicate and the BFS solver.

Covers:
1. GridState creation, hashing and diff
2. Solved predicate (corners only)
3. Shortest solutions, checked against exhaustive search
4. Move-depth and states-examined bounds
"""

import itertools
import random
import sys
from pathlib import Path
from typing import Optional

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from morabox.engine import (
    BreadthFirstSolver,
    Color,
    GridState,
    Move,
    TargetCorners,
    apply_effect,
    find_solution,
    is_solved,
    parse_tile_numbers,
    replay,
    tile_numbers,
)
from morabox.engine.solution import LIMIT_STATES


def grid(*rows: str) -> GridState:
    return GridState.from_rows([row.split() for row in rows])


FALLBACK = grid(
    "white gray white",
    "gray  white gray",
    "gray  gray white",
)
ALL_WHITE = TargetCorners.uniform(Color.WHITE)


def brute_force_length(g: GridState, corners: TargetCorners, max_depth: int) -> Optional[int]:
    """Shortest solution length by trying every click sequence."""
    if is_solved(g, corners):
        return 0
    for depth in range(1, max_depth + 1):
        for seq in itertools.product(range(9), repeat=depth):
            state = g
            for tile in seq:
                r, c = divmod(tile, 3)
                state = apply_effect(state, r, c)
            if is_solved(state, corners):
                return depth
    return None


def random_grid(rng: random.Random, palette) -> GridState:
    return GridState.from_flat([rng.choice(palette) for _ in range(9)])


# ---------------------------------------------------------------------------
# GridState
# ---------------------------------------------------------------------------

def test_grid_state_hashing_and_equality():
    a = GridState.from_rows([["white", "gray", "red"]] * 3)
    b = GridState.from_rows([[Color.WHITE, Color.GRAY, Color.RED]] * 3)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_grid_state_diff():
    changed = FALLBACK.with_cell(2, 0, Color.WHITE)
    assert FALLBACK.diff(changed) == [(2, 0)]
    assert FALLBACK.diff(FALLBACK) == []


def test_grid_state_rejects_bad_input():
    with pytest.raises(ValueError):
        GridState.from_rows([["gray", "gray"], ["gray", "gray"]])
    with pytest.raises(ValueError):
        GridState.from_rows([["gray", "gray", "teal"]] * 3)
    with pytest.raises(ValueError):
        GridState.from_flat(["gray"] * 8)


def test_actionable_positions_skip_gray():
    assert FALLBACK.actionable_positions() == [(0, 0), (0, 2), (1, 1), (2, 2)]


def test_move_tile_numbers():
    assert Move(0, 0).tile_number == 1
    assert Move(1, 0).tile_number == 4
    assert Move(2, 2).tile_number == 9
    assert Move.from_tile_number(6) == Move(1, 2)
    assert parse_tile_numbers("1-4-9") == (Move(0, 0), Move(1, 0), Move(2, 2))
    assert parse_tile_numbers("") == ()
    assert tile_numbers([Move(0, 1), Move(2, 0)]) == [2, 7]

    with pytest.raises(ValueError):
        Move.from_tile_number(10)
    with pytest.raises(ValueError):
        parse_tile_numbers("1--2")
    with pytest.raises(ValueError):
        Move(3, 0)


# ---------------------------------------------------------------------------
# Solved predicate
# ---------------------------------------------------------------------------

def test_is_solved_checks_corners_only():
    g = grid(
        "red  white  blue",
        "pink gray   pink",
        "green yellow black",
    )
    corners = TargetCorners(Color.RED, Color.BLUE, Color.GREEN, Color.BLACK)
    assert is_solved(g, corners)
    assert g.is_solved(corners)

    # Edges and center never matter
    assert is_solved(g.with_cell(1, 1, Color.BLUE).with_cell(0, 1, Color.GRAY), corners)
    assert not is_solved(g.with_cell(2, 2, Color.RED), corners)


def test_fallback_layout_is_not_already_solved():
    # Bottom-left corner is gray
    assert not is_solved(FALLBACK, ALL_WHITE)


# ---------------------------------------------------------------------------
# Solver
# ---------------------------------------------------------------------------

def test_already_solved_returns_empty_sequence():
    g = grid(
        "white gray white",
        "gray  gray gray",
        "white gray white",
    )
    assert find_solution(g, ALL_WHITE) == ()
    assert find_solution(g, ALL_WHITE, max_moves=0) == ()


def test_fallback_layout_solves_in_two_moves():
    moves = find_solution(FALLBACK, ALL_WHITE, max_moves=10)
    assert moves == (Move(0, 0), Move(1, 0))
    assert tile_numbers(moves) == [1, 4]


def test_solution_record():
    solution = BreadthFirstSolver(max_moves=10).solve(FALLBACK, ALL_WHITE)
    assert solution.found
    assert solution.move_count == 2
    assert solution.tile_numbers == [1, 4]
    assert len(solution.board_states) == 3
    assert solution.board_states[0] == FALLBACK
    assert solution.board_states[-1].is_solved(ALL_WHITE)
    assert solution.board_states[1] == apply_effect(FALLBACK, 0, 0)
    assert solution.metrics.states_explored >= 1
    assert solution.metrics.limit_hit is None


def test_depth_limit_returns_not_found():
    assert find_solution(FALLBACK, ALL_WHITE, max_moves=1) is None
    assert find_solution(FALLBACK, ALL_WHITE, max_moves=0) is None


def test_states_limit_returns_not_found():
    solver = BreadthFirstSolver(max_moves=10, max_states=1)
    solution = solver.solve(FALLBACK, ALL_WHITE)
    assert not solution.found
    assert solution.moves == ()
    assert solution.metrics.states_explored == 1
    assert solution.metrics.limit_hit == LIMIT_STATES


def test_exhausted_state_space_returns_not_found():
    all_gray = GridState.from_flat(["gray"] * 9)
    solution = BreadthFirstSolver().solve(all_gray, ALL_WHITE)
    assert not solution.found
    assert solution.metrics.states_explored == 1
    assert solution.metrics.limit_hit is None


def test_invalid_bounds_rejected():
    with pytest.raises(ValueError):
        BreadthFirstSolver(max_moves=-1)
    with pytest.raises(ValueError):
        BreadthFirstSolver(max_states=0)


def test_solutions_are_valid_and_shortest():
    rng = random.Random(1234)
    palettes = [
        [Color.GRAY, Color.WHITE, Color.YELLOW, Color.PINK, Color.BLUE],
        [Color.GRAY, Color.WHITE, Color.PURPLE, Color.GREEN, Color.BLACK, Color.RED],
        list(Color),
    ]
    max_depth = 3

    for i in range(30):
        palette = palettes[i % len(palettes)]
        g = random_grid(rng, palette)
        corners = TargetCorners.from_tuple(rng.choice(palette[1:]) for _ in range(4))
        if i % 2 == 0:
            # Start from a solved layout and click twice, so short solutions are common
            for (r, c), color in zip([(0, 0), (0, 2), (2, 0), (2, 2)], corners.as_tuple()):
                g = g.with_cell(r, c, color)
            for _ in range(2):
                clickable = g.actionable_positions()
                if clickable:
                    g = apply_effect(g, *rng.choice(clickable))

        moves = find_solution(g, corners, max_moves=max_depth)
        expected = brute_force_length(g, corners, max_depth)

        if expected is None:
            assert moves is None
        else:
            assert moves is not None
            assert len(moves) == expected
            assert replay(g, moves)[-1].is_solved(corners)
            # Every click in the solution lands on a non-gray tile
            state = g
            for move in moves:
                assert state.get_cell(move.row, move.col) is not Color.GRAY
                state = state.apply_move(move)


def test_solver_finds_multi_step_solution():
    # The yellow tile climbs twice to reach the top-left corner
    g = grid(
        "gray   gray  gray",
        "gray   gray  gray",
        "yellow gray  gray",
    )
    corners = TargetCorners(Color.YELLOW, Color.GRAY, Color.GRAY, Color.GRAY)
    moves = find_solution(g, corners)
    assert moves == (Move(2, 0), Move(1, 0))
