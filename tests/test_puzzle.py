"""
Tests for the Puzzle value type and custom puzzle validation.
"""

import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from morabox.engine import Color, GridState, Move, TargetCorners
from morabox.puzzles import Puzzle, build_custom_puzzle, fallback_puzzle
from morabox.puzzles.custom import (
    STATUS_ALREADY_SOLVED,
    STATUS_OK,
    STATUS_UNSOLVABLE,
)

import pytest

WHITE_CORNERS = TargetCorners.uniform(Color.WHITE)


class TestPuzzle:
    def test_optimal_moves(self):
        assert fallback_puzzle().optimal_moves == 2
        assert Puzzle(grid=fallback_puzzle().grid, target_corners=WHITE_CORNERS).optimal_moves is None

    def test_is_perfect(self):
        puzzle = fallback_puzzle()
        assert puzzle.is_perfect(2)
        assert not puzzle.is_perfect(3)

        unsolved = Puzzle(grid=puzzle.grid, target_corners=WHITE_CORNERS)
        assert not unsolved.is_perfect(2)

    def test_dict_round_trip(self):
        puzzle = fallback_puzzle(puzzle_number=12)
        data = puzzle.to_dict()

        assert data["grid"][0] == ["white", "gray", "white"]
        assert data["target_corners"] == ["white", "white", "white", "white"]
        assert data["solution"] == [[0, 0], [1, 0]]
        assert data["difficulty"] == "easy"
        assert data["puzzle_number"] == 12

        # Survives JSON serialization
        restored = Puzzle.from_dict(json.loads(json.dumps(data)))
        assert restored == puzzle

    def test_from_dict_without_solution(self):
        data = fallback_puzzle().to_dict()
        data["solution"] = None
        del data["difficulty"]
        restored = Puzzle.from_dict(data)
        assert restored.solution is None
        assert restored.difficulty is None

    def test_from_dict_rejects_bad_colors(self):
        data = fallback_puzzle().to_dict()
        data["grid"][1][1] = "teal"
        with pytest.raises(ValueError):
            Puzzle.from_dict(data)

    def test_is_immutable(self):
        puzzle = fallback_puzzle()
        with pytest.raises(Exception):
            puzzle.solution = ()


class TestCustomPuzzle:
    def test_already_solved_is_rejected(self):
        grid = GridState.from_rows([
            ["white", "red", "white"],
            ["gray", "gray", "gray"],
            ["white", "pink", "white"],
        ])
        result = build_custom_puzzle(grid, WHITE_CORNERS)
        assert result.status == STATUS_ALREADY_SOLVED
        assert not result.ok
        assert result.puzzle is None

    def test_unsolvable_is_rejected(self):
        grid = GridState.from_flat(["gray"] * 9)
        result = build_custom_puzzle(grid, WHITE_CORNERS)
        assert result.status == STATUS_UNSOLVABLE
        assert result.puzzle is None

    def test_solvable_layout_becomes_a_puzzle(self):
        grid = fallback_puzzle().grid
        result = build_custom_puzzle(grid, WHITE_CORNERS)
        assert result.ok
        assert result.status == STATUS_OK
        assert result.puzzle.solution == (Move(0, 0), Move(1, 0))
        assert result.puzzle.difficulty is None
        assert result.puzzle.share_code == "1010100011111"

    def test_move_bound_applies(self):
        grid = fallback_puzzle().grid
        result = build_custom_puzzle(grid, WHITE_CORNERS, max_moves=1)
        assert result.status == STATUS_UNSOLVABLE
