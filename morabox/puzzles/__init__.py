"""
Puzzles Package - Building, sharing and scheduling puzzles.

Public API:
    - Puzzle: Starting grid + target corners + cached shortest solution
    - generate(): Generate-and-test builder for a difficulty tier
    - daily_puzzle() / daily_puzzle_for_number(): Deterministic daily puzzle
    - practice_puzzle(): Unseeded puzzle for a chosen tier
    - encode() / decode(): 13-digit share codes
    - build_custom_puzzle(): Validate a player-built layout
"""

from .puzzle import Puzzle
from .random_source import LcgRandom, RandomSource, pick, pick_distinct
from .tiers import EASY, EXPERT, HARD, MEDIUM, Tier, get_tier, get_tier_names
from .generator import MAX_ATTEMPTS, fallback_puzzle, generate
from .daily import (
    EPOCH,
    daily_puzzle,
    daily_puzzle_for_number,
    practice_puzzle,
    puzzle_number,
    tier_for_number,
    time_until_next_puzzle,
)
from .codec import CODE_LENGTH, decode, encode
from .custom import CustomPuzzleResult, build_custom_puzzle

__all__ = [
    "Puzzle",
    # Randomness
    "LcgRandom",
    "RandomSource",
    "pick",
    "pick_distinct",
    # Tiers
    "Tier",
    "EASY",
    "MEDIUM",
    "HARD",
    "EXPERT",
    "get_tier",
    "get_tier_names",
    # Generation
    "MAX_ATTEMPTS",
    "generate",
    "fallback_puzzle",
    "EPOCH",
    "puzzle_number",
    "tier_for_number",
    "time_until_next_puzzle",
    "daily_puzzle",
    "daily_puzzle_for_number",
    "practice_puzzle",
    # Sharing
    "CODE_LENGTH",
    "encode",
    "decode",
    "CustomPuzzleResult",
    "build_custom_puzzle",
]
