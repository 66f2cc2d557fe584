"""
Daily Module - Daily and practice puzzle entry points.

The daily puzzle number counts UTC days since EPOCH, starting at 1.
It selects the tier on a fixed weekly schedule and seeds an LcgRandom
stream, so every caller on a given day gets the same puzzle.
"""

import dataclasses
import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from ..engine import DEFAULT_MAX_STATES
from .generator import generate
from .puzzle import Puzzle
from .random_source import LcgRandom, RandomSource
from .tiers import EASY, EXPERT, HARD, MEDIUM, Tier, get_tier

logger = logging.getLogger(__name__)

EPOCH = datetime(2025, 2, 1, tzinfo=timezone.utc)

SEED_MULTIPLIER = 12345


def _as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def puzzle_number(now: Optional[datetime] = None) -> int:
    """
    Daily puzzle ordinal for a moment in time.

    Args:
        now: Moment to evaluate (default: current time)

    Returns:
        floor((now - EPOCH) / 1 day) + 1
    """
    moment = _as_utc(now or datetime.now(timezone.utc))
    return (moment - EPOCH) // timedelta(days=1) + 1


def tier_for_number(number: int) -> Tier:
    """
    Weekly difficulty schedule.

    Every 7th puzzle is expert and the one before it hard; of the
    rest, multiples of 3 are medium and everything else easy.
    """
    if number % 7 == 0:
        return EXPERT
    if number % 7 == 6:
        return HARD
    if number % 3 == 0:
        return MEDIUM
    return EASY


def seed_for_number(number: int) -> int:
    return number * SEED_MULTIPLIER


def time_until_next_puzzle(now: Optional[datetime] = None) -> timedelta:
    """Time left until the next UTC midnight."""
    moment = _as_utc(now or datetime.now(timezone.utc))
    tomorrow = (moment + timedelta(days=1)).replace(hour=0, minute=0, second=0, microsecond=0)
    return tomorrow - moment


def daily_puzzle_for_number(number: int, max_states: int = DEFAULT_MAX_STATES) -> Puzzle:
    """
    Build the daily puzzle for an ordinal.

    Deterministic: the same number always yields an identical Puzzle.
    """
    tier = tier_for_number(number)
    rng = LcgRandom(seed_for_number(number))
    logger.debug(f"Daily #{number}: tier={tier.name}, seed={rng.seed}")

    puzzle = generate(tier, rng, max_states=max_states)
    return dataclasses.replace(puzzle, puzzle_number=number)


def daily_puzzle(now: Optional[datetime] = None, max_states: int = DEFAULT_MAX_STATES) -> Puzzle:
    """Today's puzzle (or the puzzle for the day containing now)."""
    return daily_puzzle_for_number(puzzle_number(now), max_states=max_states)


def practice_puzzle(
    difficulty: Union[Tier, str] = MEDIUM,
    rng: Optional[RandomSource] = None,
    max_states: int = DEFAULT_MAX_STATES,
) -> Puzzle:
    """
    Build a non-daily puzzle.

    Args:
        difficulty: Tier or tier name
        rng: Random source (default: a fresh unseeded random.Random)
        max_states: Solver state ceiling per candidate
    """
    tier = get_tier(difficulty) if isinstance(difficulty, str) else difficulty
    return generate(tier, rng if rng is not None else random.Random(), max_states=max_states)


__all__ = [
    "EPOCH",
    "puzzle_number",
    "tier_for_number",
    "seed_for_number",
    "time_until_next_puzzle",
    "daily_puzzle_for_number",
    "daily_puzzle",
    "practice_puzzle",
]
