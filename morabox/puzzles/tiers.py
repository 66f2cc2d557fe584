"""
Tiers Module - Difficulty tier definitions.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..engine import Color

# Corner pattern names, easiest to hardest
PATTERN_UNIFORM = "uniform"
PATTERN_SPLIT = "split"
PATTERN_DIAGONAL = "diagonal"
PATTERN_DISTINCT = "distinct"

# Scramble length is scramble_moves + floor(random() * SCRAMBLE_JITTER)
SCRAMBLE_JITTER = 8


@dataclass(frozen=True)
class Tier:
    """
    Difficulty tier settings.

    Attributes:
        name: Tier name
        min_moves: Shortest accepted solution length
        max_moves: Longest accepted solution length, also the solver depth
        scramble_moves: Base number of scramble clicks
        palette: Allowed colors, always including gray
        corner_pattern: How target corners are chosen
    """
    name: str
    min_moves: int
    max_moves: int
    scramble_moves: int
    palette: Tuple[Color, ...]
    corner_pattern: str

    @property
    def target_palette(self) -> Tuple[Color, ...]:
        """Palette colors usable as corner targets (everything but gray)."""
        return tuple(c for c in self.palette if c is not Color.GRAY)

    def accepts(self, solution_length: int) -> bool:
        return self.min_moves <= solution_length <= self.max_moves


EASY = Tier(
    name="easy",
    min_moves=3,
    max_moves=5,
    scramble_moves=8,
    palette=(Color.GRAY, Color.WHITE, Color.YELLOW, Color.PINK, Color.BLUE),
    corner_pattern=PATTERN_UNIFORM,
)

MEDIUM = Tier(
    name="medium",
    min_moves=5,
    max_moves=8,
    scramble_moves=12,
    palette=(Color.GRAY, Color.WHITE, Color.YELLOW, Color.PURPLE, Color.PINK,
             Color.GREEN, Color.BLUE),
    corner_pattern=PATTERN_SPLIT,
)

HARD = Tier(
    name="hard",
    min_moves=7,
    max_moves=11,
    scramble_moves=16,
    palette=(Color.GRAY, Color.WHITE, Color.YELLOW, Color.PURPLE, Color.PINK,
             Color.GREEN, Color.ORANGE, Color.BLUE),
    corner_pattern=PATTERN_DIAGONAL,
)

EXPERT = Tier(
    name="expert",
    min_moves=9,
    max_moves=14,
    scramble_moves=20,
    palette=(Color.GRAY, Color.WHITE, Color.YELLOW, Color.PURPLE, Color.PINK,
             Color.GREEN, Color.ORANGE, Color.BLACK, Color.RED, Color.BLUE),
    corner_pattern=PATTERN_DISTINCT,
)

_TIERS: Dict[str, Tier] = {tier.name: tier for tier in (EASY, MEDIUM, HARD, EXPERT)}


def get_tier(name: str) -> Tier:
    """
    Look up a tier by name.

    Raises:
        ValueError: If tier name not found
    """
    key = name.strip().lower()
    if key not in _TIERS:
        available = ", ".join(_TIERS.keys())
        raise ValueError(f"Unknown difficulty: {name}. Available: {available}")
    return _TIERS[key]


def get_tier_names() -> List[str]:
    """Tier names, easiest first."""
    return list(_TIERS.keys())


__all__ = [
    "Tier",
    "EASY",
    "MEDIUM",
    "HARD",
    "EXPERT",
    "PATTERN_UNIFORM",
    "PATTERN_SPLIT",
    "PATTERN_DIAGONAL",
    "PATTERN_DISTINCT",
    "SCRAMBLE_JITTER",
    "get_tier",
    "get_tier_names",
]
