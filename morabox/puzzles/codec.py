"""
Codec Module - 13-digit puzzle share codes.

Format: the 9 grid cells row-major, then the target corners in
topLeft, topRight, bottomLeft, bottomRight order, one ASCII digit per
color (gray=0, white=1, ..., red=8, blue=9).
"""

import logging
from typing import Dict, Optional

from ..engine import Color, GridState, TargetCorners, find_solution
from .puzzle import Puzzle

logger = logging.getLogger(__name__)

CODE_LENGTH = 13
DECODE_MAX_MOVES = 20

_DIGIT_BY_COLOR: Dict[Color, str] = {color: str(i) for i, color in enumerate(Color)}
_COLOR_BY_DIGIT: Dict[str, Color] = {digit: color for color, digit in _DIGIT_BY_COLOR.items()}


def encode(grid: GridState, corners: TargetCorners) -> str:
    """Encode a grid and its target corners as a 13-digit string."""
    return "".join(_DIGIT_BY_COLOR[c] for c in grid.flat() + corners.as_tuple())


def decode(code: str, max_moves: int = DECODE_MAX_MOVES) -> Optional[Puzzle]:
    """
    Decode a share code and solve it.

    Args:
        code: Exactly 13 ASCII digits
        max_moves: Solver depth used to fill in the solution

    Returns:
        Puzzle (its solution is None if none exists within max_moves),
        or None if the code is malformed
    """
    if not isinstance(code, str):
        return None
    if len(code) != CODE_LENGTH:
        logger.debug(f"Rejected share code of length {len(code)}")
        return None

    colors = [_COLOR_BY_DIGIT.get(ch) for ch in code]
    if any(color is None for color in colors):
        logger.debug(f"Rejected share code with non-digit characters: {code!r}")
        return None

    grid = GridState.from_flat(colors[:9])
    corners = TargetCorners.from_tuple(colors[9:])
    return Puzzle(
        grid=grid,
        target_corners=corners,
        solution=find_solution(grid, corners, max_moves=max_moves),
    )


__all__ = [
    "CODE_LENGTH",
    "DECODE_MAX_MOVES",
    "encode",
    "decode",
]
