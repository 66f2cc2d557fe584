"""
Random Source Module - Portable seeded stream for daily puzzles.

Daily puzzles must come out identical on every platform, so they draw
from a fully specified 32-bit linear congruential generator rather
than from the interpreter's own generator. Practice puzzles may use any
object with a random() method, such as random.Random.
"""

from typing import List, Protocol, Sequence, TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32


class RandomSource(Protocol):
    """Anything producing floats uniformly in [0, 1)."""

    def random(self) -> float:
        ...


class LcgRandom:
    """
    Linear congruential generator.

    state = (1664525 * state + 1013904223) mod 2**32, and each draw
    returns the new state divided by 2**32.

    Attributes:
        seed: Initial seed (reduced mod 2**32)
        state: Current internal state
    """

    def __init__(self, seed: int):
        self.seed = seed % LCG_MODULUS
        self.state = self.seed

    def next_uint32(self) -> int:
        """Advance the stream and return the raw 32-bit state."""
        self.state = (LCG_MULTIPLIER * self.state + LCG_INCREMENT) % LCG_MODULUS
        return self.state

    def random(self) -> float:
        """Next float in [0, 1). Exact: state / 2**32 fits a double."""
        return self.next_uint32() / LCG_MODULUS

    def __repr__(self) -> str:
        return f"LcgRandom(seed={self.seed}, state={self.state})"


def pick(items: Sequence[T], rng: RandomSource) -> T:
    """Choose one item: items[floor(random() * len(items))]."""
    if not items:
        raise ValueError("Cannot pick from an empty sequence")
    return items[int(rng.random() * len(items))]


def pick_distinct(pool: Sequence[T], count: int, rng: RandomSource) -> List[T]:
    """
    Choose count distinct items by rejection sampling.

    If the pool holds fewer than count items, the first count items of
    the pool are returned as-is.
    """
    if len(pool) < count:
        return list(pool[:count])
    result: List[T] = []
    while len(result) < count:
        candidate = pick(pool, rng)
        if candidate not in result:
            result.append(candidate)
    return result


__all__ = [
    "RandomSource",
    "LcgRandom",
    "pick",
    "pick_distinct",
]
