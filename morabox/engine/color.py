"""
Color Module - The ten tile colors of the puzzle box.
"""

from enum import Enum


class Color(str, Enum):
    """
    Closed set of tile colors.

    Declaration order is the canonical order used by the share code
    (gray is digit 0, blue is digit 9).
    The str mixin gives C-level hashing for the solver visited set.
    """
    GRAY = "gray"
    WHITE = "white"
    YELLOW = "yellow"
    PURPLE = "purple"
    GREEN = "green"
    PINK = "pink"
    ORANGE = "orange"
    BLACK = "black"
    RED = "red"
    BLUE = "blue"

    @classmethod
    def parse(cls, name: "str | Color") -> "Color":
        """
        Resolve a color from its name.

        Args:
            name: Color name (case-insensitive) or an existing Color

        Returns:
            Matching Color

        Raises:
            ValueError: If name is not one of the ten colors
        """
        if isinstance(name, Color):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            available = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown color: {name!r}. Available: {available}") from None

    @property
    def is_actionable(self) -> bool:
        """Gray tiles cannot be clicked."""
        return self is not Color.GRAY

    @property
    def label(self) -> str:
        """Display name, e.g. 'Gray'."""
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.value


__all__ = ["Color"]
