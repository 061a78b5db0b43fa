"""Named colours and lookups between names and RGB values."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def as_linear(self) -> tuple[float, float, float, float]:
        """Channels scaled to 0..1 without gamma correction."""
        return (self.r / 255, self.g / 255, self.b / 255, self.a / 255)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

COLOR_DICTIONARY: dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": Color(255, 0, 0),
    "green": Color(0, 255, 0),
    "blue": Color(0, 0, 255),
    "yellow": Color(255, 255, 0),
    "cyan": Color(0, 255, 255),
    "magenta": Color(255, 0, 255),
    "orange": Color(255, 165, 0),
    "purple": Color(128, 0, 128),
    "gray": Color(128, 128, 128),
}


def from_name(name: str) -> Color:
    """Return the colour called ``name`` (case-insensitive), or white if unknown."""
    return COLOR_DICTIONARY.get(name.lower(), WHITE)


def nearest_color_name(color: Color) -> str:
    """Return the dictionary name whose RGB value is closest to ``color``.

    Ties go to the entry that comes first in the dictionary.
    """
    best_name = "Unknown"
    best_dist = float("inf")
    for name, candidate in COLOR_DICTIONARY.items():
        dist = (
            (color.r - candidate.r) ** 2
            + (color.g - candidate.g) ** 2
            + (color.b - candidate.b) ** 2
        )
        if dist < best_dist:
            best_dist = dist
            best_name = name
    return best_name


def random_color(rng: random.Random | None = None) -> Color:
    """Return a colour picked at random from the dictionary."""
    chooser = rng if rng is not None else random
    return chooser.choice(list(COLOR_DICTIONARY.values()))