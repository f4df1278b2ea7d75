"""Region color helpers."""

import colorsys
import random

from .palettes import get_palette

# Redraws allowed when a random color repeats one already in use
MAX_COLOR_ATTEMPTS = 8


def random_saturated_color(rng: random.Random) -> tuple[int, int, int, int]:
    """Draw an opaque, fully saturated color with a random hue.

    Args:
        rng: Random stream to draw the hue from.

    Returns:
        RGBA tuple with 0-255 channels and alpha 255.
    """
    r, g, b = colorsys.hsv_to_rgb(rng.random(), 1.0, 1.0)
    return (round(r * 255), round(g * 255), round(b * 255), 255)


def distinct_random_color(
    rng: random.Random, used: set[tuple[int, int, int, int]]
) -> tuple[int, int, int, int]:
    """Draw a random saturated color, redrawing if it is already used.

    Gives up after MAX_COLOR_ATTEMPTS draws and returns the last one, so
    large region counts still terminate.

    Args:
        rng: Random stream to draw from.
        used: Colors already assigned. The returned color is added to it.

    Returns:
        RGBA tuple.
    """
    color = random_saturated_color(rng)
    attempts = 1
    while color in used and attempts < MAX_COLOR_ATTEMPTS:
        color = random_saturated_color(rng)
        attempts += 1
    used.add(color)
    return color


def palette_colors(name: str) -> list[tuple[int, int, int, int]]:
    """Opaque RGBA versions of a named palette's colors."""
    return [(r, g, b, 255) for r, g, b in get_palette(name)]
