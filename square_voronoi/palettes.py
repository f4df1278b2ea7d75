"""Named color palettes for diagram regions.

Each palette is ordered so that neighbouring entries contrast well; regions
take palette colors in creation order and wrap around when there are more
regions than colors.
"""

from collections import OrderedDict

PALETTES: OrderedDict[str, list[tuple[int, int, int]]] = OrderedDict()

PALETTES["Primary"] = [
    (220, 40, 40),     # Red
    (40, 90, 220),     # Blue
    (245, 200, 20),    # Yellow
    (30, 160, 70),     # Green
    (240, 120, 20),    # Orange
    (130, 50, 180),    # Violet
    (20, 170, 190),    # Cyan
    (200, 40, 140),    # Magenta
    (120, 200, 40),    # Lime
    (60, 60, 70),      # Charcoal
]

PALETTES["Earth"] = [
    (140, 90, 50),     # Umber
    (90, 120, 60),     # Moss
    (200, 160, 100),   # Sand
    (110, 70, 60),     # Clay
    (160, 140, 80),    # Ochre
    (70, 90, 80),      # Slate green
    (190, 110, 70),    # Terracotta
    (120, 110, 100),   # Stone
    (60, 50, 40),      # Loam
    (170, 180, 130),   # Sage
]

PALETTES["Ocean"] = [
    (10, 50, 100),     # Abyss
    (30, 110, 160),    # Deep water
    (70, 170, 200),    # Lagoon
    (150, 210, 220),   # Shallows
    (20, 80, 80),      # Kelp
    (60, 140, 130),    # Reef
    (230, 220, 190),   # Foam
    (40, 70, 130),     # Navy
    (100, 190, 170),   # Seafoam
    (200, 170, 120),   # Beach
]

PALETTES["Neon"] = [
    (255, 20, 150),    # Hot pink
    (0, 230, 255),     # Electric cyan
    (180, 255, 0),     # Acid green
    (255, 120, 0),     # Blaze orange
    (140, 0, 255),     # Ultraviolet
    (255, 240, 0),     # Laser yellow
    (0, 255, 120),     # Spring green
    (255, 0, 60),      # Signal red
]

PALETTE_NAMES: list[str] = list(PALETTES.keys())


def get_palette(name: str) -> list[tuple[int, int, int]]:
    """Return the colors of a named palette.

    Args:
        name: Palette name (case sensitive).

    Returns:
        List of RGB tuples.

    Raises:
        ValueError: If name is not recognized.
    """
    if name not in PALETTES:
        raise ValueError(f"Unknown palette: {name!r}. Available: {PALETTE_NAMES}")
    return list(PALETTES[name])
