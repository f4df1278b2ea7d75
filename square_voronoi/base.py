"""Parameters, results and seeding shared by the diagram generator."""

from dataclasses import dataclass, field
from datetime import datetime

import numpy as np
from PIL import Image

from .region import GrowthMode


# Pixels covered by no region
BACKGROUND_COLOR = (255, 255, 255, 255)

# Default canvas edge length per region
PIXELS_PER_REGION = 15

_FNV_OFFSET_BASIS = 2166136261
_FNV_PRIME = 16777619


class InvalidDimensionError(ValueError):
    """Raised when the canvas is too small to place seed points."""


class SimulationLimitError(RuntimeError):
    """Raised when growth has not settled within the allowed number of ticks."""


def fnv1a_32(text: str) -> int:
    """Hash text with 32-bit FNV-1a over its UTF-8 bytes.

    Python's built-in str hash is salted per process, so this stable hash is
    what turns a seed string into a reproducible RNG seed.

    Args:
        text: Seed string.

    Returns:
        Unsigned 32-bit hash value.
    """
    value = _FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * _FNV_PRIME) & 0xFFFFFFFF
    return value


def default_seed() -> str:
    """Current local time as text, used when no seed is given."""
    return datetime.now().isoformat(sep=" ")


@dataclass
class DiagramParams:
    """Configuration for a square-growth Voronoi diagram.

    Width and height default to ``region_count * 15`` and the seed defaults
    to the current timestamp. Pass an explicit seed for reproducible output.
    """

    region_count: int
    width: int | None = None
    height: int | None = None
    seed: str | None = None
    growth_mode: GrowthMode = GrowthMode.DIRECTIONAL
    step: int = 1
    palette: str | None = None  # None = random saturated colors

    def resolved_size(self) -> tuple[int, int]:
        """Canvas size with defaults applied."""
        default = max(self.region_count, 0) * PIXELS_PER_REGION
        width = default if self.width is None else self.width
        height = default if self.height is None else self.height
        return width, height


@dataclass
class GeneratedDiagram:
    """Output of rasterizing a diagram."""

    pixels: np.ndarray  # HxWx4 uint8 RGBA
    region_ids: np.ndarray  # HxW int32, -1 = background
    width: int
    height: int
    seed: str
    colors: list[tuple[int, int, int, int]]
    rects: list[tuple[int, int, int, int]]  # (x, y, width, height) per region
    ticks: int = 0
    numeric_seed: int = 0  # FNV-1a hash of seed
    generator_name: str = "square_voronoi"
    params: dict = field(default_factory=dict)

    @property
    def num_regions(self) -> int:
        return len(self.colors)

    @property
    def background_pixels(self) -> int:
        return int(np.count_nonzero(self.region_ids < 0))

    @property
    def coverage(self) -> float:
        """Fraction of pixels covered by some region (1.0 for an empty canvas)."""
        total = self.width * self.height
        if total == 0:
            return 1.0
        return 1.0 - self.background_pixels / total

    def to_image(self) -> Image.Image:
        """Convert the pixel buffer to a PIL RGBA image."""
        return Image.fromarray(self.pixels)
