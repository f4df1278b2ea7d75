"""Square-growth Voronoi diagram generator.

Approximates a Voronoi diagram without computing any polygons:

1. Place N unit squares at random seed points, each with its own color
2. Grow every square outward one tick at a time until nothing can grow
3. Paint each square's final rectangle onto a white canvas

Regions that cannot grow any further leave uncovered (white) pixels behind.
That is expected for rectangle growth; see gaps.fill_gaps to remove them.
"""

import random

import numpy as np

from .base import (
    BACKGROUND_COLOR,
    DiagramParams,
    GeneratedDiagram,
    InvalidDimensionError,
    SimulationLimitError,
    default_seed,
    fnv1a_32,
)
from .colors import distinct_random_color, palette_colors
from .gaps import fill_gaps as fill_region_gaps
from .region import Rect, Region


class VoronoiDiagram:
    """A set of growable regions on a fixed-size canvas.

    The region list keeps creation order. Rasterization paints regions in
    that order, so where rectangles overlap the later region wins.
    """

    name = "square_voronoi"

    def __init__(self, params: DiagramParams) -> None:
        """Validate parameters and place the seed regions.

        Args:
            params: Diagram configuration.

        Raises:
            InvalidDimensionError: If the canvas is negative, or smaller than
                2x2 while regions are requested.
            ValueError: If step is below 1 or the palette is unknown.
        """
        width, height = params.resolved_size()
        if width < 0 or height < 0:
            raise InvalidDimensionError(f"Canvas size must not be negative: {width}x{height}")
        if params.region_count > 0 and (width < 2 or height < 2):
            raise InvalidDimensionError(
                f"Canvas must be at least 2x2 to place regions, got {width}x{height}"
            )
        if params.step < 1:
            raise ValueError(f"Growth step must be at least 1, got {params.step}")

        self.params = params
        self.width = width
        self.height = height
        self.seed = params.seed or default_seed()
        self.numeric_seed = fnv1a_32(self.seed)
        self.rng = random.Random(self.numeric_seed)
        self.palette = palette_colors(params.palette) if params.palette else None

        self.regions: list[Region] = []
        self.seed_points: list[tuple[int, int]] = []
        self.ticks = 0

        self._generate_regions()

    def _generate_regions(self) -> None:
        """Create one unit region per requested count at a random position."""
        used_colors: set[tuple[int, int, int, int]] = set()

        for i in range(self.params.region_count):
            x = self.rng.randrange(0, self.width - 1)
            y = self.rng.randrange(0, self.height - 1)

            if self.palette is not None:
                color = self.palette[i % len(self.palette)]
            else:
                color = distinct_random_color(self.rng, used_colors)

            self.seed_points.append((x, y))
            self.regions.append(Region(rect=Rect(x, y, 1, 1), color=color))

    def growing_count(self) -> int:
        """Number of regions that can still grow."""
        return sum(1 for region in self.regions if region.can_grow)

    def tick(self) -> int:
        """Grow every still-growing region once, in creation order.

        Each region is checked against all other regions and the canvas right
        after it grows, so later regions see the earlier ones' new size.

        Returns:
            Number of regions that can still grow afterwards.
        """
        step = self.params.step
        mode = self.params.growth_mode

        for i, region in enumerate(self.regions):
            if not region.can_grow:
                continue
            others = self.regions[:i] + self.regions[i + 1:]
            region.grow(step, others, self.width, self.height, mode)

        self.ticks += 1
        return self.growing_count()

    def simulate(self, max_ticks: int | None = None) -> int:
        """Run ticks until no region can grow.

        Args:
            max_ticks: Optional ceiling on ticks for this call.

        Returns:
            Number of ticks run by this call.

        Raises:
            SimulationLimitError: If regions are still growing after
                max_ticks ticks.
        """
        ticks = 0
        while self.growing_count() > 0:
            if max_ticks is not None and ticks >= max_ticks:
                raise SimulationLimitError(
                    f"{self.growing_count()} regions still growing after {ticks} ticks"
                )
            self.tick()
            ticks += 1
        return ticks

    def rasterize(self, fill_gaps: bool = False) -> GeneratedDiagram:
        """Paint the regions into a fresh pixel buffer.

        Args:
            fill_gaps: Assign uncovered pixels to their nearest region instead
                of leaving them as background.

        Returns:
            GeneratedDiagram with RGBA pixels and the region id map.
        """
        region_ids = np.full((self.height, self.width), -1, dtype=np.int32)

        for i, region in enumerate(self.regions):
            x0, y0, x1, y1 = region.rect.clipped(self.width, self.height)
            region_ids[y0:y1, x0:x1] = i

        if fill_gaps:
            region_ids = fill_region_gaps(region_ids)

        colors = [region.color for region in self.regions]
        pixels = np.empty((self.height, self.width, 4), dtype=np.uint8)
        pixels[:] = BACKGROUND_COLOR

        covered = region_ids >= 0
        if colors and np.any(covered):
            color_table = np.array(colors, dtype=np.uint8)
            pixels[covered] = color_table[region_ids[covered]]

        return GeneratedDiagram(
            pixels=pixels,
            region_ids=region_ids,
            width=self.width,
            height=self.height,
            seed=self.seed,
            colors=colors,
            rects=[region.rect.as_tuple() for region in self.regions],
            ticks=self.ticks,
            numeric_seed=self.numeric_seed,
            generator_name=self.name,
            params={
                "region_count": self.params.region_count,
                "width": self.width,
                "height": self.height,
                "seed": self.seed,
                "growth_mode": self.params.growth_mode.value,
                "step": self.params.step,
                "palette": self.params.palette,
                "fill_gaps": fill_gaps,
            },
        )

    def generate(self, fill_gaps: bool = False, max_ticks: int | None = None) -> GeneratedDiagram:
        """Simulate to completion and rasterize."""
        self.simulate(max_ticks=max_ticks)
        return self.rasterize(fill_gaps=fill_gaps)
