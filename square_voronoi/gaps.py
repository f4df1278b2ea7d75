"""Gap analysis and filling for rasterized diagrams.

Square growth cannot always tile the canvas, so some pixels may be left
uncovered (region id -1). These helpers measure those gaps and optionally
hand each uncovered pixel to the nearest region.
"""

from dataclasses import dataclass

import numpy as np
from scipy.ndimage import label
from scipy.spatial import cKDTree


@dataclass
class GapStats:
    """Summary of the uncovered pixels in a region id map."""

    background_pixels: int
    gap_count: int  # 4-connected components of background
    coverage: float


def gap_stats(region_ids: np.ndarray) -> GapStats:
    """Measure uncovered pixels.

    Args:
        region_ids: HxW region id map with -1 for background.

    Returns:
        GapStats for the map.
    """
    background = region_ids < 0
    background_pixels = int(np.count_nonzero(background))
    total = region_ids.size

    gap_count = 0
    if background_pixels:
        _, gap_count = label(background)

    coverage = 1.0 if total == 0 else 1.0 - background_pixels / total
    return GapStats(
        background_pixels=background_pixels,
        gap_count=int(gap_count),
        coverage=coverage,
    )


def fill_gaps(region_ids: np.ndarray) -> np.ndarray:
    """Assign every background pixel to the region of its nearest covered pixel.

    Args:
        region_ids: HxW region id map with -1 for background.

    Returns:
        New region id map. Unchanged copy if there is nothing to fill or
        nothing to fill from.
    """
    result = region_ids.copy()
    background = result < 0
    if not np.any(background) or np.all(background):
        return result

    covered_y, covered_x = np.nonzero(~background)
    gap_y, gap_x = np.nonzero(background)

    tree = cKDTree(np.column_stack([covered_x, covered_y]).astype(np.float64))
    _, nearest = tree.query(np.column_stack([gap_x, gap_y]).astype(np.float64))

    result[gap_y, gap_x] = result[covered_y[nearest], covered_x[nearest]]
    return result
