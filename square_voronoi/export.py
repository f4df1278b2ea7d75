"""Diagram export: PNG images plus JSON metadata."""

import json
from pathlib import Path

import numpy as np
from PIL import Image

from .base import BACKGROUND_COLOR, DiagramParams, GeneratedDiagram
from .diagram import VoronoiDiagram
from .region import GrowthMode

FORMAT_VERSION = 1

DIAGRAM_IMAGE = "diagram.png"
REGION_IDS_IMAGE = "region_ids.png"
METADATA_FILE = "diagram.json"


def encode_region_ids(region_ids: np.ndarray) -> np.ndarray:
    """Pack a region id map into RGB bytes.

    Encoding: value = id + 1 = r + (g << 8) + (b << 16), so black is background.

    Args:
        region_ids: HxW int array, -1 for background.

    Returns:
        HxWx3 uint8 array.
    """
    values = (region_ids.astype(np.int64) + 1).astype(np.uint32)
    r = (values & 0xFF).astype(np.uint8)
    g = ((values >> 8) & 0xFF).astype(np.uint8)
    b = ((values >> 16) & 0xFF).astype(np.uint8)
    return np.stack([r, g, b], axis=-1)


def build_metadata(diagram: GeneratedDiagram) -> dict:
    """Describe a diagram as JSON-serializable data."""
    regions = []
    for i, (rect, color) in enumerate(zip(diagram.rects, diagram.colors)):
        regions.append({
            "id": i,
            "rect": list(rect),
            "color": list(color),
        })

    return {
        "version": FORMAT_VERSION,
        "width": diagram.width,
        "height": diagram.height,
        "seed": diagram.seed,
        "numeric_seed": diagram.numeric_seed,
        "ticks": diagram.ticks,
        "background": list(BACKGROUND_COLOR),
        "regions": regions,
        "generator": diagram.generator_name,
        "params": diagram.params,
    }


def export_diagram(diagram: GeneratedDiagram, output_dir: Path) -> None:
    """Write a generated diagram to a directory.

    Creates:
    - diagram.png: The rendered RGBA image
    - region_ids.png: Region id map encoded as RGB
    - diagram.json: Size, seed, region rectangles and colors

    Args:
        diagram: Rasterized diagram to export.
        output_dir: Directory to write files to.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    with open(output_dir / METADATA_FILE, "w", encoding="utf-8") as f:
        json.dump(build_metadata(diagram), f, indent=2)

    # Pillow cannot encode zero-sized images
    if diagram.width > 0 and diagram.height > 0:
        diagram.to_image().save(output_dir / DIAGRAM_IMAGE)
        Image.fromarray(encode_region_ids(diagram.region_ids)).save(
            output_dir / REGION_IDS_IMAGE
        )

    print(f"Exported diagram to {output_dir}")
    print(f"  Size: {diagram.width}x{diagram.height}")
    print(f"  Regions: {diagram.num_regions}")
    print(f"  Coverage: {diagram.coverage:.1%}")


def create_diagram(
    region_count: int,
    size: tuple[int, int] | None = None,
    seed: str | None = None,
    growth_mode: GrowthMode = GrowthMode.DIRECTIONAL,
    step: int = 1,
    palette: str | None = None,
    fill_gaps: bool = False,
    max_ticks: int | None = None,
) -> GeneratedDiagram:
    """Build, simulate and rasterize a diagram in one step.

    Args:
        region_count: Number of regions.
        size: Optional (width, height); defaults to 15 pixels per region.
        seed: Optional seed text; defaults to the current time.
        growth_mode: Directional or uniform edge blocking.
        step: Pixels each edge advances per tick.
        palette: Optional palette name; random colors if None.
        fill_gaps: Assign uncovered pixels to the nearest region.
        max_ticks: Optional simulation tick ceiling.

    Returns:
        The rasterized diagram.
    """
    width, height = size if size is not None else (None, None)
    params = DiagramParams(
        region_count=region_count,
        width=width,
        height=height,
        seed=seed,
        growth_mode=growth_mode,
        step=step,
        palette=palette,
    )
    return VoronoiDiagram(params).generate(fill_gaps=fill_gaps, max_ticks=max_ticks)
