"""Diagram loader.

Loads an exported diagram (diagram.png + region_ids.png + diagram.json) back
into arrays.
"""

import json
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from square_voronoi.export import DIAGRAM_IMAGE, METADATA_FILE, REGION_IDS_IMAGE


@dataclass
class LoadedDiagram:
    """An exported diagram read back from disk."""

    pixels: np.ndarray  # HxWx4 uint8
    region_ids: np.ndarray  # HxW int32, -1 = background
    metadata: dict

    @property
    def width(self) -> int:
        return int(self.metadata["width"])

    @property
    def height(self) -> int:
        return int(self.metadata["height"])


def load_region_ids(path: Path) -> np.ndarray:
    """Load a region id map from PNG.

    Args:
        path: Path to region_ids.png.

    Returns:
        HxW int32 array. Encoding: id + 1 = r + (g << 8) + (b << 16)
    """
    img = Image.open(path).convert("RGB")
    arr = np.array(img, dtype=np.uint32)
    values = arr[:, :, 0] + (arr[:, :, 1] << 8) + (arr[:, :, 2] << 16)
    return values.astype(np.int32) - 1


def load_metadata(path: Path) -> dict:
    """Load diagram metadata from JSON."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_diagram(directory: Path) -> LoadedDiagram:
    """Load an exported diagram directory.

    Args:
        directory: Directory written by export_diagram.

    Returns:
        LoadedDiagram with pixels, region ids and metadata.

    Raises:
        FileNotFoundError: If one of the diagram files is missing.
        ValueError: If the images don't match the size in the metadata.
    """
    directory = Path(directory)
    metadata_path = directory / METADATA_FILE
    if not metadata_path.exists():
        raise FileNotFoundError(f"No {METADATA_FILE} in {directory}")
    metadata = load_metadata(metadata_path)

    width, height = int(metadata["width"]), int(metadata["height"])
    if width == 0 or height == 0:
        # Empty canvases are exported without images
        return LoadedDiagram(
            pixels=np.zeros((height, width, 4), dtype=np.uint8),
            region_ids=np.full((height, width), -1, dtype=np.int32),
            metadata=metadata,
        )

    for name in (DIAGRAM_IMAGE, REGION_IDS_IMAGE):
        if not (directory / name).exists():
            raise FileNotFoundError(f"No {name} in {directory}")

    pixels = np.array(Image.open(directory / DIAGRAM_IMAGE).convert("RGBA"), dtype=np.uint8)
    region_ids = load_region_ids(directory / REGION_IDS_IMAGE)

    for name, arr in (("diagram image", pixels), ("region id map", region_ids)):
        if arr.shape[:2] != (height, width):
            raise ValueError(
                f"{name} is {arr.shape[1]}x{arr.shape[0]}, metadata says {width}x{height}"
            )

    return LoadedDiagram(pixels=pixels, region_ids=region_ids, metadata=metadata)
