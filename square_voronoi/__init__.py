"""Square-growth Voronoi diagrams.

Seed points grow as squares until they run into each other or the canvas
edge, producing a tiled texture of colored regions.

Typical use:
    diagram = create_diagram(12, seed="forest")
    export_diagram(diagram, Path("out"))
"""

from .base import (
    BACKGROUND_COLOR,
    DiagramParams,
    GeneratedDiagram,
    InvalidDimensionError,
    SimulationLimitError,
    fnv1a_32,
)
from .region import Edge, GrowthMode, Rect, Region
from .diagram import VoronoiDiagram
from .gaps import GapStats, fill_gaps, gap_stats
from .palettes import PALETTE_NAMES, get_palette
from .export import create_diagram, export_diagram

__all__ = [
    # Configuration and results
    "BACKGROUND_COLOR",
    "DiagramParams",
    "GeneratedDiagram",
    "InvalidDimensionError",
    "SimulationLimitError",
    "fnv1a_32",
    # Regions
    "Edge",
    "GrowthMode",
    "Rect",
    "Region",
    # Generator
    "VoronoiDiagram",
    # Gap utilities
    "GapStats",
    "fill_gaps",
    "gap_stats",
    # Palettes
    "PALETTE_NAMES",
    "get_palette",
    # Export
    "create_diagram",
    "export_diagram",
]
