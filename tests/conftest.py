"""Pytest configuration and fixtures."""

import os

# pygame must not try to open a real display during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from square_voronoi import DiagramParams, GrowthMode, Rect, VoronoiDiagram


@pytest.fixture
def make_diagram():
    """Factory for diagrams with an explicit seed."""

    def _make(
        region_count: int = 6,
        width: int | None = 40,
        height: int | None = 40,
        seed: str = "fixture",
        **kwargs,
    ) -> VoronoiDiagram:
        params = DiagramParams(
            region_count=region_count,
            width=width,
            height=height,
            seed=seed,
            **kwargs,
        )
        return VoronoiDiagram(params)

    return _make


@pytest.fixture
def placed_diagram(make_diagram):
    """Factory for diagrams whose regions start at chosen points."""

    def _make(
        points: list[tuple[int, int]],
        width: int = 20,
        height: int = 20,
        growth_mode: GrowthMode = GrowthMode.DIRECTIONAL,
    ) -> VoronoiDiagram:
        diagram = make_diagram(len(points), width, height, growth_mode=growth_mode)
        for region, (x, y) in zip(diagram.regions, points):
            region.rect = Rect(x, y, 1, 1)
        return diagram

    return _make


@pytest.fixture
def output_dir(tmp_path):
    """Directory for exported diagrams."""
    out_dir = tmp_path / "output"
    out_dir.mkdir()
    return out_dir
