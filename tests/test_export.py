"""Tests for diagram export and loading."""

import json

import numpy as np
import pytest

from diagram_loader import load_diagram
from square_voronoi import VoronoiDiagram, create_diagram, export_diagram, fnv1a_32
from square_voronoi.export import (
    DIAGRAM_IMAGE,
    METADATA_FILE,
    REGION_IDS_IMAGE,
    encode_region_ids,
)


class TestEncoding:
    """Test the region id PNG encoding."""

    def test_background_is_black(self):
        rgb = encode_region_ids(np.array([[-1]], dtype=np.int32))
        assert rgb[0, 0].tolist() == [0, 0, 0]

    def test_ids_are_offset_by_one(self):
        rgb = encode_region_ids(np.array([[0, 299]], dtype=np.int32))
        assert rgb[0, 0].tolist() == [1, 0, 0]
        assert rgb[0, 1].tolist() == [44, 1, 0]


class TestExport:
    """Test writing and reading diagram directories."""

    def test_export_writes_all_files(self, output_dir):
        diagram = create_diagram(5, size=(30, 20), seed="export")
        export_diagram(diagram, output_dir)

        assert (output_dir / DIAGRAM_IMAGE).exists()
        assert (output_dir / REGION_IDS_IMAGE).exists()
        assert (output_dir / METADATA_FILE).exists()

    def test_metadata_describes_regions(self, output_dir):
        diagram = create_diagram(5, size=(30, 20), seed="export")
        export_diagram(diagram, output_dir)

        with open(output_dir / METADATA_FILE, encoding="utf-8") as f:
            metadata = json.load(f)

        assert metadata["width"] == 30
        assert metadata["height"] == 20
        assert metadata["seed"] == "export"
        assert len(metadata["regions"]) == 5
        assert metadata["regions"][0]["rect"] == list(diagram.rects[0])
        assert metadata["regions"][0]["color"] == list(diagram.colors[0])
        assert metadata["params"]["growth_mode"] == "directional"

    def test_metadata_records_generator_and_numeric_seed(self, output_dir):
        export_diagram(create_diagram(3, size=(15, 15), seed="export"), output_dir)

        with open(output_dir / METADATA_FILE, encoding="utf-8") as f:
            metadata = json.load(f)

        assert metadata["generator"] == VoronoiDiagram.name
        assert metadata["numeric_seed"] == fnv1a_32("export")

    def test_load_round_trip(self, output_dir):
        diagram = create_diagram(6, size=(25, 25), seed="roundtrip")
        export_diagram(diagram, output_dir)

        loaded = load_diagram(output_dir)

        assert (loaded.width, loaded.height) == (25, 25)
        assert np.array_equal(loaded.pixels, diagram.pixels)
        assert np.array_equal(loaded.region_ids, diagram.region_ids)

    def test_export_prints_summary(self, output_dir, capsys):
        export_diagram(create_diagram(2, size=(10, 10), seed="test"), output_dir)
        out = capsys.readouterr().out

        assert "Exported diagram" in out
        assert "Regions: 2" in out

    def test_empty_diagram_exports_metadata_only(self, output_dir):
        diagram = create_diagram(0, seed="empty")
        export_diagram(diagram, output_dir)

        assert (output_dir / METADATA_FILE).exists()
        assert not (output_dir / DIAGRAM_IMAGE).exists()

        loaded = load_diagram(output_dir)
        assert loaded.pixels.shape == (0, 0, 4)
        assert loaded.region_ids.shape == (0, 0)

    def test_missing_metadata_raises(self, output_dir):
        with pytest.raises(FileNotFoundError):
            load_diagram(output_dir)

    def test_missing_image_raises(self, output_dir):
        export_diagram(create_diagram(3, size=(12, 12), seed="gone"), output_dir)
        (output_dir / REGION_IDS_IMAGE).unlink()

        with pytest.raises(FileNotFoundError):
            load_diagram(output_dir)

    def test_size_mismatch_raises(self, output_dir):
        export_diagram(create_diagram(3, size=(12, 12), seed="size"), output_dir)
        metadata_path = output_dir / METADATA_FILE
        metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
        metadata["width"] = 13
        metadata_path.write_text(json.dumps(metadata), encoding="utf-8")

        with pytest.raises(ValueError):
            load_diagram(output_dir)
