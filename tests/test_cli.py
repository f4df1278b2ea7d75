"""Tests for the generate_diagram command line script."""

import json

import pytest

from generate_diagram import build_parser, main
from square_voronoi.export import METADATA_FILE


class TestParser:
    """Test argument defaults."""

    def test_defaults(self, tmp_path):
        args = build_parser().parse_args(["4", str(tmp_path)])

        assert args.regions == 4
        assert args.size is None
        assert args.seed is None
        assert args.mode == "directional"
        assert args.step == 1
        assert not args.fill_gaps
        assert not args.preview

    def test_unknown_palette_rejected(self, tmp_path):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["4", str(tmp_path), "--palette", "Nope"])


class TestMain:
    """Test end-to-end generation from the command line."""

    def test_generates_diagram(self, output_dir, capsys):
        main(["4", str(output_dir), "--size", "30", "--seed", "cli"])

        with open(output_dir / METADATA_FILE, encoding="utf-8") as f:
            metadata = json.load(f)

        assert metadata["width"] == 30
        assert metadata["height"] == 30
        assert metadata["seed"] == "cli"
        assert len(metadata["regions"]) == 4
        assert "Diagram generated successfully" in capsys.readouterr().out

    def test_width_overrides_size(self, output_dir):
        main(["3", str(output_dir), "--size", "20", "--width", "35", "--seed", "w"])

        with open(output_dir / METADATA_FILE, encoding="utf-8") as f:
            metadata = json.load(f)

        assert (metadata["width"], metadata["height"]) == (35, 20)

    def test_uniform_mode_with_gap_filling(self, output_dir):
        main([
            "6", str(output_dir),
            "--size", "40",
            "--seed", "fill",
            "--mode", "uniform",
            "--palette", "Ocean",
            "--fill-gaps",
        ])

        with open(output_dir / METADATA_FILE, encoding="utf-8") as f:
            metadata = json.load(f)

        assert metadata["params"]["growth_mode"] == "uniform"
        assert metadata["params"]["palette"] == "Ocean"
        assert metadata["params"]["fill_gaps"] is True

    def test_too_small_canvas_is_usage_error(self, output_dir):
        with pytest.raises(SystemExit) as excinfo:
            main(["3", str(output_dir), "--size", "1"])
        assert excinfo.value.code == 2

    def test_tick_limit_exits_cleanly(self, output_dir, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["40", str(output_dir), "--size", "200", "--seed", "slow", "--max-ticks", "1"])

        assert excinfo.value.code == 1
        assert "Growth did not settle" in capsys.readouterr().err
        assert not (output_dir / METADATA_FILE).exists()

    @pytest.mark.parametrize("max_ticks", ["0", "-5"])
    def test_non_positive_tick_limit_is_usage_error(self, output_dir, max_ticks):
        with pytest.raises(SystemExit) as excinfo:
            main(["3", str(output_dir), "--size", "20", "--max-ticks", max_ticks])
        assert excinfo.value.code == 2

    def test_generous_tick_limit_succeeds(self, output_dir):
        main(["3", str(output_dir), "--size", "20", "--seed", "ok", "--max-ticks", "500"])
        assert (output_dir / METADATA_FILE).exists()
