#!/usr/bin/env python3
"""CLI script to generate square Voronoi diagrams.

Usage:
    python generate_diagram.py regions output_dir [options]

Examples:
    python generate_diagram.py 12 output/forest --seed forest
    python generate_diagram.py 40 output/tiles --size 256 --palette Ocean
    python generate_diagram.py 8 output/legacy --mode uniform --preview
"""

import argparse
from pathlib import Path

from square_voronoi import (
    DiagramParams,
    GrowthMode,
    PALETTE_NAMES,
    SimulationLimitError,
    VoronoiDiagram,
    export_diagram,
    gap_stats,
)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="Generate a square-growth Voronoi diagram",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Growth modes:
  directional - a blocked edge stops, the other edges keep growing
  uniform     - all edges grow each tick, any contact then stops the region
""",
    )

    parser.add_argument(
        "regions",
        type=int,
        help="Number of regions",
    )
    parser.add_argument(
        "output_dir",
        type=Path,
        help="Output directory for diagram files",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Square canvas size in pixels (default: 15 per region)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Canvas width, overrides --size",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Canvas height, overrides --size",
    )
    parser.add_argument(
        "--seed",
        type=str,
        default=None,
        help="Seed text for reproducibility (default: current time)",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GrowthMode],
        default=GrowthMode.DIRECTIONAL.value,
        help="Growth mode (default: directional)",
    )
    parser.add_argument(
        "--step",
        type=int,
        default=1,
        help="Pixels each edge grows per tick (default: 1)",
    )
    parser.add_argument(
        "--palette",
        choices=PALETTE_NAMES,
        default=None,
        help="Named palette (default: random saturated colors)",
    )
    parser.add_argument(
        "--fill-gaps",
        action="store_true",
        help="Give uncovered pixels to the nearest region",
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=None,
        help="Abort if growth has not settled after this many ticks",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Open a preview window after exporting",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for diagram generation CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_ticks is not None and args.max_ticks < 1:
        parser.error(f"--max-ticks must be at least 1, got {args.max_ticks}")

    width = args.width if args.width is not None else args.size
    height = args.height if args.height is not None else args.size

    params = DiagramParams(
        region_count=args.regions,
        width=width,
        height=height,
        seed=args.seed,
        growth_mode=GrowthMode(args.mode),
        step=args.step,
        palette=args.palette,
    )

    try:
        generator = VoronoiDiagram(params)
    except ValueError as e:
        parser.error(str(e))

    print(f"Generating {args.regions} regions on {generator.width}x{generator.height}...")
    try:
        ticks = generator.simulate(max_ticks=args.max_ticks)
    except SimulationLimitError as e:
        parser.exit(1, f"Growth did not settle: {e}\n")
    diagram = generator.rasterize(fill_gaps=args.fill_gaps)
    stats = gap_stats(diagram.region_ids)

    export_diagram(diagram, args.output_dir)

    print(f"\nDiagram generated successfully!")
    print(f"  Seed: {diagram.seed}")
    print(f"  Mode: {args.mode}")
    print(f"  Ticks: {ticks}")
    print(f"  Gaps: {stats.gap_count} ({stats.background_pixels} pixels)")
    print(f"  Output: {args.output_dir}")

    if args.preview:
        from preview import run_preview

        run_preview(
            diagram.pixels,
            title=f"Square Voronoi - {diagram.seed}",
            screenshot_dir=args.output_dir,
        )


if __name__ == "__main__":
    main()
