#!/usr/bin/env python3
"""
Point Clustering Tool

Links the points of a data file into a nearest-neighbour chain, cuts
the longest edges to form k clusters and draws the result as SVG.

Usage:
    python cluster_points.py <data.txt> [output.svg] [-k 2] [--strategy=chain]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from point_clustering import (
    ClusteringError,
    RenderStyle,
    STRATEGIES,
    cluster_points,
    load_points,
    write_cluster_svg,
    print_cluster_stats,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    defaults = RenderStyle()
    parser = argparse.ArgumentParser(
        description="Cluster 2D points by cutting the longest chain edges"
    )
    parser.add_argument("input", help="Input file of whitespace separated x y pairs")
    parser.add_argument("output", nargs="?", help="Output SVG file (default: input-clusters.svg)")
    parser.add_argument(
        "-k",
        "--clusters",
        type=int,
        default=2,
        help="Number of clusters (default: 2)",
    )
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default="chain",
        help="Spanning edge strategy (default: chain)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--scale", type=float, default=defaults.scale, help=f"Coordinate scale (default: {defaults.scale})")
    parser.add_argument("--shift-x", type=float, default=defaults.shift_x, help=f"Horizontal shift (default: {defaults.shift_x})")
    parser.add_argument("--shift-y", type=float, default=defaults.shift_y, help=f"Vertical shift (default: {defaults.shift_y})")
    parser.add_argument("--width", type=int, default=defaults.width, help=f"Canvas width (default: {defaults.width})")
    parser.add_argument("--height", type=int, default=defaults.height, help=f"Canvas height (default: {defaults.height})")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = input_path.with_name(input_path.stem + "-clusters.svg")

    style = RenderStyle(
        scale=args.scale,
        shift_x=args.shift_x,
        shift_y=args.shift_y,
        width=args.width,
        height=args.height,
    )

    print(f"Input: {input_path}")
    print(f"Output: {output_path}")
    print(f"Clusters: {args.clusters}")
    print()

    try:
        points = load_points(input_path)
        print(f"Loaded {len(points)} points")
        result = cluster_points(points, args.clusters, args.strategy)
    except (ClusteringError, OSError) as exc:
        logger.error("Clustering failed for %s: %s", input_path, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("\nClustering results:")
    print_cluster_stats(result)

    print(f"\nWriting output to {output_path}...")
    write_cluster_svg(output_path, result, style)

    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
