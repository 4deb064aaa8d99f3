"""Command line entry point for rendering attainment legends.

Usage:
    python -m attainment.cli                               # Quantize legend -> legend.svg
    python -m attainment.cli --scale quantile              # Equal-count bins
    python -m attainment.cli --scale sequential -o seq.svg # Gradient legend
    python -m attainment.cli --surface -o map.svg          # Map surface with legend attached
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from attainment.choropleth import (
    LEGEND_TICK_FORMAT,
    LEGEND_TITLE,
    LEGEND_WIDTH,
    SCALE_METHODS,
    attach_legend,
    build_color_scale,
    build_legend,
    create_surface,
)
from attainment.data import EDUCATION_FILENAME, load_education, validate_education
from attainment.utils import get_data_path
from attainment.visualization.svg import to_string

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Render the educational attainment choropleth legend as SVG",
    )
    parser.add_argument(
        "--education",
        type=Path,
        default=None,
        help=f"County education JSON (default: data/raw/education/{EDUCATION_FILENAME})",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("legend.svg"),
        help="Output SVG path (default: legend.svg)",
    )
    parser.add_argument(
        "--scale",
        choices=SCALE_METHODS,
        default="quantize",
        help="Color scale method (default: quantize)",
    )
    parser.add_argument(
        "--title",
        default=LEGEND_TITLE,
        help=f"Legend title (default: {LEGEND_TITLE})",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=LEGEND_WIDTH,
        help=f"Legend width in pixels (default: {LEGEND_WIDTH})",
    )
    parser.add_argument(
        "--tick-format",
        default=LEGEND_TICK_FORMAT,
        help=f"Tick label format spec (default: {LEGEND_TICK_FORMAT})",
    )
    parser.add_argument(
        "--surface",
        action="store_true",
        help="Write the map surface with the legend attached",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress output except errors",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    # Configure logging
    if args.quiet:
        level = logging.ERROR
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        path = args.education or get_data_path("education") / EDUCATION_FILENAME
        df = load_education(path)

        validation = validate_education(df)
        logger.info(str(validation))
        validation.raise_if_invalid()

        scale = build_color_scale(df, method=args.scale)
        node = build_legend(
            scale, title=args.title, width=args.width, tick_format=args.tick_format
        )

        if args.surface:
            surface = create_surface()
            attach_legend(surface, node)
            args.output.write_text(to_string(surface, pretty=True), encoding="utf-8")
        else:
            node.save(args.output)

        logger.info(f"Wrote {node.kind.value} legend to {args.output}")
        return 0

    except Exception as e:
        logger.error(f"Legend rendering failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
