"""
Command line entry point: generate a map and print it.
"""

import argparse
import sys
from typing import List, Optional

import structlog

from . import __version__
from .config import settings
from .core.generator import GenerationOptions, MapGenerator
from .core.geometry import DEFAULT_MAP_HEIGHT, DEFAULT_MAP_WIDTH
from .utils.logging import configure_logging

logger = structlog.get_logger()

DEFAULT_WATER_RATIO = 70
DEFAULT_SMOOTH_ITERATIONS = 5


def _water_ratio(value: str) -> int:
    ratio = int(value)
    if not 0 <= ratio <= 90:
        raise argparse.ArgumentTypeError(f"{ratio} is not in range 0..90")
    return ratio


def _smooth_count(value: str) -> int:
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"{count} is negative")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="empyre", description="Generate a random terrain map with cities"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-w",
        dest="water",
        type=_water_ratio,
        default=DEFAULT_WATER_RATIO,
        help="Must be in range 0..90",
    )
    parser.add_argument(
        "-s",
        dest="smooth",
        type=_smooth_count,
        default=DEFAULT_SMOOTH_ITERATIONS,
        help="Must be greater or equal to zero",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level, settings.log_format)

    options = GenerationOptions(
        width=DEFAULT_MAP_WIDTH,
        height=DEFAULT_MAP_HEIGHT,
        water_ratio=args.water,
        smooth_iterations=args.smooth,
    )
    logger.info("Map generation requested", request=options.model_dump())

    terrain_map = MapGenerator(options).generate()
    sys.stdout.write(terrain_map.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
