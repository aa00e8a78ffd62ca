#!/usr/bin/env python3
"""
Sine Track Example

This example demonstrates how to:
1. Sketch a function curve with acceleration lines
2. Add a polygon obstacle
3. Drop randomly placed riders
4. Write the track for the game's importer

Usage:
    python draw_track.py                        # Write track.json
    python draw_track.py --output my.json       # Choose output file
    python draw_track.py --seed 42              # Reproducible riders
    python draw_track.py --log-level DEBUG      # Verbose output
"""

import argparse
import logging
import sys

import numpy as np

from drawlr import Game, CoordOptions, create_riders, function_lines, thick_polygon_lines


logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Draw an example Line Rider track")
    parser.add_argument("--output", default="track.json", help="Output file (default: track.json)")
    parser.add_argument("--riders", type=int, default=4, help="Number of riders")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for rider placement")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args()


def setup_logging(level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def offset_sin(x: float) -> float:
    return 50.0 + 100.0 * np.sin(0.01 * x)


def build_game(num_riders: int, seed: int | None = None) -> Game:
    """Build the example track."""
    game = Game()

    game.add_lines(function_lines(offset_sin, range(-1000, 100000)))
    game.add_lines(thick_polygon_lines(10, 40, thickness=1, kind=1))

    riders = create_riders(num_riders, CoordOptions.rand(), CoordOptions.rand(), seed=seed)
    game.add_riders(riders)

    return game


def main() -> int:
    args = parse_args()
    setup_logging(args.log_level)

    game = build_game(args.riders, args.seed)
    try:
        path = game.write_to_file(args.output)
    except OSError as e:
        logger.error(f"Could not write track: {e}")
        return 1

    logger.info(f"Track written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
