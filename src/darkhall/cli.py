"""Headless inspection tool: generate a maze and print it.

Usage:
    python -m darkhall --seed 7
    python -m darkhall --width 31 --height 15 --verbose
    python -m darkhall --seed 7 --json
"""

from __future__ import annotations

import argparse
import json
import sys

from loguru import logger

from darkhall.config import settings
from darkhall.core.clock import ManualClock
from darkhall.simulation.game import GameSimulation
from darkhall.simulation.maze import MazeGenerationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="darkhall",
        description="Generate a Dark Hall maze and print it as ASCII",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible maze")
    parser.add_argument("--width", type=int, default=settings.maze_width, help="Maze width in cells")
    parser.add_argument("--height", type=int, default=settings.maze_height, help="Maze height in cells")
    parser.add_argument("--json", action="store_true", dest="output_json", help="Print the snapshot as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    try:
        sim = GameSimulation(args.width, args.height, seed=args.seed, clock=ManualClock())
    except (ValueError, MazeGenerationError) as e:
        logger.error(f"Maze generation failed: {e}")
        return 2

    snap = sim.snapshot()
    if args.output_json:
        print(json.dumps(snap.to_dict(), indent=2))
        return 0

    print(sim.maze.render_ascii({snap.pursuer_position: "M"}))
    walkable = len(sim.maze.floor_cells())
    route = sim.maze.distances_from(snap.start_position).get(snap.prize_position)
    print(
        f"\n{snap.width}x{snap.height}  floor={walkable}  "
        f"start={tuple(snap.start_position)}  prize={tuple(snap.prize_position)}  "
        f"route={route} steps  pursuer={tuple(snap.pursuer_position)}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
