"""Pursuer spawn placement.

Candidates are floor cells other than start and prize, narrowed in
tiers and sampled uniformly from the best non-empty tier:

  1. safe      -- far enough away AND not a corridor on the main axis
  2. distant   -- at least ``min_start_distance`` corridor steps from
                  start and ``min_prize_distance`` from the prize
  3. any floor cell except start and prize
  4. any walkable cell except start (only hit by degenerate layouts)

A cell is unsafe when it has <= 2 walkable neighbours (a corridor, not
an intersection) and lies along the start -> prize direction (dot of the
normalized directions > ``axis_alignment``): a pursuer there could block
the only reasonable route.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from loguru import logger

from darkhall.config import DarkHallSettings
from darkhall.config import settings as default_settings
from darkhall.core.vector import Vector2

from .maze import CellType

if TYPE_CHECKING:
    from .maze import Maze


def is_unsafe_spawn(maze: Maze, position: Vector2, axis_alignment: float) -> bool:
    if len(maze.walkable_neighbors(position)) > 2:
        return False
    axis = (maze.prize_position - maze.start_position).normalize()
    direction = (position - maze.start_position).normalize()
    return direction.dot(axis) > axis_alignment


def choose_spawn(
    maze: Maze,
    rng: random.Random,
    *,
    min_start_distance: float | None = None,
    min_prize_distance: float | None = None,
    axis_alignment: float | None = None,
    settings: DarkHallSettings | None = None,
) -> Vector2:
    """Pick a spawn cell for the pursuer; never fails on a valid maze."""
    s = settings or default_settings
    min_start = s.spawn_min_start_distance if min_start_distance is None else min_start_distance
    min_prize = s.spawn_min_prize_distance if min_prize_distance is None else min_prize_distance
    alignment = s.spawn_axis_alignment if axis_alignment is None else axis_alignment

    from_start = maze.distances_from(maze.start_position)
    from_prize = maze.distances_from(maze.prize_position)

    candidates = [c.position for c in maze.cells() if c.type == CellType.FLOOR]
    distant = [
        p for p in candidates
        if from_start.get(p, -1) >= min_start and from_prize.get(p, -1) >= min_prize
    ]
    safe = [p for p in distant if not is_unsafe_spawn(maze, p, alignment)]

    if safe:
        return rng.choice(safe)
    if distant:
        logger.warning(f"No safe pursuer spawn; using one of {len(distant)} distant cells")
        return rng.choice(distant)
    if candidates:
        logger.warning(f"No distant pursuer spawn; using one of {len(candidates)} floor cells")
        return rng.choice(candidates)
    fallback = [c.position for c in maze.floor_cells() if c.position != maze.start_position]
    logger.warning("Degenerate maze: spawning pursuer on any walkable cell")
    return rng.choice(fallback or [maze.prize_position])
