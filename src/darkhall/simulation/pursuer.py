"""Pursuer -- the adversary that hunts the player through the maze.

Per tick:
  1. Accumulate dt into the move timer and the recompute timer.
  2. Recompute the path when the recompute timer passes
     ``recompute_ms`` or the target has moved more than
     ``retarget_distance`` since the last recompute.  Search is BFS
     capped at ``search_depth`` steps; a target beyond the cap yields an
     empty path and the pursuer stalls.
  3. When the move timer reaches ``base_speed_ms * modifier`` take one
     step along the path.  The modifier is ``light_slowdown`` while the
     pursuer stands in light above ``light_threshold`` (and fears it),
     else 1.  A stale path whose next waypoint is no longer walkable is
     dropped instead of stepped.

Capture is exact cell equality; the orchestrator acts on it.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

from darkhall.config import DarkHallSettings
from darkhall.config import settings as default_settings
from darkhall.core.vector import Vector2

if TYPE_CHECKING:
    from .maze import Maze


@dataclass(frozen=True)
class PursuerConfig:
    base_speed_ms: float = 800.0
    recompute_ms: float = 1000.0
    retarget_distance: float = 2.0
    search_depth: int = 15
    light_threshold: float = 0.5
    light_slowdown: float = 2.0
    fear_of_light: bool = True

    @classmethod
    def from_settings(cls, settings: DarkHallSettings | None = None) -> PursuerConfig:
        s = settings or default_settings
        return cls(
            base_speed_ms=s.pursuer_base_speed_ms,
            recompute_ms=s.pursuer_recompute_ms,
            retarget_distance=s.pursuer_retarget_distance,
            search_depth=s.pursuer_search_depth,
            light_threshold=s.pursuer_light_threshold,
            light_slowdown=s.pursuer_light_slowdown,
            fear_of_light=s.pursuer_fear_of_light,
        )


def find_path(maze: Maze, start: Vector2, goal: Vector2, max_depth: int) -> list[Vector2]:
    """Shortest walkable path from *start* (exclusive) to *goal* (inclusive).

    Returns [] when the goal is the start, is unreachable, or needs more
    than *max_depth* steps.
    """
    if start == goal or not maze.is_walkable(goal):
        return []
    parents: dict[Vector2, Vector2 | None] = {start: None}
    depth = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if depth[current] >= max_depth:
            continue
        for nxt in maze.walkable_neighbors(current):
            if nxt in parents:
                continue
            parents[nxt] = current
            depth[nxt] = depth[current] + 1
            if nxt == goal:
                path = [nxt]
                step = current
                while step != start:
                    path.append(step)
                    step = parents[step]
                path.reverse()
                return path
            queue.append(nxt)
    return []


class Pursuer:
    """Chases a target cell, one grid step per movement tick."""

    def __init__(
        self,
        maze: Maze,
        position: Vector2,
        config: PursuerConfig | None = None,
    ) -> None:
        self._maze = maze
        self.config = config or PursuerConfig.from_settings()
        self.position = position
        self.is_active = True
        self.move_timer = 0.0
        self.recompute_timer = 0.0
        self._path: list[Vector2] = []
        self._last_target: Vector2 | None = None

    @property
    def path(self) -> tuple[Vector2, ...]:
        return tuple(self._path)

    def speed_modifier(self, light_intensity: float) -> float:
        cfg = self.config
        if cfg.fear_of_light and light_intensity > cfg.light_threshold:
            return cfg.light_slowdown
        return 1.0

    def update(self, dt: float, target: Vector2, light_intensity: float) -> None:
        """Advance by *dt* ms toward *target*; *light_intensity* is the light at our cell."""
        if not self.is_active:
            return

        self.move_timer += dt
        self.recompute_timer += dt

        if (
            self._last_target is None
            or self.recompute_timer > self.config.recompute_ms
            or self._last_target.distance_to(target) > self.config.retarget_distance
        ):
            self.recompute_path(target)

        if self.move_timer >= self.config.base_speed_ms * self.speed_modifier(light_intensity):
            self.step()
            self.move_timer = 0.0

    def recompute_path(self, target: Vector2) -> None:
        self._path = find_path(self._maze, self.position, target, self.config.search_depth)
        self._last_target = target
        self.recompute_timer = 0.0
        if self._path:
            logger.debug(f"Pursuer at {tuple(self.position)}: path of {len(self._path)} to {tuple(target)}")
        else:
            logger.debug(f"Pursuer at {tuple(self.position)}: no path to {tuple(target)}, stalling")

    def step(self) -> None:
        """Advance one waypoint, or drop the path if that waypoint is blocked."""
        if not self._path:
            return
        nxt = self._path[0]
        if not self._maze.is_walkable(nxt):
            self._path = []
            return
        self.position = nxt
        self._path.pop(0)

    def has_caught(self, target: Vector2) -> bool:
        return self.position == target

    def reset_position(self, position: Vector2) -> None:
        self.position = position
        self._path = []
        self._last_target = None
        self.move_timer = 0.0
        self.recompute_timer = 0.0

    def debug_info(self) -> dict:
        return {
            "position": tuple(self.position),
            "path_length": len(self._path),
            "is_active": self.is_active,
            "speed": self.config.base_speed_ms,
        }
