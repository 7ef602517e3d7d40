"""GameSimulation -- frame-driven owner of the maze, player and pursuer.

Architecture
------------
The simulation is the single owner of every piece of world state: one
Maze, one Player (with its footprint trail), one Pursuer and the coarse
StateMachine.  Nothing is shared outside this object graph, so there are
no locks; the presentation layer calls ``update(dt)`` once per frame and
reads ``snapshot()`` / ``visible_cells()`` back.

Frame order (exploring only):
  1. player.update()          -- fade / prune footprints against the clock
  2. capture?  -> game_over, stop (the player may have stepped onto
                 the pursuer since the last frame)
  3. pursuer.update(dt, ...)  -- light sample is the player's real
                                 illumination at the pursuer's cell
  4. capture?  -> game_over, stop
  5. prize?    -> victory

Randomness (maze carve, connections, spawn) flows from one injected
``random.Random``; footprint timestamps come from an injected Clock.
Pass ``seed=`` for a reproducible session.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from loguru import logger

from darkhall.config import DarkHallSettings
from darkhall.config import settings as default_settings
from darkhall.core.clock import Clock, MonotonicClock
from darkhall.core.state_machine import GameState, StateMachine
from darkhall.core.vector import CARDINALS, UP, Vector2

from .illumination import IlluminationModel, LightConfig
from .maze import CellType, Maze
from .player import Player
from .pursuer import Pursuer, PursuerConfig
from .spawning import choose_spawn


@dataclass(frozen=True)
class VisibleCell:
    """One lit cell handed to the renderer."""

    cell_type: CellType
    position: Vector2
    intensity: float


@dataclass(frozen=True)
class GameSnapshot:
    """Flat, read-only per-frame view of the simulation."""

    state: GameState
    player_position: Vector2
    facing: Vector2
    aim: Vector2
    pursuer_position: Vector2
    pursuer_light: float
    pursuer_visible: bool
    god_mode: bool
    width: int
    height: int
    start_position: Vector2
    prize_position: Vector2
    footprints: int

    def to_dict(self) -> dict:
        """Serialize for logging / debugging."""
        return {
            "state": self.state.value,
            "player_position": {"x": self.player_position.x, "y": self.player_position.y},
            "facing": {"x": self.facing.x, "y": self.facing.y},
            "aim": {"x": round(self.aim.x, 4), "y": round(self.aim.y, 4)},
            "pursuer_position": {"x": self.pursuer_position.x, "y": self.pursuer_position.y},
            "pursuer_light": round(self.pursuer_light, 4),
            "pursuer_visible": self.pursuer_visible,
            "god_mode": self.god_mode,
            "maze_size": {"width": self.width, "height": self.height},
            "start_position": {"x": self.start_position.x, "y": self.start_position.y},
            "prize_position": {"x": self.prize_position.x, "y": self.prize_position.y},
            "footprints": self.footprints,
        }


class GameSimulation:
    """Core game simulation -- all game logic, no presentation."""

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
        clock: Clock | None = None,
        maze: Maze | None = None,
        settings: DarkHallSettings | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._rng = rng if rng is not None else random.Random(seed)
        self._clock = clock if clock is not None else MonotonicClock()

        self.maze = maze if maze is not None else Maze(
            width, height, rng=self._rng, settings=self._settings,
        )
        self.light_config = LightConfig.from_settings(self._settings)
        self.illumination = IlluminationModel(self.maze, self.light_config)
        self.player = Player(self.maze.start_position, self._clock, self.light_config)
        self.pursuer = Pursuer(
            self.maze,
            choose_spawn(self.maze, self._rng, settings=self._settings),
            PursuerConfig.from_settings(self._settings),
        )
        self.state_machine = StateMachine(GameState.EXPLORING)
        self.god_mode = False

        logger.info(f"Game simulation initialized: {self.maze.width}x{self.maze.height} maze")
        logger.info(f"Player starting at: {tuple(self.player.position)}")
        logger.info(f"Prize at: {tuple(self.maze.prize_position)}")
        logger.info(f"Pursuer spawned at: {tuple(self.pursuer.position)}")

    @property
    def state(self) -> GameState:
        return self.state_machine.state

    # -- Frame update -----------------------------------------------------------

    def update(self, dt: float) -> None:
        """Advance the world by *dt* milliseconds; call once per frame."""
        if self.state != GameState.EXPLORING:
            return

        self.player.update()
        if self._check_capture():
            return
        self.pursuer.update(dt, self.player.position, self.light_at(self.pursuer.position))
        if self._check_capture():
            return

        self._check_win_condition()

    def _check_capture(self) -> bool:
        if not self.pursuer.has_caught(self.player.position):
            return False
        logger.info(f"Game over! Pursuer caught the player at {tuple(self.player.position)}")
        self.state_machine.transition(GameState.GAME_OVER)
        return True

    def _check_win_condition(self) -> None:
        if self.player.position == self.maze.prize_position:
            logger.info("Victory! Player reached the prize!")
            self.state_machine.transition(GameState.VICTORY)

    # -- Commands from the input layer ------------------------------------------

    def move_player(self, direction: Vector2) -> bool:
        """Step one cell in a cardinal *direction*; False if blocked or not exploring."""
        if self.state != GameState.EXPLORING or direction not in CARDINALS:
            return False
        destination = self.player.position + direction
        if not self.maze.is_walkable(destination):
            return False
        self.player.move(direction)
        logger.debug(f"Player moved to: {tuple(self.player.position)}")
        return True

    def set_aim(self, direction: Vector2) -> bool:
        return self.player.set_aim(direction)

    def rotate_aim(self, angle: float) -> None:
        self.player.rotate_aim(angle)

    def toggle_god_mode(self) -> bool:
        self.god_mode = not self.god_mode
        logger.info(f"God mode {'enabled' if self.god_mode else 'disabled'}")
        return self.god_mode

    def toggle_pause(self) -> None:
        """Exploring <-> paused; ignored once the game has ended."""
        if self.state == GameState.EXPLORING:
            self.state_machine.transition(GameState.PAUSED)
        elif self.state == GameState.PAUSED:
            self.state_machine.transition(GameState.EXPLORING)

    def reset(self) -> None:
        """Respawn player at start, re-roll the pursuer, back to exploring."""
        self.player.respawn(self.maze.start_position, UP)
        self.pursuer.reset_position(choose_spawn(self.maze, self._rng, settings=self._settings))
        self.state_machine.transition(GameState.EXPLORING)
        logger.info("Game reset")

    def place_pursuer(self, position: Vector2) -> None:
        """Put the pursuer on a specific walkable cell (scripted setups, tests)."""
        if not self.maze.is_walkable(position):
            raise ValueError(f"Pursuer cannot be placed on non-walkable cell {tuple(position)}")
        self.pursuer.reset_position(position)

    # -- Queries for the renderer -----------------------------------------------

    def light_at(self, position: Vector2) -> float:
        """True illumination of *position* from the player's light."""
        return self.illumination.intensity(self.player.observer_state(), position)

    def visible_cells(self) -> list[VisibleCell]:
        """Lit cells; in god mode every cell with at least the floor intensity."""
        observer = self.player.observer_state()
        floor = self._settings.god_mode_floor_intensity
        result = []
        for cell in self.maze.cells():
            intensity = self.illumination.intensity(observer, cell.position)
            if self.god_mode:
                intensity = max(intensity, floor)
            if intensity > 0:
                result.append(VisibleCell(cell.type, cell.position, intensity))
        return result

    def snapshot(self) -> GameSnapshot:
        pursuer_light = self.light_at(self.pursuer.position)
        return GameSnapshot(
            state=self.state,
            player_position=self.player.position,
            facing=self.player.facing,
            aim=self.player.aim,
            pursuer_position=self.pursuer.position,
            pursuer_light=pursuer_light,
            pursuer_visible=self.god_mode or pursuer_light > self._settings.pursuer_visible_threshold,
            god_mode=self.god_mode,
            width=self.maze.width,
            height=self.maze.height,
            start_position=self.maze.start_position,
            prize_position=self.maze.prize_position,
            footprints=len(self.player.trail),
        )
