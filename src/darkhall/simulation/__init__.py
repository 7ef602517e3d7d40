"""Simulation subsystem -- maze, light, pursuer, orchestrator."""
from .game import GameSimulation, GameSnapshot, VisibleCell
from .illumination import (
    Footprint,
    FootprintTrail,
    IlluminationModel,
    LightConfig,
    ObserverState,
    footprint_intensity,
)
from .maze import Cell, CellType, Maze, MazeGenerationError
from .player import Player
from .pursuer import Pursuer, PursuerConfig, find_path
from .spawning import choose_spawn, is_unsafe_spawn
from .visibility import has_line_of_sight, sample_cells

__all__ = [
    "Cell",
    "CellType",
    "Footprint",
    "FootprintTrail",
    "GameSimulation",
    "GameSnapshot",
    "IlluminationModel",
    "LightConfig",
    "Maze",
    "MazeGenerationError",
    "ObserverState",
    "Player",
    "Pursuer",
    "PursuerConfig",
    "VisibleCell",
    "choose_spawn",
    "find_path",
    "footprint_intensity",
    "has_line_of_sight",
    "is_unsafe_spawn",
    "sample_cells",
]
