"""Dark Hall -- headless simulation core of a flashlight maze-chase game."""
from darkhall.core import GameState, ManualClock, MonotonicClock, Vector2
from darkhall.simulation import GameSimulation, Maze

__version__ = "0.1.0"

__all__ = [
    "GameSimulation",
    "GameState",
    "ManualClock",
    "Maze",
    "MonotonicClock",
    "Vector2",
    "__version__",
]
