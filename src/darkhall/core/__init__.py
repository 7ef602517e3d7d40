"""Core primitives -- vectors, clocks, game-state machine."""
from .clock import Clock, ManualClock, MonotonicClock
from .state_machine import GameState, InvalidTransitionError, StateMachine
from .vector import CARDINALS, DOWN, LEFT, RIGHT, UP, ZERO, Vector2

__all__ = [
    "CARDINALS",
    "Clock",
    "DOWN",
    "GameState",
    "InvalidTransitionError",
    "LEFT",
    "ManualClock",
    "MonotonicClock",
    "RIGHT",
    "StateMachine",
    "UP",
    "Vector2",
    "ZERO",
]
