"""Coarse game-state machine.

  exploring -> paused | game_over | victory
  paused    -> exploring | game_over
  game_over -> exploring          (reset)
  victory   -> exploring          (reset)

Listeners are registered per target state and fire only after a real
change of state.  Transitioning to the current state is a no-op.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from loguru import logger


class GameState(str, Enum):
    EXPLORING = "exploring"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    VICTORY = "victory"


_TRANSITIONS: dict[GameState, frozenset[GameState]] = {
    GameState.EXPLORING: frozenset({GameState.PAUSED, GameState.GAME_OVER, GameState.VICTORY}),
    GameState.PAUSED: frozenset({GameState.EXPLORING, GameState.GAME_OVER}),
    GameState.GAME_OVER: frozenset({GameState.EXPLORING}),
    GameState.VICTORY: frozenset({GameState.EXPLORING}),
}


class InvalidTransitionError(ValueError):
    """Raised when a state change is not in the transition table."""

    def __init__(self, current: GameState, requested: GameState) -> None:
        super().__init__(f"Illegal game state transition: {current.value} -> {requested.value}")
        self.current = current
        self.requested = requested


class StateMachine:
    """Holds exactly one GameState and guards changes to it."""

    def __init__(self, initial: GameState = GameState.EXPLORING) -> None:
        self._state = initial
        self._listeners: dict[GameState, list[Callable[[], None]]] = {}

    @property
    def state(self) -> GameState:
        return self._state

    def can_transition_to(self, state: GameState) -> bool:
        return state in _TRANSITIONS[self._state]

    def transition(self, new_state: GameState) -> bool:
        """Move to *new_state*.

        Returns True if the state changed, False if it already was
        *new_state*.  Raises InvalidTransitionError for illegal moves.
        """
        if new_state == self._state:
            return False
        if not self.can_transition_to(new_state):
            raise InvalidTransitionError(self._state, new_state)
        old = self._state
        self._state = new_state
        logger.info(f"State changed: {old.value} -> {new_state.value}")
        for callback in self._listeners.get(new_state, []):
            callback()
        return True

    def on_state_change(self, state: GameState, callback: Callable[[], None]) -> None:
        """Call *callback* every time the machine enters *state*."""
        self._listeners.setdefault(state, []).append(callback)
