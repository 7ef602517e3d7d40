"""Unit tests for the coarse game-state machine."""

from __future__ import annotations

import pytest

from darkhall.core.state_machine import GameState, InvalidTransitionError, StateMachine

pytestmark = pytest.mark.unit


class TestTransitions:

    def test_starts_exploring(self):
        assert StateMachine().state == GameState.EXPLORING

    @pytest.mark.parametrize("target", [GameState.PAUSED, GameState.GAME_OVER, GameState.VICTORY])
    def test_exploring_can_leave_to(self, target):
        sm = StateMachine()
        assert sm.transition(target) is True
        assert sm.state == target

    def test_paused_cannot_win(self):
        sm = StateMachine(GameState.PAUSED)
        assert not sm.can_transition_to(GameState.VICTORY)
        with pytest.raises(InvalidTransitionError):
            sm.transition(GameState.VICTORY)
        assert sm.state == GameState.PAUSED

    @pytest.mark.parametrize("terminal", [GameState.GAME_OVER, GameState.VICTORY])
    def test_terminal_states_only_reset(self, terminal):
        sm = StateMachine(terminal)
        assert sm.can_transition_to(GameState.EXPLORING)
        assert not sm.can_transition_to(GameState.PAUSED)

    def test_same_state_is_noop(self):
        sm = StateMachine()
        assert sm.transition(GameState.EXPLORING) is False

    def test_error_carries_states(self):
        sm = StateMachine(GameState.VICTORY)
        with pytest.raises(InvalidTransitionError) as exc:
            sm.transition(GameState.GAME_OVER)
        assert exc.value.current == GameState.VICTORY
        assert exc.value.requested == GameState.GAME_OVER


class TestListeners:

    def test_listener_fires_on_entry(self):
        sm = StateMachine()
        calls = []
        sm.on_state_change(GameState.PAUSED, lambda: calls.append("paused"))
        sm.transition(GameState.PAUSED)
        sm.transition(GameState.EXPLORING)
        sm.transition(GameState.PAUSED)
        assert calls == ["paused", "paused"]

    def test_listener_not_fired_for_noop(self):
        sm = StateMachine()
        calls = []
        sm.on_state_change(GameState.EXPLORING, lambda: calls.append(1))
        sm.transition(GameState.EXPLORING)
        assert calls == []

    def test_game_state_values(self):
        assert GameState.GAME_OVER.value == "game_over"
        assert GameState("victory") is GameState.VICTORY
