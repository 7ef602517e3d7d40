"""Tests for DarkHallSettings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from darkhall.config import DarkHallSettings
from darkhall.simulation.game import GameSimulation
from darkhall.core.clock import ManualClock

pytestmark = pytest.mark.unit


class TestDefaults:

    def test_defaults(self):
        s = DarkHallSettings()
        assert (s.maze_width, s.maze_height) == (21, 21)
        assert s.flashlight_range == 4.0
        assert s.flashlight_angle_deg == 60.0
        assert s.ambient_radius == 1.5
        assert s.footprint_decay_ms == 15000.0
        assert s.pursuer_search_depth == 15
        assert s.god_mode_floor_intensity == 0.2


class TestEnvironment:

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DARKHALL_MAZE_WIDTH", "31")
        monkeypatch.setenv("DARKHALL_PURSUER_FEAR_OF_LIGHT", "false")
        s = DarkHallSettings()
        assert s.maze_width == 31
        assert s.pursuer_fear_of_light is False

    def test_too_small_maze_rejected(self, monkeypatch):
        monkeypatch.setenv("DARKHALL_MAZE_HEIGHT", "3")
        with pytest.raises(ValidationError):
            DarkHallSettings()

    def test_ambient_must_stay_below_cone_peak(self):
        with pytest.raises(ValidationError):
            DarkHallSettings(max_ambient_intensity=1.0)


def test_settings_flow_into_simulation():
    s = DarkHallSettings(maze_width=9, maze_height=7, pursuer_base_speed_ms=250, flashlight_range=6)
    sim = GameSimulation(seed=2, clock=ManualClock(), settings=s)
    assert (sim.maze.width, sim.maze.height) == (9, 7)
    assert sim.pursuer.config.base_speed_ms == 250
    assert sim.illumination.config.flashlight_range == 6
