"""Tests for the sampled line-of-sight check."""

from __future__ import annotations

import pytest

from darkhall.core.vector import Vector2
from darkhall.simulation.maze import Maze
from darkhall.simulation.visibility import has_line_of_sight, sample_cells

from conftest import open_room

pytestmark = pytest.mark.unit


class TestSampleCells:

    def test_straight_line_visits_every_cell(self):
        cells = list(sample_cells(Vector2(1, 1), Vector2(4, 1)))
        assert cells == [Vector2(1, 1), Vector2(2, 1), Vector2(3, 1), Vector2(4, 1)]

    def test_same_cell(self):
        assert list(sample_cells(Vector2(2, 2), Vector2(2, 2))) == [Vector2(2, 2)]

    def test_endpoints_included(self):
        cells = list(sample_cells(Vector2(1, 1), Vector2(4, 3)))
        assert cells[0] == Vector2(1, 1)
        assert cells[-1] == Vector2(4, 3)

    def test_density_controls_sampling(self):
        sparse = list(sample_cells(Vector2(0, 0), Vector2(6, 1), samples_per_unit=0.2))
        dense = list(sample_cells(Vector2(0, 0), Vector2(6, 1), samples_per_unit=4.0))
        assert len(sparse) < len(dense)


class TestLineOfSight:

    def test_clear_corridor(self, corridor):
        assert has_line_of_sight(corridor, Vector2(1, 1), Vector2(9, 1))

    def test_wall_between_blocks(self, walled_room):
        assert not has_line_of_sight(walled_room, Vector2(1, 1), Vector2(4, 1))
        assert not has_line_of_sight(walled_room, Vector2(1, 1), Vector2(5, 1))

    def test_wall_face_itself_is_visible(self, walled_room):
        assert has_line_of_sight(walled_room, Vector2(1, 1), Vector2(3, 1))

    def test_cell_behind_outer_wall_blocked(self, corridor):
        # (1, 1) -> (1, 2) is the border wall itself (visible); nothing beyond the grid is
        assert has_line_of_sight(corridor, Vector2(1, 1), Vector2(1, 2))
        assert not has_line_of_sight(corridor, Vector2(1, 1), Vector2(1, 3))

    def test_around_corner_blocked(self, ring):
        # start (1, 1) cannot see (7, 4) through the solid block
        assert not has_line_of_sight(ring, Vector2(1, 1), Vector2(7, 4))

    def test_symmetric_in_open_room(self):
        maze = Maze.from_layout(open_room())
        a, b = Vector2(2, 3), Vector2(8, 6)
        assert has_line_of_sight(maze, a, b)
        assert has_line_of_sight(maze, b, a)
