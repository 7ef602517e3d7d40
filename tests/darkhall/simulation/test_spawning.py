"""Tests for pursuer spawn placement."""

from __future__ import annotations

import random

import pytest

from darkhall.core.vector import Vector2
from darkhall.simulation.maze import CellType, Maze
from darkhall.simulation.spawning import choose_spawn, is_unsafe_spawn

pytestmark = pytest.mark.unit

LEFT_COLUMN = {Vector2(1, 2), Vector2(1, 3), Vector2(1, 4)}


class TestUnsafeCells:

    def test_corridor_on_main_axis_is_unsafe(self, corridor):
        assert is_unsafe_spawn(corridor, Vector2(5, 1), 0.7)

    def test_corridor_off_axis_is_safe(self, ring):
        assert not is_unsafe_spawn(ring, Vector2(1, 3), 0.7)

    def test_top_row_of_ring_is_on_axis(self, ring):
        assert is_unsafe_spawn(ring, Vector2(4, 1), 0.7)

    def test_intersection_is_never_unsafe(self):
        maze = Maze.from_layout([
            "#######",
            "#S....#",
            "#.#.#.#",
            "#....P#",
            "#######",
        ])
        # (3, 1) has three walkable neighbours
        assert not is_unsafe_spawn(maze, Vector2(3, 1), 0.0)


class TestChooseSpawn:

    @pytest.mark.parametrize("seed", range(6))
    def test_prefers_safe_cells(self, ring, seed):
        spawn = choose_spawn(
            ring, random.Random(seed),
            min_start_distance=0, min_prize_distance=0, axis_alignment=0.7,
        )
        assert spawn in LEFT_COLUMN

    def test_falls_back_to_distant_cells(self, ring):
        dist = ring.distances_from(ring.start_position)
        for seed in range(6):
            spawn = choose_spawn(
                ring, random.Random(seed),
                min_start_distance=4, min_prize_distance=0, axis_alignment=0.7,
            )
            assert dist[spawn] >= 4
            assert spawn != ring.prize_position

    def test_corridor_uses_distance_tier(self, corridor):
        spawn = choose_spawn(
            corridor, random.Random(0),
            min_start_distance=5, min_prize_distance=3, axis_alignment=0.7,
        )
        assert spawn == Vector2(6, 1)

    def test_falls_back_to_any_floor_cell(self, corridor):
        spawn = choose_spawn(
            corridor, random.Random(0),
            min_start_distance=100, min_prize_distance=100, axis_alignment=0.7,
        )
        assert corridor.cell_type(spawn) == CellType.FLOOR

    def test_degenerate_layout_still_spawns(self):
        maze = Maze.from_layout(["####", "#SP#", "####"])
        assert choose_spawn(maze, random.Random(0)) == maze.prize_position

    @pytest.mark.parametrize("seed", range(10))
    def test_generated_maze_spawn_contract(self, seed):
        rng = random.Random(seed)
        maze = Maze(21, 21, rng=rng)
        spawn = choose_spawn(maze, rng)
        assert maze.cell_type(spawn) == CellType.FLOOR
        assert maze.distances_from(maze.start_position)[spawn] >= 5
        assert maze.distances_from(maze.prize_position)[spawn] >= 3

    def test_same_seed_same_spawn(self, ring):
        a = choose_spawn(ring, random.Random(5), min_start_distance=0, min_prize_distance=0)
        b = choose_spawn(ring, random.Random(5), min_start_distance=0, min_prize_distance=0)
        assert a == b
