"""Shared fixtures and layouts for Dark Hall tests."""

from __future__ import annotations

import random

import pytest

from darkhall.core.clock import ManualClock
from darkhall.simulation.maze import Maze

# Straight corridor: S at (1, 1), P at (9, 1)
CORRIDOR = [
    "###########",
    "#S.......P#",
    "###########",
]

# Open room with one wall block at (3, 1)
WALLED_ROOM = [
    "#######",
    "#S.#..#",
    "#.....#",
    "#....P#",
    "#######",
]

# A ring of one-wide corridors around a solid block
RING = [
    "#########",
    "#S......#",
    "#.#####.#",
    "#.#####.#",
    "#......P#",
    "#########",
]


def open_room(width: int = 11, height: int = 11, start: tuple[int, int] = (5, 5),
              prize: tuple[int, int] | None = None) -> list[str]:
    """Walled rectangle with an all-floor interior."""
    prize = prize or (width - 2, height - 2)
    rows = []
    for y in range(height):
        row = []
        for x in range(width):
            if x in (0, width - 1) or y in (0, height - 1):
                row.append("#")
            elif (x, y) == start:
                row.append("S")
            elif (x, y) == prize:
                row.append("P")
            else:
                row.append(".")
        rows.append("".join(row))
    return rows


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def corridor() -> Maze:
    return Maze.from_layout(CORRIDOR)


@pytest.fixture
def walled_room() -> Maze:
    return Maze.from_layout(WALLED_ROOM)


@pytest.fixture
def ring() -> Maze:
    return Maze.from_layout(RING)
