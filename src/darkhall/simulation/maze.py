"""Maze -- procedural grid maze with a guaranteed start -> prize path.

Generation (one attempt):
  1. Fill the grid with walls.
  2. Recursive-backtracking carve from the start cell.  Candidates are the
     unvisited cells two steps away (up/right/down/left); the wall cell
     halfway between is knocked out together with the chosen neighbour.
     When the stack empties the floor cells form a spanning tree.
  3. Loop the tree: sample (w*h)//25 interior cells and open walls that
     touch 2-3 floor cells, then a stronger (w*h)//40-sample sweep that
     opens any wall touching >= 2 floor cells.  Every opened cell touches
     existing floor, so no isolated pockets appear.
  4. Prize = floor cell with the largest straight-line distance from the
     start (scan order y-major, first maximum wins).  Corridor distance
     is deliberately not used.
  5. BFS start -> prize.  A failed check regenerates, up to
     ``max_attempts`` times, then MazeGenerationError.

The grid is a numpy int8 array indexed ``[y, x]``.  Cell objects are
built on demand as read-only snapshots; nothing outside this class can
change the layout after construction.

Minimum supported size is 5x5.  Odd dimensions give a clean lattice;
even dimensions leave an extra wall column/row on the far side.
"""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

import numpy as np
from loguru import logger

from darkhall.config import DarkHallSettings
from darkhall.config import settings as default_settings
from darkhall.core.vector import CARDINALS, Vector2


class CellType(str, Enum):
    WALL = "wall"
    FLOOR = "floor"
    START = "start"
    PRIZE = "prize"


# Grid codes: index into _CELL_TYPES
_CELL_TYPES: tuple[CellType, ...] = (CellType.WALL, CellType.FLOOR, CellType.START, CellType.PRIZE)
_CODES: dict[CellType, int] = {t: i for i, t in enumerate(_CELL_TYPES)}
_WALL = _CODES[CellType.WALL]
_FLOOR = _CODES[CellType.FLOOR]

_LAYOUT_CHARS: dict[str, CellType] = {
    "#": CellType.WALL,
    ".": CellType.FLOOR,
    "S": CellType.START,
    "P": CellType.PRIZE,
}
_ASCII: dict[CellType, str] = {v: k for k, v in _LAYOUT_CHARS.items()}

# Carver moves two cells at a time so a wall stays between lattice cells
_LATTICE_STEPS: tuple[Vector2, ...] = tuple(d * 2 for d in CARDINALS)


@dataclass(frozen=True)
class Cell:
    """Read-only view of one grid square."""

    type: CellType
    position: Vector2

    @property
    def walkable(self) -> bool:
        return self.type != CellType.WALL


class MazeGenerationError(RuntimeError):
    """Generation kept failing its connectivity check (grid too small?)."""

    def __init__(self, width: int, height: int, attempts: int) -> None:
        super().__init__(
            f"Could not generate a connected {width}x{height} maze in {attempts} attempts"
        )
        self.width = width
        self.height = height
        self.attempts = attempts


class Maze:
    """Fixed-size grid of typed cells with a start and a prize."""

    MIN_SIZE = 5

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        *,
        rng: random.Random | None = None,
        start: Vector2 | tuple[int, int] | None = None,
        max_attempts: int | None = None,
        settings: DarkHallSettings | None = None,
    ) -> None:
        cfg = settings or default_settings
        width = cfg.maze_width if width is None else width
        height = cfg.maze_height if height is None else height
        if width < self.MIN_SIZE or height < self.MIN_SIZE:
            raise ValueError(
                f"Maze must be at least {self.MIN_SIZE}x{self.MIN_SIZE}, got {width}x{height}"
            )
        start = Vector2(cfg.start_x, cfg.start_y) if start is None else Vector2.of(start)
        if not (
            start.is_integral()
            and 0 < start.x < width - 1
            and 0 < start.y < height - 1
        ):
            raise ValueError(f"Start {tuple(start)} is not an interior cell of a {width}x{height} maze")

        self._init_grid(width, height, rng)
        self.start_position = Vector2(int(start.x), int(start.y))

        attempts = cfg.maze_max_attempts if max_attempts is None else max_attempts
        self.prize_position = self._generate(attempts)

        self._set(self.start_position, CellType.START)
        self._set(self.prize_position, CellType.PRIZE)
        logger.info(
            f"Maze generated: {width}x{height}, start={tuple(self.start_position)}, "
            f"prize={tuple(self.prize_position)}"
        )

    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> Maze:
        """Build a fixed maze from ASCII rows.

        ``#`` wall, ``.`` floor, ``S`` start, ``P`` prize.  Exactly one S
        and one P are required and P must be reachable from S.
        """
        if not rows:
            raise ValueError("Layout is empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Layout rows must all have the same length")

        maze = cls.__new__(cls)
        maze._init_grid(width, len(rows))

        starts: list[Vector2] = []
        prizes: list[Vector2] = []
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                cell_type = _LAYOUT_CHARS.get(ch)
                if cell_type is None:
                    raise ValueError(f"Unknown layout character {ch!r} at ({x}, {y})")
                maze._grid[y, x] = _CODES[cell_type]
                if cell_type == CellType.START:
                    starts.append(Vector2(x, y))
                elif cell_type == CellType.PRIZE:
                    prizes.append(Vector2(x, y))

        if len(starts) != 1 or len(prizes) != 1:
            raise ValueError(
                f"Layout needs exactly one S and one P (got {len(starts)} and {len(prizes)})"
            )
        maze.start_position = starts[0]
        maze.prize_position = prizes[0]
        if not maze.has_path(maze.start_position, maze.prize_position):
            raise ValueError("Layout has no path from S to P")
        return maze

    def _init_grid(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self._grid = np.full((height, width), _WALL, dtype=np.int8)

    # -- Queries ----------------------------------------------------------------

    def is_valid(self, position: Vector2) -> bool:
        """True for an integral coordinate inside the grid."""
        return (
            position.is_integral()
            and 0 <= position.x < self.width
            and 0 <= position.y < self.height
        )

    def cell_type(self, position: Vector2) -> CellType | None:
        if not self.is_valid(position):
            return None
        return _CELL_TYPES[self._grid[int(position.y), int(position.x)]]

    def cell(self, position: Vector2) -> Cell | None:
        cell_type = self.cell_type(position)
        if cell_type is None:
            return None
        return Cell(cell_type, Vector2(int(position.x), int(position.y)))

    def is_walkable(self, position: Vector2) -> bool:
        """Any in-bounds cell that is not a wall."""
        if not self.is_valid(position):
            return False
        return self._grid[int(position.y), int(position.x)] != _WALL

    def neighbors(self, position: Vector2) -> list[Vector2]:
        """In-bounds 4-directional neighbours (up, right, down, left)."""
        return [p for p in (position + d for d in CARDINALS) if self.is_valid(p)]

    def walkable_neighbors(self, position: Vector2) -> list[Vector2]:
        return [p for p in self.neighbors(position) if self.is_walkable(p)]

    def cells(self) -> Iterator[Cell]:
        """Every cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield Cell(_CELL_TYPES[self._grid[y, x]], Vector2(x, y))

    def floor_cells(self) -> list[Cell]:
        """Every walkable cell (floor, start and prize)."""
        return [c for c in self.cells() if c.walkable]

    def distances_from(self, origin: Vector2) -> dict[Vector2, int]:
        """BFS step counts from *origin* to every reachable walkable cell."""
        if not self.is_walkable(origin):
            return {}
        origin = Vector2(int(origin.x), int(origin.y))
        dist = {origin: 0}
        queue = deque([origin])
        while queue:
            current = queue.popleft()
            for nxt in self.walkable_neighbors(current):
                if nxt not in dist:
                    dist[nxt] = dist[current] + 1
                    queue.append(nxt)
        return dist

    def reachable_from(self, origin: Vector2) -> set[Vector2]:
        return set(self.distances_from(origin))

    def has_path(self, a: Vector2, b: Vector2) -> bool:
        return self.is_walkable(b) and b in self.distances_from(a)

    def render_ascii(self, markers: dict[Vector2, str] | None = None) -> str:
        """Text dump for debugging; *markers* overlay single characters."""
        markers = markers or {}
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                pos = Vector2(x, y)
                row.append(markers.get(pos) or _ASCII[_CELL_TYPES[self._grid[y, x]]])
            lines.append("".join(row))
        return "\n".join(lines)

    # -- Generation -------------------------------------------------------------

    def _generate(self, max_attempts: int) -> Vector2:
        for attempt in range(1, max_attempts + 1):
            self._grid.fill(_WALL)
            self._carve()
            self._add_random_connections()
            self._add_strategic_connections()
            prize = self._find_prize()
            if prize is not None and self.has_path(self.start_position, prize):
                return prize
            logger.warning(
                f"Maze attempt {attempt}/{max_attempts}: no path from start to prize, regenerating"
            )
        raise MazeGenerationError(self.width, self.height, max_attempts)

    def _carve(self) -> None:
        """Recursive backtracker over the two-step lattice."""
        root = self.start_position
        self._set(root, CellType.FLOOR)
        visited = {root}
        stack = [root]
        while stack:
            current = stack[-1]
            candidates = self._unvisited_lattice_neighbors(current, visited)
            if not candidates:
                stack.pop()
                continue
            nxt = self._rng.choice(candidates)
            between = Vector2((current.x + nxt.x) // 2, (current.y + nxt.y) // 2)
            self._set(nxt, CellType.FLOOR)
            self._set(between, CellType.FLOOR)
            visited.add(nxt)
            stack.append(nxt)

    def _unvisited_lattice_neighbors(self, position: Vector2, visited: set[Vector2]) -> list[Vector2]:
        result = []
        for step in _LATTICE_STEPS:
            candidate = position + step
            if (
                0 < candidate.x < self.width - 1
                and 0 < candidate.y < self.height - 1
                and candidate not in visited
            ):
                result.append(candidate)
        return result

    def _random_interior(self) -> Vector2:
        return Vector2(
            self._rng.randrange(1, self.width - 1),
            self._rng.randrange(1, self.height - 1),
        )

    def _add_random_connections(self) -> None:
        """Open walls that join two or three corridors without making rooms."""
        for _ in range((self.width * self.height) // 25):
            pos = self._random_interior()
            if self._grid[pos.y, pos.x] == _WALL and 2 <= self._adjacent_floor_count(pos) <= 3:
                self._set(pos, CellType.FLOOR)

    def _add_strategic_connections(self) -> None:
        """Stronger sweep: open any sampled wall touching two or more floors."""
        for _ in range((self.width * self.height) // 40):
            pos = self._random_interior()
            if self._grid[pos.y, pos.x] == _WALL and self._adjacent_floor_count(pos) >= 2:
                self._set(pos, CellType.FLOOR)

    def _adjacent_floor_count(self, position: Vector2) -> int:
        return len(self.walkable_neighbors(position))

    def _find_prize(self) -> Vector2 | None:
        best: Vector2 | None = None
        best_dist = -1.0
        for cell in self.cells():
            if cell.type != CellType.FLOOR or cell.position == self.start_position:
                continue
            dist = self.start_position.distance_to(cell.position)
            if dist > best_dist:
                best, best_dist = cell.position, dist
        return best

    def _set(self, position: Vector2, cell_type: CellType) -> None:
        self._grid[int(position.y), int(position.x)] = _CODES[cell_type]
