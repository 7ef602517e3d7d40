"""Illumination model -- how brightly the player's light reaches a cell.

Three sources, combined by maximum (never summed, so overlapping
sources cannot over-brighten a cell):

  - Flashlight cone: within ``flashlight_range`` and half of
    ``flashlight_angle`` of the aim direction, with line of sight.
    Intensity = (1 - d/range) * (1 - angle/half_angle), both clamped.
  - Ambient glow: within ``ambient_radius`` with line of sight.
    Intensity = max_ambient * (1 - d/radius)^2.  Always below the cone
    peak of 1.0.
  - Footprint trail: the age-faded intensity of a trail entry at the cell,
    evaluated against the clock at query time.
    Entries fade along a half cosine,
    ``max * (cos(pi * age / window) + 1) / 2``, and are dropped once
    ``age >= window``.  No line-of-sight test: the trail is the player's
    memory of where they have been, not live light.

The model mirrors the ambient/cone split of a unit vision system, but
returns a graded intensity instead of a seen/unseen flag.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from darkhall.config import DarkHallSettings
from darkhall.config import settings as default_settings
from darkhall.core.clock import Clock
from darkhall.core.vector import Vector2

from .visibility import DEFAULT_SAMPLES_PER_UNIT, has_line_of_sight

if TYPE_CHECKING:
    from .maze import Maze


@dataclass(frozen=True)
class LightConfig:
    """Light tunables.  Angles in radians, times in milliseconds."""

    flashlight_range: float = 4.0
    flashlight_angle: float = math.pi / 3
    ambient_radius: float = 1.5
    max_ambient_intensity: float = 0.6
    footprint_decay_ms: float = 15000.0
    max_footprint_intensity: float = 0.4
    los_samples_per_unit: float = DEFAULT_SAMPLES_PER_UNIT

    @classmethod
    def from_settings(cls, settings: DarkHallSettings | None = None) -> LightConfig:
        s = settings or default_settings
        return cls(
            flashlight_range=s.flashlight_range,
            flashlight_angle=math.radians(s.flashlight_angle_deg),
            ambient_radius=s.ambient_radius,
            max_ambient_intensity=s.max_ambient_intensity,
            footprint_decay_ms=s.footprint_decay_ms,
            max_footprint_intensity=s.max_footprint_intensity,
            los_samples_per_unit=s.los_samples_per_unit,
        )


def footprint_intensity(age_ms: float, window_ms: float, max_intensity: float) -> float:
    """Half-cosine fade: *max_intensity* at age 0, exactly 0 at *window_ms*."""
    if age_ms <= 0:
        return max_intensity
    if age_ms >= window_ms:
        return 0.0
    return max_intensity * (math.cos(math.pi * age_ms / window_ms) + 1.0) / 2.0


@dataclass
class Footprint:
    """One trail entry.  Only ``intensity`` changes after creation."""

    position: Vector2
    timestamp: float
    intensity: float


class FootprintTrail:
    """Fading markers keyed by cell; the newest write at a cell wins."""

    def __init__(
        self,
        clock: Clock,
        decay_ms: float = 15000.0,
        max_intensity: float = 0.4,
    ) -> None:
        self._clock = clock
        self.decay_ms = decay_ms
        self.max_intensity = max_intensity
        self._entries: dict[Vector2, Footprint] = {}

    def record(self, position: Vector2) -> Footprint:
        entry = Footprint(position, self._clock.now_ms(), self.max_intensity)
        self._entries[position] = entry
        return entry

    def update(self) -> None:
        """Re-evaluate every entry against the clock and drop the faded ones."""
        now = self._clock.now_ms()
        expired = []
        for pos, entry in self._entries.items():
            age = now - entry.timestamp
            if age >= self.decay_ms:
                expired.append(pos)
            else:
                entry.intensity = footprint_intensity(age, self.decay_ms, self.max_intensity)
        for pos in expired:
            del self._entries[pos]

    def intensity_at(self, position: Vector2) -> float:
        """Current intensity at *position*, evaluated against the clock now."""
        entry = self._entries.get(position)
        if entry is None:
            return 0.0
        age = self._clock.now_ms() - entry.timestamp
        return footprint_intensity(age, self.decay_ms, self.max_intensity)

    def get(self, position: Vector2) -> Footprint | None:
        return self._entries.get(position)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Footprint]:
        return iter(list(self._entries.values()))

    def __contains__(self, position: object) -> bool:
        return position in self._entries


@dataclass(frozen=True)
class ObserverState:
    """Everything the model needs to know about the light source."""

    position: Vector2
    aim: Vector2
    trail: FootprintTrail | None = field(default=None, compare=False)


class IlluminationModel:
    """Computes per-cell light intensity in [0, 1] for an observer."""

    def __init__(self, maze: Maze, config: LightConfig | None = None) -> None:
        self._maze = maze
        self.config = config or LightConfig.from_settings()

    def intensity(self, observer: ObserverState, target: Vector2) -> float:
        return max(
            self.cone_intensity(observer, target),
            self.ambient_intensity(observer, target),
            self.trail_intensity(observer, target),
        )

    def cone_intensity(self, observer: ObserverState, target: Vector2) -> float:
        cfg = self.config
        offset = target - observer.position
        distance = offset.magnitude()
        if distance == 0 or distance > cfg.flashlight_range:
            return 0.0
        aim = observer.aim.normalize()
        if aim.magnitude() == 0:
            return 0.0
        half_angle = cfg.flashlight_angle / 2
        angle = aim.angle_to(offset)
        if angle > half_angle:
            return 0.0
        if not self._line_of_sight(observer.position, target):
            return 0.0
        distance_falloff = max(0.0, 1.0 - distance / cfg.flashlight_range)
        angle_falloff = max(0.0, 1.0 - angle / half_angle)
        return min(1.0, distance_falloff * angle_falloff)

    def ambient_intensity(self, observer: ObserverState, target: Vector2) -> float:
        cfg = self.config
        distance = observer.position.distance_to(target)
        if distance >= cfg.ambient_radius:
            return 0.0
        if not self._line_of_sight(observer.position, target):
            return 0.0
        return cfg.max_ambient_intensity * (1.0 - distance / cfg.ambient_radius) ** 2

    def trail_intensity(self, observer: ObserverState, target: Vector2) -> float:
        if observer.trail is None:
            return 0.0
        return observer.trail.intensity_at(target)

    def _line_of_sight(self, origin: Vector2, target: Vector2) -> bool:
        return has_line_of_sight(self._maze, origin, target, self.config.los_samples_per_unit)
