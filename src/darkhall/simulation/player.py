"""Player -- the light-carrying actor.

Position and facing follow movement; the flashlight aim is steered
separately (mouse / touch) and is only reset on respawn.  Every step,
including the spawn itself, leaves a footprint on the trail.
"""

from __future__ import annotations

from darkhall.core.clock import Clock
from darkhall.core.vector import UP, Vector2

from .illumination import FootprintTrail, LightConfig, ObserverState


class Player:
    """Grid-bound player with a flashlight and a fading footprint trail."""

    def __init__(
        self,
        start: Vector2,
        clock: Clock,
        light: LightConfig | None = None,
        aim: Vector2 = UP,
    ) -> None:
        light = light or LightConfig.from_settings()
        self.trail = FootprintTrail(
            clock,
            decay_ms=light.footprint_decay_ms,
            max_intensity=light.max_footprint_intensity,
        )
        self.position = start
        self.facing = aim.normalize()
        self.aim = aim.normalize()
        self.trail.record(self.position)

    def move(self, delta: Vector2) -> None:
        """Step by *delta* (legality is the caller's job)."""
        self.position = self.position + delta
        if delta.magnitude() > 0:
            self.facing = delta.normalize()
        self.trail.record(self.position)

    def respawn(self, position: Vector2, aim: Vector2 = UP) -> None:
        """Back to *position* with a fresh trail holding a single footprint."""
        self.position = position
        self.facing = aim.normalize()
        self.aim = aim.normalize()
        self.trail.clear()
        self.trail.record(self.position)

    def set_aim(self, direction: Vector2) -> bool:
        """Point the flashlight; a zero vector leaves the aim unchanged."""
        if direction.magnitude() == 0:
            return False
        self.aim = direction.normalize()
        return True

    def rotate_aim(self, angle: float) -> None:
        """Rotate the flashlight by *angle* radians."""
        self.aim = self.aim.rotate(angle).normalize()

    def update(self) -> None:
        self.trail.update()

    def observer_state(self) -> ObserverState:
        return ObserverState(self.position, self.aim, self.trail)
