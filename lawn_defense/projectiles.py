"""Projectiles fired by plants along their row."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from lawn_defense.constants import Color, Vec2

_SPIN_RATE = 5.0
_FULL_TURN = 360.0


@dataclass
class Projectile:
    """A star-shaped shot travelling to the right while spinning."""

    mesh: Any
    color: Color
    longer_side_length: float
    shorter_side_length: float
    num_segments: int
    name: str
    position: Vec2
    rotation: float
    active: bool
    speed: float

    def __post_init__(self) -> None:
        pos: Sequence[float] = self.position
        self.position = (float(pos[0]), float(pos[1]))

    def move(self, delta_time: float, resolution: Sequence[int]) -> None:
        """Advance along x, spin, and deactivate once past the window's right edge."""
        x, y = self.position
        x += self.speed * delta_time
        self.position = (x, y)
        self.rotation += _SPIN_RATE * delta_time
        if self.rotation >= _FULL_TURN:
            self.rotation -= _FULL_TURN
        if x > resolution[0]:
            self.active = False