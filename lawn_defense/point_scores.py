"""Collectible suns ("point scores") and their periodic spawning."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, MutableMapping, Optional, Sequence

from lawn_defense.constants import (
    POINT_SCORE_RADIUS,
    POINT_SCORE_RAY_BIGGER,
    POINT_SCORE_RAY_SEGMENTS,
    POINT_SCORE_RAY_SMALLER,
    POINT_SCORE_SEGMENTS,
    YELLOW,
    Color,
    Vec3,
)
from lawn_defense.game_meshes import create_point_score

_DEFAULT_LIFESPAN = 5.0
_DISAPPEARANCE_RATE = 0.3
_SPAWN_INTERVAL = 5.0
_MIN_SPAWN = 3
_MAX_SPAWN = 6


@dataclass
class PointScore:
    """A sun that can be clicked to earn points before its lifespan runs out."""

    name: str
    position: Vec3
    color: Color
    radius: float
    num_segments: int
    ray_segments: int
    bigger_ray_length: float
    smaller_ray_length: float
    mesh: Any = None
    lifespan: float = _DEFAULT_LIFESPAN
    active: bool = True
    disappearing: bool = False
    disappearance_progress: float = 0.0

    def __post_init__(self) -> None:
        pos: Sequence[float] = self.position
        z = float(pos[2]) if len(pos) > 2 else 0.0
        self.position = (float(pos[0]), float(pos[1]), z)
        c: Sequence[float] = self.color
        self.color = (float(c[0]), float(c[1]), float(c[2]))

    def is_mouse_over(self, world_x: float, world_y: float) -> bool:
        """Whether a world point lies within the sun's radius (boundary included)."""
        dx = world_x - self.position[0]
        dy = world_y - self.position[1]
        return dx * dx + dy * dy <= self.radius * self.radius

    def animate_disappearance(self, delta_time: float) -> None:
        """Advance the fade-out; the sun turns inactive once it completes."""
        self.disappearance_progress += delta_time * _DISAPPEARANCE_RATE
        if self.disappearance_progress >= 1.0:
            self.active = False


@dataclass
class PointScoreSpawner:
    """Drops a batch of three to six suns at random places every few seconds."""

    interval: float = _SPAWN_INTERVAL
    rng: random.Random = field(default_factory=random.Random)
    timer: float = 0.0

    def spawn(
        self,
        delta_time: float,
        window_width: float,
        window_height: float,
        point_scores: list[PointScore],
        meshes: Optional[MutableMapping[str, Any]] = None,
    ) -> list[PointScore]:
        """Advance the timer and, when due, add a batch to ``point_scores``.

        Each new sun's mesh is also stored in ``meshes`` under its name.
        Returns the suns added by this call.
        """
        self.timer += delta_time
        if self.timer < self.interval:
            return []
        self.timer -= self.interval

        spawned: list[PointScore] = []
        count = self.rng.randint(_MIN_SPAWN, _MAX_SPAWN)
        for i in range(count):
            x = self.rng.random() * window_width
            y = self.rng.random() * window_height
            name = f"pointScore{len(point_scores) + i}"
            point_score = PointScore(
                name,
                (x, y, 0.0),
                YELLOW,
                POINT_SCORE_RADIUS,
                POINT_SCORE_SEGMENTS,
                POINT_SCORE_RAY_SEGMENTS,
                POINT_SCORE_RAY_BIGGER,
                POINT_SCORE_RAY_SMALLER,
            )
            point_score.mesh = create_point_score(
                name,
                POINT_SCORE_RADIUS,
                POINT_SCORE_SEGMENTS,
                POINT_SCORE_RAY_SEGMENTS,
                POINT_SCORE_RAY_BIGGER,
                POINT_SCORE_RAY_SMALLER,
                YELLOW,
            )
            if meshes is not None:
                meshes[name] = point_score.mesh
            point_scores.append(point_score)
            spawned.append(point_score)
        return spawned