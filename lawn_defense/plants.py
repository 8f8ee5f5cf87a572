"""Plants placed on the lawn and the drag-and-drop state used to buy them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from lawn_defense.constants import Color, Vec2

_DEFAULT_SHOOT_COOLDOWN = 5.0


@dataclass
class Plant:
    """A shooting plant; ``position`` is kept as a 2D point."""

    mesh: Any
    name: str
    position: Vec2
    color: Color
    radius: float
    num_triangles: int
    inner_length: float
    outer_length: float
    row: int
    col: int
    cost: int
    shoot_cooldown: float = _DEFAULT_SHOOT_COOLDOWN
    shoot_timer: float = 0.0
    scale: float = 1.0
    placed: bool = False
    active: bool = True

    def __post_init__(self) -> None:
        pos: Sequence[float] = self.position
        self.position = (float(pos[0]), float(pos[1]))
        c: Sequence[float] = self.color
        self.color = (float(c[0]), float(c[1]), float(c[2]))

    @property
    def length(self) -> float:
        """Outer petal length of the plant's shape."""
        return self.outer_length

    def is_mouse_over(self, world_x: float, world_y: float) -> bool:
        """Whether a world point lies within the plant's radius (boundary included)."""
        dx = world_x - self.position[0]
        dy = world_y - self.position[1]
        return dx * dx + dy * dy <= self.radius * self.radius

    def update_shoot_timer(self, delta_time: float) -> None:
        """Advance the time since the last shot."""
        self.shoot_timer += delta_time

    def can_shoot(self) -> bool:
        """Whether the cooldown has elapsed."""
        return self.shoot_timer >= self.shoot_cooldown

    def reset_shoot_timer(self) -> None:
        """Restart the cooldown after a shot."""
        self.shoot_timer = 0.0


@dataclass
class DragState:
    """The plant currently dragged from the inventory, if any."""

    is_dragging: bool = False
    selected_plant: Optional[Plant] = None
    original_position: Vec2 = (0.0, 0.0)

    def reset(self) -> None:
        """Drop whatever was being dragged."""
        self.is_dragging = False
        self.selected_plant = None
        self.original_position = (0.0, 0.0)