"""Grid cells on which plants can be placed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from lawn_defense.constants import Vec2

_PLANT_TOLERANCE = 1.0


@dataclass
class GreenSquare:
    """One cell of the lawn grid.

    ``position`` is stored as a 2D point; longer sequences are cut to x and y.
    """

    name: str
    position: Vec2
    side_length: float
    row: int
    col: int
    occupied: bool = False
    mesh: Any = None

    def __post_init__(self) -> None:
        pos: Sequence[float] = self.position
        self.position = (float(pos[0]), float(pos[1]))

    def center(self) -> Vec2:
        """Return the position shifted by half a side on both axes."""
        half = self.side_length / 2.0
        return (self.position[0] + half, self.position[1] + half)

    def is_mouse_over(self, world_x: float, world_y: float) -> bool:
        """Whether a world point lies inside the square around its center (edges included)."""
        cx, cy = self.center()
        half = self.side_length / 2.0
        return cx - half <= world_x <= cx + half and cy - half <= world_y <= cy + half

    def contains_plant_at(self, plant_pos: Sequence[float]) -> bool:
        """Whether a plant position matches this square's position within one unit."""
        return (
            abs(plant_pos[0] - self.position[0]) < _PLANT_TOLERANCE
            and abs(plant_pos[1] - self.position[1]) < _PLANT_TOLERANCE
        )

    def is_free(self) -> bool:
        """Whether no plant occupies the square."""
        return not self.occupied

    def occupy(self) -> None:
        """Mark the square as occupied."""
        self.occupied = True