"""2D transforms and drawing of the static scene: inventory, costs, lives and lawn."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, MutableMapping, Optional

from lawn_defense.constants import (
    COLORS,
    HEART_SCALE,
    HEART_SCALE_IN_INVENTORY,
    HEART_SPACING,
    HEARTS_START_X,
    HEARTS_START_Y,
    HEARTS_TOTAL_WIDTH,
    INVENTORY_PADDING,
    INVENTORY_SLOTS,
    INVENTORY_START_X,
    INVENTORY_START_Y,
    LAST_SLOT_HEIGHT,
    LAST_SLOT_WIDTH,
    MAX_COST,
    NUM_COLS,
    NUM_ROWS,
    PLANT_COSTS,
    PLANT_INNER_LENGTH,
    PLANT_OUTER_LENGTH,
    PLANT_RADIUS,
    PLANT_SCALE_IN_INVENTORY,
    PLANT_TRIANGLES,
    POINT_SCORE_RADIUS,
    SLOT_HEIGHT,
    SLOT_WIDTH,
    SQUARE_SPACING,
    SUN_HORIZONTAL_GAP,
    SUN_HORIZONTAL_OFFSET,
    SUN_SCALE_IN_INVENTORY,
    SUN_VERTICAL_OFFSET,
)
from lawn_defense.game_meshes import create_plant
from lawn_defense.plants import Plant

Matrix3 = tuple[tuple[float, float, float], ...]

_IDENTITY: Matrix3 = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def translate(tx: float, ty: float) -> Matrix3:
    """Homogeneous 2D translation matrix (row-major)."""
    return ((1.0, 0.0, float(tx)), (0.0, 1.0, float(ty)), (0.0, 0.0, 1.0))


def scale(sx: float, sy: float) -> Matrix3:
    """Homogeneous 2D scaling matrix."""
    return ((float(sx), 0.0, 0.0), (0.0, float(sy), 0.0), (0.0, 0.0, 1.0))


def rotate(radians: float) -> Matrix3:
    """Homogeneous 2D counter-clockwise rotation matrix."""
    c, s = math.cos(radians), math.sin(radians)
    return ((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0))


def _compose(*matrices: Matrix3) -> Matrix3:
    result = _IDENTITY
    for m in matrices:
        result = tuple(
            tuple(sum(result[r][k] * m[k][c] for k in range(3)) for c in range(3))
            for r in range(3)
        )
    return result


DrawFunction = Callable[[Any, Matrix3], None]
AddMeshFunction = Callable[[Any], None]


@dataclass
class HudRenderer:
    """Draws the inventory bar and the lawn through a ``draw(mesh, model_matrix)`` callback.

    Meshes are looked up by name in ``meshes``; a missing one raises ``KeyError``.
    """

    meshes: MutableMapping[str, Any]
    draw: DrawFunction
    add_mesh: Optional[AddMeshFunction] = None

    def render_inventory_slots(
        self, cx: float, cy: float, space_between: float, slots: int
    ) -> None:
        """Draw ``slots`` inventory slots, all shifted by the same offset."""
        offset = translate(cx, cy - 2 * space_between)
        for i in range(slots):
            self.draw(self.meshes[f"inventorySlot{i}"], _compose(offset))

    def render_plants_for_inventory(self, inventory_plants: list[Plant]) -> None:
        """Create, register and draw one plant per inventory slot, appending each to the list."""
        for i in range(INVENTORY_SLOTS - 1):
            plant_name = f"plant{i}"
            mesh = create_plant(
                plant_name,
                PLANT_RADIUS,
                PLANT_TRIANGLES,
                PLANT_INNER_LENGTH,
                PLANT_OUTER_LENGTH,
                COLORS[i],
            )
            if self.add_mesh is not None:
                self.add_mesh(mesh)

            x = (
                INVENTORY_START_X
                + i * (SLOT_WIDTH + INVENTORY_PADDING)
                + SLOT_WIDTH
                - SQUARE_SPACING / 3
            )
            y = INVENTORY_START_Y + SLOT_HEIGHT / 2 + SQUARE_SPACING / 2

            plant = Plant(
                mesh,
                f"inventorySlot{i}",
                (x, y),
                COLORS[i],
                PLANT_RADIUS,
                PLANT_TRIANGLES,
                PLANT_INNER_LENGTH,
                PLANT_OUTER_LENGTH,
                -1,
                -1,
                PLANT_COSTS[i],
            )
            plant.placed = False
            plant.active = True
            inventory_plants.append(plant)

            self.meshes[plant_name] = mesh
            matrix = _compose(
                translate(x, y), scale(PLANT_SCALE_IN_INVENTORY, PLANT_SCALE_IN_INVENTORY)
            )
            self.draw(self.meshes[plant_name], matrix)

    def render_suns_for_inventory(self) -> None:
        """Draw the cost suns under each plant slot; missing sun meshes are skipped."""
        sun_y = INVENTORY_START_Y + SLOT_HEIGHT - SUN_VERTICAL_OFFSET
        step = POINT_SCORE_RADIUS * SUN_SCALE_IN_INVENTORY + SUN_HORIZONTAL_GAP
        for i in range(INVENTORY_SLOTS - 1):
            first_x = (
                INVENTORY_START_X + i * (SLOT_WIDTH + INVENTORY_PADDING) + SUN_HORIZONTAL_OFFSET
            )
            for j in range(MAX_COST):
                mesh = self.meshes.get(f"sun{i * 3 + j}")
                if mesh is None:
                    continue
                matrix = _compose(
                    translate(first_x + j * step, sun_y),
                    scale(SUN_SCALE_IN_INVENTORY, SUN_SCALE_IN_INVENTORY),
                )
                self.draw(mesh, matrix)

    def render_hearts_for_inventory(self, lives_left: int) -> None:
        """Draw one heart per remaining life in the last inventory slot."""
        first_x = HEARTS_START_X + LAST_SLOT_WIDTH - HEARTS_TOTAL_WIDTH / 1.05
        heart_y = HEARTS_START_Y + (LAST_SLOT_HEIGHT - HEART_SCALE * SQUARE_SPACING) / 2
        step = HEART_SCALE * SQUARE_SPACING + HEART_SPACING * 2.5
        for i in range(lives_left):
            matrix = _compose(
                translate(first_x + i * step, heart_y),
                scale(HEART_SCALE_IN_INVENTORY, HEART_SCALE_IN_INVENTORY),
            )
            self.draw(self.meshes[f"heart{i}"], matrix)

    def render_green_squares(
        self, cx: float, cy: float, space_between: float, side: float
    ) -> None:
        """Draw the lawn grid, column by column."""
        for col in range(NUM_COLS):
            for row in range(NUM_ROWS):
                matrix = _compose(
                    translate(
                        cx + side * (col + 1) + col * space_between,
                        cy + side * row + space_between * (row + 1),
                    )
                )
                self.draw(self.meshes[f"square{col * NUM_ROWS + row + 1}"], matrix)

    def render_base_rectangle(self, cx: float, cy: float, space_between: float) -> None:
        """Draw the red base the zombies must not reach."""
        self.draw(self.meshes["rectangle"], _compose(translate(cx, cy + space_between)))