"""Creation of the meshes and grid objects that make up the starting scene."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from lawn_defense.constants import (
    BACKGROUND,
    BASE_HEIGHT,
    BASE_WIDTH,
    COLORS,
    CORNER,
    CX,
    CY,
    GREEN,
    HEART_SCALE,
    HEART_SEGMENTS,
    INVENTORY_LAST_X,
    INVENTORY_LAST_Y,
    INVENTORY_PADDING,
    INVENTORY_SLOTS,
    INVENTORY_START_X,
    INVENTORY_START_Y,
    LAST_SLOT_HEIGHT,
    LAST_SLOT_WIDTH,
    NAME_WIDTH,
    NUM_COLS,
    NUM_LIVES,
    NUM_ROWS,
    NUMBER_WIDTH,
    PLANT_COSTS,
    PLANT_INNER_LENGTH,
    PLANT_OUTER_LENGTH,
    PLANT_RADIUS,
    PLANT_SLOTS,
    PLANT_TRIANGLES,
    POINT_SCORE_SEGMENTS,
    RED,
    SLOT_FILL_COLOR,
    SLOT_HEIGHT,
    SLOT_WIDTH,
    SQUARE_SIDE,
    SQUARE_SPACING,
    SUN_RADIUS,
    SUN_RAY_BIGGER,
    SUN_RAY_SMALLER,
    SUN_RAYS,
    SUNS_PER_SLOT,
)
from lawn_defense.game_meshes import (
    create_heart,
    create_inventory,
    create_plant,
    create_point_score,
)
from lawn_defense.plants import Plant
from lawn_defense.shapes import Mesh, create_rectangle, create_square
from lawn_defense.squares import GreenSquare

AddMeshFunction = Callable[[Mesh], Any]

_PLANT_KINDS = 8


@dataclass
class SceneBuilder:
    """Builds the scene's meshes, registering each by name and through ``add_mesh``."""

    add_mesh: Optional[AddMeshFunction] = None
    rng: random.Random = field(default_factory=random.Random)
    meshes: dict[str, Mesh] = field(default_factory=dict)

    def _register(self, name: str, mesh: Mesh) -> Mesh:
        self.meshes[name] = mesh
        self._publish(mesh)
        return mesh

    def _publish(self, mesh: Mesh) -> None:
        if self.add_mesh is not None:
            self.add_mesh(mesh)

    def initialize_inventory_slots(self) -> list[Mesh]:
        """Create the plant slots and the wider last slot for lives and points."""
        created = []
        for i in range(INVENTORY_SLOTS - 1):
            name = f"inventorySlot{i}"
            x = INVENTORY_START_X + i * (SLOT_WIDTH + INVENTORY_PADDING)
            mesh = create_inventory(
                name, (x, INVENTORY_START_Y, 0.0), SLOT_WIDTH, SLOT_HEIGHT, SLOT_FILL_COLOR
            )
            created.append(self._register(name, mesh))

        last_name = f"inventorySlot{INVENTORY_SLOTS - 1}"
        last = create_inventory(
            last_name,
            (INVENTORY_LAST_X, INVENTORY_LAST_Y, 0.0),
            LAST_SLOT_WIDTH,
            LAST_SLOT_HEIGHT,
            SLOT_FILL_COLOR,
        )
        created.append(self._register(last_name, last))
        return created

    def initialize_plants_for_inventory(self) -> list[Mesh]:
        """Create one plant mesh per plant slot, colored from the palette."""
        created = []
        for i in range(INVENTORY_SLOTS - 1):
            name = f"plantSlot{i}"
            mesh = create_plant(
                name,
                PLANT_RADIUS,
                PLANT_TRIANGLES,
                PLANT_INNER_LENGTH,
                PLANT_OUTER_LENGTH,
                COLORS[i % len(COLORS)],
            )
            created.append(self._register(name, mesh))
        return created

    def initialize_suns_for_inventory(self) -> list[Mesh]:
        """Create the cost suns; slot ``i`` gets its suns named from ``sun{3*i}`` on."""
        created = []
        for i in range(PLANT_SLOTS):
            for j in range(SUNS_PER_SLOT[i]):
                name = f"sun{i * 3 + j}"
                mesh = create_point_score(
                    name,
                    SUN_RADIUS,
                    POINT_SCORE_SEGMENTS,
                    SUN_RAYS,
                    SUN_RAY_BIGGER,
                    SUN_RAY_SMALLER,
                    BACKGROUND,
                )
                created.append(self._register(name, mesh))
        return created

    def initialize_hearts_for_inventory(self) -> list[Mesh]:
        """Create one red heart per life."""
        created = []
        for i in range(NUM_LIVES):
            name = f"heart{i}"
            mesh = create_heart(name, HEART_SCALE, HEART_SEGMENTS, RED)
            created.append(self._register(name, mesh))
        return created

    def initialize_base_rectangle(self) -> Mesh:
        """Create the red base rectangle."""
        name = "rectangle"
        mesh = create_rectangle(name, CORNER, BASE_WIDTH, BASE_HEIGHT, RED)
        return self._register(name, mesh)

    def initialize_green_squares(self) -> list[GreenSquare]:
        """Create the lawn cells column by column, numbered from 1."""
        squares = []
        half = SQUARE_SIDE / 2
        for col in range(NUM_COLS):
            for row in range(NUM_ROWS):
                name = f"square{col * NUM_ROWS + row + 1}"
                mesh = self._register(name, create_square(name, CORNER, SQUARE_SIDE, GREEN))
                x = CX + SQUARE_SIDE * (col + 1) + col * SQUARE_SPACING
                y = CY + SQUARE_SIDE * row + SQUARE_SPACING * (row + 1)
                squares.append(
                    GreenSquare(
                        name=name,
                        position=(x + half, y + half),
                        side_length=SQUARE_SIDE,
                        row=row,
                        col=col,
                        occupied=False,
                        mesh=mesh,
                    )
                )
        return squares

    def initialize_random_grid_plants(
        self, cx: float, cy: float, side: float, space_between: float
    ) -> list[Plant]:
        """Place a random plant in each cell with even odds; placed plants are active."""
        plants = []
        for col in range(NUM_COLS):
            for row in range(NUM_ROWS):
                if self.rng.randrange(2) != 0:
                    continue
                x = cx + side * (col + 1) + col * space_between
                y = cy + side * row + space_between * (row + 1)
                position = (x + side / 2, y + side / 2)
                kind = self.rng.randrange(_PLANT_KINDS)
                name = f"plant{kind}_{col * NUM_ROWS + row}"
                mesh = create_plant(
                    name,
                    PLANT_RADIUS,
                    PLANT_TRIANGLES,
                    PLANT_INNER_LENGTH,
                    PLANT_OUTER_LENGTH,
                    COLORS[kind],
                )
                self._publish(mesh)
                plant = Plant(
                    mesh,
                    name,
                    position,
                    COLORS[kind],
                    PLANT_RADIUS,
                    PLANT_TRIANGLES,
                    PLANT_INNER_LENGTH,
                    PLANT_OUTER_LENGTH,
                    row,
                    col,
                    PLANT_COSTS[kind],
                )
                plant.placed = True
                plant.active = True
                plants.append(plant)
        return plants

    def mesh_report(self) -> str:
        """A numbered table of every registered mesh name."""
        lines = [
            "\t===========================",
            "\t  (INIT) : MESH MAP NAMES  ",
            "\t===========================",
        ]
        for number, name in enumerate(self.meshes, start=1):
            lines.append(
                f"( NR : {str(number).rjust(NUMBER_WIDTH)}"
                f" | MESH NAME : {name.ljust(NAME_WIDTH)})"
            )
        lines.append("\t=========================")
        return "\n".join(lines)