import random

import pytest

from lawn_defense.constants import (
    BACKGROUND,
    COLORS,
    INVENTORY_LAST_X,
    INVENTORY_LAST_Y,
    INVENTORY_SLOTS,
    NUM_COLS,
    NUM_LIVES,
    NUM_ROWS,
    PLANT_COSTS,
    RED,
    SQUARE_SIDE,
    SQUARE_SPACING,
    SUNS_PER_SLOT,
)
from lawn_defense.scene_setup import SceneBuilder


class _AlwaysZero(random.Random):
    def randrange(self, *args, **kwargs):
        return 0


class _NeverPlace(random.Random):
    def randrange(self, *args, **kwargs):
        return 1


def test_inventory_slots_registered_and_published():
    published = []
    builder = SceneBuilder(add_mesh=published.append)
    meshes = builder.initialize_inventory_slots()
    assert len(meshes) == INVENTORY_SLOTS
    assert [m.name for m in published] == [f"inventorySlot{i}" for i in range(INVENTORY_SLOTS)]
    assert set(builder.meshes) == {f"inventorySlot{i}" for i in range(INVENTORY_SLOTS)}


def test_last_inventory_slot_position():
    builder = SceneBuilder()
    builder.initialize_inventory_slots()
    last = builder.meshes[f"inventorySlot{INVENTORY_SLOTS - 1}"]
    assert last.vertices[1].position == (INVENTORY_LAST_X, INVENTORY_LAST_Y, 0.0)


def test_plants_for_inventory_use_palette():
    builder = SceneBuilder()
    meshes = builder.initialize_plants_for_inventory()
    assert [m.name for m in meshes] == [f"plantSlot{i}" for i in range(INVENTORY_SLOTS - 1)]
    for i, mesh in enumerate(meshes):
        assert mesh.vertices[0].color == COLORS[i]


def test_suns_names_follow_slot_layout():
    builder = SceneBuilder()
    meshes = builder.initialize_suns_for_inventory()
    assert len(meshes) == sum(SUNS_PER_SLOT)
    expected = {f"sun{i * 3 + j}" for i, n in enumerate(SUNS_PER_SLOT) for j in range(n)}
    assert set(builder.meshes) == expected
    assert all(m.vertices[0].color == BACKGROUND for m in meshes)


def test_hearts_one_per_life():
    builder = SceneBuilder()
    meshes = builder.initialize_hearts_for_inventory()
    assert [m.name for m in meshes] == [f"heart{i}" for i in range(NUM_LIVES)]
    assert meshes[0].vertices[1].color == RED


def test_base_rectangle():
    builder = SceneBuilder()
    mesh = builder.initialize_base_rectangle()
    assert builder.meshes["rectangle"] is mesh
    assert mesh.vertices[0].color == RED


def test_green_squares_grid():
    builder = SceneBuilder()
    squares = builder.initialize_green_squares()
    assert len(squares) == NUM_ROWS * NUM_COLS
    assert squares[0].name == "square1"
    assert squares[-1].name == f"square{NUM_ROWS * NUM_COLS}"
    for square in squares:
        assert square.is_free()
        assert builder.meshes[square.name] is square.mesh
    by_pos = {(s.row, s.col): s for s in squares}
    step = SQUARE_SIDE + SQUARE_SPACING
    for row in range(NUM_ROWS):
        for col in range(1, NUM_COLS):
            dx = by_pos[(row, col)].position[0] - by_pos[(row, col - 1)].position[0]
            assert dx == pytest.approx(step)
    for col in range(NUM_COLS):
        for row in range(1, NUM_ROWS):
            dy = by_pos[(row, col)].position[1] - by_pos[(row - 1, col)].position[1]
            assert dy == pytest.approx(step)


def test_random_grid_plants_fill_every_cell_when_rng_says_so():
    published = []
    builder = SceneBuilder(add_mesh=published.append, rng=_AlwaysZero())
    plants = builder.initialize_random_grid_plants(0.0, 0.0, SQUARE_SIDE, SQUARE_SPACING)
    assert len(plants) == NUM_ROWS * NUM_COLS
    assert len(published) == len(plants)
    assert builder.meshes == {}
    for plant in plants:
        assert plant.placed and plant.active
        assert plant.color == COLORS[0]
        assert plant.cost == PLANT_COSTS[0]
        assert plant.name == f"plant0_{plant.col * NUM_ROWS + plant.row}"


def test_random_grid_plants_none_when_rng_refuses():
    builder = SceneBuilder(rng=_NeverPlace())
    assert builder.initialize_random_grid_plants(0.0, 0.0, SQUARE_SIDE, SQUARE_SPACING) == []


def test_random_grid_plants_cost_matches_kind():
    builder = SceneBuilder(rng=random.Random(7))
    plants = builder.initialize_random_grid_plants(0.0, 0.0, SQUARE_SIDE, SQUARE_SPACING)
    for plant in plants:
        kind = int(plant.name[len("plant"):].split("_")[0])
        assert plant.cost == PLANT_COSTS[kind]
        assert plant.color == COLORS[kind]


def test_random_grid_plants_deterministic_with_seed():
    first = SceneBuilder(rng=random.Random(3)).initialize_random_grid_plants(
        0.0, 0.0, SQUARE_SIDE, SQUARE_SPACING
    )
    second = SceneBuilder(rng=random.Random(3)).initialize_random_grid_plants(
        0.0, 0.0, SQUARE_SIDE, SQUARE_SPACING
    )
    assert [p.name for p in first] == [p.name for p in second]
    assert [p.position for p in first] == [p.position for p in second]


def test_mesh_report_format():
    builder = SceneBuilder()
    builder.initialize_base_rectangle()
    lines = builder.mesh_report().split("\n")
    assert lines[1] == "\t  (INIT) : MESH MAP NAMES  "
    assert lines[3] == "( NR :     1 | MESH NAME : rectangle" + " " * 11 + ")"
    assert lines[-1] == "\t========================="


def test_mesh_report_lists_all_meshes():
    builder = SceneBuilder()
    builder.initialize_hearts_for_inventory()
    builder.initialize_base_rectangle()
    lines = builder.mesh_report().split("\n")
    assert len(lines) == 3 + NUM_LIVES + 1 + 1
    assert "heart0" in lines[3]
    assert "rectangle" in lines[3 + NUM_LIVES]