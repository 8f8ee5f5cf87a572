import math

import pytest

from lawn_defense.constants import (
    COLORS,
    INVENTORY_SLOTS,
    NUM_COLS,
    NUM_ROWS,
    PLANT_COSTS,
    PLANT_SCALE_IN_INVENTORY,
    SUN_SCALE_IN_INVENTORY,
    HEART_SCALE_IN_INVENTORY,
)
from lawn_defense.render_hud import HudRenderer, rotate, scale, translate
from lawn_defense.shapes import Mesh


class _Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, mesh, matrix):
        self.calls.append((mesh.name, matrix))


def _renderer(names, add_mesh=None):
    meshes = {name: Mesh(name) for name in names}
    recorder = _Recorder()
    return HudRenderer(meshes, recorder, add_mesh), recorder


def test_translate_matrix():
    m = translate(2, 3)
    assert m[0] == (1.0, 0.0, 2.0)
    assert m[1] == (0.0, 1.0, 3.0)
    assert m[2] == (0.0, 0.0, 1.0)


def test_scale_matrix():
    m = scale(4, 5)
    assert m[0][0] == 4.0 and m[1][1] == 5.0 and m[2][2] == 1.0
    assert m[0][2] == 0.0 and m[1][2] == 0.0


def test_rotate_quarter_turn():
    m = rotate(math.pi / 2)
    # image of the x axis is the y axis
    assert m[0][0] == pytest.approx(0.0, abs=1e-12)
    assert m[1][0] == pytest.approx(1.0)
    assert m[0][1] == pytest.approx(-1.0)


def test_inventory_slots_drawn_with_shared_offset():
    names = [f"inventorySlot{i}" for i in range(INVENTORY_SLOTS)]
    renderer, rec = _renderer(names)
    renderer.render_inventory_slots(10.0, 50.0, 5.0, INVENTORY_SLOTS)
    assert [name for name, _ in rec.calls] == names
    for _, m in rec.calls:
        assert m[0][2] == pytest.approx(10.0)
        assert m[1][2] == pytest.approx(40.0)


def test_missing_slot_mesh_raises():
    renderer, _ = _renderer(["inventorySlot0"])
    with pytest.raises(KeyError):
        renderer.render_inventory_slots(0.0, 0.0, 0.0, 2)


def test_plants_for_inventory():
    added = []
    renderer, rec = _renderer([], added.append)
    inventory = []
    renderer.render_plants_for_inventory(inventory)
    count = INVENTORY_SLOTS - 1
    assert len(inventory) == count
    assert [p.cost for p in inventory] == list(PLANT_COSTS)
    assert [p.name for p in inventory] == [f"inventorySlot{i}" for i in range(count)]
    assert [p.color for p in inventory] == list(COLORS[:count])
    assert all(p.row == -1 and p.col == -1 and not p.placed and p.active for p in inventory)
    assert [m.name for m in added] == [f"plant{i}" for i in range(count)]
    assert all(f"plant{i}" in renderer.meshes for i in range(count))
    assert len(rec.calls) == count
    xs = [p.position[0] for p in inventory]
    assert xs == sorted(xs)
    for plant, (_, m) in zip(inventory, rec.calls):
        assert m[0][2] == pytest.approx(plant.position[0])
        assert m[1][2] == pytest.approx(plant.position[1])
        assert m[0][0] == pytest.approx(PLANT_SCALE_IN_INVENTORY)


def test_suns_skip_missing_meshes():
    renderer, rec = _renderer(["sun0", "sun4"])
    renderer.render_suns_for_inventory()
    assert [name for name, _ in rec.calls] == ["sun0", "sun4"]
    assert rec.calls[0][1][0][0] == pytest.approx(SUN_SCALE_IN_INVENTORY)
    assert rec.calls[0][1][1][2] == pytest.approx(rec.calls[1][1][1][2])


def test_all_suns_drawn():
    names = [f"sun{i}" for i in range((INVENTORY_SLOTS - 1) * 3)]
    renderer, rec = _renderer(names)
    renderer.render_suns_for_inventory()
    assert len(rec.calls) == len(names)


def test_hearts_follow_lives():
    renderer, rec = _renderer(["heart0", "heart1", "heart2"])
    renderer.render_hearts_for_inventory(2)
    assert [name for name, _ in rec.calls] == ["heart0", "heart1"]
    (_, first), (_, second) = rec.calls
    assert second[0][2] > first[0][2]
    assert second[1][2] == pytest.approx(first[1][2])
    assert first[0][0] == pytest.approx(HEART_SCALE_IN_INVENTORY)


def test_hearts_zero_lives_draws_nothing():
    renderer, rec = _renderer([])
    renderer.render_hearts_for_inventory(0)
    assert rec.calls == []


def test_green_squares():
    names = [f"square{i}" for i in range(1, NUM_ROWS * NUM_COLS + 1)]
    renderer, rec = _renderer(names)
    renderer.render_green_squares(0.0, 0.0, 10.0, 80.0)
    assert [name for name, _ in rec.calls] == names
    first = rec.calls[0][1]
    assert first[0][2] == pytest.approx(80.0)
    assert first[1][2] == pytest.approx(10.0)


def test_base_rectangle():
    renderer, rec = _renderer(["rectangle"])
    renderer.render_base_rectangle(3.0, 4.0, 5.0)
    assert len(rec.calls) == 1
    name, m = rec.calls[0]
    assert name == "rectangle"
    assert m[0][2] == pytest.approx(3.0)
    assert m[1][2] == pytest.approx(9.0)


def test_base_rectangle_missing_raises():
    renderer, _ = _renderer([])
    with pytest.raises(KeyError):
        renderer.render_base_rectangle(0.0, 0.0, 0.0)