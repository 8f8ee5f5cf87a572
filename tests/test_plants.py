import pytest

from lawn_defense.plants import DragState, Plant


def _plant(**overrides):
    args = dict(
        mesh=None,
        name="plant0_3",
        position=(100.0, 200.0, 0.0),
        color=(0.0, 0.0, 1.0),
        radius=55.0,
        num_triangles=8,
        inner_length=25.0,
        outer_length=40.0,
        row=3,
        col=0,
        cost=1,
    )
    args.update(overrides)
    return Plant(**args)


def test_defaults_match_source():
    plant = _plant()
    assert plant.position == (100.0, 200.0)
    assert plant.shoot_cooldown == 5.0
    assert plant.shoot_timer == 0.0
    assert plant.scale == 1.0
    assert plant.placed is False
    assert plant.active is True
    assert plant.length == 40.0


def test_mouse_over_inside_and_on_boundary():
    plant = _plant()
    assert plant.is_mouse_over(100.0, 200.0)
    assert plant.is_mouse_over(155.0, 200.0)
    assert plant.is_mouse_over(100.0, 145.0)


def test_mouse_over_outside():
    plant = _plant()
    assert not plant.is_mouse_over(155.1, 200.0)
    assert not plant.is_mouse_over(150.0, 250.0)


def test_shoot_timer_cycle():
    plant = _plant()
    assert not plant.can_shoot()
    plant.update_shoot_timer(2.5)
    assert plant.shoot_timer == pytest.approx(2.5)
    assert not plant.can_shoot()
    plant.update_shoot_timer(2.5)
    assert plant.can_shoot()
    plant.reset_shoot_timer()
    assert plant.shoot_timer == 0.0
    assert not plant.can_shoot()


def test_custom_cooldown():
    plant = _plant(shoot_cooldown=1.0)
    plant.update_shoot_timer(1.0)
    assert plant.can_shoot()


def test_drag_state_reset():
    plant = _plant()
    state = DragState(True, plant, (3.0, 4.0))
    assert state.selected_plant is plant
    state.reset()
    assert state.is_dragging is False
    assert state.selected_plant is None
    assert state.original_position == (0.0, 0.0)