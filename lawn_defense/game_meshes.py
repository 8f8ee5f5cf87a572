"""Meshes for the game's actors: suns, hearts, projectiles, plants, zombies and inventory slots."""

from __future__ import annotations

import math
from typing import Sequence

from lawn_defense.constants import Color
from lawn_defense.shapes import DrawMode, Mesh, Vertex, create_hexagon

_ORIGIN = (0.0, 0.0, 0.0)
_PETAL_TIP_COLOR: Color = (1.0, 0.8, 0.8)
_ZOMBIE_INNER_COLOR: Color = (0.5, 0.5, 0.5)
_ZOMBIE_ROTATION_DEGREES = 45.0
_SUN_TIP_MIX = 0.5
_HEART_CENTER_DARKEN = 0.5
_WHITE: Color = (1.0, 1.0, 1.0)
_BLACK: Color = (0.0, 0.0, 0.0)


def _rgb(color: Sequence[float]) -> Color:
    return (float(color[0]), float(color[1]), float(color[2]))


def create_point_score(
    name: str,
    radius: float,
    segments: int,
    ray_segments: int,
    ray_bigger: float,
    ray_smaller: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Sun-shaped collectible: a circular core ringed by rays of alternating length.

    ``ray_segments`` is accepted for symmetry with the sun's description; the
    number of rays follows ``segments``.
    """
    rgb = _rgb(color)
    tip = tuple(c * (1.0 - _SUN_TIP_MIX) + _SUN_TIP_MIX for c in rgb)
    vertices = [Vertex(_ORIGIN, rgb)]
    indices: list[int] = []

    for i in range(segments):
        angle = i / segments * 2.0 * math.pi
        vertices.append(Vertex((radius * math.cos(angle), radius * math.sin(angle), 0.0), tip))

    for i in range(segments + 1):
        indices.extend((0, i, i + 1))

    for i in range(segments + 1):
        angle = 2.0 * math.pi * i / segments + math.pi / segments
        ray = ray_bigger if (i - 1) % 2 == 0 else ray_smaller
        reach = radius + ray
        vertices.append(Vertex((reach * math.cos(angle), reach * math.sin(angle), 0.0), rgb))

        tip_index = 1 + segments + (i - 1)
        next_tip = 1 + segments + i if i < segments else 1 + segments
        indices.extend((i, tip_index, i + 1))
        indices.extend((i + 1, tip_index, next_tip))

    return Mesh(name, vertices, indices, DrawMode.TRIANGLES)


def create_heart(
    name: str,
    scale: float,
    segments: int,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Heart outline from the classic parametric curve, filled as a fan from the origin."""
    rgb = _rgb(color)
    center_color = tuple(c - _HEART_CENTER_DARKEN for c in rgb)
    vertices = [Vertex(_ORIGIN, center_color)]
    indices: list[int] = []

    for i in range(segments + 1):
        angle = i / segments * 2.0 * math.pi
        dx = scale * 16 * math.sin(angle) ** 3
        dy = scale * (
            12 * math.cos(angle)
            - 4 * math.cos(2 * angle)
            - 2 * math.cos(3 * angle)
            - math.cos(4 * angle)
        )
        vertices.append(Vertex((dx, dy, 0.0), rgb))
        if i > 0:
            indices.extend((0, i, i + 1))

    return Mesh(name, vertices, indices, DrawMode.TRIANGLES)


def create_projectile(
    name: str,
    segments: int,
    longer_side: float,
    shorter_side: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Star with ``segments`` blades, long points in ``color`` and short points pale."""
    rgb = _rgb(color)
    vertices = [Vertex(_ORIGIN, rgb)]
    indices: list[int] = []
    step = 2 * math.pi / segments

    for i in range(segments):
        angle = i * step
        half = angle + step / 2
        vertices.append(
            Vertex((longer_side * math.cos(angle), longer_side * math.sin(angle), 0.0), rgb)
        )
        vertices.append(
            Vertex(
                (shorter_side * math.cos(half), shorter_side * math.sin(half), 0.0),
                _PETAL_TIP_COLOR,
            )
        )
        indices.extend((0, 2 * i + 1, 2 * i + 2))

    return Mesh(name, vertices, indices, DrawMode.TRIANGLES)


def create_plant(
    name: str,
    radius: float,
    num_triangles: int,
    inner_length: float,
    outer_length: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Flower of rhombus petals around a center; petal tips are pale unless white or black."""
    rgb = _rgb(color)
    tip = rgb if rgb in (_WHITE, _BLACK) else _PETAL_TIP_COLOR
    vertices = [Vertex(_ORIGIN, rgb)]
    indices: list[int] = []
    step = 2 * math.pi / num_triangles

    for i in range(num_triangles):
        angle = i * step
        a1 = angle - step / 3
        a2 = angle + step / 3
        vertices.append(Vertex((inner_length * math.cos(a1), inner_length * math.sin(a1), 0.0), rgb))
        vertices.append(
            Vertex((outer_length * math.cos(angle), outer_length * math.sin(angle), 0.0), tip)
        )
        vertices.append(Vertex((inner_length * math.cos(a2), inner_length * math.sin(a2), 0.0), rgb))
        indices.extend((0, 3 * i + 1, 3 * i + 2, 0, 3 * i + 2, 3 * i + 3))

    return Mesh(name, vertices, indices, DrawMode.TRIANGLES)


def _rotated(vertices: list[Vertex], radians: float) -> list[Vertex]:
    c, s = math.cos(radians), math.sin(radians)
    result = []
    for v in vertices:
        x, y, z = v.position
        result.append(Vertex((x * c - y * s, x * s + y * c, z), v.color, v.normal))
    return result


def create_zombie(
    name: str,
    inner_radius: float,
    outer_radius: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Two concentric hexagons turned by 45 degrees: outer in ``color``, inner grey."""
    rotation = math.radians(_ZOMBIE_ROTATION_DEGREES)
    outer = create_hexagon(f"{name}_outer", _ORIGIN, outer_radius, color, fill)
    inner = create_hexagon(f"{name}_inner", _ORIGIN, inner_radius, _ZOMBIE_INNER_COLOR, fill)

    vertices = _rotated(outer.vertices, rotation)
    indices = list(outer.indices)
    offset = len(vertices)
    vertices.extend(_rotated(inner.vertices, rotation))
    indices.extend(index + offset for index in inner.indices)

    return Mesh(name, vertices, indices, DrawMode.TRIANGLES)


def create_inventory(
    name: str,
    left_bottom_corner: Sequence[float],
    width: float,
    height: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Inventory slot: fill and black outline vertices, drawn as the outline loop."""
    corner = (float(left_bottom_corner[0]), float(left_bottom_corner[1]), float(left_bottom_corner[2]))
    rgb = _rgb(color)
    x, y, z = corner
    center = (x + width / 2, y + height / 2, z)
    corners = [(x, y, z), (x + width, y, z), (x + width, y + height, z), (x, y + height, z)]

    vertices = [Vertex(center, rgb)]
    vertices.extend(Vertex(p, rgb) for p in corners)
    vertices.extend(Vertex(p, _BLACK) for p in corners)

    # The outline is laid over the fill and is what the slot ends up drawing.
    return Mesh(name, vertices, [5, 6, 7, 8, 5], DrawMode.LINE_LOOP)