"""Basic 2D meshes: squares, rectangles, triangles, rhombuses, circles and hexagons."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Sequence

from lawn_defense.constants import Color, Vec3

_CIRCLE_COLOR: Color = (0.5, 0.5, 1.0)
_RIM_DEPTH = 0.5
_HEXAGON_SIDES = 6


class DrawMode(Enum):
    """How a mesh's indices are assembled into primitives."""

    POINTS = "points"
    LINES = "lines"
    LINE_LOOP = "line_loop"
    TRIANGLES = "triangles"
    TRIANGLE_FAN = "triangle_fan"


@dataclass
class Vertex:
    """A mesh vertex: a position, a color and an optional normal."""

    position: Vec3
    color: Color
    normal: Optional[Color] = None

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.color = _vec3(self.color)
        if self.normal is not None:
            self.normal = _vec3(self.normal)


@dataclass
class Mesh:
    """A named set of vertices with the indices that draw them."""

    name: str
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    draw_mode: DrawMode = DrawMode.TRIANGLES
    data: Any = None


def _vec3(values: Sequence[float]) -> Vec3:
    return (float(values[0]), float(values[1]), float(values[2]))


def _add(a: Sequence[float], dx: float, dy: float, dz: float = 0.0) -> Vec3:
    return (a[0] + dx, a[1] + dy, a[2] + dz)


def create_square(
    name: str,
    left_bottom_corner: Sequence[float],
    length: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Square with a center vertex; filled as a triangle fan, otherwise an outline."""
    corner = _vec3(left_bottom_corner)
    center = _add(corner, length / 2, length / 2)
    vertices = [
        Vertex(center, color),
        Vertex(corner, color),
        Vertex(_add(corner, length, 0), color),
        Vertex(_add(corner, length, length), color),
        Vertex(_add(corner, 0, length), color),
    ]
    if fill:
        return Mesh(name, vertices, [0, 1, 2, 3, 4, 1], DrawMode.TRIANGLE_FAN)
    return Mesh(name, vertices, [1, 2, 3, 4], DrawMode.LINE_LOOP)


def create_rectangle(
    name: str,
    left_bottom_corner: Sequence[float],
    width: float,
    height: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Axis-aligned rectangle; filled as two triangles, otherwise an outline."""
    corner = _vec3(left_bottom_corner)
    vertices = [
        Vertex(corner, color),
        Vertex(_add(corner, width, 0), color),
        Vertex(_add(corner, width, height), color),
        Vertex(_add(corner, 0, height), color),
    ]
    if fill:
        return Mesh(name, vertices, [0, 1, 2, 0, 2, 3], DrawMode.TRIANGLES)
    return Mesh(name, vertices, [0, 1, 2, 3], DrawMode.LINE_LOOP)


def _triangle_mesh(name: str, corners: Sequence[Vec3], color: Sequence[float], fill: bool) -> Mesh:
    vertices = [Vertex(c, color) for c in corners]
    mode = DrawMode.TRIANGLES if fill else DrawMode.LINE_LOOP
    return Mesh(name, vertices, [0, 1, 2], mode)


def create_triangle(
    name: str,
    left_bottom_corner: Sequence[float],
    right_bottom_corner: Sequence[float],
    up_corner: Sequence[float],
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Triangle through three given corners."""
    corners = [_vec3(left_bottom_corner), _vec3(right_bottom_corner), _vec3(up_corner)]
    return _triangle_mesh(name, corners, color, fill)


def create_isosceles_triangle(
    name: str,
    vertex: Sequence[float],
    width: float,
    height: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Isosceles triangle whose base is centered on ``vertex``, apex ``height`` above it."""
    base = _vec3(vertex)
    corners = [
        _add(base, -width / 2.0, 0),
        _add(base, width / 2.0, 0),
        _add(base, 0, height),
    ]
    return _triangle_mesh(name, corners, color, fill)


def create_equilateral_triangle(
    name: str,
    vertex: Sequence[float],
    length: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Equilateral triangle with its base centered on ``vertex``."""
    base = _vec3(vertex)
    corners = [
        _add(base, -length / 2.0, 0),
        _add(base, length / 2.0, 0),
        _add(base, 0, length * math.sqrt(3.0) / 2.0),
    ]
    return _triangle_mesh(name, corners, color, fill)


def create_rhombus(
    name: str,
    left_bottom_corner: Sequence[float],
    length: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Rhombus built from two equilateral triangles sharing the bottom edge."""
    left = _vec3(left_bottom_corner)
    right = _add(left, length, 0)
    rise = length / 2.0 * math.sqrt(3.0)
    up = _add(left, length / 2.0, rise)
    down = _add(right, -length / 2.0, -rise)
    vertices = [Vertex(p, color) for p in (left, right, up, down)]
    if fill:
        return Mesh(name, vertices, [0, 1, 2, 0, 2, 3, 0, 3, 1], DrawMode.TRIANGLES)
    return Mesh(name, vertices, [0, 1, 2, 3, 0], DrawMode.LINE_LOOP)


def _fan(
    name: str,
    center: Vec3,
    segments: float,
    radius: float,
    color: Color,
    center_normal: Color,
) -> Mesh:
    count = math.floor(segments)
    vertices = [Vertex(center, color, center_normal)]
    for i in range(count + 1):
        theta = 2.0 * math.pi * i / segments
        point = (
            center[0] + radius * math.cos(theta),
            center[1] + radius * math.sin(theta),
            _RIM_DEPTH,
        )
        vertices.append(Vertex(point, color, color))
    indices: list[int] = []
    for i in range(1, count + 1):
        indices.extend((0, i, i + 1))
    indices.extend((0, int(segments), 1))
    return Mesh(name, vertices, indices)


def create_circle(
    name: str,
    center: Sequence[float],
    num_segments: float,
    radius: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Circle as a triangle fan; drawn in a fixed light blue whatever ``color`` is."""
    return _fan(name, _vec3(center), num_segments, radius, _CIRCLE_COLOR, _CIRCLE_COLOR)


def create_hexagon(
    name: str,
    center: Sequence[float],
    radius: float,
    color: Sequence[float],
    fill: bool = True,
) -> Mesh:
    """Regular hexagon as a triangle fan in the given color."""
    rgb = _vec3(color)
    return _fan(name, _vec3(center), _HEXAGON_SIDES, radius, rgb, rgb)