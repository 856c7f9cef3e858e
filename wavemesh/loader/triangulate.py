"""
Разбиение четырёхугольника на два треугольника: (0,1,2) + (0,2,3).
Треугольник возвращается как есть; остальные грани – ошибка.
"""

from __future__ import annotations

from wavemesh.errors import UnsupportedTopologyError
from wavemesh.scene.mesh import Face

SUPPORTED_VERTEX_COUNTS = (3, 4)

_QUAD_FAN = ((0, 1, 2), (0, 2, 3))


def validate_topology(face: Face) -> None:
    if face.num_vertices not in SUPPORTED_VERTEX_COUNTS:
        raise UnsupportedTopologyError(face.num_vertices)


def _pick(indices: list[int], corners: tuple[int, ...]) -> list[int]:
    # пустой список атрибута остаётся пустым
    return [indices[i] for i in corners] if indices else []


def triangulate(face: Face) -> list[Face]:
    validate_topology(face)
    if face.num_vertices == 3:
        return [face]
    return [
        Face(
            position_indices=_pick(face.position_indices, corners),
            normal_indices=_pick(face.normal_indices, corners),
            uv_indices=_pick(face.uv_indices, corners),
            color_indices=_pick(face.color_indices, corners),
        )
        for corners in _QUAD_FAN
    ]
