# wavemesh/scene/obj_data.py
"""
Итог разбора: плоские буферы атрибутов + упорядоченный список мешей.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from wavemesh.assets.material import Material
from wavemesh.math.vec import Vec2, Vec3, stack_vectors
from wavemesh.scene.mesh import Mesh


@dataclass
class OBJData:
    positions: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)
    colors: list[Vec3] = field(default_factory=list)
    meshes: list[Mesh] = field(default_factory=list)
    name: str = ""

    # -----------------------------------------------------------------
    def mesh(self, name: str) -> Mesh:
        for m in self.meshes:
            if m.name == name:
                return m
        raise KeyError(name)

    @property
    def mesh_names(self) -> list[str]:
        return [m.name for m in self.meshes]

    @property
    def materials(self) -> list[Material]:
        """Уникальные материалы, привязанные к мешам (по идентичности объекта)."""
        seen: dict[int, Material] = {}
        for m in self.meshes:
            if m.material is not None:
                seen.setdefault(id(m.material), m.material)
        return list(seen.values())

    # -----------------------------------------------------------------
    # numpy‑представление (для передачи в рендер)
    # -----------------------------------------------------------------
    def positions_array(self) -> np.ndarray:
        return stack_vectors(self.positions, 3)

    def normals_array(self) -> np.ndarray:
        return stack_vectors(self.normals, 3)

    def uvs_array(self) -> np.ndarray:
        return stack_vectors(self.uvs, 2)

    def colors_array(self) -> np.ndarray:
        return stack_vectors(self.colors, 3)
