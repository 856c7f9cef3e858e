"""
Грань (Face) и именованная группа граней (Mesh).

Mesh не хранит самих векторов – только индексы в общих буферах OBJData.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from wavemesh.assets.material import Material


@dataclass
class Face:
    """
    Четыре параллельных списка индексов (0‑based).
    Непустой список всегда имеет длину `num_vertices`.
    """
    position_indices: list[int] = field(default_factory=list)
    normal_indices: list[int] = field(default_factory=list)
    uv_indices: list[int] = field(default_factory=list)
    color_indices: list[int] = field(default_factory=list)

    @property
    def num_vertices(self) -> int:
        return len(self.position_indices)

    def attribute_lists(self) -> dict[str, list[int]]:
        return {
            "position": self.position_indices,
            "normal": self.normal_indices,
            "uv": self.uv_indices,
            "color": self.color_indices,
        }

    def is_consistent(self) -> bool:
        """Все непустые списки совпадают по длине со списком позиций."""
        n = self.num_vertices
        return all(not lst or len(lst) == n for lst in self.attribute_lists().values())

    def copy(self) -> "Face":
        return Face(
            list(self.position_indices),
            list(self.normal_indices),
            list(self.uv_indices),
            list(self.color_indices),
        )


@dataclass
class Mesh:
    name: str
    faces: list[Face] = field(default_factory=list)
    material: Material | None = None

    @property
    def face_count(self) -> int:
        return len(self.faces)

    def index_array(self, kind: str = "position") -> np.ndarray:
        """
        Индексы атрибута `kind` всех граней → uint32‑массив (F, k).
        Работает только для однородных мешей (все грани с одинаковым k).
        У пустого меша k неизвестно → форма (0, 0).
        """
        rows = [face.attribute_lists()[kind] for face in self.faces]
        if not rows:
            return np.zeros((0, 0), dtype=np.uint32)
        if any(len(r) != len(rows[0]) for r in rows):
            raise ValueError(f"Mesh '{self.name}' mixes faces of different sizes for '{kind}'")
        return np.asarray(rows, dtype=np.uint32)
