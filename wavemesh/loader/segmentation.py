# wavemesh/loader/segmentation.py
"""
Сегментация документа на меши.

Состояние – имя «текущего» меша + словарь имя → Mesh.  `g`/`o`
переключают текущий меш (создавая его при первом упоминании), смена
режима сглаживания `s` создаёт анонимную группу, но только если в
текущем меше уже есть грани.  Счётчик анонимных групп живёт в
экземпляре – у каждого сеанса разбора он свой.
"""

from __future__ import annotations

from typing import Iterable

from wavemesh.assets.material import Material
from wavemesh.scene.mesh import Face, Mesh

ANONYMOUS_GROUP_PREFIX = "group"


class MeshSegmenter:

    def __init__(self) -> None:
        self.current_name = ""
        self.meshes: dict[str, Mesh] = {}
        self.smooth_shading = False
        self._anonymous_counter = 0

    # -----------------------------------------------------------------
    @property
    def current(self) -> Mesh:
        """Текущий меш; безымянный ("") создаётся при первом обращении."""
        mesh = self.meshes.get(self.current_name)
        if mesh is None:
            mesh = Mesh(self.current_name)
            self.meshes[self.current_name] = mesh
        return mesh

    def _current_has_faces(self) -> bool:
        mesh = self.meshes.get(self.current_name)
        return mesh is not None and bool(mesh.faces)

    # -----------------------------------------------------------------
    # переходы
    # -----------------------------------------------------------------
    def open_group(self, name: str) -> Mesh:
        """`g name` / `o name`: повторное имя – дописываем в существующий меш."""
        name = name.strip()
        self.current_name = name
        return self.current

    def set_smooth_shading(self, enabled: bool) -> Mesh | None:
        """Возвращает новую анонимную группу, если она была создана."""
        if enabled == self.smooth_shading:
            return None
        self.smooth_shading = enabled
        return self.make_anonymous_group()

    def make_anonymous_group(self) -> Mesh | None:
        if not self._current_has_faces():
            return None
        name = self._next_anonymous_name()
        self.current_name = name
        return self.current

    def _next_anonymous_name(self) -> str:
        while True:
            name = f"{ANONYMOUS_GROUP_PREFIX}{self._anonymous_counter}"
            self._anonymous_counter += 1
            if name not in self.meshes:
                return name

    # -----------------------------------------------------------------
    def push_faces(self, faces: Iterable[Face]) -> None:
        self.current.faces.extend(faces)

    def bind_material(self, material: Material) -> Mesh:
        mesh = self.current
        mesh.material = material
        return mesh

    def mesh_list(self) -> list[Mesh]:
        return list(self.meshes.values())

    def reset(self) -> None:
        self.current_name = ""
        self.meshes.clear()
        self.smooth_shading = False
        self._anonymous_counter = 0
