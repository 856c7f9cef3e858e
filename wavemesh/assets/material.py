# -*- coding: utf-8 -*-
"""
Материал из .mtl – хранит скалярные/векторные параметры (Ka, Kd, Ks,
Ns, d) и до пяти декодированных карт (map_Ka … map_d).

Материал **разделяемый**: несколько Mesh‑ей ссылаются на один и тот же
объект Material, а живёт он столько же, сколько OBJData.  Копии на
каждый меш не создаются.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wavemesh.math.vec import Vec3


@dataclass(eq=False)
class ImageData:
    """Декодированная картинка: сырые байты + размеры."""
    name: str = ""
    path: str = ""
    bytes: bytes = b""
    width: int = 0
    height: int = 0
    channels: int = 0

    @property
    def is_decoded(self) -> bool:
        return bool(self.bytes)


class TextureSlot(Enum):
    """Слоты карт материала (значение – атрибут Material)."""
    AMBIENT = "ambient_map"       # map_Ka
    DIFFUSE = "diffuse_map"       # map_Kd
    SPECULAR = "specular_map"     # map_Ks
    ROUGHNESS = "roughness_map"   # map_Ns
    ALPHA = "alpha_map"           # map_d


@dataclass(eq=False)
class Material:
    name: str

    # -------------------------------------------------------------
    # карты
    # -------------------------------------------------------------
    ambient_map: ImageData | None = None
    diffuse_map: ImageData | None = None
    specular_map: ImageData | None = None
    roughness_map: ImageData | None = None
    alpha_map: ImageData | None = None

    # -------------------------------------------------------------
    # параметры (None – в файле не задано)
    # -------------------------------------------------------------
    ambient: Vec3 | None = None
    diffuse: Vec3 | None = None
    specular: Vec3 | None = None
    roughness: float | None = None
    alpha: float | None = None

    def get_map(self, slot: TextureSlot) -> ImageData | None:
        return getattr(self, slot.value)

    def set_map(self, slot: TextureSlot, image: ImageData) -> bool:
        """Записать карту в слот. Возвращает True, если слот уже был занят."""
        occupied = self.get_map(slot) is not None
        setattr(self, slot.value, image)
        return occupied

    @property
    def maps(self) -> dict[TextureSlot, ImageData]:
        """Только заполненные слоты."""
        return {
            slot: image
            for slot in TextureSlot
            if (image := self.get_map(slot)) is not None
        }
