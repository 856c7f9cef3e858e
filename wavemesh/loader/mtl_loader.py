# -*- coding: utf-8 -*-
"""
Разбор .mtl – таблица именованных материалов.

`newmtl` открывает материал и делает его текущим; все следующие записи
(Ka/Kd/Ks/Ns/d и map_*) меняют текущий материал до следующего `newmtl`.
Повторная карта в занятом слоте – предупреждение, но последняя запись
побеждает.  Само декодирование картинок делает TextureManager (Pillow).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from wavemesh.assets.material import Material, TextureSlot
from wavemesh.assets.texture_manager import TextureManager
from wavemesh.errors import MTLLoadError, TextureLoadError
from wavemesh.loader.identifiers import MtlKind, classify_mtl_line
from wavemesh.loader.tokens import parse_float, parse_vec3, payload
from wavemesh.utils.config import Config
from wavemesh.utils.logger import DiagnosticLog, located

MTL_EXTENSION = ".mtl"

_MAP_SLOTS = {
    MtlKind.AMBIENT_MAP: TextureSlot.AMBIENT,
    MtlKind.DIFFUSE_MAP: TextureSlot.DIFFUSE,
    MtlKind.SPECULAR_MAP: TextureSlot.SPECULAR,
    MtlKind.ROUGHNESS_MAP: TextureSlot.ROUGHNESS,
    MtlKind.ALPHA_MAP: TextureSlot.ALPHA,
}

_VEC3_PROPERTIES = {
    MtlKind.AMBIENT: "ambient",
    MtlKind.DIFFUSE: "diffuse",
    MtlKind.SPECULAR: "specular",
}

_SCALAR_PROPERTIES = {
    MtlKind.ROUGHNESS: "roughness",
    MtlKind.ALPHA: "alpha",
}


class MTLLoader:
    """Загрузчик одного или нескольких .mtl в общую таблицу материалов."""

    def __init__(self, diagnostics: DiagnosticLog | None = None,
                 config: Config | None = None,
                 textures: TextureManager | None = None):
        self.config = config if config is not None else Config()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog("MTLLoader")
        self.textures = textures if textures is not None else TextureManager(
            load_images=self.config["load_textures"],
            flip_vertically=self.config["flip_textures"],
        )
        self.materials: dict[str, Material] = {}
        self._current: Material | None = None
        self._file_name = ""
        self._working_dir = Path(".")
        self._line = 0

    # -----------------------------------------------------------------
    # входные точки
    # -----------------------------------------------------------------
    def load_material_file(self, path) -> dict[str, Material]:
        """Прочитать .mtl; возвращает таблицу материалов, прочитанных из этого файла."""
        p = Path(str(path).strip())
        if self.config["check_extensions"] and p.suffix.lower() != MTL_EXTENSION:
            self._fatal(f"The file {p} does not have the {MTL_EXTENSION} extension")
        try:
            with p.open("r", encoding=self.config["encoding"], errors="replace") as f:
                return self.load_lines(f, name=p.name, working_dir=p.parent)
        except OSError as exc:
            self._fatal(f"Could not open material file {p}: {exc}")

    def load_lines(self, lines: Iterable[str], name: str = "<memory>",
                   working_dir=".") -> dict[str, Material]:
        self._current = None
        self._file_name = name
        self._working_dir = Path(working_dir)
        loaded: dict[str, Material] = {}

        for line_no, raw in enumerate(lines, start=1):
            self._line = line_no
            line = raw.strip()
            kind = classify_mtl_line(line)

            if kind in (MtlKind.COMMENT, MtlKind.BLANK):
                continue
            if kind is MtlKind.UNKNOWN:
                self.diagnostics.warn(self._at("Unknown identifier encountered"))
                continue
            if kind is MtlKind.NEW_MATERIAL:
                material = self._new_material(line)
                loaded[material.name] = material
                continue
            if self._current is None:
                self.diagnostics.error(self._at(f"'{kind.keyword}' appears before any newmtl record"))
                continue

            if kind in _MAP_SLOTS:
                self._set_map(line, kind)
            elif kind in _VEC3_PROPERTIES:
                setattr(self._current, _VEC3_PROPERTIES[kind], self._require(parse_vec3(line), kind))
            elif kind in _SCALAR_PROPERTIES:
                setattr(self._current, _SCALAR_PROPERTIES[kind], self._require(parse_float(line), kind))

        self.diagnostics.info(f"Loaded {len(loaded)} material(s) from {self._file_name}")
        return loaded

    # -----------------------------------------------------------------
    # записи
    # -----------------------------------------------------------------
    def _new_material(self, line: str) -> Material:
        name = payload(line)
        if name in self.materials:
            self.diagnostics.warn(self._at(f"Material '{name}' is defined twice, the later definition wins"))
        material = Material(name)
        self.materials[name] = material
        self._current = material
        return material

    def _set_map(self, line: str, kind: MtlKind) -> None:
        rel_path = payload(line)
        try:
            image = self.textures.get(self._working_dir / rel_path)
        except TextureLoadError as exc:
            self.diagnostics.error(self._at(str(exc)))
            return
        if self._current.set_map(_MAP_SLOTS[kind], image):
            self.diagnostics.warn(self._at(f"Defined two {kind.keyword} image maps"))

    def _require(self, value, kind: MtlKind):
        if value is None:
            self._fatal(self._at(f"Malformed numeric value in '{kind.keyword}' record"))
        return value

    def _fatal(self, message: str) -> None:
        self.diagnostics.error(message)
        raise MTLLoadError(message)

    def _at(self, message: str) -> str:
        return located(self._file_name, self._line, message)

    # -----------------------------------------------------------------
    def reset(self) -> None:
        self.materials.clear()
        self.textures.clear()
        self._current = None
        self._file_name = ""
        self._line = 0
