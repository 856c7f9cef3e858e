# -*- coding: utf-8 -*-
"""
Загрузчик Wavefront OBJ (+ библиотеки материалов MTL).

Строки читаются строго по порядку: классификатор определяет тип
записи, дальше запись уходит в свой разборщик.  Вершины/нормали/uv
складываются в общие буферы, грани (после триангуляции) – в текущий
меш сегментатора.

Три уровня серьёзности:
    * фатальная ошибка – OBJLoadError, разбор прерывается;
    * локальная – запись пропускается, ошибка в журнале;
    * предупреждение – только запись в журнал.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from wavemesh.assets.material import Material
from wavemesh.assets.texture_manager import TextureManager
from wavemesh.errors import IndexRangeError, MTLLoadError, OBJLoadError
from wavemesh.loader.face_parser import FaceParser
from wavemesh.loader.identifiers import LineKind, classify_line
from wavemesh.loader.indices import IndexResolver
from wavemesh.loader.mtl_loader import MTLLoader
from wavemesh.loader.segmentation import MeshSegmenter
from wavemesh.loader.tokens import parse_position, parse_toggle, parse_vec2, parse_vec3, payload
from wavemesh.loader.triangulate import triangulate, validate_topology
from wavemesh.math.vec import Vec2, Vec3
from wavemesh.scene.mesh import Mesh
from wavemesh.scene.obj_data import OBJData
from wavemesh.utils.config import Config
from wavemesh.utils.logger import DiagnosticLog, located

OBJ_EXTENSION = ".obj"


class OBJLoader:
    """
    Один загрузчик – один документ за раз.  Повторный `load()`
    начинает с чистого состояния; ранее возвращённые OBJData при этом
    не меняются.
    """

    def __init__(self, config: Config | None = None):
        self.config = config if config is not None else Config()
        self.diagnostics = DiagnosticLog("OBJLoader")
        self.textures = TextureManager(
            load_images=self.config["load_textures"],
            flip_vertically=self.config["flip_textures"],
        )
        self.mtl_loader = MTLLoader(self.diagnostics.child("MTLLoader"), self.config, self.textures)
        self.reset()

    # -----------------------------------------------------------------
    # состояние
    # -----------------------------------------------------------------
    def reset(self, keep_diagnostics: bool = False) -> None:
        self.positions: list[Vec3] = []
        self.normals: list[Vec3] = []
        self.uvs: list[Vec2] = []
        self.colors: list[Vec3] = []
        self.segmenter = MeshSegmenter()
        self.resolver = IndexResolver(self.positions, self.normals, self.uvs, self.colors)
        self.face_parser = FaceParser(self.resolver, report=self._report_syntax)
        self.file_name = ""
        self.working_dir = Path(".")
        self._line = 0
        if not keep_diagnostics:
            self.diagnostics.clear()
        self.mtl_loader.reset()

    def set_should_triangulate(self, flag: bool) -> None:
        self.config["triangulate"] = bool(flag)

    @property
    def materials(self) -> dict[str, Material]:
        return self.mtl_loader.materials

    # -----------------------------------------------------------------
    # входные точки
    # -----------------------------------------------------------------
    def load(self, path) -> OBJData:
        self.reset()
        p = Path(str(path).strip())
        self.file_name = p.name
        if self.config["check_extensions"] and p.suffix.lower() != OBJ_EXTENSION:
            self._fatal(f"The file {p} does not have the {OBJ_EXTENSION} extension")
        try:
            with p.open("r", encoding=self.config["encoding"], errors="replace") as f:
                self._parse(f, p.name, p.parent)
        except OSError as exc:
            self._fatal(f"Could not open {p}: {exc}")
        return self._build()

    def load_lines(self, lines: Iterable[str], name: str = "<memory>.obj",
                   working_dir=".") -> OBJData:
        """Разбор из любого источника строк (файл уже открыт, тесты и т.п.)."""
        self.reset()
        self._parse(lines, name, Path(working_dir))
        return self._build()

    # -----------------------------------------------------------------
    # основной цикл
    # -----------------------------------------------------------------
    def _parse(self, lines: Iterable[str], name: str, working_dir: Path) -> None:
        self.file_name = name
        self.working_dir = working_dir

        for line_no, raw in enumerate(lines, start=1):
            self._line = line_no
            line = raw.strip()
            kind = classify_line(line)
            try:
                self._dispatch(kind, line)
            except OBJLoadError as exc:
                self.diagnostics.error(self._at(str(exc)))
                raise

        if not self.positions:
            self._fatal(f".obj file {self.file_name} must include at least one position")

        self.diagnostics.info(f"Successfully parsed and loaded data from {self.file_name}")

    def _dispatch(self, kind: LineKind, line: str) -> None:
        if kind is LineKind.POSITION:
            result = parse_position(line)
            if result is None:
                raise OBJLoadError("Malformed position record")
            position, color = result
            self.positions.append(position)
            if color is not None:
                self.colors.append(color)
        elif kind is LineKind.NORMAL:
            self.normals.append(self._require(parse_vec3(line), kind))
        elif kind is LineKind.UV:
            self.uvs.append(self._require(parse_vec2(line), kind))
        elif kind is LineKind.FACE:
            self._parse_face(line)
        elif kind in (LineKind.GROUP, LineKind.NAMED_OBJECT):
            self.segmenter.open_group(payload(line))
        elif kind is LineKind.SMOOTH_SHADING:
            self._parse_smooth_shading(line)
        elif kind is LineKind.MATERIAL_LIB:
            self._load_material_library(payload(line))
        elif kind is LineKind.USE_MATERIAL:
            self._use_material(payload(line))
        elif kind is LineKind.LINE_ELEMENT:
            raise OBJLoadError("Line elements ('l') are not supported")
        elif kind is LineKind.UNKNOWN:
            self.diagnostics.warn(self._at("Encountered unknown line identifier"))
        # COMMENT / BLANK – пропускаем

    # -----------------------------------------------------------------
    # отдельные записи
    # -----------------------------------------------------------------
    def _parse_face(self, line: str) -> None:
        try:
            face = self.face_parser.parse(line)
        except IndexRangeError as exc:
            self.diagnostics.error(self._at(f"{exc}; face record skipped"))
            return

        if self.config["triangulate"]:
            faces = triangulate(face)
        else:
            validate_topology(face)
            faces = [face]
        self.segmenter.push_faces(faces)

    def _parse_smooth_shading(self, line: str) -> None:
        toggle = parse_toggle(line)
        if toggle is None:
            self.diagnostics.warn(self._at(f"Could not parse smooth shading value '{payload(line)}'"))
            return
        self.segmenter.set_smooth_shading(toggle)

    def _load_material_library(self, rel_path: str) -> None:
        # причину ошибки MTLLoader уже записал в журнал
        try:
            self.mtl_loader.load_material_file(self.working_dir / rel_path)
        except MTLLoadError:
            self.diagnostics.warn(self._at(f"Material library '{rel_path}' skipped"))

    def _use_material(self, name: str) -> None:
        material = self.materials.get(name)
        if material is None:
            self.diagnostics.error(self._at(f"Unknown material '{name}'"))
            return
        self.segmenter.bind_material(material)

    # -----------------------------------------------------------------
    # вспомогательное
    # -----------------------------------------------------------------
    def _require(self, value, kind: LineKind):
        if value is None:
            raise OBJLoadError(f"Malformed numeric value in '{kind.keyword}' record")
        return value

    def _report_syntax(self, message: str) -> None:
        self.diagnostics.error(self._at(message))

    def _fatal(self, message: str) -> None:
        self.diagnostics.error(message)
        raise OBJLoadError(message)

    def _at(self, message: str) -> str:
        return located(self.file_name, self._line, message)

    def _build(self) -> OBJData:
        return OBJData(
            positions=self.positions,
            normals=self.normals,
            uvs=self.uvs,
            colors=self.colors,
            meshes=self.segmenter.mesh_list(),
            name=self.file_name,
        )

    # -----------------------------------------------------------------
    # выдача результата
    # -----------------------------------------------------------------
    def share(self) -> OBJData:
        """Копия текущего документа; материалы остаются общими."""
        return OBJData(
            positions=list(self.positions),
            normals=list(self.normals),
            uvs=list(self.uvs),
            colors=list(self.colors),
            meshes=[
                Mesh(m.name, [f.copy() for f in m.faces], m.material)
                for m in self.segmenter.mesh_list()
            ],
            name=self.file_name,
        )

    def steal(self) -> OBJData:
        """Отдать документ и начать с чистого состояния (журнал сохраняется)."""
        data = self._build()
        self.reset(keep_diagnostics=True)
        return data

    # -----------------------------------------------------------------
    # журнал
    # -----------------------------------------------------------------
    @property
    def errors(self) -> list[str]:
        return list(self.diagnostics.errors)

    @property
    def warnings(self) -> list[str]:
        return list(self.diagnostics.warnings)

    @property
    def infos(self) -> list[str]:
        return list(self.diagnostics.infos)

    def exists_error(self) -> bool:
        return self.diagnostics.exists_error()

    def exists_warning(self) -> bool:
        return self.diagnostics.exists_warning()


def load_obj(path, config: Config | None = None) -> OBJData:
    """Загрузить .obj одним вызовом (фатальная ошибка → OBJLoadError)."""
    return OBJLoader(config).load(path)
