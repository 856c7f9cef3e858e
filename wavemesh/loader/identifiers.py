"""
Классификация строк .obj / .mtl по префиксу.

Каждое ключевое слово требует завершающего пробела, поэтому `vn 0 1 0`
никогда не спутается с `v …`, а `map_Kd x.png` – с `Kd …`.  Строка
передаётся уже без крайних пробелов.
"""

from __future__ import annotations

from enum import Enum


class LineKind(Enum):
    POSITION = "v"
    NORMAL = "vn"
    UV = "vt"
    FACE = "f"
    GROUP = "g"
    NAMED_OBJECT = "o"
    LINE_ELEMENT = "l"
    SMOOTH_SHADING = "s"
    MATERIAL_LIB = "mtllib"
    USE_MATERIAL = "usemtl"
    COMMENT = "#"
    BLANK = ""
    UNKNOWN = "unknown"

    @property
    def keyword(self) -> str:
        return self.value


class MtlKind(Enum):
    NEW_MATERIAL = "newmtl"

    AMBIENT_MAP = "map_Ka"
    DIFFUSE_MAP = "map_Kd"
    SPECULAR_MAP = "map_Ks"
    ROUGHNESS_MAP = "map_Ns"
    ALPHA_MAP = "map_d"

    AMBIENT = "Ka"
    DIFFUSE = "Kd"
    SPECULAR = "Ks"
    ROUGHNESS = "Ns"
    ALPHA = "d"

    COMMENT = "#"
    BLANK = ""
    UNKNOWN = "unknown"

    @property
    def keyword(self) -> str:
        return self.value


# Таблицы «ключ + пробел» → тип; comment/blank/unknown обрабатываются отдельно.
_OBJ_PREFIXES = tuple(
    (kind.keyword + " ", kind)
    for kind in LineKind
    if kind not in (LineKind.COMMENT, LineKind.BLANK, LineKind.UNKNOWN)
)

_MTL_PREFIXES = tuple(
    (kind.keyword + " ", kind)
    for kind in MtlKind
    if kind not in (MtlKind.COMMENT, MtlKind.BLANK, MtlKind.UNKNOWN)
)


def _classify(line: str, table, comment, blank, unknown):
    if not line:
        return blank
    if line.startswith("#"):
        return comment
    # табуляция после ключа – тоже разделитель
    head = line.replace("\t", " ", 1)
    for prefix, kind in table:
        if head.startswith(prefix):
            return kind
    return unknown

def classify_line(line: str) -> LineKind:
    return _classify(line, _OBJ_PREFIXES, LineKind.COMMENT, LineKind.BLANK, LineKind.UNKNOWN)

def classify_mtl_line(line: str) -> MtlKind:
    return _classify(line, _MTL_PREFIXES, MtlKind.COMMENT, MtlKind.BLANK, MtlKind.UNKNOWN)
