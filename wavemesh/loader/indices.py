# wavemesh/loader/indices.py
"""
Перевод ссылок из записи `f` в 0‑based индексы.

    n > 0   →  n - 1
    n < 0   →  len(buffer) - |n|      (длина буфера *на момент чтения строки*)
    n == 0  →  IndexRangeError

Отрицательные ссылки разрешаются сразу, пока строка читается: тот же
литерал `-1` в разных местах файла указывает на разные вершины.
"""

from __future__ import annotations

from enum import Enum
from typing import Sized

from wavemesh.errors import IndexRangeError


class IndexType(Enum):
    POSITION = "position"
    NORMAL = "normal"
    UV = "uv"
    COLOR = "color"


def resolve_index(reference: int, buffer_length: int) -> int:
    if reference > 0:
        return reference - 1
    if reference == 0:
        raise IndexRangeError("Index 0 is not a valid reference (indices are 1-based)")
    offset = buffer_length - abs(reference)
    if offset < 0:
        raise IndexRangeError(
            f"Relative index {reference} reaches before the start of a buffer of {buffer_length} elements"
        )
    return offset


class IndexResolver:
    """Разрешает ссылки относительно живых (растущих) буферов документа."""

    def __init__(self, positions: Sized, normals: Sized, uvs: Sized, colors: Sized):
        self._buffers = {
            IndexType.POSITION: positions,
            IndexType.NORMAL: normals,
            IndexType.UV: uvs,
            IndexType.COLOR: colors,
        }

    def length(self, index_type: IndexType) -> int:
        return len(self._buffers[index_type])

    def resolve(self, reference: int, index_type: IndexType) -> int:
        try:
            return resolve_index(reference, self.length(index_type))
        except IndexRangeError as exc:
            raise IndexRangeError(f"Invalid {index_type.value} reference: {exc}") from None

    def has_vertex_colors(self) -> bool:
        """Цвет есть у каждой прочитанной позиции."""
        colors = self.length(IndexType.COLOR)
        return colors > 0 and colors == self.length(IndexType.POSITION)
