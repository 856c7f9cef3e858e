# wavemesh/errors.py
"""
Иерархия исключений загрузчика.

Фатальные ошибки (`OBJLoadError` и наследники) прерывают разбор всего
документа.  Остальные – «локальные»: загрузчик записывает их в журнал
диагностики и продолжает со следующей строки.
"""


class WavemeshError(Exception):
    """Базовое исключение пакета."""


class OBJLoadError(WavemeshError, RuntimeError):
    """Фатальная ошибка разбора .obj – документ не загружен."""


class UnsupportedTopologyError(OBJLoadError):
    """Грань с числом вершин, отличным от 3 или 4."""

    def __init__(self, vertex_count: int):
        super().__init__(
            f"Only triangles and quads are supported, got a face with {vertex_count} vertices"
        )
        self.vertex_count = vertex_count


class IndexRangeError(WavemeshError, ValueError):
    """Ссылка 0 или отрицательная ссылка за начало буфера."""


class FaceSyntaxError(WavemeshError, ValueError):
    """Неверный разделитель внутри записи `f` (только в strict‑режиме)."""


class MTLLoadError(WavemeshError, RuntimeError):
    """Файл материалов не удалось прочитать или разобрать."""


class TextureLoadError(WavemeshError, RuntimeError):
    """Изображение карты материала не удалось декодировать."""
