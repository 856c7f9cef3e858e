# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: запись .obj/.mtl во временную папку и
маленькие PNG‑картинки, сгенерированные через Pillow.
"""

import textwrap
from pathlib import Path

import pytest
from PIL import Image

from wavemesh.loader.indices import IndexResolver
from wavemesh.loader.obj_loader import OBJLoader
from wavemesh.utils.config import Config


# ----------------------------------------------------------------------
# Файлы
# ----------------------------------------------------------------------
@pytest.fixture
def write_file(tmp_path):
    """Фабрика: write_file("a.obj", "...") → Path (текст без общего отступа)."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text).lstrip("\n"), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_png(tmp_path):
    """
    Фабрика PNG: make_png("a.png", size=(w, h), mode="RGB", color=...).
    Верхняя строка красная, остальное – `color`.
    """
    def _make(name: str, size=(2, 3), mode="RGB", color=(0, 0, 255)):
        img = Image.new("RGB", size, color)
        for x in range(size[0]):
            img.putpixel((x, 0), (255, 0, 0))
        if mode != "RGB":
            img = img.convert(mode)
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        img.save(path)
        return path
    return _make


# ----------------------------------------------------------------------
# Загрузчики
# ----------------------------------------------------------------------
@pytest.fixture
def loader() -> OBJLoader:
    """Новый загрузчик с настройками по‑умолчанию."""
    return OBJLoader(Config())


@pytest.fixture
def resolver_factory():
    """Резолвер над буферами заданной длины (содержимое не важно)."""
    def _make(positions=3, normals=3, uvs=3, colors=0):
        return IndexResolver([None] * positions, [None] * normals,
                             [None] * uvs, [None] * colors)
    return _make
