# wavemesh/assets/texture_manager.py
"""Менеджер кэширования текстур – один объект на сеанс разбора."""

from pathlib import Path

from wavemesh.assets.material import ImageData
from wavemesh.utils.logger import logger
from wavemesh.utils.texture_loader import load_texture


class TextureManager:
    """
    Кеширующий менеджер текстур.

    Кеш живёт в экземпляре (а не в классе): разные документы не видят
    картинки друг друга.  Два материала, ссылающиеся на один файл,
    получают один и тот же объект ImageData.
    """

    def __init__(self, load_images: bool = True, flip_vertically: bool = True):
        self.load_images = load_images
        self.flip_vertically = flip_vertically
        self._cache: dict[str, ImageData] = {}

    def get(self, path) -> ImageData:
        key = str(Path(path).expanduser().resolve())
        if key in self._cache:
            return self._cache[key]
        if self.load_images:
            tex = load_texture(key, flip_vertically=self.flip_vertically)
            logger.debug(f"[TextureManager] Loaded texture: {path}")
        else:
            tex = ImageData(name=Path(key).name, path=key)
        self._cache[key] = tex
        return tex

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
