# wavemesh/assets/__init__.py
"""Пакет с материалами и данными изображений."""
from wavemesh.assets.material import ImageData, Material, TextureSlot

__all__ = ["ImageData", "Material", "TextureSlot"]
