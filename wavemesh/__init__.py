"""
wavemesh – загрузчик Wavefront OBJ/MTL в простое представление меша
(общие буферы атрибутов + именованные группы граней + материалы).
"""

from wavemesh.utils import logger, Config
from wavemesh.math import Vec2, Vec3
from wavemesh.assets.material import ImageData, Material, TextureSlot
from wavemesh.scene import Face, Mesh, OBJData
from wavemesh.errors import (
    WavemeshError,
    OBJLoadError,
    UnsupportedTopologyError,
    IndexRangeError,
    FaceSyntaxError,
    MTLLoadError,
    TextureLoadError,
)
from wavemesh.loader import OBJLoader, MTLLoader, load_obj

__version__ = "1.0.0"

__all__ = [
    "Config",
    "Vec2",
    "Vec3",
    "ImageData",
    "Material",
    "TextureSlot",
    "Face",
    "Mesh",
    "OBJData",
    "WavemeshError",
    "OBJLoadError",
    "UnsupportedTopologyError",
    "IndexRangeError",
    "FaceSyntaxError",
    "MTLLoadError",
    "TextureLoadError",
    "OBJLoader",
    "MTLLoader",
    "load_obj",
]
