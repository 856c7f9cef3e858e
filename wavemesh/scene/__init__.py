"""
Пакет scene – грани, меши и итоговый документ OBJData.
"""

from wavemesh.scene.mesh import Face, Mesh
from wavemesh.scene.obj_data import OBJData

__all__ = ["Face", "Mesh", "OBJData"]
