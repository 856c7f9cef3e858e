"""
Разборщики .obj / .mtl.
"""

from wavemesh.loader.identifiers import LineKind, MtlKind, classify_line, classify_mtl_line
from wavemesh.loader.indices import IndexResolver, IndexType, resolve_index
from wavemesh.loader.face_parser import FaceParser, FaceSyntax, detect_syntax
from wavemesh.loader.triangulate import triangulate
from wavemesh.loader.segmentation import MeshSegmenter
from wavemesh.loader.mtl_loader import MTLLoader
from wavemesh.loader.obj_loader import OBJLoader, load_obj

__all__ = [
    "LineKind", "MtlKind", "classify_line", "classify_mtl_line",
    "IndexResolver", "IndexType", "resolve_index",
    "FaceParser", "FaceSyntax", "detect_syntax",
    "triangulate",
    "MeshSegmenter",
    "MTLLoader",
    "OBJLoader", "load_obj",
]
