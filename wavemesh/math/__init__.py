"""
Математический суб‑пакет: Vec2, Vec3.
"""

from wavemesh.math.vec import Vec2, Vec3, stack_vectors

__all__ = ["Vec2", "Vec3", "stack_vectors"]
