# -*- coding: utf-8 -*-
"""
Неизменяемые векторы Vec2 / Vec3.

В отличие от движковых Vec3/Vec4 (обёртка над ndarray) здесь это
обычные `NamedTuple` – значения, прочитанные из файла, после разбора
не меняются.  В numpy они переводятся пачкой через `stack_vectors`.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np


class Vec2(NamedTuple):
    x: float
    y: float


class Vec3(NamedTuple):
    x: float
    y: float
    z: float


def stack_vectors(vectors: Sequence[tuple], width: int) -> np.ndarray:
    """Список векторов → float32‑массив формы (N, width); пустой список → (0, width)."""
    if not vectors:
        return np.zeros((0, width), dtype=np.float32)
    return np.asarray(vectors, dtype=np.float32).reshape(-1, width)
