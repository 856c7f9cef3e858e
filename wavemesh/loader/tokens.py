# wavemesh/loader/tokens.py
"""
Чтение чисел из строки записи: `<ключ> x y z …`.

Ключевое слово (первый токен) пропускается, лишние хвостовые токены
игнорируются.  При нехватке или нечисловом токене функции возвращают
None – решение о фатальности принимает вызывающий код.
"""

from __future__ import annotations

import math

from wavemesh.math.vec import Vec2, Vec3

ON = "on"
OFF = "off"


def payload(line: str) -> str:
    """Всё после ключевого слова, без крайних пробелов."""
    parts = line.split(None, 1)
    return parts[1].strip() if len(parts) > 1 else ""


def parse_floats(line: str, count: int) -> list[float] | None:
    tokens = line.split()[1:]
    if len(tokens) < count:
        return None
    values = []
    for tok in tokens[:count]:
        try:
            value = float(tok)
        except ValueError:
            return None
        if not math.isfinite(value):
            return None
        values.append(value)
    return values


def parse_vec3(line: str) -> Vec3 | None:
    values = parse_floats(line, 3)
    return Vec3(*values) if values is not None else None


def parse_vec2(line: str) -> Vec2 | None:
    values = parse_floats(line, 2)
    return Vec2(*values) if values is not None else None


def parse_float(line: str) -> float | None:
    values = parse_floats(line, 1)
    return values[0] if values is not None else None


def parse_position(line: str) -> tuple[Vec3, Vec3 | None] | None:
    """
    `v x y z` или `v x y z r g b`.
    Возвращает (позиция, цвет‑или‑None); None – если позиция не читается.
    """
    position = parse_vec3(line)
    if position is None:
        return None
    if len(line.split()) < 7:
        return position, None
    rgb = parse_floats(line, 6)
    if rgb is None:
        return position, None
    return position, Vec3(*rgb[3:])


def parse_toggle(line: str) -> bool | None:
    """`s on|off|<int>` → True/False, None – если значение не распознано."""
    value = payload(line).split()
    if not value:
        return None
    word = value[0]
    if word == ON:
        return True
    if word == OFF:
        return False
    try:
        return int(word) != 0
    except ValueError:
        return None
