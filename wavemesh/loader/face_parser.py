# -*- coding: utf-8 -*-
"""
Разбор записи `f` в одном из четырёх синтаксисов:

    f 1 2 3                 позиции
    f 1/1 2/2 3/3           позиции + uv
    f 1/1/1 2/2/2 3/3/3     позиции + uv + нормали
    f 1//1 2//1 3//1        позиции + нормали

Синтаксис выбирается один раз на строку (`detect_syntax`), дальше
строка читается кортежами фиксированной формы.  Неверный разделитель
(любой символ на месте `/`) попадает в журнал, но чтение продолжается;
если строка обрывается посреди кортежа – возвращаем то, что успели
прочитать.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from wavemesh.errors import FaceSyntaxError
from wavemesh.loader.indices import IndexResolver, IndexType
from wavemesh.loader.tokens import payload
from wavemesh.scene.mesh import Face

DELIMITER = "/"


class FaceSyntax(Enum):
    POSITION = "v"
    POSITION_UV = "v/vt"
    POSITION_UV_NORMAL = "v/vt/vn"
    POSITION_NORMAL = "v//vn"

    @property
    def has_uv(self) -> bool:
        return self in (FaceSyntax.POSITION_UV, FaceSyntax.POSITION_UV_NORMAL)

    @property
    def has_normal(self) -> bool:
        return self in (FaceSyntax.POSITION_NORMAL, FaceSyntax.POSITION_UV_NORMAL)


class _Cursor:
    """Посимвольное чтение, как у потока: пробелы перед токеном пропускаются."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def read_int(self) -> int | None:
        self._skip_ws()
        start = self.pos
        if self.pos < len(self.text) and self.text[self.pos] in "+-":
            self.pos += 1
        digits = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in "0123456789":
            self.pos += 1
        if self.pos == digits:
            self.pos = start
            return None
        return int(self.text[start:self.pos])

    def read_char(self) -> str | None:
        self._skip_ws()
        if self.pos >= len(self.text):
            return None
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""


def detect_syntax(refs: str) -> FaceSyntax:
    """Выбор синтаксиса по списку ссылок (без ключа `f`)."""
    if DELIMITER * 2 in refs:
        return FaceSyntax.POSITION_NORMAL
    if DELIMITER not in refs:
        return FaceSyntax.POSITION
    # первая пара v/vt; если сразу за ней ещё `/` – тройка
    cursor = _Cursor(refs)
    if cursor.read_int() is None or cursor.read_char() is None or cursor.read_int() is None:
        return FaceSyntax.POSITION_UV
    return FaceSyntax.POSITION_UV_NORMAL if cursor.peek() == DELIMITER else FaceSyntax.POSITION_UV


# каденс каждого синтаксиса: что читать на одну вершину
_CADENCE = {
    FaceSyntax.POSITION: ("int",),
    FaceSyntax.POSITION_UV: ("int", "sep", "int"),
    FaceSyntax.POSITION_UV_NORMAL: ("int", "sep", "int", "sep", "int"),
    FaceSyntax.POSITION_NORMAL: ("int", "sep", "sep", "int"),
}

_SLOTS = {
    FaceSyntax.POSITION: (IndexType.POSITION,),
    FaceSyntax.POSITION_UV: (IndexType.POSITION, IndexType.UV),
    FaceSyntax.POSITION_UV_NORMAL: (IndexType.POSITION, IndexType.UV, IndexType.NORMAL),
    FaceSyntax.POSITION_NORMAL: (IndexType.POSITION, IndexType.NORMAL),
}


class FaceParser:
    """
    Превращает строку `f …` в Face с уже разрешёнными индексами.

    `report` получает текст каждой синтаксической ошибки; при
    `strict=True` вместо этого поднимается FaceSyntaxError.
    IndexRangeError (ссылка 0 и т.п.) всегда пробрасывается наружу.
    """

    def __init__(self, resolver: IndexResolver,
                 report: Callable[[str], None] | None = None,
                 strict: bool = False):
        self.resolver = resolver
        self.report = report
        self.strict = strict

    # -----------------------------------------------------------------
    def parse(self, line: str) -> Face:
        refs = payload(line)
        syntax = detect_syntax(refs)
        cursor = _Cursor(refs)
        face = Face()
        with_colors = self.resolver.has_vertex_colors()

        while True:
            values = self._read_tuple(cursor, syntax)
            if values is None:
                break
            self._push(face, syntax, values, with_colors)
        return face

    # -----------------------------------------------------------------
    def _read_tuple(self, cursor: _Cursor, syntax: FaceSyntax) -> list[int] | None:
        numbers: list[int] = []
        bad: list[str] = []
        for step in _CADENCE[syntax]:
            if step == "int":
                value = cursor.read_int()
                if value is None:
                    return None
                numbers.append(value)
            else:
                ch = cursor.read_char()
                if ch is None:
                    return None
                if ch != DELIMITER:
                    bad.append(ch)
        if bad:
            self._syntax_error(syntax, bad)
        return numbers

    def _syntax_error(self, syntax: FaceSyntax, bad: list[str]) -> None:
        found = " or ".join(repr(ch) for ch in bad)
        message = f"Invalid '{syntax.value}' face syntax ({found} is not '{DELIMITER}')"
        if self.strict:
            raise FaceSyntaxError(message)
        if self.report is not None:
            self.report(message)

    def _push(self, face: Face, syntax: FaceSyntax, values: list[int], with_colors: bool) -> None:
        # сначала разрешаем весь кортеж, потом добавляем: грань не бывает «рваной»
        resolved = {
            slot: self.resolver.resolve(ref, slot)
            for slot, ref in zip(_SLOTS[syntax], values)
        }
        face.position_indices.append(resolved[IndexType.POSITION])
        if IndexType.UV in resolved:
            face.uv_indices.append(resolved[IndexType.UV])
        if IndexType.NORMAL in resolved:
            face.normal_indices.append(resolved[IndexType.NORMAL])
        if with_colors:
            face.color_indices.append(self.resolver.resolve(values[0], IndexType.COLOR))
