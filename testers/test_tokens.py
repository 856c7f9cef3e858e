# -*- coding: utf-8 -*-
from wavemesh.loader.tokens import (
    parse_float, parse_position, parse_toggle, parse_vec2, parse_vec3, payload,
)
from wavemesh.math.vec import Vec2, Vec3


def test_parse_vec3_reads_three_floats():
    assert parse_vec3("v 1 -2.5 3e1") == Vec3(1.0, -2.5, 30.0)

def test_parse_vec3_ignores_trailing_tokens():
    assert parse_vec3("vn 0 1 0 1") == Vec3(0.0, 1.0, 0.0)

def test_parse_vec3_rejects_missing_or_bad_tokens():
    assert parse_vec3("v 1 2") is None
    assert parse_vec3("v 1 x 3") is None
    assert parse_vec3("v nan 0 0") is None
    assert parse_vec3("v inf 0 0") is None

def test_parse_vec2_and_float():
    assert parse_vec2("vt 0.25 0.75") == Vec2(0.25, 0.75)
    assert parse_vec2("vt 0.25") is None
    assert parse_float("Ns 96.0") == 96.0
    assert parse_float("d") is None

def test_parse_position_with_and_without_color():
    assert parse_position("v 1 2 3") == (Vec3(1, 2, 3), None)
    assert parse_position("v 1 2 3 0.5 0.25 1") == (Vec3(1, 2, 3), Vec3(0.5, 0.25, 1))
    # w‑компонента (4 числа) – не цвет
    assert parse_position("v 1 2 3 1") == (Vec3(1, 2, 3), None)
    assert parse_position("v 1 2") is None

def test_parse_toggle_word_and_number_forms():
    assert parse_toggle("s on") is True
    assert parse_toggle("s off") is False
    assert parse_toggle("s 1") is True
    assert parse_toggle("s 4") is True
    assert parse_toggle("s 0") is False
    assert parse_toggle("s maybe") is None
    assert parse_toggle("s") is None

def test_payload_keeps_inner_spaces():
    assert payload("g  left arm ") == "left arm"
    assert payload("usemtl") == ""
