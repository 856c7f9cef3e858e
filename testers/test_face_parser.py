# -*- coding: utf-8 -*-
import pytest

from wavemesh.errors import FaceSyntaxError, IndexRangeError
from wavemesh.loader.face_parser import FaceParser, FaceSyntax, detect_syntax


@pytest.mark.parametrize("refs, syntax", [
    ("1 2 3", FaceSyntax.POSITION),
    ("1/1 2/2 3/3", FaceSyntax.POSITION_UV),
    ("1/1/1 2/2/2 3/3/3", FaceSyntax.POSITION_UV_NORMAL),
    ("1//1 2//2 3//3", FaceSyntax.POSITION_NORMAL),
    ("-1/-1/-1 -2/-2/-2 -3/-3/-3", FaceSyntax.POSITION_UV_NORMAL),
])
def test_detect_syntax(refs, syntax):
    assert detect_syntax(refs) is syntax


@pytest.mark.parametrize("line", [
    "f 1 2 3",
    "f 1/1 2/2 3/3",
    "f 1//1 2//2 3//3",
    "f 1/1/1 2/2/2 3/3/3",
])
def test_all_syntaxes_yield_same_positions(resolver_factory, line):
    face = FaceParser(resolver_factory()).parse(line)
    assert face.position_indices == [0, 1, 2]
    assert face.is_consistent()


def test_attribute_lists_per_syntax(resolver_factory):
    parser = FaceParser(resolver_factory())

    plain = parser.parse("f 1 2 3")
    assert (plain.uv_indices, plain.normal_indices) == ([], [])

    pair = parser.parse("f 1/1 2/2 3/3")
    assert pair.uv_indices == [0, 1, 2]
    assert pair.normal_indices == []

    pos_normal = parser.parse("f 1//1 2//2 3//3")
    assert pos_normal.uv_indices == []
    assert pos_normal.normal_indices == [0, 1, 2]

    triple = parser.parse("f 1/3/2 2/2/3 3/1/1")
    assert triple.uv_indices == [2, 1, 0]
    assert triple.normal_indices == [1, 2, 0]


def test_negative_references(resolver_factory):
    parser = FaceParser(resolver_factory(positions=4, normals=2, uvs=4))
    face = parser.parse("f -4/-4/-2 -3/-3/-1 -1/-1/-1")
    assert face.position_indices == [0, 1, 3]
    assert face.uv_indices == [0, 1, 3]
    assert face.normal_indices == [0, 1, 1]


def test_zero_reference_raises(resolver_factory):
    with pytest.raises(IndexRangeError):
        FaceParser(resolver_factory()).parse("f 0 1 2")


def test_bad_delimiter_is_reported_and_parsing_continues(resolver_factory):
    reported = []
    parser = FaceParser(resolver_factory(), report=reported.append)
    face = parser.parse("f 1/1/1 2/2\\2 3/3/3")
    assert face.position_indices == [0, 1, 2]
    assert face.normal_indices == [0, 1, 2]
    assert len(reported) == 1
    assert "'\\\\'" in reported[0]


def test_bad_delimiter_in_strict_mode(resolver_factory):
    parser = FaceParser(resolver_factory(), strict=True)
    with pytest.raises(FaceSyntaxError):
        parser.parse("f 1/1 2|2 3/3")


def test_truncated_tuple_keeps_consumed_vertices(resolver_factory):
    face = FaceParser(resolver_factory()).parse("f 1/1/1 2/2/2 3/3")
    assert face.position_indices == [0, 1]
    assert face.is_consistent()


def test_empty_face_record(resolver_factory):
    assert FaceParser(resolver_factory()).parse("f").num_vertices == 0


def test_color_indices_follow_positions(resolver_factory):
    parser = FaceParser(resolver_factory(positions=3, colors=3))
    face = parser.parse("f 1 2 -1")
    assert face.color_indices == [0, 1, 2]

    partial = FaceParser(resolver_factory(positions=3, colors=1)).parse("f 1 2 3")
    assert partial.color_indices == []


def test_non_ascii_digit_ends_the_vertex_list(resolver_factory):
    # '³'.isdigit() истинно, но int() его не принимает
    face = FaceParser(resolver_factory()).parse("f 1 2 ³")
    assert face.position_indices == [0, 1]
