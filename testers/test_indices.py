# -*- coding: utf-8 -*-
import pytest

from wavemesh.errors import IndexRangeError
from wavemesh.loader.indices import IndexResolver, IndexType, resolve_index


@pytest.mark.parametrize("reference", [1, 2, 7, 1000])
def test_positive_reference_is_one_based(reference):
    # верхняя граница при разборе не проверяется
    assert resolve_index(reference, buffer_length=3) == reference - 1


@pytest.mark.parametrize("reference, length, expected", [
    (-1, 4, 3),
    (-4, 4, 0),
    (-2, 10, 8),
])
def test_negative_reference_counts_from_current_end(reference, length, expected):
    assert resolve_index(reference, length) == expected


def test_zero_reference_fails():
    with pytest.raises(IndexRangeError):
        resolve_index(0, 5)


def test_negative_reference_before_buffer_start_fails():
    with pytest.raises(IndexRangeError):
        resolve_index(-5, 4)


def test_resolver_follows_growing_buffer():
    positions = [None, None]
    resolver = IndexResolver(positions, [], [], [])
    assert resolver.resolve(-1, IndexType.POSITION) == 1
    positions.append(None)
    assert resolver.resolve(-1, IndexType.POSITION) == 2


def test_resolver_selects_buffer_by_type():
    resolver = IndexResolver([None] * 5, [None] * 2, [None] * 3, [])
    assert resolver.resolve(-1, IndexType.POSITION) == 4
    assert resolver.resolve(-1, IndexType.NORMAL) == 1
    assert resolver.resolve(-1, IndexType.UV) == 2
    with pytest.raises(IndexRangeError, match="color"):
        resolver.resolve(-1, IndexType.COLOR)


def test_vertex_colors_only_when_every_position_has_one():
    assert not IndexResolver([None] * 3, [], [], []).has_vertex_colors()
    assert not IndexResolver([None] * 3, [], [], [None] * 2).has_vertex_colors()
    assert IndexResolver([None] * 3, [], [], [None] * 3).has_vertex_colors()
