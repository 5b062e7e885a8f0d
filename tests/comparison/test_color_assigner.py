"""Unit tests for cyclic color assignment."""

import pytest

from labcompare.comparison.color_assigner import DEFAULT_PALETTE, assign_colors, color_for_index


def test_default_palette_order():
    assert DEFAULT_PALETTE[0] == "#2563EB"
    assert len(DEFAULT_PALETTE) == 6


def test_colors_wrap_around():
    series = [f"s{i}" for i in range(8)]
    colors = assign_colors(series)
    assert colors[:6] == list(DEFAULT_PALETTE)
    assert colors[6] == DEFAULT_PALETTE[0]
    assert colors[7] == DEFAULT_PALETTE[1]


def test_colors_follow_position_not_identity():
    assert assign_colors(["a", "b"]) == assign_colors(["b", "a"])
    assert color_for_index(1, ["red", "green"]) == "green"


def test_single_color_palette():
    assert assign_colors(["a", "b", "c"], ["#000"]) == ["#000", "#000", "#000"]


def test_empty_series_gives_no_colors():
    assert assign_colors([]) == []


def test_empty_palette_raises():
    with pytest.raises(ValueError):
        color_for_index(0, [])
    with pytest.raises(ValueError):
        assign_colors(["a"], [])
