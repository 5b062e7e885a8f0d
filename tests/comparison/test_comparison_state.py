"""Unit tests for ComparisonState serialization."""

import pytest

from labcompare.comparison.color_assigner import DEFAULT_PALETTE
from labcompare.comparison.comparison_state import ComparisonState, PlotType
from labcompare.comparison.series_aligner import CollisionPolicy


def test_defaults():
    state = ComparisonState()
    assert state.metric == ""
    assert state.plot_type == PlotType.LINE
    assert state.collision_policy == CollisionPolicy.LAST_WRITE_WINS
    assert state.palette == list(DEFAULT_PALETTE)


def test_to_dict_uses_enum_values():
    d = ComparisonState(plot_type=PlotType.SCATTER, collision_policy=CollisionPolicy.KEY_BY_ID).to_dict()
    assert d["plot_type"] == "scatter"
    assert d["collision_policy"] == "key_by_id"


def test_from_dict_round_trip():
    state = ComparisonState(
        metric="voltage",
        selected_dataset_ids=["1", "2"],
        plot_dataset_id="1",
        x_col="time",
        y_col="voltage",
        plot_type=PlotType.SCATTER,
        palette=["#111", "#222"],
        show_legend=False,
    )
    restored = ComparisonState.from_dict(state.to_dict())
    assert restored == state


def test_from_dict_missing_keys_default():
    state = ComparisonState.from_dict({"metric": "power"})
    assert state.metric == "power"
    assert state.plot_dataset_id is None
    assert state.selected_dataset_ids == []
    assert state.palette == list(DEFAULT_PALETTE)


def test_from_dict_unknown_plot_type_raises():
    with pytest.raises(ValueError):
        ComparisonState.from_dict({"plot_type": "violin"})


def test_from_dict_empty_palette_raises():
    with pytest.raises(ValueError) as exc_info:
        ComparisonState.from_dict({"palette": []})
    assert "palette" in str(exc_info.value)
