"""Unit tests for per-dataset summary statistics."""

import math

import numpy as np
import pytest

from labcompare.comparison.dataset import Dataset
from labcompare.comparison.statistics_engine import (
    STATS_COLUMNS,
    format_value,
    numeric_values,
    stats_for_values,
    summarize,
    summary_table,
)


def test_scenario_single_dataset(ds_x):
    (st,) = summarize([ds_x], "v")
    assert st.dataset_id == "x"
    assert st.name == "X"
    assert st.metric == "v"
    assert st.count == 3
    assert st.min == 1.0
    assert st.max == 3.0
    assert st.mean == 2.0
    assert st.stddev == pytest.approx(math.sqrt(2.0 / 3.0))
    assert st.stddev == pytest.approx(0.8165, abs=1e-4)


def test_population_std_matches_numpy_ddof0():
    values = [1.5, 2.25, 9.0, -4.0, 0.125]
    ds = Dataset(id="a", name="A", rows=[{"m": v} for v in values])
    (st,) = summarize([ds], "m")
    assert st.stddev == pytest.approx(float(np.std(values, ddof=0)))
    assert st.mean == pytest.approx(float(np.mean(values)))


def test_non_numeric_cells_are_skipped_not_coerced():
    ds = Dataset(id="a", name="A", rows=[{"m": 2.0}, {"m": "4.0"}, {}, {"m": None}, {"m": 6.0}, {"m": True}])
    (st,) = summarize([ds], "m")
    assert st.count == 2
    assert st.mean == 4.0
    assert st.min == 2.0
    assert st.max == 6.0


def test_count_equals_numeric_cells(ds_x, ds_y):
    stats = summarize([ds_x, ds_y], "v")
    assert [s.count for s in stats] == [3, 2]
    assert [s.name for s in stats] == ["X", "Y"]


def test_non_contributing_datasets_are_dropped(ds_x, ds_z):
    """label is text in Z's first row, so Z does not contribute."""
    assert summarize([ds_z], "label") == []
    assert [s.name for s in summarize([ds_x, ds_z], "v")] == ["X"]


def test_empty_inputs():
    assert summarize([], "v") == []
    assert summarize([], "") == []


def test_zero_count_is_nan_not_error():
    st = stats_for_values(np.asarray([], dtype=float))
    assert st["count"] == 0
    for key in ("min", "max", "mean", "stddev"):
        assert math.isnan(st[key])


def test_single_value_has_zero_std():
    ds = Dataset(id="a", name="A", rows=[{"m": 5}])
    (st,) = summarize([ds], "m")
    assert st.count == 1
    assert st.stddev == 0.0


def test_numeric_values_returns_float_array(ds_x):
    arr = numeric_values(ds_x, "t")
    assert arr.dtype == float
    assert arr.tolist() == [0.0, 1.0, 2.0]


def test_summary_table_columns(ds_x, ds_y):
    df = summary_table(summarize([ds_x, ds_y], "v"))
    assert list(df.columns) == ["name"] + STATS_COLUMNS
    assert df["name"].tolist() == ["X", "Y"]
    assert df["count"].tolist() == [3, 2]


def test_summary_table_empty():
    df = summary_table([])
    assert list(df.columns) == ["name"] + STATS_COLUMNS
    assert len(df) == 0


@pytest.mark.parametrize(
    "value, expected",
    [(2.0, "2.000"), (0.81649658, "0.816"), (3, "3"), (math.nan, "-"), (None, "-"), ("x", "x")],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_summarize_is_idempotent(ds_x, ds_y):
    assert summarize([ds_x, ds_y], "v") == summarize([ds_x, ds_y], "v")


def test_int_beyond_float_range_saturates():
    ds = Dataset(id="a", name="A", rows=[{"m": 1.0}, {"m": 10**400}])
    [st] = summarize([ds], "m")
    assert st.count == 2
    assert st.min == 1.0
    assert st.max == math.inf
    assert st.mean == math.inf
