"""Unit tests for the memoizing ComparisonEngine."""

from dataclasses import replace

from labcompare.comparison.comparison_engine import ComparisonEngine
from labcompare.comparison.dataset import Dataset
from labcompare.comparison.series_aligner import CollisionPolicy, align_series
from labcompare.comparison.statistics_engine import summarize


def test_results_match_pure_functions(ds_x, ds_y, ds_z):
    engine = ComparisonEngine()
    assert engine.numeric_columns(ds_z) == ["t"]
    assert engine.metric_choices([ds_x, ds_z]) == ["t", "v"]
    assert engine.align_series([ds_x, ds_y], "v") == align_series([ds_x, ds_y], "v")
    assert engine.summarize([ds_x, ds_y], "v") == summarize([ds_x, ds_y], "v")
    assert len(engine.project_plot(ds_x, "t", "v")) == 3


def test_repeated_query_hits_cache(ds_x, ds_y):
    engine = ComparisonEngine()
    engine.align_series([ds_x, ds_y], "v")
    engine.align_series([ds_x, ds_y], "v")
    assert engine.misses == 1
    assert engine.hits == 1


def test_replacing_rows_invalidates(ds_x, ds_y):
    engine = ComparisonEngine()
    first = engine.summarize([ds_x], "v")
    ds_x2 = ds_x.with_rows(list(ds_x.rows) + [{"t": 3, "v": 10.0}])
    second = engine.summarize([ds_x2], "v")
    assert first[0].count == 3
    assert second[0].count == 4
    assert engine.misses == 2


def test_returned_values_are_copies(ds_x, ds_y):
    engine = ComparisonEngine()
    aligned = engine.align_series([ds_x, ds_y], "v")
    aligned[0]["X"] = "poisoned"
    aligned.append({"index": 99})
    again = engine.align_series([ds_x, ds_y], "v")
    assert again[0]["X"] == 1.0
    assert len(again) == 3


def test_clear_cache_and_eviction(ds_x, ds_y):
    engine = ComparisonEngine(max_entries=2)
    engine.summarize([ds_x], "v")
    engine.summarize([ds_y], "v")
    engine.summarize([ds_x, ds_y], "v")
    assert engine.cache_size == 2
    engine.clear_cache()
    assert engine.cache_size == 0


def test_collision_policy_used():
    a = Dataset(id="1", name="Run", rows=[{"v": 1.0}])
    b = Dataset(id="2", name="Run", rows=[{"v": 2.0}])
    engine = ComparisonEngine(collision=CollisionPolicy.KEY_BY_ID)
    assert engine.align_series([a, b], "v") == [{"index": 0, "1": 1.0, "2": 2.0}]
    assert engine.series_keys([a, b], "v") == ["1", "2"]
    assert engine.series_labels([a, b], "v") == {"1": "Run", "2": "Run"}


def test_empty_inputs():
    engine = ComparisonEngine()
    assert engine.align_series([], "v") == []
    assert engine.summarize([], "v") == []
    assert engine.metric_choices([]) == []


def test_renamed_dataset_is_not_served_from_cache():
    a = Dataset(id="a", name="Old", rows=[{"v": 1.0}])
    engine = ComparisonEngine()
    assert engine.align_series([a], "v") == [{"index": 0, "Old": 1.0}]
    renamed = replace(a, name="New")
    assert renamed.rows is a.rows
    assert engine.align_series([renamed], "v") == [{"index": 0, "New": 1.0}]
    assert engine.summarize([renamed], "v")[0].name == "New"
