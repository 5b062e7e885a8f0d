"""Unit tests for first-row numeric column discovery."""

from labcompare.comparison.dataset import Dataset
from labcompare.comparison.schema_indexer import is_numeric_column, numeric_columns, numeric_columns_union


def test_numeric_columns_in_first_row_order(ds_x):
    assert numeric_columns(ds_x) == ["t", "v"]


def test_text_column_is_excluded(ds_z):
    assert numeric_columns(ds_z) == ["t"]


def test_empty_dataset_has_no_numeric_columns(ds_empty):
    assert numeric_columns(ds_empty) == []


def test_only_first_row_decides(ds_x):
    """Appending a row of a different type at a column does not change membership."""
    before = numeric_columns(ds_x)
    grown = ds_x.with_rows(list(ds_x.rows) + [{"t": "late", "v": None}])
    assert numeric_columns(grown) == before


def test_column_text_in_first_row_never_numeric():
    ds = Dataset(id="a", name="A", rows=[{"k": "n/a"}, {"k": 1.0}, {"k": 2.0}])
    assert numeric_columns(ds) == []
    assert not is_numeric_column(ds, "k")


def test_missing_or_none_in_first_row_is_not_numeric():
    ds = Dataset(id="a", name="A", rows=[{"a": None}, {"a": 1.0, "b": 2.0}])
    assert numeric_columns(ds) == []


def test_boolean_is_not_numeric():
    ds = Dataset(id="a", name="A", rows=[{"flag": True, "n": 1}])
    assert numeric_columns(ds) == ["n"]


def test_is_numeric_column_unknown_or_empty_name(ds_x):
    assert not is_numeric_column(ds_x, "nope")
    assert not is_numeric_column(ds_x, "")


def test_union_is_ordered_and_deduplicated(ds_x, ds_z):
    other = Dataset(id="o", name="O", rows=[{"power": 5.0, "t": 3}])
    assert numeric_columns_union([ds_x, ds_z, other]) == ["t", "v", "power"]


def test_union_of_nothing_is_empty(ds_empty):
    assert numeric_columns_union([]) == []
    assert numeric_columns_union([ds_empty]) == []
