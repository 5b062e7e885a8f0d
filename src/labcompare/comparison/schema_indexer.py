"""Numeric column discovery for datasets.

A column is numeric for a dataset when the dataset's FIRST row holds a number
at that key. Later rows are never consulted: a column that starts numeric
stays selectable even if later cells are text or missing, and a column that
starts as text is never offered, however many numbers follow.
"""

from __future__ import annotations

from typing import Iterable

from labcompare.comparison.dataset import Dataset
from labcompare.comparison.values import cell, classify_value


def numeric_columns(dataset: Dataset) -> list[str]:
    """Return the numeric column names of a dataset, in first-row key order.

    Args:
        dataset: Dataset to inspect.

    Returns:
        Column names whose first-row value is numeric; [] for an empty dataset.
    """
    first = dataset.first_row
    if first is None:
        return []
    return [str(key) for key, value in first.items() if classify_value(value).is_numeric]


def is_numeric_column(dataset: Dataset, column: str) -> bool:
    """True if column is numeric for dataset (first-row test)."""
    first = dataset.first_row
    if first is None or not column:
        return False
    return cell(first, column).is_numeric


def numeric_columns_union(datasets: Iterable[Dataset]) -> list[str]:
    """Ordered union of numeric columns across datasets (first-seen order).

    This is the list of metrics a comparison view offers: a metric is
    selectable when at least one dataset would contribute to it.
    """
    seen: dict[str, None] = {}
    for ds in datasets:
        for col in numeric_columns(ds):
            seen.setdefault(col, None)
    return list(seen)
