"""Single-dataset point projection for x/y plots."""

from __future__ import annotations

from typing import Any, Optional

from labcompare.comparison.dataset import Dataset
from labcompare.comparison.schema_indexer import is_numeric_column
from labcompare.utils.logging import get_logger

logger = get_logger(__name__)

INDEX_KEY = "index"


def project_plot(
    dataset: Dataset,
    x_col: Optional[str],
    y_col: Optional[str],
) -> list[dict[str, Any]]:
    """Project a dataset onto an (x, y) column pair, one point record per row.

    Each record is a copy of the original row with the x and y values and the
    zero-based row index laid over it::

        {**row, x_col: row[x_col], y_col: row[y_col], "index": i}

    Row order is preserved; nothing is sorted or bucketed, even when x is not
    monotonic. A row missing x or y yields None at that key.

    Args:
        dataset: Dataset to project.
        x_col: X column name; must be a numeric column of the dataset.
        y_col: Y column name; must be a numeric column of the dataset.

    Returns:
        List of point records. Empty ("no plot yet") when an axis is unselected,
        the dataset has no rows, or an axis is not a numeric column.
    """
    if not x_col or not y_col or len(dataset) == 0:
        return []
    for col in (x_col, y_col):
        if not is_numeric_column(dataset, col):
            logger.debug(f"dataset {dataset.id!r}: column {col!r} is not numeric, nothing to plot")
            return []

    points: list[dict[str, Any]] = []
    for i, row in enumerate(dataset.rows):
        point = dict(row)
        point[x_col] = row.get(x_col)
        point[y_col] = row.get(y_col)
        point[INDEX_KEY] = i
        points.append(point)
    return points
