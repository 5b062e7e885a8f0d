"""Positional alignment of one metric across several datasets.

Given a metric and datasets of unequal length, produce one record per row
index with one slot per contributing dataset, for overlay charting::

    [{"index": 0, "run A": 1.0, "run B": 5.0},
     {"index": 1, "run A": 2.0, "run B": 7.0},
     {"index": 2, "run A": 3.0, "run B": None}]

A dataset contributes only when its first row holds the metric as a number.
Non-contributing datasets are left out entirely (no all-None column).
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Any, Optional, Sequence

from labcompare.comparison.dataset import Dataset
from labcompare.comparison.schema_indexer import is_numeric_column
from labcompare.utils.logging import get_logger

logger = get_logger(__name__)

INDEX_KEY = "index"


class CollisionPolicy(Enum):
    """How series slots are keyed when two datasets share a display name."""
    LAST_WRITE_WINS = "last_write_wins"  # key by name; later dataset overwrites earlier
    KEY_BY_ID = "key_by_id"              # key by dataset id; names are labels only


def contributing_datasets(datasets: Sequence[Dataset], metric: Optional[str]) -> list[Dataset]:
    """Datasets whose first row holds metric as a number, in input order."""
    if not metric:
        return []
    return [ds for ds in datasets if is_numeric_column(ds, metric)]


def _slot_key(ds: Dataset, collision: CollisionPolicy) -> str:
    if collision is CollisionPolicy.KEY_BY_ID:
        return ds.id
    return ds.name


def series_keys(
    datasets: Sequence[Dataset],
    metric: Optional[str],
    *,
    collision: CollisionPolicy = CollisionPolicy.LAST_WRITE_WINS,
) -> list[str]:
    """Ordered, de-duplicated slot keys that align_series() will emit."""
    keys: dict[str, None] = {}
    for ds in contributing_datasets(datasets, metric):
        keys.setdefault(_slot_key(ds, collision), None)
    return list(keys)


def series_labels(
    datasets: Sequence[Dataset],
    metric: Optional[str],
    *,
    collision: CollisionPolicy = CollisionPolicy.LAST_WRITE_WINS,
) -> dict[str, str]:
    """Map slot key -> display name for legends."""
    return {_slot_key(ds, collision): ds.name for ds in contributing_datasets(datasets, metric)}


def align_series(
    datasets: Sequence[Dataset],
    metric: Optional[str],
    *,
    collision: CollisionPolicy = CollisionPolicy.LAST_WRITE_WINS,
    max_rows: Optional[int] = None,
) -> list[dict[str, Any]]:
    """Align metric values of several datasets by shared row index.

    Args:
        datasets: Datasets to compare, in display order.
        metric: Column name to align.
        collision: Slot keying policy. With LAST_WRITE_WINS two datasets with
            the same name share one slot and the later one's value overwrites
            the earlier one while the later dataset still has rows.
        max_rows: Optional cap on the number of aligned records.

    Returns:
        One record per index in [0, max length of contributing datasets), each
        holding "index" and one slot per contributing dataset; None marks a
        missing value. Empty when no dataset contributes.
    """
    contributing = contributing_datasets(datasets, metric)
    if not contributing:
        logger.debug(f"align_series: no dataset contributes metric {metric!r}")
        return []

    if collision is CollisionPolicy.LAST_WRITE_WINS:
        dupes = [name for name, n in Counter(ds.name for ds in contributing).items() if n > 1]
        if dupes:
            logger.warning(
                f"align_series: duplicate dataset names {dupes} share one series slot; "
                "later datasets overwrite earlier ones"
            )

    max_length = max(len(ds) for ds in contributing)
    if max_rows is not None and max_length > max_rows:
        logger.warning(f"align_series: truncating {max_length} aligned rows to max_rows={max_rows}")
        max_length = max(0, max_rows)

    aligned: list[dict[str, Any]] = []
    for i in range(max_length):
        record: dict[str, Any] = {INDEX_KEY: i}
        for ds in contributing:
            key = _slot_key(ds, collision)
            if i < len(ds):
                record[key] = ds.rows[i].get(metric)
            else:
                # past the end: absent, but never clobber a same-named slot
                record.setdefault(key, None)
        aligned.append(record)

    logger.debug(
        f"align_series: metric={metric!r} series={len(contributing)} rows={len(aligned)}"
    )
    return aligned
