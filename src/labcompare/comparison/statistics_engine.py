"""Per-dataset summary statistics for one metric.

Only cells that are numbers at read time are aggregated; text and missing
cells at a numeric column are skipped, not coerced. Standard deviation is the
population form (ddof=0). With no numeric values every statistic is NaN.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from labcompare.comparison.dataset import Dataset
from labcompare.comparison.series_aligner import contributing_datasets
from labcompare.comparison.values import cell
from labcompare.utils.logging import get_logger

logger = get_logger(__name__)

# Columns of the summary table, in display order.
STATS_COLUMNS = ["count", "min", "max", "mean", "stddev"]


@dataclass(frozen=True)
class SummaryStatistics:
    """Summary of one metric in one dataset.

    Attributes:
        dataset_id: Id of the summarized dataset.
        name: Display name of the summarized dataset.
        metric: Summarized column.
        count: Number of numeric values present.
        min, max, mean, stddev: Unrounded float results; NaN when count == 0.
    """
    dataset_id: str
    name: str
    metric: str
    count: int
    min: float
    max: float
    mean: float
    stddev: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def numeric_values(dataset: Dataset, metric: str) -> np.ndarray:
    """Values of metric across all rows that are numbers, as a float array."""
    values = [c.as_float() for c in (cell(row, metric) for row in dataset.rows) if c.is_numeric]
    return np.asarray(values, dtype=float)


def stats_for_values(values: np.ndarray) -> dict[str, Any]:
    """Compute count, min, max, mean and population std for a float array."""
    n = int(values.size)
    if n == 0:
        return {"count": 0, "min": math.nan, "max": math.nan, "mean": math.nan, "stddev": math.nan}
    mean = float(np.mean(values))
    return {
        "count": n,
        "min": float(np.min(values)),
        "max": float(np.max(values)),
        "mean": mean,
        "stddev": float(np.sqrt(np.mean((values - mean) ** 2))),
    }


def summarize(datasets: Sequence[Dataset], metric: Optional[str]) -> list[SummaryStatistics]:
    """Summarize metric for each contributing dataset, in input order.

    Args:
        datasets: Datasets to summarize.
        metric: Column name; a dataset contributes when its first row holds
            metric as a number.

    Returns:
        One SummaryStatistics per contributing dataset; [] when none contributes.
    """
    out: list[SummaryStatistics] = []
    for ds in contributing_datasets(datasets, metric):
        st = stats_for_values(numeric_values(ds, metric))
        if st["count"] < len(ds):
            logger.debug(
                f"summarize: dataset {ds.id!r} metric {metric!r}: "
                f"{len(ds) - st['count']} non-numeric cells skipped"
            )
        out.append(SummaryStatistics(dataset_id=ds.id, name=ds.name, metric=metric, **st))
    return out


def summary_table(stats: Sequence[SummaryStatistics]) -> pd.DataFrame:
    """One row per dataset: name + STATS_COLUMNS."""
    if not stats:
        return pd.DataFrame(columns=["name"] + STATS_COLUMNS)
    df = pd.DataFrame([s.to_dict() for s in stats])
    return df[["name"] + STATS_COLUMNS]


def format_value(value: Any, digits: int = 3) -> str:
    """Display string for a statistic: fixed decimals, '-' for NaN/None."""
    if value is None:
        return "-"
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return str(int(value))
    try:
        f = float(value)
    except (TypeError, ValueError):
        return str(value)
    if math.isnan(f):
        return "-"
    return f"{f:.{digits}f}"
