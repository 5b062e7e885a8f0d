"""Memoizing facade over the comparison core.

ComparisonEngine is what the presentation layer talks to. It exposes the four
queries (numeric_columns, project_plot, align_series, summarize) and caches
their results per input selection, so re-rendering with an unchanged
selection does not recompute anything.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Optional, Sequence

from labcompare.comparison import plot_projector, schema_indexer, series_aligner, statistics_engine
from labcompare.comparison.dataset import Dataset
from labcompare.comparison.series_aligner import CollisionPolicy
from labcompare.comparison.statistics_engine import SummaryStatistics
from labcompare.utils.logging import get_logger

logger = get_logger(__name__)


def _dataset_key(ds: Dataset) -> tuple[str, str, int]:
    # rows are only ever replaced wholesale, so the tuple's identity tracks content;
    # name is part of the key because series slots and statistics carry it
    return (ds.id, ds.name, id(ds.rows))


class ComparisonEngine:
    """Caches comparison results keyed by dataset identity and selection.

    A cache entry keeps references to the datasets it was computed from, so a
    row tuple's id cannot be recycled while its entry exists. Replacing a
    dataset's rows (Dataset.with_rows) changes the key and the stale entry is
    simply never hit again; clear_cache() drops everything.

    Results are returned as fresh copies; callers may mutate them freely.

    Attributes:
        collision: Slot keying policy used by align_series.
        max_rows: Optional cap on aligned rows (None = no cap).
        max_entries: Cache size; the oldest entry is evicted first.
    """

    def __init__(
        self,
        *,
        collision: CollisionPolicy = CollisionPolicy.LAST_WRITE_WINS,
        max_rows: Optional[int] = None,
        max_entries: int = 128,
    ) -> None:
        self.collision = collision
        self.max_rows = max_rows
        self.max_entries = max_entries
        self._cache: dict[Hashable, tuple[tuple[Dataset, ...], Any]] = {}
        self.hits = 0
        self.misses = 0

    def clear_cache(self) -> None:
        self._cache.clear()

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def _cached(
        self,
        op: str,
        datasets: Sequence[Dataset],
        args: tuple,
        compute: Callable[[], Any],
    ) -> Any:
        key = (op, tuple(_dataset_key(ds) for ds in datasets), args)
        entry = self._cache.get(key)
        if entry is not None:
            self.hits += 1
            return entry[1]
        self.misses += 1
        result = compute()
        if len(self._cache) >= self.max_entries:
            # dicts keep insertion order: drop the oldest entry
            self._cache.pop(next(iter(self._cache)))
        self._cache[key] = (tuple(datasets), result)
        logger.debug(f"{op}{args}: computed for {len(datasets)} dataset(s)")
        return result

    # -----------------------------
    # Queries
    # -----------------------------
    def numeric_columns(self, dataset: Dataset) -> list[str]:
        """Numeric columns of one dataset (first-row classification)."""
        result = self._cached(
            "numeric_columns", [dataset], (), lambda: schema_indexer.numeric_columns(dataset)
        )
        return list(result)

    def metric_choices(self, datasets: Sequence[Dataset]) -> list[str]:
        """Metrics offered for comparing datasets (ordered union of numeric columns)."""
        result = self._cached(
            "metric_choices", datasets, (), lambda: schema_indexer.numeric_columns_union(datasets)
        )
        return list(result)

    def project_plot(self, dataset: Dataset, x_col: Optional[str], y_col: Optional[str]) -> list[dict[str, Any]]:
        """Point records for a single-dataset x/y plot."""
        result = self._cached(
            "project_plot",
            [dataset],
            (x_col, y_col),
            lambda: plot_projector.project_plot(dataset, x_col, y_col),
        )
        return [dict(p) for p in result]

    def align_series(self, datasets: Sequence[Dataset], metric: Optional[str]) -> list[dict[str, Any]]:
        """Aligned multi-series records for overlay plotting."""
        result = self._cached(
            "align_series",
            datasets,
            (metric, self.collision, self.max_rows),
            lambda: series_aligner.align_series(
                datasets, metric, collision=self.collision, max_rows=self.max_rows
            ),
        )
        return [dict(r) for r in result]

    def series_keys(self, datasets: Sequence[Dataset], metric: Optional[str]) -> list[str]:
        """Slot keys emitted by align_series, in legend order."""
        return series_aligner.series_keys(datasets, metric, collision=self.collision)

    def series_labels(self, datasets: Sequence[Dataset], metric: Optional[str]) -> dict[str, str]:
        return series_aligner.series_labels(datasets, metric, collision=self.collision)

    def summarize(self, datasets: Sequence[Dataset], metric: Optional[str]) -> list[SummaryStatistics]:
        """Summary statistics per contributing dataset."""
        result = self._cached(
            "summarize", datasets, (metric,), lambda: statistics_engine.summarize(datasets, metric)
        )
        # SummaryStatistics is frozen; a new list is enough
        return list(result)
