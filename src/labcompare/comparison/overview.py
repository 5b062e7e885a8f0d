"""Side-by-side overview of the compared experiments.

Two tables, both plain records so the UI (or a report) can render them:

- info_rows(): one row per dataset with its row count and numeric columns.
- parameter_table(): one row per metadata key, one cell per dataset. Keys are
  the ordered union across datasets; a dataset without the key gets None.

Parameter cells are keyed by dataset id, not name, so two experiments that
share a display name still get separate columns.
"""

from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from labcompare.comparison.dataset import Dataset
from labcompare.comparison.schema_indexer import numeric_columns

PARAMETER_KEY = "parameter"

# Columns of info_rows(), in display order.
INFO_COLUMNS = ["dataset_id", "name", "rows", "numeric_columns"]


def info_rows(datasets: Sequence[Dataset]) -> list[dict[str, Any]]:
    """Basic information per dataset, in input order."""
    return [
        {
            "dataset_id": ds.id,
            "name": ds.name,
            "rows": len(ds),
            "numeric_columns": len(numeric_columns(ds)),
        }
        for ds in datasets
    ]


def parameter_keys(datasets: Sequence[Dataset]) -> list[str]:
    """Ordered union of metadata keys (first-seen order, no duplicates)."""
    seen: dict[str, None] = {}
    for ds in datasets:
        for key in ds.metadata:
            seen.setdefault(str(key), None)
    return list(seen)


def parameter_table(datasets: Sequence[Dataset]) -> list[dict[str, Any]]:
    """One record per metadata key: {"parameter": key, <dataset id>: value-or-None, ...}.

    Returns [] when no dataset carries metadata.
    """
    table = []
    for key in parameter_keys(datasets):
        record: dict[str, Any] = {PARAMETER_KEY: key}
        for ds in datasets:
            record[ds.id] = ds.metadata.get(key)
        table.append(record)
    return table


def parameter_frame(datasets: Sequence[Dataset]) -> pd.DataFrame:
    """parameter_table() as a DataFrame indexed by parameter, one column per dataset id."""
    columns = [ds.id for ds in datasets]
    records = parameter_table(datasets)
    if not records:
        return pd.DataFrame(columns=columns, index=pd.Index([], name=PARAMETER_KEY))
    return pd.DataFrame(records, columns=[PARAMETER_KEY] + columns).set_index(PARAMETER_KEY)
