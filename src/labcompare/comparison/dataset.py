"""Dataset model for the comparison core.

A Dataset is one experiment's measurements: a stable id, a display name and
an ordered sequence of rows. Rows are replaced wholesale (with_rows), never
edited in place, so identity of the row tuple is enough to detect a change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

Row = Mapping[str, Any]


@dataclass(frozen=True, eq=False)
class Dataset:
    """An identified, named, ordered sequence of rows.

    Attributes:
        id: Opaque identifier, stable for the dataset's lifetime.
        name: Display name (used as the series key when comparing).
        rows: Ordered rows; each row maps column name -> number, string or None.
        metadata: Free-form experiment parameters (operator, temperature, ...)
            shown side by side in the overview; never read by the numeric core.
    """
    id: str
    name: str
    rows: tuple[Row, ...] = field(default_factory=tuple)
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        for i, row in enumerate(rows):
            if not isinstance(row, Mapping):
                raise ValueError(
                    f"Dataset {self.id!r}: row {i} must be a mapping, got {type(row).__name__}"
                )
        if not isinstance(self.metadata, Mapping):
            raise ValueError(
                f"Dataset {self.id!r}: metadata must be a mapping, got {type(self.metadata).__name__}"
            )
        # frozen dataclass: normalize list input to tuple
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "metadata", dict(self.metadata))

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def first_row(self) -> Optional[Row]:
        """First row, or None for an empty dataset."""
        return self.rows[0] if self.rows else None

    def with_rows(self, rows: Iterable[Row]) -> "Dataset":
        """Return a new Dataset with the same id, name and metadata and a replaced row sequence."""
        return Dataset(id=self.id, name=self.name, rows=tuple(rows), metadata=self.metadata)

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        *,
        id: str,
        name: str,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> "Dataset":
        """Build a Dataset from a DataFrame (one row per record).

        Missing cells (NaN/NA in object columns, None) become None. NaN in a
        float column is kept as a float so the column stays numeric.
        """
        records = []
        for record in df.to_dict(orient="records"):
            clean = {}
            for key, value in record.items():
                if value is pd.NA or value is pd.NaT:
                    value = None
                clean[str(key)] = value
            records.append(clean)
        return cls(id=id, name=name, rows=tuple(records), metadata=metadata or {})

    def to_dataframe(self) -> pd.DataFrame:
        """Return the rows as a DataFrame (columns in first-seen key order)."""
        return pd.DataFrame.from_records([dict(r) for r in self.rows])
