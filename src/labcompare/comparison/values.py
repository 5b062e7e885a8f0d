"""Tagged cell values for dataset rows.

Rows hold loosely typed values (numbers, strings, or nothing). Every numeric
decision in the comparison core goes through classify_value() so that the
"is this a number" test is explicit and identical everywhere.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class ValueKind(Enum):
    """Kind of a single cell value."""
    NUMERIC = "numeric"
    TEXT = "text"
    ABSENT = "absent"


@dataclass(frozen=True)
class CellValue:
    """A cell value tagged with its kind.

    Attributes:
        kind: NUMERIC, TEXT or ABSENT.
        raw: The value as stored in the row (None when absent).
    """
    kind: ValueKind
    raw: Any = None

    @property
    def is_numeric(self) -> bool:
        return self.kind is ValueKind.NUMERIC

    def as_float(self) -> float:
        """Return the numeric value as float.

        Integers too large for a float become +inf or -inf.

        Raises:
            ValueError: If the cell is not numeric.
        """
        if not self.is_numeric:
            raise ValueError(f"Cell of kind {self.kind.value!r} has no numeric value")
        try:
            return float(self.raw)
        except OverflowError:
            # ints beyond float range saturate instead of failing
            return math.inf if self.raw > 0 else -math.inf


ABSENT = CellValue(ValueKind.ABSENT, None)


def classify_value(value: Any) -> CellValue:
    """Tag a raw row value.

    int/float (including numpy scalars) are NUMERIC; bool is not a number
    here and is tagged TEXT. None is ABSENT. NaN is still NUMERIC.
    """
    if value is None:
        return ABSENT
    if isinstance(value, bool):
        return CellValue(ValueKind.TEXT, value)
    if isinstance(value, numbers.Real):
        return CellValue(ValueKind.NUMERIC, value)
    return CellValue(ValueKind.TEXT, value)


def is_numeric_value(value: Any) -> bool:
    """True if value would be tagged NUMERIC by classify_value()."""
    return classify_value(value).is_numeric


def cell(row: Mapping[str, Any], column: str) -> CellValue:
    """Read column from row as a tagged value; a missing key is ABSENT."""
    if column not in row:
        return ABSENT
    return classify_value(row[column])
