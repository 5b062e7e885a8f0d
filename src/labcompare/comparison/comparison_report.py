"""Plain-text comparison report (params, summary table, aligned series).

Tab-separated so the text pastes into spreadsheet columns. Used by the
comparison view's "copy report" action; does not depend on Plotly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from labcompare.comparison.comparison_state import ComparisonState
from labcompare.comparison.series_aligner import INDEX_KEY
from labcompare.comparison.statistics_engine import (
    STATS_COLUMNS,
    SummaryStatistics,
    format_value,
    summary_table,
)

# Params keys that are purely visual (excluded from text report).
PARAMS_VISUAL_KEYS = frozenset({
    "palette", "line_width", "marker_size", "show_legend", "stat_digits",
})


@dataclass
class ComparisonReport:
    """Structured summary of a comparison.

    Attributes:
        params: ComparisonState as dict (state.to_dict()).
        summary_table: One row per contributing dataset (name + stats).
        aligned: Wide table: index column plus one column per series key.
    """
    params: dict[str, Any]
    summary_table: pd.DataFrame
    aligned: pd.DataFrame


def build_comparison_report(
    state: ComparisonState,
    stats: Sequence[SummaryStatistics],
    aligned: Sequence[Mapping[str, Any]],
    keys: Sequence[str],
) -> ComparisonReport:
    """Collect the pieces of a comparison into a ComparisonReport."""
    columns = [INDEX_KEY] + list(keys)
    aligned_df = pd.DataFrame([{c: r.get(c) for c in columns} for r in aligned], columns=columns)
    return ComparisonReport(
        params=state.to_dict(),
        summary_table=summary_table(stats),
        aligned=aligned_df,
    )


def _cell(value: Any, digits: Optional[int]) -> str:
    if value is None:
        return ""
    if digits is None:
        return str(value)
    return format_value(value, digits)


def format_comparison_to_str(report: ComparisonReport, *, digits: Optional[int] = None) -> str:
    """Convert ComparisonReport to a plain-text string.

    Args:
        report: Report to format.
        digits: Decimals for the summary table; None writes full precision.
    """
    sep = "\t"
    lines: list[str] = []
    # (1) Params (tab between name and value; exclude purely visual keys)
    lines.append("=== Params ===")
    for k, v in report.params.items():
        if k in PARAMS_VISUAL_KEYS:
            continue
        lines.append(f"{k}{sep}{v}")
    # (2) Summary table
    lines.append("")
    lines.append("=== Summary table ===")
    if len(report.summary_table) > 0:
        lines.append(sep.join(["name"] + STATS_COLUMNS))
        for _, row in report.summary_table.iterrows():
            cells = [str(row["name"])]
            cells.extend(_cell(row[c], digits) for c in STATS_COLUMNS)
            lines.append(sep.join(cells))
    else:
        lines.append("(none)")
    # (3) Aligned series (absent slots are blank cells)
    lines.append("")
    lines.append("=== Aligned series ===")
    if len(report.aligned) > 0:
        lines.append(sep.join(str(c) for c in report.aligned.columns))
        for record in report.aligned.to_dict(orient="records"):
            lines.append(sep.join(_cell(_none_if_nan(v), None) for v in record.values()))
    else:
        lines.append("(none)")
    return "\n".join(lines)


def _none_if_nan(value: Any) -> Any:
    # object columns keep None; numeric columns turn it into NaN
    if isinstance(value, float) and value != value:
        return None
    return value
