"""Cross-dataset comparison core.

Pure functions over in-memory datasets:

- numeric_columns: which columns of a dataset are numeric (first-row rule)
- project_plot: point records for a single-dataset x/y plot
- align_series: one metric of several datasets laid out by shared row index
- summarize: count/min/max/mean/population std per dataset
- info_rows / parameter_table: overview of row counts and experiment parameters

ComparisonEngine wraps the four queries with a result cache. Figure building
(Plotly) and the NiceGUI demo live in their own modules and are not imported
here.
"""

from labcompare.comparison.color_assigner import DEFAULT_PALETTE, assign_colors, color_for_index
from labcompare.comparison.comparison_engine import ComparisonEngine
from labcompare.comparison.dataset import Dataset
from labcompare.comparison.overview import info_rows, parameter_frame, parameter_table
from labcompare.comparison.plot_projector import project_plot
from labcompare.comparison.schema_indexer import is_numeric_column, numeric_columns, numeric_columns_union
from labcompare.comparison.series_aligner import (
    CollisionPolicy,
    align_series,
    contributing_datasets,
    series_keys,
    series_labels,
)
from labcompare.comparison.statistics_engine import SummaryStatistics, summarize, summary_table
from labcompare.comparison.values import CellValue, ValueKind, classify_value

__all__ = [
    "CellValue",
    "CollisionPolicy",
    "ComparisonEngine",
    "DEFAULT_PALETTE",
    "Dataset",
    "SummaryStatistics",
    "ValueKind",
    "align_series",
    "assign_colors",
    "classify_value",
    "color_for_index",
    "contributing_datasets",
    "info_rows",
    "is_numeric_column",
    "numeric_columns",
    "numeric_columns_union",
    "parameter_frame",
    "parameter_table",
    "project_plot",
    "series_keys",
    "series_labels",
    "summarize",
    "summary_table",
]
