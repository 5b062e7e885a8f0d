"""
labcompare: record, browse and compare tabular measurement datasets.

This package provides:
- A pure comparison core (labcompare.comparison): numeric column discovery,
  single-dataset plot projection, cross-dataset series alignment and
  per-dataset summary statistics
- Plotly figure builders and a NiceGUI demo view on top of that core
- Logging utilities for library and application use

For logging configuration in standalone scripts/demos:
    ```python
    from labcompare.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the parent application's
configuration.
"""

import logging

from labcompare.utils.logging import configure_logging, get_logger

from labcompare.comparison import (
    ComparisonEngine,
    Dataset,
    SummaryStatistics,
    align_series,
    numeric_columns,
    project_plot,
    summarize,
)

# Ensure labcompare logger has NullHandler so logs don't propagate to root
# when no application has configured logging. Applications/demos call
# configure_logging() to replace this with a real handler.
_logger = logging.getLogger("labcompare")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "ComparisonEngine",
    "Dataset",
    "SummaryStatistics",
    "align_series",
    "configure_logging",
    "get_logger",
    "numeric_columns",
    "project_plot",
    "summarize",
]

__version__ = "0.1.0"
