"""Comparison view state.

This module defines the PlotType enum and ComparisonState dataclass used to
serialize and manage what the comparison view is showing. The state lives in
the application, never in the comparison core: core functions receive its
fields as explicit arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from labcompare.comparison.color_assigner import DEFAULT_PALETTE
from labcompare.comparison.series_aligner import CollisionPolicy


class PlotType(Enum):
    """Enumeration of available single-dataset plot types."""
    LINE = "line"
    SCATTER = "scatter"


@dataclass
class ComparisonState:
    """Configuration state for the plot and comparison views.

    Holds the single-dataset plot selection (dataset, x/y columns, plot type),
    the comparison selection (datasets, metric), and visual options.
    """
    metric: str = ""                            # compared column; "" = nothing selected
    selected_dataset_ids: list[str] = field(default_factory=list)  # datasets in the comparison
    plot_dataset_id: Optional[str] = None       # dataset shown in the single plot
    x_col: str = ""
    y_col: str = ""
    plot_type: PlotType = PlotType.LINE
    collision_policy: CollisionPolicy = CollisionPolicy.LAST_WRITE_WINS
    palette: list[str] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    line_width: int = 2
    marker_size: int = 6
    show_legend: bool = True
    stat_digits: int = 3                        # decimals in the statistics table

    def to_dict(self) -> dict[str, Any]:
        """Serialize ComparisonState to dictionary.

        Returns:
            Dictionary representation of ComparisonState with all fields.
        """
        return {
            "metric": self.metric,
            "selected_dataset_ids": list(self.selected_dataset_ids),
            "plot_dataset_id": self.plot_dataset_id,
            "x_col": self.x_col,
            "y_col": self.y_col,
            "plot_type": self.plot_type.value,  # Convert enum to string
            "collision_policy": self.collision_policy.value,
            "palette": list(self.palette),
            "line_width": self.line_width,
            "marker_size": self.marker_size,
            "show_legend": self.show_legend,
            "stat_digits": self.stat_digits,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ComparisonState":
        """Deserialize ComparisonState from dictionary.

        Missing keys take their defaults.

        Args:
            data: Dictionary containing ComparisonState fields.

        Returns:
            ComparisonState instance created from dictionary data.

        Raises:
            ValueError: If plot_type or collision_policy is not a known value,
                or palette is empty.
        """
        plot_type = PlotType(data.get("plot_type", PlotType.LINE.value))
        collision_policy = CollisionPolicy(
            data.get("collision_policy", CollisionPolicy.LAST_WRITE_WINS.value)
        )
        palette = data.get("palette")
        if palette is None:
            palette = list(DEFAULT_PALETTE)
        elif not isinstance(palette, list) or not palette:
            raise ValueError("ComparisonState palette must be a non-empty list of colors")
        selected = data.get("selected_dataset_ids")
        if not isinstance(selected, list):
            selected = []
        plot_dataset_id = data.get("plot_dataset_id")  # Can be None
        return cls(
            metric=str(data.get("metric", "")),
            selected_dataset_ids=[str(s) for s in selected],
            plot_dataset_id=str(plot_dataset_id) if plot_dataset_id is not None else None,
            x_col=str(data.get("x_col", "")),
            y_col=str(data.get("y_col", "")),
            plot_type=plot_type,
            collision_policy=collision_policy,
            palette=[str(c) for c in palette],
            line_width=int(data.get("line_width", 2)),
            marker_size=int(data.get("marker_size", 6)),
            show_legend=bool(data.get("show_legend", True)),
            stat_digits=int(data.get("stat_digits", 3)),
        )
