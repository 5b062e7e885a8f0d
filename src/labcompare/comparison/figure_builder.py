"""Plotly figure generation for the plot and comparison views.

Builds Plotly figure dictionaries from the plain records produced by the
comparison core (project_plot / align_series). Nothing here computes data;
it only maps records onto traces and colors.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

import plotly.graph_objects as go

from labcompare.comparison.color_assigner import assign_colors
from labcompare.comparison.comparison_state import ComparisonState, PlotType
from labcompare.comparison.plot_projector import INDEX_KEY
from labcompare.utils.logging import get_logger

logger = get_logger(__name__)

_LAYOUT_MARGIN = dict(l=20, r=30, t=40, b=20)


def plot_title(state: ComparisonState) -> str:
    """Title of the single-dataset plot ('y vs x'), or a placeholder."""
    if state.x_col and state.y_col:
        return f"{state.y_col} vs {state.x_col}"
    return "Data Visualization"


def make_single_figure(points: Sequence[Mapping[str, Any]], state: ComparisonState) -> dict:
    """Line or scatter figure of state.y_col against state.x_col.

    Args:
        points: Records from project_plot(), in row order.
        state: Supplies axes, plot type, palette and sizes.

    Returns:
        Plotly figure dictionary; an empty figure (no traces) when points is empty.
    """
    fig = go.Figure()
    if points:
        color = assign_colors([state.y_col], state.palette)[0]
        mode = "markers" if state.plot_type == PlotType.SCATTER else "lines+markers"
        fig.add_trace(go.Scatter(
            x=[p.get(state.x_col) for p in points],
            y=[p.get(state.y_col) for p in points],
            mode=mode,
            name=plot_title(state),
            customdata=[p.get(INDEX_KEY) for p in points],
            line=dict(color=color, width=state.line_width),
            marker=dict(color=color, size=state.marker_size),
            hovertemplate=(
                f"row=%{{customdata}}<br>{state.x_col}=%{{x:.3f}}<br>{state.y_col}=%{{y:.3f}}"
                "<extra></extra>"
            ),
        ))
    fig.update_layout(
        title=plot_title(state),
        xaxis_title=state.x_col or None,
        yaxis_title=state.y_col or None,
        showlegend=state.show_legend and bool(points),
        margin=_LAYOUT_MARGIN,
    )
    logger.debug(f"make_single_figure: plot_type={state.plot_type.value} points={len(points)}")
    return fig.to_dict()


def make_overlay_figure(
    aligned: Sequence[Mapping[str, Any]],
    keys: Sequence[str],
    state: ComparisonState,
    *,
    labels: Optional[Mapping[str, str]] = None,
) -> dict:
    """One line per series over the shared row index.

    Args:
        aligned: Records from align_series().
        keys: Series slot keys in legend order (series_keys()); colors are
            assigned by position in this list.
        state: Supplies metric, palette and sizes.
        labels: Optional slot key -> legend name (used when keyed by id).

    Returns:
        Plotly figure dictionary. Missing values (None) become gaps.
    """
    fig = go.Figure()
    x = [r[INDEX_KEY] for r in aligned]
    colors = assign_colors(keys, state.palette)
    for key, color in zip(keys, colors):
        name = labels.get(key, key) if labels else key
        fig.add_trace(go.Scatter(
            x=x,
            y=[r.get(key) for r in aligned],
            mode="lines+markers",
            name=name,
            line=dict(color=color, width=state.line_width),
            marker=dict(color=color, size=state.marker_size / 2),
            hovertemplate=f"{name}<br>index=%{{x}}<br>{state.metric}=%{{y:.3f}}<extra></extra>",
        ))
    fig.update_layout(
        title=f"{state.metric} across experiments" if state.metric else "Data Comparison",
        xaxis_title=INDEX_KEY,
        yaxis_title=state.metric or None,
        showlegend=state.show_legend,
        margin=_LAYOUT_MARGIN,
    )
    logger.debug(f"make_overlay_figure: metric={state.metric!r} series={len(keys)} rows={len(aligned)}")
    return fig.to_dict()
