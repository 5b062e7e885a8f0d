# Demo app for ComparisonView
"""Demo application showing the plot and comparison views with NiceGUI.

Three tabs:
1. Overview: row counts and experiment parameters side by side.
2. Plot: pick one experiment and an x/y column pair -> line or scatter plot.
3. Compare: pick a metric -> overlay of all experiments plus a statistics table.

The open tab is remembered in the config (active_view).

The experiments are synthetic (seeded numpy RNG) so the demo is reproducible.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np
from nicegui import ui

from labcompare.comparison.comparison_config import VIEWS, ComparisonConfig
from labcompare.comparison.comparison_engine import ComparisonEngine
from labcompare.comparison.comparison_report import build_comparison_report, format_comparison_to_str
from labcompare.comparison.comparison_state import ComparisonState, PlotType
from labcompare.comparison.dataset import Dataset
from labcompare.comparison.figure_builder import make_overlay_figure, make_single_figure
from labcompare.comparison.overview import INFO_COLUMNS, PARAMETER_KEY, info_rows, parameter_table
from labcompare.comparison.statistics_engine import STATS_COLUMNS, SummaryStatistics, format_value
from labcompare.utils.gui_defaults import setUpGuiDefaults
from labcompare.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def make_demo_datasets(seed: int = 0) -> list[Dataset]:
    """Three battery/thermal style experiments of different lengths and schemas."""
    rng = np.random.default_rng(seed)
    datasets = []
    battery = (
        ("1", "Battery Test v1", 40, 0.002, {"operator": "J. Smith", "cell": "18650-A"}),
        ("2", "Battery Test v2", 55, 0.0015, {"operator": "J. Smith", "cell": "18650-B", "ambient": "25C"}),
    )
    for ds_id, name, n, drop, params in battery:
        t = np.arange(n) * 0.1
        voltage = 3.7 - np.arange(n) * drop + (rng.random(n) - 0.5) * 0.05
        current = 2.0 + (rng.random(n) - 0.5) * 0.2
        rows = [
            {"time": float(t[i]), "voltage": float(voltage[i]), "current": float(current[i]),
             "power": float(voltage[i] * current[i]), "sample": f"S{i + 1}"}
            for i in range(n)
        ]
        datasets.append(Dataset(id=ds_id, name=name, rows=rows, metadata=params))
    n = 30
    temp = 22 + np.arange(n) * 0.5 + (rng.random(n) - 0.5) * 2
    rows = [
        {"time": float(i * 60), "temperature": float(temp[i]), "power": float(50 + (rng.random() - 0.5) * 10)}
        for i in range(n)
    ]
    datasets.append(Dataset(id="3", name="Thermal Study", rows=rows, metadata={"chamber": "TC-2", "ambient": "22C"}))
    return datasets


def _view_name(value: Any) -> Any:
    # tab_panels reports either the tab element or its name
    if isinstance(value, ui.tab):
        return value.props.get("name")
    return value


def _param_cell(value: Any) -> str:
    return "-" if value is None or value == "" else str(value)


def stats_rows(stats: Sequence[SummaryStatistics], digits: int) -> list[dict[str, Any]]:
    """Statistics table rows, keyed by dataset_id so duplicate names stay distinct."""
    return [
        {
            "dataset_id": s.dataset_id,
            "name": s.name,
            **{c: format_value(getattr(s, c), digits) for c in STATS_COLUMNS},
        }
        for s in stats
    ]


class ComparisonView:
    """Overview, plot and comparison tabs over a fixed list of datasets.

    Holds only view state (ComparisonState); every figure and table is
    recomputed through ComparisonEngine from that state.
    """

    def __init__(
        self,
        datasets: Sequence[Dataset],
        *,
        state: Optional[ComparisonState] = None,
        config: Optional[ComparisonConfig] = None,
    ) -> None:
        self.datasets = list(datasets)
        self.config = config
        self.state = state or ComparisonState()
        self.engine = ComparisonEngine(collision=self.state.collision_policy)
        self.active_view = config.get_active_view() if config is not None else "plot"

        self._single_plot: Optional[ui.plotly] = None
        self._overlay_plot: Optional[ui.plotly] = None
        self._x_select: Optional[ui.select] = None
        self._y_select: Optional[ui.select] = None
        self._stats_table: Optional[ui.table] = None

    # -----------------------------
    # Selection helpers
    # -----------------------------
    def _plot_dataset(self) -> Optional[Dataset]:
        for ds in self.datasets:
            if ds.id == self.state.plot_dataset_id:
                return ds
        return None

    def _compared(self) -> list[Dataset]:
        if not self.state.selected_dataset_ids:
            return list(self.datasets)
        wanted = set(self.state.selected_dataset_ids)
        return [ds for ds in self.datasets if ds.id in wanted]

    # -----------------------------
    # Render
    # -----------------------------
    def render(self) -> None:
        """Create the tabs inside the current container."""
        with ui.tabs().classes("w-full") as tabs:
            tab_by_view = {view: ui.tab(view, label=view.capitalize()) for view in VIEWS}
        with ui.tab_panels(
            tabs,
            value=tab_by_view[self.active_view],
            on_change=lambda e: self._on_view(e.value),
        ).classes("w-full"):
            with ui.tab_panel(tab_by_view["overview"]):
                self._render_overview_tab()
            with ui.tab_panel(tab_by_view["plot"]):
                self._render_plot_tab()
            with ui.tab_panel(tab_by_view["compare"]):
                self._render_compare_tab()
        self._update_single_plot()
        self._update_comparison()

    def _render_overview_tab(self) -> None:
        compared = self._compared()
        ui.label("Basic Information").classes("text-lg font-bold")
        ui.table(
            columns=[{"name": c, "label": c.replace("_", " ").capitalize(), "field": c, "align": "left"}
                     for c in INFO_COLUMNS],
            rows=info_rows(compared),
            row_key="dataset_id",
        ).classes("w-full")

        params = parameter_table(compared)
        if not params:
            return
        ui.label("Custom Parameters").classes("text-lg font-bold")
        columns = [{"name": PARAMETER_KEY, "label": "Parameter", "field": PARAMETER_KEY, "align": "left"}]
        columns += [{"name": ds.id, "label": ds.name, "field": ds.id, "align": "left"} for ds in compared]
        rows = [
            {k: (v if k == PARAMETER_KEY else _param_cell(v)) for k, v in record.items()}
            for record in params
        ]
        ui.table(columns=columns, rows=rows, row_key=PARAMETER_KEY).classes("w-full")

    def _render_plot_tab(self) -> None:
        with ui.row().classes("w-full gap-4 items-center"):
            ui.select(
                {ds.id: f"{ds.name} ({len(ds)} rows)" for ds in self.datasets if len(ds) > 0},
                value=self.state.plot_dataset_id,
                label="Experiment",
                on_change=lambda e: self._on_plot_dataset(e.value),
            ).classes("flex-1")
            ui.select(
                [p.value for p in PlotType],
                value=self.state.plot_type.value,
                label="Plot Type",
                on_change=lambda e: self._on_plot_type(e.value),
            ).classes("w-32")
            self._x_select = ui.select(
                [], value=None, label="X-Axis", on_change=lambda e: self._on_axis("x_col", e.value),
            ).classes("w-40")
            self._y_select = ui.select(
                [], value=None, label="Y-Axis", on_change=lambda e: self._on_axis("y_col", e.value),
            ).classes("w-40")
        self._single_plot = ui.plotly(make_single_figure([], self.state)).classes("w-full h-96")
        self._refresh_axis_options()

    def _render_compare_tab(self) -> None:
        with ui.row().classes("w-full gap-4 items-center"):
            ui.select(
                self.engine.metric_choices(self._compared()),
                value=self.state.metric or None,
                label="Compare Metric",
                on_change=lambda e: self._on_metric(e.value),
            ).classes("w-64")
            ui.button("Copy report", on_click=self._copy_report)
        self._overlay_plot = ui.plotly(make_overlay_figure([], [], self.state)).classes("w-full h-96")
        columns = [{"name": "name", "label": "Experiment", "field": "name", "align": "left"}]
        columns += [{"name": c, "label": c.capitalize(), "field": c} for c in STATS_COLUMNS]
        self._stats_table = ui.table(columns=columns, rows=[], row_key="dataset_id").classes("w-full")

    # -----------------------------
    # Events
    # -----------------------------
    def _on_view(self, value: Any) -> None:
        view = _view_name(value)
        if view not in VIEWS:
            return
        self.active_view = view
        if self.config is not None:
            self.config.set_active_view(view)
        self._save_state()

    def _on_plot_dataset(self, dataset_id: Optional[str]) -> None:
        self.state.plot_dataset_id = dataset_id
        self.state.x_col = ""
        self.state.y_col = ""
        self._refresh_axis_options()
        self._update_single_plot()

    def _on_plot_type(self, value: str) -> None:
        self.state.plot_type = PlotType(value)
        self._update_single_plot()

    def _on_axis(self, attr: str, value: Optional[str]) -> None:
        setattr(self.state, attr, value or "")
        self._update_single_plot()

    def _on_metric(self, value: Optional[str]) -> None:
        self.state.metric = value or ""
        self._update_comparison()

    def _refresh_axis_options(self) -> None:
        ds = self._plot_dataset()
        options = self.engine.numeric_columns(ds) if ds is not None else []
        for select, current in ((self._x_select, self.state.x_col), (self._y_select, self.state.y_col)):
            if select is None:
                continue
            select.set_options(options, value=current if current in options else None)
        if ds is not None and not options:
            ui.notify("No numeric columns found in the selected experiment data.", type="warning")

    def _update_single_plot(self) -> None:
        if self._single_plot is None:
            return
        ds = self._plot_dataset()
        points = self.engine.project_plot(ds, self.state.x_col, self.state.y_col) if ds is not None else []
        self._single_plot.update_figure(make_single_figure(points, self.state))
        self._save_state()

    def _update_comparison(self) -> None:
        if self._overlay_plot is None or self._stats_table is None:
            return
        compared = self._compared()
        aligned = self.engine.align_series(compared, self.state.metric)
        keys = self.engine.series_keys(compared, self.state.metric)
        labels = self.engine.series_labels(compared, self.state.metric)
        self._overlay_plot.update_figure(make_overlay_figure(aligned, keys, self.state, labels=labels))
        stats = self.engine.summarize(compared, self.state.metric)
        self._stats_table.rows = stats_rows(stats, self.state.stat_digits)
        self._stats_table.update()
        self._save_state()

    def _copy_report(self) -> None:
        compared = self._compared()
        report = build_comparison_report(
            self.state,
            self.engine.summarize(compared, self.state.metric),
            self.engine.align_series(compared, self.state.metric),
            self.engine.series_keys(compared, self.state.metric),
        )
        ui.clipboard.write(format_comparison_to_str(report, digits=self.state.stat_digits))
        ui.notify("Comparison report copied to clipboard")

    def _save_state(self) -> None:
        if self.config is None:
            return
        self.config.set_comparison_state(self.state)
        try:
            self.config.save()
        except OSError:
            logger.warning("comparison state not saved")


# ----------------------------
# Demo entrypoint
# ----------------------------

def main() -> None:
    """Demo entrypoint: synthetic experiments, persisted view state."""
    setup_logging(level="INFO")

    config = ComparisonConfig.load()
    datasets = make_demo_datasets()

    setUpGuiDefaults()
    ui.page_title("labcompare - Experiment Comparison Demo")

    with ui.column().classes("w-full gap-4 p-4"):
        ui.label("Hardware Experiments").classes("text-2xl font-bold")
        view = ComparisonView(datasets, state=config.get_comparison_state(), config=config)
        view.render()

    ui.run(reload=False, native=False)


if __name__ in {"__main__", "__mp_main__"}:
    main()
