from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nicegui import ui

import config
from logging_config import setup_logging
from mcdm import DecisionGrid, RankingClient, Submitter, get_method, list_methods, render_result
from models import DIRECTIONS, RunConfig

logger = logging.getLogger("mcdm.app")


@dataclass
class EditorSession:
    grid: DecisionGrid = field(default_factory=DecisionGrid.default)
    run_config: RunConfig = field(default_factory=RunConfig)
    submitter: Submitter = field(
        default_factory=lambda: Submitter(RankingClient(config.API_BASE, timeout=config.REQUEST_TIMEOUT))
    )


@ui.page("/")
def editor_page() -> None:
    session = EditorSession()
    grid = session.grid
    submitter = session.submitter

    def refresh_grid() -> None:
        grid_view.refresh()
        results_view.refresh()

    def add_alternative() -> None:
        grid.add_alternative()
        refresh_grid()

    def add_criterion() -> None:
        grid.add_criterion()
        refresh_grid()

    def remove_alternative(index: int) -> None:
        if grid.remove_alternative(index):
            refresh_grid()

    def remove_criterion(index: int) -> None:
        if grid.remove_criterion(index):
            refresh_grid()

    def rename_alternative(index: int, text: str | None) -> None:
        grid.rename_alternative(index, text or "")
        results_view.refresh()

    def rename_criterion(index: int, text: str | None) -> None:
        grid.rename_criterion(index, text or "")
        results_view.refresh()

    def on_method_change(event) -> None:
        session.run_config.method = get_method(event.value)

    def on_weights_toggle(event) -> None:
        session.run_config.use_automatic_weights = bool(event.value)

    def on_submission_change() -> None:
        if submitter.busy:
            run_button.props("loading")
            run_button.disable()
        else:
            run_button.props(remove="loading")
            run_button.enable()
        error_view.refresh()
        results_view.refresh()

    async def run_mcdm() -> None:
        if not await submitter.submit(grid, session.run_config):
            return
        if submitter.error:
            ui.notify(submitter.error, type="negative")

    ui.page_title("MCDM Playground")

    with ui.column().classes("w-full max-w-6xl mx-auto p-6"):
        ui.label("MCDM Playground").classes("text-3xl font-semibold")
        ui.label(
            "Compare alternatives with multiple criteria using MEREC + TOPSIS + MAIRCA. No coding, just tables."
        ).classes("text-gray-500")

        with ui.row().classes("w-full items-start gap-6 no-wrap"):
            with ui.card().classes("grow"):
                with ui.row().classes("w-full items-center justify-between"):
                    with ui.column().classes("gap-0"):
                        ui.label("Alternatives x Criteria").classes("text-lg font-semibold")
                        ui.label("Type numbers directly into the table.").classes("text-sm text-gray-500")
                    with ui.row():
                        ui.button("+ Alternative", on_click=add_alternative).props("outline color=positive")
                        ui.button("+ Criterion", on_click=add_criterion).props("outline color=primary")

                @ui.refreshable
                def grid_view() -> None:
                    criteria = grid.criteria
                    name_col_width = 180
                    cell_col_width = 170
                    min_width = name_col_width + (len(criteria) * cell_col_width)
                    grid_template = (
                        f"grid-template-columns: {name_col_width}px repeat({len(criteria)}, {cell_col_width}px);"
                    )
                    row_style = f"display: grid; {grid_template} align-items: start; gap: 12px; min-width: {min_width}px;"

                    with ui.element("div").classes("w-full overflow-x-auto").style("max-width: 100%;"):
                        with ui.column().classes("gap-2"):
                            with ui.element("div").style(row_style):
                                ui.label("Alternative").classes("font-semibold")
                                for ci, criterion in enumerate(criteria):
                                    with ui.column().classes("gap-1"):
                                        ui.input(
                                            value=criterion.name,
                                            on_change=lambda e, i=ci: rename_criterion(i, e.value),
                                        ).props("dense")
                                        ui.select(
                                            options=DIRECTIONS,
                                            value=criterion.direction,
                                            on_change=lambda e, i=ci: grid.set_criterion_direction(i, e.value),
                                        ).props("dense").classes("w-full")
                                        if len(criteria) > 1:
                                            ui.button(
                                                "Remove", on_click=lambda i=ci: remove_criterion(i)
                                            ).props("flat dense size=sm color=negative")

                            for ai, alternative in enumerate(grid.alternatives):
                                with ui.element("div").style(row_style):
                                    with ui.column().classes("gap-1"):
                                        ui.input(
                                            value=alternative.name,
                                            on_change=lambda e, i=ai: rename_alternative(i, e.value),
                                        ).props("dense")
                                        if len(grid.alternatives) > 1:
                                            ui.button(
                                                "Remove", on_click=lambda i=ai: remove_alternative(i)
                                            ).props("flat dense size=sm color=negative")
                                    for ci in range(len(criteria)):
                                        ui.input(
                                            value=alternative.values[ci],
                                            on_change=lambda e, ii=ai, jj=ci: grid.set_cell_value(ii, jj, e.value or ""),
                                        ).props('dense inputmode="decimal" input-class="text-center"')

                grid_view()

            with ui.column().classes("w-96 gap-4"):
                with ui.card().classes("w-full"):
                    ui.select(
                        options=list_methods(),
                        value=session.run_config.method,
                        label="Method",
                        on_change=on_method_change,
                    ).classes("w-full")
                    ui.checkbox(
                        "Use MEREC to compute weights automatically",
                        value=session.run_config.use_automatic_weights,
                        on_change=on_weights_toggle,
                    )
                    ui.label("Recommended for most users. Uncheck only if you want custom weights.").classes(
                        "text-sm text-gray-500"
                    )
                    run_button = ui.button("Run MCDM", on_click=run_mcdm).classes("w-full")

                @ui.refreshable
                def error_view() -> None:
                    if not submitter.error:
                        return
                    with ui.card().classes("w-full bg-red-100"):
                        ui.label(f"Error: {submitter.error}").classes("text-sm text-negative")

                error_view()

                @ui.refreshable
                def results_view() -> None:
                    if submitter.busy:
                        ui.label("Running MCDM...").classes("text-gray-500")
                        return
                    if submitter.result is None:
                        return
                    rendered = render_result(submitter.result, grid)
                    with ui.card().classes("w-full"):
                        ui.label("Weights Used").classes("text-md font-semibold")
                        ui.label(rendered.weights_text).classes("text-sm")
                        if rendered.rankings:
                            ui.label("Rankings").classes("text-md font-semibold mt-4")
                        for method_name, names in rendered.rankings.items():
                            ui.label(f"{method_name} (best -> worst):").classes("font-semibold mt-2")
                            with ui.column().classes("gap-1"):
                                for position, name in enumerate(names, start=1):
                                    ui.label(f"{position}. {name}")

                results_view()

    submitter.on_change = on_submission_change


if __name__ in {"__main__", "__mp_main__"}:
    setup_logging()
    logger.info("Ranking service at %s", config.API_BASE)
    ui.run(title="MCDM Playground", reload=False, host=config.HOST, port=config.PORT)
