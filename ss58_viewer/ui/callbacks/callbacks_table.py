from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from ss58_viewer.ui.helpers import apply_control_event, snapshot_outputs
from ss58_viewer.ui.ids import IDs

if TYPE_CHECKING:
    from ss58_viewer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Any control change -> recompute filter, sort and page
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.REGISTRY_TABLE, "data"),
        Output(IDs.Control.REGISTRY_TABLE, "sort_by"),
        Output(IDs.Control.TABLE_SUMMARY, "children"),
        Output(IDs.Control.PAGE_LABEL, "children"),
        Output(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Output(IDs.Control.FIRST_PAGE_BTN, "disabled"),
        Output(IDs.Control.PREVIOUS_PAGE_BTN, "disabled"),
        Output(IDs.Control.NEXT_PAGE_BTN, "disabled"),
        Output(IDs.Control.LAST_PAGE_BTN, "disabled"),
        Output(IDs.Store.TABLE_STATE, "data"),
        Input(IDs.Control.FILTER_INPUT, "value"),
        Input(IDs.Control.REGISTRY_TABLE, "sort_by"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Input(IDs.Control.FIRST_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.PREVIOUS_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.LAST_PAGE_BTN, "n_clicks"),
        State(IDs.Store.TABLE_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_table(filter_text, sort_by, page_size, _first, _prev, _next, _last, state_data):
        triggered_id = dash.ctx.triggered_id
        view = ctx.restore_view(state_data)

        try:
            snapshot = apply_control_event(
                view,
                triggered_id,
                filter_text=filter_text,
                sort_by=sort_by,
                page_size=page_size,
            )
        except (KeyError, TypeError, ValueError):
            # Stale or tampered client values; keep the previous snapshot.
            logger.warning(
                "Ignoring invalid table control event",
                extra={"trigger": str(triggered_id), "sort_by": sort_by, "page_size": page_size},
                exc_info=True,
            )
            snapshot = view.snapshot

        logger.debug(
            "Table recomputed",
            extra={
                "trigger": str(triggered_id),
                "filtered_rows": snapshot.filtered_rows,
                "page_index": snapshot.page_index,
            },
        )

        return snapshot_outputs(snapshot, view)
