from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from ss58_viewer.ui.ids import IDs
from ss58_viewer.ui.layout.build_navbar import build_navbar
from ss58_viewer.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from ss58_viewer.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    return dbc.Container(
        fluid=True,
        className="ss58-root",
        children=[
            build_navbar(ctx.global_config, len(ctx.store)),

            # Control state lives client-side; callbacks rebuild the TableView from it
            dcc.Store(
                id=IDs.Store.TABLE_STATE,
                storage_type="memory",
                data=ctx.initial_state().to_dict(),
            ),

            build_table_panel(ctx),
        ],
    )
