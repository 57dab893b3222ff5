from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dash_table, dcc, html

from ss58_viewer.core.table_view import TableSnapshot
from ss58_viewer.ui.helpers import (
    page_label,
    page_size_options,
    sort_by_for,
    summary_text,
    table_columns,
    table_records,
)
from ss58_viewer.ui.ids import IDs

if TYPE_CHECKING:
    from ss58_viewer.ui.config import AppConfig

FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def build_registry_table(snapshot: TableSnapshot) -> dash_table.DataTable:
    """
    Registry DataTable. Sorting and paging are "custom": the table only reports
    header clicks, the rows come from the TableView snapshot.
    """
    return dash_table.DataTable(
        id=IDs.Control.REGISTRY_TABLE,
        data=table_records(snapshot.rows),
        columns=table_columns(),
        sort_action="custom",
        sort_mode="single",
        sort_by=sort_by_for(snapshot.sort),
        page_action="none",
        filter_action="none",
        markdown_options={"link_target": "_blank"},

        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": FONT_FAMILY,
            "fontSize": "13px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "320px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontFamily": FONT_FAMILY,
            "fontSize": "13px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
    )


def build_pagination_bar(snapshot: TableSnapshot, ctx: AppConfig) -> dbc.Row:
    def nav_button(label: str, btn_id: str, disabled: bool) -> dbc.Button:
        return dbc.Button(
            label,
            id=btn_id,
            n_clicks=0,
            disabled=disabled,
            color="secondary",
            outline=True,
            size="sm",
        )

    return dbc.Row(
        [
            dbc.Col(
                dbc.ButtonGroup(
                    [
                        nav_button("<<", IDs.Control.FIRST_PAGE_BTN, not snapshot.can_previous_page),
                        nav_button("<", IDs.Control.PREVIOUS_PAGE_BTN, not snapshot.can_previous_page),
                        nav_button(">", IDs.Control.NEXT_PAGE_BTN, not snapshot.can_next_page),
                        nav_button(">>", IDs.Control.LAST_PAGE_BTN, not snapshot.can_next_page),
                    ]
                ),
                width="auto",
            ),
            dbc.Col(
                html.Strong(page_label(snapshot), id=IDs.Control.PAGE_LABEL),
                width="auto",
            ),
            dbc.Col(
                dcc.Dropdown(
                    id=IDs.Control.PAGE_SIZE_SELECT,
                    options=page_size_options(ctx.global_config.page_size_options),
                    value=snapshot.page.page_size,
                    clearable=False,
                    style={"minWidth": "140px"},
                ),
                width="auto",
            ),
        ],
        className="mt-3 justify-content-between align-items-center",
    )


def build_table_panel(ctx: AppConfig) -> dbc.Card:
    snapshot = ctx.make_view(ctx.initial_state()).snapshot

    return dbc.Card(
        dbc.CardBody(
            [
                dbc.Input(
                    id=IDs.Control.FILTER_INPUT,
                    value="",
                    type="text",
                    placeholder=ctx.global_config.filter_placeholder,
                    className="mb-2",
                ),
                html.Div(
                    summary_text(snapshot),
                    id=IDs.Control.TABLE_SUMMARY,
                    className="text-muted small mb-2",
                ),
                build_registry_table(snapshot),
                build_pagination_bar(snapshot, ctx),
            ]
        ),
        className="mt-3",
    )
