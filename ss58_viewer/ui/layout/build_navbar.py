from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from ss58_viewer.config.model import GlobalConfig


def build_navbar(global_config: GlobalConfig, n_entries: int) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            f"{n_entries} registered networks",
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.A(
                    "GitHub",
                    href=global_config.repo_url,
                    target="_blank",
                    rel="noopener noreferrer",
                    className="ms-auto btn btn-outline-secondary",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm ss58-navbar",
    )
