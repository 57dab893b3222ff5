from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from ss58_viewer.config.io import load_global_config
from ss58_viewer.core.record_store import load_registry
from ss58_viewer.ui.callbacks.callbacks_table import register_table_callbacks
from ss58_viewer.ui.config import AppConfig
from ss58_viewer.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load config
    global_config = load_global_config(config_root)

    # 2) Load the registry once for the whole process; it is never reloaded
    store = load_registry(global_config.registry_file)

    # 3) App context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        store=store,
    )

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    register_table_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_entries": len(store)},
    )
    return app
