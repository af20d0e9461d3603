from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from marketing_browser.config.io import load_app_data
from marketing_browser.ui.callbacks.callbacks_view import register_view_callbacks
from marketing_browser.ui.config import AppConfig
from marketing_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load config + records
    global_config, dataset = load_app_data(config_root)

    # 2) App context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=dataset,
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    register_view_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_records": len(dataset)},
    )
    return app
