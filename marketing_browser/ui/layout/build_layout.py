from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from marketing_browser.core.view_coordinator import ViewCoordinator
from marketing_browser.ui.config import AppConfig
from marketing_browser.ui.ids import IDs
from marketing_browser.ui.layout.build_filter_panel import build_filter_panel
from marketing_browser.ui.layout.build_navbar import build_navbar
from marketing_browser.ui.layout.build_table_panel import build_table_panel


def build_layout(ctx: AppConfig) -> dbc.Container:
    coordinator = ViewCoordinator(ctx.dataset)
    snapshot = coordinator.snapshot()

    return dbc.Container(
        fluid=True,
        className="mkb-root",
        children=[
            build_navbar(ctx.global_config, snapshot),

            dcc.Store(
                id=IDs.Store.VIEW_STATE,
                storage_type="memory",
                data=coordinator.state.to_dict(),
            ),

            build_filter_panel(snapshot),
            build_table_panel(snapshot),
        ],
    )
