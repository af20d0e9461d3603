from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from marketing_browser.config.model import GlobalConfig
from marketing_browser.core.view_coordinator import ViewSnapshot
from marketing_browser.ui.ids import IDs


def build_navbar(global_config: GlobalConfig, snapshot: ViewSnapshot) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    snapshot.summary_text,
                    id=IDs.Control.RESULT_SUMMARY,
                    className="mkb-result-summary",
                ),
            ],
        ),
        className="mkb-navbar mb-3",
    )
