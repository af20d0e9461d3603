from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from marketing_browser.core.view_coordinator import ViewSnapshot
from marketing_browser.ui.ids import IDs


def dropdown_options(values) -> list[dict]:
    return [{"label": v, "value": v} for v in values]


def build_filter_panel(snapshot: ViewSnapshot) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                dbc.Row(
                    [
                        dbc.Col(
                            [
                                html.Label("Channel", className="form-label"),
                                dcc.Dropdown(
                                    id=IDs.Control.CHANNEL_SELECT,
                                    options=dropdown_options(snapshot.channel_options),
                                    value=snapshot.selected_channel,
                                    clearable=False,
                                ),
                            ],
                            md=6,
                        ),
                        dbc.Col(
                            [
                                html.Label("Region", className="form-label"),
                                dcc.Dropdown(
                                    id=IDs.Control.REGION_SELECT,
                                    options=dropdown_options(snapshot.region_options),
                                    value=snapshot.selected_region,
                                    clearable=False,
                                ),
                            ],
                            md=6,
                        ),
                    ]
                )
            ),
        ],
        className="mkb-filter-card mb-3",
    )
