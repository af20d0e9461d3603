from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import dcc, html

from marketing_browser.core.sort_engine import SORTABLE_FIELDS
from marketing_browser.core.view_coordinator import ViewSnapshot
from marketing_browser.ui.formatting import (
    COLUMNS,
    EMPTY_MESSAGE,
    NUMERIC_COLUMNS,
    page_label,
    records_to_rows,
    sort_title,
)
from marketing_browser.ui.ids import IDs, sort_button_id


def sort_button_label(snapshot: ViewSnapshot, field: str, title: str) -> list:
    return [
        html.Span(title),
        html.Span(
            snapshot.sort_indicator(field),
            className="sort-indicator active" if snapshot.sort_field == field else "sort-indicator",
        ),
    ]


def _header_cell(snapshot: ViewSnapshot, field: str, title: str) -> html.Th:
    if field not in SORTABLE_FIELDS:
        return html.Th(title, className="num" if field in NUMERIC_COLUMNS else None)

    return html.Th(
        html.Button(
            sort_button_label(snapshot, field, title),
            id=sort_button_id(field),
            n_clicks=0,
            title=sort_title(snapshot.aria_sort(field)),
            className="mkb-sort-btn",
        ),
        className="num sortable",
        **{"aria-sort": snapshot.aria_sort(field)},
    )


def build_table_rows(snapshot: ViewSnapshot) -> List[html.Tr]:
    rows = []
    for row in records_to_rows(snapshot.page_records):
        rows.append(
            html.Tr(
                [
                    html.Td(row[key], className="num" if key in NUMERIC_COLUMNS else None)
                    for key, _ in COLUMNS
                ]
            )
        )
    return rows


def hidden_if(flag: bool) -> dict:
    return {"display": "none"} if flag else {}


def build_table_panel(snapshot: ViewSnapshot) -> dbc.Card:
    table = html.Table(
        [
            html.Thead(html.Tr([_header_cell(snapshot, key, title) for key, title in COLUMNS])),
            html.Tbody(build_table_rows(snapshot), id=IDs.Control.TABLE_BODY),
        ],
        id=IDs.Control.TABLE,
        className="table table-sm mkb-table",
        style=hidden_if(snapshot.is_empty),
    )

    empty = html.Div(
        EMPTY_MESSAGE,
        id=IDs.Control.EMPTY_MESSAGE,
        className="mkb-empty text-muted",
        style=hidden_if(not snapshot.is_empty),
    )

    pagination = html.Div(
        [
            dbc.Button("Prev", id=IDs.Control.PREV_BTN, disabled=not snapshot.has_prev, size="sm", className="me-1"),
            dbc.Button("Next", id=IDs.Control.NEXT_BTN, disabled=not snapshot.has_next, size="sm"),
            html.Span(
                page_label(snapshot.current_page, snapshot.total_pages),
                id=IDs.Control.PAGE_LABEL,
                className="ms-2",
            ),
            html.Span("Go to page:", className="ms-2 me-1"),
            dcc.Input(
                id=IDs.Control.PAGE_INPUT,
                type="number",
                value=snapshot.current_page,
                debounce=True,
                className="mkb-page-input",
            ),
        ],
        className="mkb-pagination d-flex align-items-center",
    )

    return dbc.Card(
        dbc.CardBody([table, empty, pagination]),
        className="mkb-table-card",
    )
