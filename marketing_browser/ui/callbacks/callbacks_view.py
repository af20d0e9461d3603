from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, State

from marketing_browser.core.sort_engine import SORTABLE_FIELDS
from marketing_browser.core.view_coordinator import ViewCoordinator, ViewSnapshot
from marketing_browser.ui.callbacks.callbacks_utils import apply_view_event, try_parse_view_state
from marketing_browser.ui.formatting import COLUMNS, page_label, sort_title
from marketing_browser.ui.ids import IDs, sort_button_id
from marketing_browser.ui.layout.build_filter_panel import dropdown_options
from marketing_browser.ui.layout.build_table_panel import build_table_rows, hidden_if, sort_button_label

if TYPE_CHECKING:
    from marketing_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

SORT_TITLES = dict(COLUMNS)


def render_outputs(coordinator: ViewCoordinator, snapshot: ViewSnapshot) -> tuple:
    """Everything the view callback writes, in Output order."""
    sort_labels = [sort_button_label(snapshot, f, SORT_TITLES[f]) for f in SORTABLE_FIELDS]
    sort_titles = [sort_title(snapshot.aria_sort(f)) for f in SORTABLE_FIELDS]

    return (
        coordinator.state.to_dict(),
        dropdown_options(snapshot.channel_options),
        snapshot.selected_channel,
        dropdown_options(snapshot.region_options),
        snapshot.selected_region,
        build_table_rows(snapshot),
        hidden_if(snapshot.is_empty),
        hidden_if(not snapshot.is_empty),
        snapshot.summary_text,
        page_label(snapshot.current_page, snapshot.total_pages),
        not snapshot.has_prev,
        not snapshot.has_next,
        snapshot.current_page,
        *sort_labels,
        *sort_titles,
    )


def register_view_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Single event loop: control -> one coordinator event -> store + markup.
    # Controls are both Input and Output here so they can be reset
    # (region after a channel change, page after clamping).
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Output(IDs.Control.CHANNEL_SELECT, "options"),
        Output(IDs.Control.CHANNEL_SELECT, "value"),
        Output(IDs.Control.REGION_SELECT, "options"),
        Output(IDs.Control.REGION_SELECT, "value"),
        Output(IDs.Control.TABLE_BODY, "children"),
        Output(IDs.Control.TABLE, "style"),
        Output(IDs.Control.EMPTY_MESSAGE, "style"),
        Output(IDs.Control.RESULT_SUMMARY, "children"),
        Output(IDs.Control.PAGE_LABEL, "children"),
        Output(IDs.Control.PREV_BTN, "disabled"),
        Output(IDs.Control.NEXT_BTN, "disabled"),
        Output(IDs.Control.PAGE_INPUT, "value"),
        *[Output(sort_button_id(f), "children") for f in SORTABLE_FIELDS],
        *[Output(sort_button_id(f), "title") for f in SORTABLE_FIELDS],
        Input(IDs.Control.CHANNEL_SELECT, "value"),
        Input(IDs.Control.REGION_SELECT, "value"),
        Input(IDs.Control.PREV_BTN, "n_clicks"),
        Input(IDs.Control.NEXT_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_INPUT, "value"),
        *[Input(sort_button_id(f), "n_clicks") for f in SORTABLE_FIELDS],
        State(IDs.Store.VIEW_STATE, "data"),
    )
    def update_view(channel, region, _prev, _next, page_input, *rest: Any):
        state_data = rest[-1]
        triggered_id = dash.callback_context.triggered_id

        state = try_parse_view_state(state_data)
        coordinator = ViewCoordinator(ctx.dataset, state)

        snapshot = apply_view_event(
            coordinator,
            triggered_id,
            channel=channel,
            region=region,
            page_input=page_input,
        )

        logger.debug(
            "view_callback",
            extra={
                "triggered_id": str(triggered_id),
                "current_page": snapshot.current_page,
                "total_count": snapshot.total_count,
            },
        )
        return render_outputs(coordinator, snapshot)
