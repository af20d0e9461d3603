from __future__ import annotations

import logging
from typing import Any, Optional

from marketing_browser.core.state import ViewState
from marketing_browser.core.view_coordinator import ViewCoordinator, ViewSnapshot
from marketing_browser.ui.ids import IDs, field_for_sort_button

logger = logging.getLogger(__name__)


def try_parse_view_state(data: object) -> ViewState:
    """Rebuild the stored ViewState, falling back to the initial state."""
    if not isinstance(data, dict) or not data:
        return ViewState()
    try:
        return ViewState.from_dict(data)
    except Exception:
        logger.exception("Invalid view-state: %r", data)
        return ViewState()


def apply_view_event(
        coordinator: ViewCoordinator,
        triggered_id: Optional[object],
        *,
        channel: Any = None,
        region: Any = None,
        page_input: Any = None,
) -> ViewSnapshot:
    """
    Map the component that fired a callback to exactly one coordinator event.

    Anything unrecognised (including the initial call, where nothing fired)
    just reads the current snapshot.
    """
    if triggered_id == IDs.Control.CHANNEL_SELECT:
        return coordinator.select_channel(channel)
    if triggered_id == IDs.Control.REGION_SELECT:
        return coordinator.select_region(region)
    if triggered_id == IDs.Control.PREV_BTN:
        return coordinator.prev_page()
    if triggered_id == IDs.Control.NEXT_BTN:
        return coordinator.next_page()
    if triggered_id == IDs.Control.PAGE_INPUT:
        return coordinator.goto_page(page_input)

    field = field_for_sort_button(triggered_id)
    if field is not None:
        return coordinator.toggle_sort(field)

    return coordinator.snapshot()
