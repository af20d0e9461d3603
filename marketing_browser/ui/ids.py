from __future__ import annotations

__all__ = ["IDs", "sort_button_id", "field_for_sort_button"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"

    class Control:
        # Filters
        CHANNEL_SELECT = "channel-select"
        REGION_SELECT = "region-select"

        # Table
        TABLE = "records-table"
        TABLE_BODY = "records-table-body"
        EMPTY_MESSAGE = "records-empty-message"

        # Pagination
        PREV_BTN = "page-prev-btn"
        NEXT_BTN = "page-next-btn"
        PAGE_LABEL = "page-label"
        PAGE_INPUT = "page-input"

        # Navbar
        RESULT_SUMMARY = "result-summary"


_SORT_PREFIX = "sort-"
_SORT_SUFFIX = "-btn"


def sort_button_id(field: str) -> str:
    return f"{_SORT_PREFIX}{field}{_SORT_SUFFIX}"


def field_for_sort_button(component_id: object) -> str | None:
    """Inverse of sort_button_id; None for any other component id."""
    if not isinstance(component_id, str):
        return None
    if component_id.startswith(_SORT_PREFIX) and component_id.endswith(_SORT_SUFFIX):
        return component_id[len(_SORT_PREFIX):-len(_SORT_SUFFIX)]
    return None
