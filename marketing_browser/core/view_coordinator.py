from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

import pandas as pd

from marketing_browser.core.dataset import ALL, Dataset, Record
from marketing_browser.core.dataset_index import distinct_channels, distinct_regions
from marketing_browser.core.filter_engine import apply_filter
from marketing_browser.core.paginator import PAGE_SIZE, clamp, page_slice, total_pages
from marketing_browser.core.sort_engine import ASC, DESC, SORTABLE_FIELDS, apply_sort, flip
from marketing_browser.core.state import FilterSelection, PageState, SortSelection, ViewState

logger = logging.getLogger(__name__)

SORT_GLYPHS = {ASC: "▲", DESC: "▼"}
UNSORTED_GLYPH = "⇅"


@dataclass(frozen=True)
class ViewSnapshot:
    """
    Read-only projection of the dataset under a ViewState.

    Recomputed after every transition; holds no state of its own.
    """

    channel_options: Tuple[str, ...]
    region_options: Tuple[str, ...]
    selected_channel: str
    selected_region: str
    filtered_records: Tuple[Record, ...]
    sorted_records: Tuple[Record, ...]
    page_records: Tuple[Record, ...]
    total_count: int
    current_page: int
    total_pages: int
    sort_field: Optional[str]
    sort_direction: str

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def summary_text(self) -> str:
        return f"Showing {self.total_count} results"

    def aria_sort(self, field: str) -> str:
        """Value for the column header's aria-sort attribute."""
        if self.sort_field != field:
            return "none"
        return "ascending" if self.sort_direction == ASC else "descending"

    def sort_indicator(self, field: str) -> str:
        if self.sort_field != field:
            return UNSORTED_GLYPH
        return SORT_GLYPHS[self.sort_direction]


def _coerce_page(value: Any) -> Optional[float]:
    """
    Turn a raw go-to-page input into a number.

    Returns None for anything that is not a number (None, '', 'abc', NaN).
    Infinities are kept so clamping sends them to the first/last page.
    """
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except OverflowError:
        # ints too large for a float
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    if math.isinf(number):
        return number
    # round half up
    return float(math.floor(number + 0.5))


class ViewCoordinator:
    """
    Owns the interaction state and derives the displayed page from it.

    Every event builds the next ViewState, clamps the page into range and stores it,
    so `1 <= current_page <= total_pages` holds after every call. No event raises;
    inputs that make no sense are clamped or ignored.
    """

    def __init__(
        self,
        dataset: Dataset,
        state: Optional[ViewState] = None,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self._dataset = dataset
        self._page_size = page_size
        self._state = self._clamped(state or ViewState())

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------
    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def state(self) -> ViewState:
        return self._state

    def _sorted_frame(self, state: ViewState) -> Tuple[pd.DataFrame, pd.DataFrame]:
        filtered = apply_filter(self._dataset.frame, state.filters)
        ordered = apply_sort(filtered, state.sort.field, state.sort.direction)
        return filtered, ordered

    def snapshot(self) -> ViewSnapshot:
        state = self._state
        filtered, ordered = self._sorted_frame(state)
        n_pages = total_pages(len(ordered), self._page_size)
        page = page_slice(ordered, state.page.current_page, self._page_size)

        return ViewSnapshot(
            channel_options=tuple(distinct_channels(self._dataset)),
            region_options=tuple(distinct_regions(self._dataset, state.filters.channel)),
            selected_channel=state.filters.channel,
            selected_region=state.filters.region,
            filtered_records=self._dataset.records_for(filtered),
            sorted_records=self._dataset.records_for(ordered),
            page_records=self._dataset.records_for(page),
            total_count=len(filtered),
            current_page=state.page.current_page,
            total_pages=n_pages,
            sort_field=state.sort.field,
            sort_direction=state.sort.direction,
        )

    def page_count(self) -> int:
        filtered = apply_filter(self._dataset.frame, self._state.filters)
        return total_pages(len(filtered), self._page_size)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------
    def _clamped(self, state: ViewState) -> ViewState:
        filtered = apply_filter(self._dataset.frame, state.filters)
        n_pages = total_pages(len(filtered), self._page_size)
        page = clamp(state.page.current_page, n_pages)
        if page == state.page.current_page:
            return state
        return replace(state, page=PageState(current_page=page))

    def _commit(self, event: str, state: ViewState) -> ViewSnapshot:
        new_state = self._clamped(state)
        if new_state == self._state:
            logger.debug("view_event_noop", extra={"event": event})
        else:
            logger.debug(
                "view_event",
                extra={"event": event, "state": new_state.to_dict()},
            )
        self._state = new_state
        return self.snapshot()

    def select_channel(self, channel: Optional[str]) -> ViewSnapshot:
        channel = ALL if channel is None else str(channel)
        return self._commit(
            "select_channel",
            replace(
                self._state,
                filters=FilterSelection(channel=channel, region=ALL),
                page=PageState(current_page=1),
            ),
        )

    def select_region(self, region: Optional[str]) -> ViewSnapshot:
        region = ALL if region is None else str(region)
        return self._commit(
            "select_region",
            replace(
                self._state,
                filters=replace(self._state.filters, region=region),
                page=PageState(current_page=1),
            ),
        )

    def toggle_sort(self, field: str) -> ViewSnapshot:
        if field not in SORTABLE_FIELDS:
            logger.warning("Ignoring sort request on non-sortable field %r", field)
            return self._commit("toggle_sort", self._state)

        current = self._state.sort
        if current.field == field:
            sort = SortSelection(field=field, direction=flip(current.direction))
        else:
            sort = SortSelection(field=field, direction=DESC)

        return self._commit(
            "toggle_sort",
            replace(self._state, sort=sort, page=PageState(current_page=1)),
        )

    def prev_page(self) -> ViewSnapshot:
        page = max(1, self._state.page.current_page - 1)
        return self._commit(
            "prev_page",
            replace(self._state, page=PageState(current_page=page)),
        )

    def next_page(self) -> ViewSnapshot:
        page = min(self.page_count(), self._state.page.current_page + 1)
        return self._commit(
            "next_page",
            replace(self._state, page=PageState(current_page=page)),
        )

    def goto_page(self, page: Any) -> ViewSnapshot:
        number = _coerce_page(page)
        if number is None:
            logger.debug("Ignoring non-numeric page input %r", page)
            return self._commit("goto_page", self._state)

        target = int(clamp(number, self.page_count()))
        return self._commit(
            "goto_page",
            replace(self._state, page=PageState(current_page=target)),
        )
