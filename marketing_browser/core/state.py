from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from marketing_browser.core.dataset import ALL
from marketing_browser.core.sort_engine import DESC, DIRECTIONS, SORTABLE_FIELDS


@dataclass(frozen=True)
class FilterSelection:
    """
    Current channel/region narrowing.

    Region is only meaningful under the selected channel; the coordinator resets it
    to 'All' whenever the channel changes.
    """

    channel: str = ALL
    region: str = ALL


@dataclass(frozen=True)
class SortSelection:
    """field=None keeps dataset order (after filtering)."""

    field: Optional[str] = None
    direction: str = DESC


@dataclass(frozen=True)
class PageState:
    current_page: int = 1


@dataclass(frozen=True)
class ViewState:
    """
    Full interaction state owned by the ViewCoordinator.

    Serialised with to_dict/from_dict so the UI can keep it in a dcc.Store.
    """

    filters: FilterSelection = field(default_factory=FilterSelection)
    sort: SortSelection = field(default_factory=SortSelection)
    page: PageState = field(default_factory=PageState)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "channel": self.filters.channel,
            "region": self.filters.region,
            "sort_field": self.sort.field,
            "sort_direction": self.sort.direction,
            "current_page": self.page.current_page,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewState:
        """
        Rebuild a state from a store payload.

        Unknown sort fields/directions and non-integer pages fall back to defaults;
        page bounds are enforced by the coordinator, not here.
        """
        sort_field = data.get("sort_field")
        if sort_field not in SORTABLE_FIELDS:
            sort_field = None

        direction = data.get("sort_direction", DESC)
        if direction not in DIRECTIONS:
            direction = DESC

        try:
            current_page = int(data.get("current_page", 1))
        except (TypeError, ValueError, OverflowError):
            current_page = 1

        return cls(
            filters=FilterSelection(
                channel=str(data.get("channel") or ALL),
                region=str(data.get("region") or ALL),
            ),
            sort=SortSelection(field=sort_field, direction=direction),
            page=PageState(current_page=current_page),
        )
