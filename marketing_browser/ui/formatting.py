from __future__ import annotations

from typing import Dict, List, Sequence

from marketing_browser.core.dataset import Record

EMPTY_MESSAGE = "No data matches your filters."

COLUMNS = (
    ("id", "ID"),
    ("channel", "Channel"),
    ("region", "Region"),
    ("spend", "Spend"),
    ("impressions", "Impressions"),
    ("clicks", "Clicks"),
    ("conversions", "Conversions"),
)
NUMERIC_COLUMNS = frozenset({"spend", "impressions", "clicks", "conversions"})


def format_spend(value: float) -> str:
    return f"${value:,.2f}"


def format_count(value: int) -> str:
    return f"{value:,}"


def record_to_row(record: Record) -> Dict[str, str]:
    """Display strings for one table row, keyed by column."""
    return {
        "id": str(record.id),
        "channel": record.channel,
        "region": record.region,
        "spend": format_spend(record.spend),
        "impressions": format_count(record.impressions),
        "clicks": format_count(record.clicks),
        "conversions": str(record.conversions),
    }


def records_to_rows(records: Sequence[Record]) -> List[Dict[str, str]]:
    return [record_to_row(r) for r in records]


def page_label(current_page: int, total_pages: int) -> str:
    return f"Page {current_page} of {total_pages}"


def sort_title(aria_sort: str) -> str:
    if aria_sort == "none":
        return "Not sorted"
    return f"Sorted {aria_sort}"
