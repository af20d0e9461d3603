from marketing_browser.core.dataset import Record
from marketing_browser.ui.formatting import (
    format_count,
    format_spend,
    page_label,
    record_to_row,
    sort_title,
)


def test_format_spend():
    assert format_spend(0) == "$0.00"
    assert format_spend(1234.5) == "$1,234.50"


def test_format_count():
    assert format_count(1234567) == "1,234,567"


def test_record_to_row():
    rec = Record(id=7, channel="Email", region="APAC", spend=99.999, impressions=12000, clicks=1500, conversions=1200)

    assert record_to_row(rec) == {
        "id": "7",
        "channel": "Email",
        "region": "APAC",
        "spend": "$100.00",
        "impressions": "12,000",
        "clicks": "1,500",
        "conversions": "1200",
    }


def test_page_label_and_sort_title():
    assert page_label(2, 5) == "Page 2 of 5"
    assert sort_title("none") == "Not sorted"
    assert sort_title("ascending") == "Sorted ascending"
