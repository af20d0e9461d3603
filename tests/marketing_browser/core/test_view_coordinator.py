import logging
import math

import pytest

from marketing_browser.core.dataset import ALL, Dataset, Record
from marketing_browser.core.state import FilterSelection, PageState, SortSelection, ViewState
from marketing_browser.core.view_coordinator import ViewCoordinator


def _make_dataset():
    """
    25 records: 5 Email (regions North/South), 10 Social and 10 Search
    (regions East/West/North).
    """
    records = []
    for i in range(1, 26):
        if i % 5 == 0:
            channel = "Email"
            region = "North" if i % 10 == 0 else "South"
        elif i % 2 == 0:
            channel = "Social"
            region = "East" if i % 4 == 0 else "North"
        else:
            channel = "Search"
            region = "West"
        records.append(
            Record(
                id=i,
                channel=channel,
                region=region,
                spend=float((i * 37) % 50),
                impressions=1000 + i,
                clicks=i % 3,
                conversions=i % 4,
            )
        )
    return Dataset(records)


def _assert_page_invariant(snap):
    assert 1 <= snap.current_page <= snap.total_pages
    assert snap.total_pages == max(1, math.ceil(snap.total_count / 10))


def test_initial_snapshot():
    vc = ViewCoordinator(_make_dataset())

    snap = vc.snapshot()

    assert snap.total_count == 25
    assert snap.total_pages == 3
    assert snap.current_page == 1
    assert snap.sort_field is None
    assert snap.sort_direction == "desc"
    assert [r.id for r in snap.page_records] == list(range(1, 11))
    assert snap.channel_options == (ALL, "Search", "Social", "Email")
    assert snap.region_options[0] == ALL
    assert snap.summary_text == "Showing 25 results"


def test_goto_page_beyond_range_clamps_to_last():
    vc = ViewCoordinator(_make_dataset())

    snap = vc.goto_page(5)

    assert snap.total_pages == 3
    assert snap.current_page == 3
    assert [r.id for r in snap.page_records] == list(range(21, 26))


def test_select_channel_email():
    vc = ViewCoordinator(_make_dataset())
    vc.goto_page(3)

    snap = vc.select_channel("Email")

    assert len(snap.filtered_records) == 5
    assert all(r.channel == "Email" for r in snap.filtered_records)
    assert snap.total_pages == 1
    assert snap.current_page == 1
    assert snap.region_options == (ALL, "South", "North")


def test_select_channel_resets_region():
    vc = ViewCoordinator(_make_dataset())
    vc.select_channel("Social")
    vc.select_region("East")

    snap = vc.select_channel("Search")

    assert snap.selected_region == ALL
    assert vc.state.filters == FilterSelection(channel="Search", region=ALL)


def test_select_region_resets_page():
    vc = ViewCoordinator(_make_dataset())
    vc.next_page()

    snap = vc.select_region("North")

    assert snap.current_page == 1
    assert [r.id for r in snap.filtered_records] == [
        r.id for r in vc.dataset if r.region == "North"
    ]


def test_unknown_channel_is_empty_not_error():
    vc = ViewCoordinator(_make_dataset())

    snap = vc.select_channel("Podcast")

    assert snap.is_empty
    assert snap.page_records == ()
    assert snap.total_pages == 1
    assert snap.current_page == 1
    assert snap.region_options == (ALL,)


def test_toggle_sort_flips_direction():
    vc = ViewCoordinator(_make_dataset())

    first = vc.toggle_sort("spend")
    second = vc.toggle_sort("spend")
    third = vc.toggle_sort("spend")

    assert (first.sort_field, first.sort_direction) == ("spend", "desc")
    assert (second.sort_field, second.sort_direction) == ("spend", "asc")
    assert (third.sort_field, third.sort_direction) == ("spend", "desc")


def test_toggle_sort_new_field_starts_desc():
    vc = ViewCoordinator(_make_dataset())
    vc.toggle_sort("spend")
    vc.toggle_sort("spend")

    snap = vc.toggle_sort("clicks")

    assert (snap.sort_field, snap.sort_direction) == ("clicks", "desc")


def test_toggle_sort_resets_page():
    vc = ViewCoordinator(_make_dataset())
    vc.goto_page(2)

    snap = vc.toggle_sort("impressions")

    assert snap.current_page == 1
    assert [r.id for r in snap.page_records] == list(range(25, 15, -1))


def test_toggle_sort_non_sortable_field_is_noop(caplog):
    vc = ViewCoordinator(_make_dataset())
    vc.goto_page(2)
    before = vc.state

    with caplog.at_level(logging.WARNING):
        snap = vc.toggle_sort("channel")

    assert vc.state == before
    assert snap.sort_field is None
    assert "non-sortable" in caplog.text


def test_sort_applies_after_filter():
    vc = ViewCoordinator(_make_dataset())
    vc.select_channel("Email")

    snap = vc.toggle_sort("spend")

    spends = [r.spend for r in snap.sorted_records]
    assert spends == sorted(spends, reverse=True)
    assert {r.channel for r in snap.sorted_records} == {"Email"}


def test_spend_sort_ties_keep_dataset_order():
    ds = Dataset(
        [
            Record(id=1, channel="A", region="X", spend=5.0, impressions=0, clicks=0, conversions=0),
            Record(id=2, channel="A", region="X", spend=20.0, impressions=0, clicks=0, conversions=0),
            Record(id=3, channel="A", region="X", spend=5.0, impressions=0, clicks=0, conversions=0),
        ]
    )
    vc = ViewCoordinator(ds)

    snap = vc.toggle_sort("spend")

    assert [r.id for r in snap.page_records] == [2, 1, 3]


def test_prev_and_next_stay_in_bounds():
    vc = ViewCoordinator(_make_dataset())

    assert vc.prev_page().current_page == 1
    assert vc.next_page().current_page == 2
    assert vc.next_page().current_page == 3
    snap = vc.next_page()
    assert snap.current_page == 3
    assert not snap.has_next
    assert snap.has_prev
    assert vc.prev_page().current_page == 2


@pytest.mark.parametrize(
    "raw, expected",
    [
        (2, 2),
        ("3", 3),
        (" 2 ", 2),
        (2.4, 2),
        (2.5, 3),
        (1.49, 1),
        (0, 1),
        (-7, 1),
        (99, 3),
        (float("inf"), 3),
        (float("-inf"), 1),
        (10**400, 3),
        (-(10**400), 1),
    ],
)
def test_goto_page_coercion(raw, expected):
    vc = ViewCoordinator(_make_dataset())

    assert vc.goto_page(raw).current_page == expected


@pytest.mark.parametrize("raw", [None, "", "abc", float("nan"), [], True])
def test_goto_page_non_numeric_is_noop(raw):
    vc = ViewCoordinator(_make_dataset())
    vc.goto_page(2)

    snap = vc.goto_page(raw)

    assert snap.current_page == 2


def test_restored_state_is_clamped():
    state = ViewState(
        filters=FilterSelection(channel="Email"),
        sort=SortSelection(field="clicks", direction="asc"),
        page=PageState(current_page=3),
    )

    vc = ViewCoordinator(_make_dataset(), state)

    assert vc.state.page.current_page == 1
    assert vc.state.sort == SortSelection(field="clicks", direction="asc")


def test_restored_state_below_one_is_clamped():
    vc = ViewCoordinator(_make_dataset(), ViewState(page=PageState(current_page=-3)))

    assert vc.snapshot().current_page == 1


def test_aria_sort_and_indicator():
    vc = ViewCoordinator(_make_dataset())

    snap = vc.snapshot()
    assert snap.aria_sort("spend") == "none"
    assert snap.sort_indicator("spend") == "⇅"

    snap = vc.toggle_sort("spend")
    assert snap.aria_sort("spend") == "descending"
    assert snap.sort_indicator("spend") == "▼"
    assert snap.aria_sort("clicks") == "none"

    snap = vc.toggle_sort("spend")
    assert snap.aria_sort("spend") == "ascending"
    assert snap.sort_indicator("spend") == "▲"


def test_snapshot_is_repeatable():
    vc = ViewCoordinator(_make_dataset())
    vc.select_channel("Social")
    vc.toggle_sort("conversions")

    assert vc.snapshot() == vc.snapshot()


def test_page_invariant_holds_across_event_sequence():
    vc = ViewCoordinator(_make_dataset())
    events = [
        lambda: vc.goto_page(3),
        lambda: vc.select_region("West"),
        lambda: vc.next_page(),
        lambda: vc.goto_page(10),
        lambda: vc.select_channel("Email"),
        lambda: vc.next_page(),
        lambda: vc.toggle_sort("spend"),
        lambda: vc.select_channel(ALL),
        lambda: vc.goto_page(-1),
        lambda: vc.next_page(),
        lambda: vc.select_region("Nowhere"),
        lambda: vc.prev_page(),
        lambda: vc.goto_page("2"),
    ]

    for event in events:
        _assert_page_invariant(event())
        _assert_page_invariant(vc.snapshot())
