from __future__ import annotations

from typing import Optional

import pandas as pd

ASC = "asc"
DESC = "desc"
DIRECTIONS = (ASC, DESC)

SORTABLE_FIELDS = ("spend", "impressions", "clicks", "conversions")


def flip(direction: str) -> str:
    return ASC if direction == DESC else DESC


def apply_sort(frame: pd.DataFrame, field: Optional[str], direction: str) -> pd.DataFrame:
    """
    Order rows by a numeric field.

    field=None keeps the incoming order. The sort is stable in both directions,
    so rows with equal values keep their relative order.
    """
    if field is None:
        return frame
    if field not in SORTABLE_FIELDS:
        raise ValueError(f"Field {field!r} is not sortable; expected one of {SORTABLE_FIELDS}")

    return frame.sort_values(by=field, ascending=direction == ASC, kind="stable")
