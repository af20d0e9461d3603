from __future__ import annotations

import math
from typing import Sequence, TypeVar

import pandas as pd

PAGE_SIZE = 10

T = TypeVar("T", pd.DataFrame, Sequence)


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages for `count` items; an empty result still has one page."""
    return max(1, math.ceil(count / page_size))


def clamp(page: int, n_pages: int) -> int:
    return min(max(1, page), n_pages)


def page_slice(items: T, page: int, page_size: int = PAGE_SIZE) -> T:
    """
    Items at zero-based offsets [(page-1)*page_size, page*page_size).

    Pages outside the data give an empty result; callers clamp first.
    """
    if page < 1:
        start = end = 0
    else:
        start = (page - 1) * page_size
        end = start + page_size

    if isinstance(items, pd.DataFrame):
        return items.iloc[start:end]
    return items[start:end]
