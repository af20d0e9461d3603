from __future__ import annotations

from typing import List

import pandas as pd

from marketing_browser.core.dataset import ALL, Dataset


def _distinct(series: pd.Series) -> List[str]:
    # pd.unique keeps first-occurrence order
    return [ALL, *(str(v) for v in pd.unique(series))]


def distinct_channels(dataset: Dataset) -> List[str]:
    """'All' followed by each channel in first-occurrence order."""
    return _distinct(dataset.frame["channel"])


def distinct_regions(dataset: Dataset, channel: str = ALL) -> List[str]:
    """
    'All' followed by the regions available under `channel`.

    With channel == 'All' every region in the dataset is listed; otherwise only
    regions that co-occur with that channel in at least one record.
    """
    frame = dataset.frame
    if channel != ALL:
        frame = frame[frame["channel"] == channel]
    return _distinct(frame["region"])
