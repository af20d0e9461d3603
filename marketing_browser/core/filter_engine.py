from __future__ import annotations

import logging

import pandas as pd

from marketing_browser.core.dataset import ALL
from marketing_browser.core.state import FilterSelection

logger = logging.getLogger(__name__)


def apply_filter(frame: pd.DataFrame, selection: FilterSelection) -> pd.DataFrame:
    """
    Keep rows matching the channel/region selection, in their original order.

    'All' on either axis matches everything, so ('All', 'All') is the identity.
    """
    if selection.channel == ALL and selection.region == ALL:
        return frame

    mask = pd.Series(True, index=frame.index)
    if selection.channel != ALL:
        mask &= frame["channel"] == selection.channel
    if selection.region != ALL:
        mask &= frame["region"] == selection.region

    logger.debug(
        "Filter applied: %d rows match out of %d",
        int(mask.sum()),
        len(frame),
    )
    return frame[mask]
