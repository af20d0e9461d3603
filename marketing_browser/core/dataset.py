from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, Iterator, Tuple, Union

import pandas as pd

ALL = "All"

RECORD_FIELDS: Tuple[str, ...] = (
    "id",
    "channel",
    "region",
    "spend",
    "impressions",
    "clicks",
    "conversions",
)


@dataclass(frozen=True)
class Record:
    """
    One row of marketing performance data.

    Fields:

    - id: unique, stable identifier
    - channel / region: category labels
    - spend: non-negative amount
    - impressions / clicks / conversions: non-negative counts
    """

    id: Union[int, str]
    channel: str
    region: str
    spend: float
    impressions: int
    clicks: int
    conversions: int


class Dataset:
    """
    Immutable, ordered collection of Records.

    The records are also exposed as a pandas DataFrame with a positional
    RangeIndex, so an index label in any derived frame is the position of the
    corresponding Record in `records`.
    """

    def __init__(self, records: Iterable[Record], name: str = "campaigns") -> None:
        self.name = name
        self._records: Tuple[Record, ...] = tuple(records)

        frame = pd.DataFrame(
            [asdict(r) for r in self._records],
            columns=list(RECORD_FIELDS),
        )
        self._frame = frame

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def frame(self) -> pd.DataFrame:
        """Read-only view; callers must not mutate the returned frame."""
        return self._frame

    def records_for(self, frame: pd.DataFrame) -> Tuple[Record, ...]:
        """Map a frame derived from `self.frame` back to its Records, in frame order."""
        return tuple(self._records[pos] for pos in frame.index)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, n_records={len(self._records)})"
