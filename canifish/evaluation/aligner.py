"""Series aligner: nearest-in-time lookup across independently sampled series."""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol, TypeVar


class Timestamped(Protocol):
    @property
    def instant(self) -> datetime: ...


T = TypeVar("T", bound=Timestamped)


def find_nearest(entries: Sequence[T], target: datetime) -> T | None:
    """Return the entry closest in time to ``target``.

    Ties go to the earlier-listed entry. Returns None for an empty series.
    """
    nearest: T | None = None
    nearest_delta: float | None = None
    for entry in entries:
        delta = abs((entry.instant - target).total_seconds())
        if nearest_delta is None or delta < nearest_delta:
            nearest = entry
            nearest_delta = delta
    return nearest
