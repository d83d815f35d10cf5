"""Day partitioner: groups the four forecast series by calendar date."""

import logging
from typing import TypeVar

from canifish.models.forecast import CalendarDay, ForecastDay, RawForecastBundle

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT")


def partition_days(bundle: RawForecastBundle) -> list[CalendarDay]:
    """Group series by date, in tide-day order.

    Days lacking weather, swell, or sunrise/sunset data are still returned
    (with ``is_complete`` False) so callers can report why they were skipped.
    """
    weather_by_date = _index_by_date(bundle.weather)
    swell_by_date = _index_by_date(bundle.swell)
    sun_by_date = _index_by_date(bundle.sunrisesunset)

    days: list[CalendarDay] = []
    for tide_day in bundle.tides:
        date = tide_day.date
        day = CalendarDay(
            date=date,
            tide_day=tide_day,
            weather_day=weather_by_date.get(date),
            swell_day=swell_by_date.get(date),
            sunrise_sunset_day=sun_by_date.get(date),
        )
        if not day.is_complete:
            logger.info(
                "Missing data for %s: weather=%s swell=%s sunrisesunset=%s",
                date,
                day.weather_day is not None,
                day.swell_day is not None,
                day.sunrise_sunset_day is not None,
            )
        days.append(day)
    return days


def _index_by_date(
    days: list[ForecastDay[EntryT]],
) -> dict[str, ForecastDay[EntryT]]:
    # First day listed for a date wins
    index: dict[str, ForecastDay[EntryT]] = {}
    for day in days:
        index.setdefault(day.date, day)
    return index
