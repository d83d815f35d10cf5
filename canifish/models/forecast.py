"""Forecast series models extracted from the provider response."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar


def parse_timestamp(iso_str: str) -> datetime:
    """Parse a provider timestamp.

    Provider times are local wall-clock without an offset; naive values are
    pinned to UTC so every series in a bundle shares one clock.
    """
    dt = datetime.fromisoformat(iso_str)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def date_component(iso_str: str) -> str:
    """YYYY-MM-DD portion of an ISO timestamp."""
    return iso_str[:10]


@dataclass(frozen=True)
class TideEntry:
    date_time: str
    height: float
    type: str  # "high" or "low"

    @property
    def instant(self) -> datetime:
        return parse_timestamp(self.date_time)


@dataclass(frozen=True)
class SwellEntry:
    date_time: str
    height: float
    period: float
    direction_text: str
    direction: float | None = None

    @property
    def instant(self) -> datetime:
        return parse_timestamp(self.date_time)


@dataclass(frozen=True)
class WeatherEntry:
    date_time: str
    precis_code: str
    precis: str

    @property
    def instant(self) -> datetime:
        return parse_timestamp(self.date_time)


@dataclass(frozen=True)
class SunriseSunsetEntry:
    rise_date_time: str
    set_date_time: str
    first_light_date_time: str | None = None
    last_light_date_time: str | None = None

    @property
    def sunrise(self) -> datetime:
        return parse_timestamp(self.rise_date_time)

    @property
    def sunset(self) -> datetime:
        return parse_timestamp(self.set_date_time)


EntryT = TypeVar("EntryT")


@dataclass(frozen=True)
class ForecastDay(Generic[EntryT]):
    date_time: str
    entries: list[EntryT] = field(default_factory=list)

    @property
    def date(self) -> str:
        return date_component(self.date_time)


@dataclass(frozen=True)
class RawForecastBundle:
    tides: list[ForecastDay[TideEntry]]
    swell: list[ForecastDay[SwellEntry]]
    weather: list[ForecastDay[WeatherEntry]]
    sunrisesunset: list[ForecastDay[SunriseSunsetEntry]]


@dataclass(frozen=True)
class CalendarDay:
    date: str
    tide_day: ForecastDay[TideEntry]
    weather_day: ForecastDay[WeatherEntry] | None
    swell_day: ForecastDay[SwellEntry] | None
    sunrise_sunset_day: ForecastDay[SunriseSunsetEntry] | None

    @property
    def is_complete(self) -> bool:
        return (
            self.weather_day is not None
            and self.swell_day is not None
            and self.sunrise_sunset_day is not None
        )

    @property
    def low_tides(self) -> list[TideEntry]:
        return [e for e in self.tide_day.entries if e.type == "low"]


@dataclass(frozen=True)
class LocationInfo:
    id: int
    name: str
    region: str
    state: str
    time_zone: str
    latitude: float
    longitude: float
    distance_km: float | None = None
