"""Forecast fetcher: resolves the location and converts provider data to a bundle."""

import logging

from pydantic import ValidationError

from canifish.config.schema import LocationConfig
from canifish.ingest.response_schema import LocationResponse, WeatherResponse
from canifish.ingest.willyweather_client import WillyWeatherClient
from canifish.models.forecast import (
    ForecastDay,
    LocationInfo,
    RawForecastBundle,
    SunriseSunsetEntry,
    SwellEntry,
    TideEntry,
    WeatherEntry,
)

logger = logging.getLogger(__name__)


class ForecastValidationError(ValueError):
    """Raised when a provider response does not match the expected shape."""


class ForecastFetcher:
    def __init__(self, client: WillyWeatherClient):
        self.client = client

    def fetch(self, location: LocationConfig) -> tuple[LocationInfo, RawForecastBundle]:
        """Resolve the provider location nearest to ``location`` and fetch its forecast."""
        info = self.fetch_location(location)
        logger.info(
            "Location details: %s, %s %s (%s km away, tz=%s)",
            info.name, info.region, info.state, info.distance_km, info.time_zone,
        )
        bundle = self.fetch_bundle(info.id)
        return info, bundle

    def fetch_location(self, location: LocationConfig) -> LocationInfo:
        raw = self.client.search_location(location.latitude, location.longitude)
        return extract_location(raw)

    def fetch_bundle(self, location_id: int) -> RawForecastBundle:
        raw = self.client.get_weather(location_id)
        return extract_bundle(raw)


def extract_location(raw: dict) -> LocationInfo:
    """Validate a location search response."""
    try:
        parsed = LocationResponse.model_validate(raw)
    except ValidationError as e:
        raise ForecastValidationError(f"Invalid location response: {e}") from e
    loc = parsed.location
    return LocationInfo(
        id=loc.id,
        name=loc.name,
        region=loc.region,
        state=loc.state,
        time_zone=loc.time_zone,
        latitude=loc.lat,
        longitude=loc.lng,
        distance_km=loc.distance,
    )


def extract_bundle(raw: dict) -> RawForecastBundle:
    """Validate a weather response and convert it to a RawForecastBundle."""
    try:
        parsed = WeatherResponse.model_validate(raw)
    except ValidationError as e:
        raise ForecastValidationError(f"Invalid weather response: {e}") from e

    f = parsed.forecasts
    bundle = RawForecastBundle(
        tides=[
            ForecastDay(
                date_time=d.date_time,
                entries=[
                    TideEntry(date_time=e.date_time, height=e.height, type=e.type)
                    for e in d.entries
                ],
            )
            for d in f.tides.days
        ],
        swell=[
            ForecastDay(
                date_time=d.date_time,
                entries=[
                    SwellEntry(
                        date_time=e.date_time,
                        height=e.height,
                        period=e.period,
                        direction_text=e.direction_text,
                        direction=e.direction,
                    )
                    for e in d.entries
                ],
            )
            for d in f.swell.days
        ],
        weather=[
            ForecastDay(
                date_time=d.date_time,
                entries=[
                    WeatherEntry(
                        date_time=e.date_time,
                        precis_code=e.precis_code,
                        precis=e.precis,
                    )
                    for e in d.entries
                ],
            )
            for d in f.weather.days
        ],
        sunrisesunset=[
            ForecastDay(
                date_time=d.date_time,
                entries=[
                    SunriseSunsetEntry(
                        rise_date_time=e.rise_date_time,
                        set_date_time=e.set_date_time,
                        first_light_date_time=e.first_light_date_time,
                        last_light_date_time=e.last_light_date_time,
                    )
                    for e in d.entries
                ],
            )
            for d in f.sunrisesunset.days
        ],
    )
    logger.info(
        "Extracted forecast: %d tide days, %d swell days, %d weather days, %d sun days",
        len(bundle.tides), len(bundle.swell), len(bundle.weather), len(bundle.sunrisesunset),
    )
    return bundle
