"""Pydantic models for the WillyWeather v2 response shapes.

Only fields the evaluation needs are required; anything else the provider
sends is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LocationModel(_ProviderModel):
    id: int
    name: str
    region: str = ""
    state: str = ""
    postcode: str = ""
    time_zone: str = Field(default="", alias="timeZone")
    lat: float
    lng: float
    type_id: int | None = Field(default=None, alias="typeId")
    distance: float | None = None


class LocationUnits(_ProviderModel):
    distance: str = "km"


class LocationResponse(_ProviderModel):
    units: LocationUnits = LocationUnits()
    location: LocationModel


class WeatherEntryModel(_ProviderModel):
    date_time: str = Field(alias="dateTime")
    precis_code: str = Field(alias="precisCode")
    precis: str
    min: float | None = None
    max: float | None = None


class TideEntryModel(_ProviderModel):
    date_time: str = Field(alias="dateTime")
    height: float
    type: str


class SwellEntryModel(_ProviderModel):
    date_time: str = Field(alias="dateTime")
    direction: float | None = None
    direction_text: str = Field(alias="directionText")
    height: float
    period: float


class SunriseSunsetEntryModel(_ProviderModel):
    first_light_date_time: str | None = Field(default=None, alias="firstLightDateTime")
    rise_date_time: str = Field(alias="riseDateTime")
    set_date_time: str = Field(alias="setDateTime")
    last_light_date_time: str | None = Field(default=None, alias="lastLightDateTime")


class WeatherDayModel(_ProviderModel):
    date_time: str = Field(alias="dateTime")
    entries: list[WeatherEntryModel]


class TideDayModel(_ProviderModel):
    date_time: str = Field(alias="dateTime")
    entries: list[TideEntryModel]


class SwellDayModel(_ProviderModel):
    date_time: str = Field(alias="dateTime")
    entries: list[SwellEntryModel]


class SunriseSunsetDayModel(_ProviderModel):
    date_time: str = Field(alias="dateTime")
    entries: list[SunriseSunsetEntryModel]


class WeatherForecast(_ProviderModel):
    days: list[WeatherDayModel]
    issue_date_time: str | None = Field(default=None, alias="issueDateTime")


class TideForecast(_ProviderModel):
    days: list[TideDayModel]
    issue_date_time: str | None = Field(default=None, alias="issueDateTime")


class SwellForecast(_ProviderModel):
    days: list[SwellDayModel]
    issue_date_time: str | None = Field(default=None, alias="issueDateTime")


class SunriseSunsetForecast(_ProviderModel):
    days: list[SunriseSunsetDayModel]


class Forecasts(_ProviderModel):
    weather: WeatherForecast
    tides: TideForecast
    swell: SwellForecast
    sunrisesunset: SunriseSunsetForecast


class WeatherResponse(_ProviderModel):
    location: LocationModel | None = None
    forecasts: Forecasts
