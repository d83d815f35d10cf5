"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field, model_validator

FACTOR_NAMES = (
    "tide_height",
    "swell_height",
    "swell_period",
    "swell_direction",
    "weather",
    "after_sunrise",
    "before_sunset",
)

Weekday = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]


class Outcome(StrEnum):
    """Verdict assigned when a value falls outside every passing tier."""

    FAIL = "fail"
    HARD_FAIL = "hard_fail"


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class UpperBoundThreshold(BaseModel):
    """Pass at or below ``pass_max``, partial at or below ``partial_max``."""

    model_config = {"extra": "forbid"}

    pass_max: float
    partial_max: float | None = None
    otherwise: Outcome = Outcome.FAIL

    @model_validator(mode="after")
    def _partial_above_pass(self) -> "UpperBoundThreshold":
        if self.partial_max is not None and self.partial_max < self.pass_max:
            raise ValueError("partial_max must be >= pass_max")
        return self


class LowerBoundThreshold(BaseModel):
    """Pass at or above ``min``."""

    model_config = {"extra": "forbid"}

    min: float
    otherwise: Outcome = Outcome.HARD_FAIL


class DirectionThreshold(BaseModel):
    model_config = {"extra": "forbid"}

    excluded: list[str] = ["SE", "SSE", "ESE"]
    otherwise: Outcome = Outcome.FAIL


class WeatherThreshold(BaseModel):
    model_config = {"extra": "forbid"}

    pass_codes: list[str] = [
        "fine",
        "mostly-fine",
        "high-cloud",
        "partly-cloudy",
    ]
    partial_codes: list[str] = [
        "mostly-cloudy",
        "cloudy",
        "overcast",
        "shower-or-two",
        "chance-shower-fine",
        "chance-shower-cloud",
        "chance-thunderstorm-fine",
    ]
    otherwise: Outcome = Outcome.FAIL

    @model_validator(mode="after")
    def _vocabularies_disjoint(self) -> "WeatherThreshold":
        overlap = set(self.pass_codes) & set(self.partial_codes)
        if overlap:
            raise ValueError(f"codes in both pass and partial: {sorted(overlap)}")
        return self


class ThresholdsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    tide_height_m: UpperBoundThreshold = UpperBoundThreshold(
        pass_max=0.4, partial_max=0.6
    )
    swell_height_m: UpperBoundThreshold = UpperBoundThreshold(
        pass_max=1.0, otherwise=Outcome.HARD_FAIL
    )
    swell_period_s: UpperBoundThreshold = UpperBoundThreshold(
        pass_max=6.0, partial_max=8.0
    )
    swell_direction: DirectionThreshold = DirectionThreshold()
    weather: WeatherThreshold = WeatherThreshold()
    hours_after_sunrise: LowerBoundThreshold = LowerBoundThreshold(min=0.0)
    hours_before_sunset: LowerBoundThreshold = LowerBoundThreshold(min=2.0)


class ScoringConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # Factors absent from this map only gate through hard_fail.
    weights: dict[str, float] = {
        "tide_height": 1.0,
        "swell_height": 1.0,
        "swell_period": 1.0,
        "swell_direction": 1.0,
        "weather": 1.0,
    }

    @model_validator(mode="after")
    def _weights_valid(self) -> "ScoringConfig":
        unknown = sorted(set(self.weights) - set(FACTOR_NAMES))
        if unknown:
            raise ValueError(f"unknown factors in weights: {unknown}")
        negative = [k for k, v in self.weights.items() if v < 0]
        if negative:
            raise ValueError(f"weights must be >= 0: {negative}")
        return self


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.willyweather.com.au/v2"
    api_key_env: str = "WILLY_WEATHER_API_KEY"
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class DeliveryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    weekly_day: Weekday | None = "sunday"
    environment: str = "production"
    always_send_environments: list[str] = ["test", "development"]


class CanIFishConfig(BaseModel):
    model_config = {"extra": "forbid"}

    location: LocationConfig | None = None
    thresholds: ThresholdsConfig = ThresholdsConfig()
    scoring: ScoringConfig = ScoringConfig()
    provider: ProviderConfig = ProviderConfig()
    delivery: DeliveryConfig = DeliveryConfig()
