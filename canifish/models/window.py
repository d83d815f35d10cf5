"""Candidate window, verdict, and scored fishing window models."""

from dataclasses import dataclass, fields
from datetime import datetime
from enum import StrEnum

from canifish.models.forecast import SwellEntry, TideEntry, WeatherEntry


class VerdictStatus(StrEnum):
    PASS = "pass"
    PARTIAL = "partial"
    FAIL = "fail"
    HARD_FAIL = "hard_fail"


NOT_PASSING = (VerdictStatus.PARTIAL, VerdictStatus.FAIL, VerdictStatus.HARD_FAIL)


class Factor(StrEnum):
    TIDE_HEIGHT = "tide_height"
    SWELL_HEIGHT = "swell_height"
    SWELL_PERIOD = "swell_period"
    SWELL_DIRECTION = "swell_direction"
    WEATHER = "weather"
    AFTER_SUNRISE = "after_sunrise"
    BEFORE_SUNSET = "before_sunset"


@dataclass(frozen=True)
class Verdict:
    factor: Factor
    status: VerdictStatus
    value: float | str
    threshold: str
    rationale: str

    @property
    def passed(self) -> bool:
        return self.status == VerdictStatus.PASS


@dataclass(frozen=True)
class FactorVerdicts:
    tide_height: Verdict
    swell_height: Verdict
    swell_period: Verdict
    swell_direction: Verdict
    weather: Verdict
    after_sunrise: Verdict
    before_sunset: Verdict

    def all(self) -> list[Verdict]:
        return [getattr(self, f.name) for f in fields(self)]

    @property
    def has_hard_fail(self) -> bool:
        return any(v.status == VerdictStatus.HARD_FAIL for v in self.all())

    def with_status(self, *statuses: VerdictStatus) -> list[Verdict]:
        return [v for v in self.all() if v.status in statuses]


@dataclass(frozen=True)
class CandidateWindow:
    date: str
    low_tide: TideEntry
    swell: SwellEntry
    weather: WeatherEntry
    sunrise: datetime
    sunset: datetime

    @property
    def time(self) -> datetime:
        return self.low_tide.instant

    @property
    def hours_after_sunrise(self) -> float:
        return (self.time - self.sunrise).total_seconds() / 3600

    @property
    def hours_before_sunset(self) -> float:
        return (self.sunset - self.time).total_seconds() / 3600


@dataclass(frozen=True)
class FishingWindow:
    candidate: CandidateWindow
    verdicts: FactorVerdicts
    overall_score: float

    @property
    def date(self) -> str:
        return self.candidate.date

    @property
    def low_tide_time(self) -> str:
        return self.candidate.low_tide.date_time
