"""Condition evaluator: runs all 7 factor checks (no short-circuit)."""

import logging

from canifish.config.schema import ThresholdsConfig
from canifish.evaluation.checks import (
    after_sunrise,
    before_sunset,
    swell_direction,
    swell_height,
    swell_period,
    tide_height,
    weather,
)
from canifish.models.window import CandidateWindow, FactorVerdicts

logger = logging.getLogger(__name__)


class ConditionEvaluator:
    def __init__(self, thresholds: ThresholdsConfig):
        self.thresholds = thresholds

    def evaluate(self, candidate: CandidateWindow) -> FactorVerdicts:
        """Grade every factor of a candidate window. Never short-circuits."""
        t = self.thresholds
        verdicts = FactorVerdicts(
            tide_height=tide_height.check(candidate.low_tide.height, t.tide_height_m),
            swell_height=swell_height.check(candidate.swell.height, t.swell_height_m),
            swell_period=swell_period.check(candidate.swell.period, t.swell_period_s),
            swell_direction=swell_direction.check(
                candidate.swell.direction_text, t.swell_direction
            ),
            weather=weather.check(
                candidate.weather.precis_code, candidate.weather.precis, t.weather
            ),
            after_sunrise=after_sunrise.check(
                candidate.hours_after_sunrise, t.hours_after_sunrise
            ),
            before_sunset=before_sunset.check(
                candidate.hours_before_sunset, t.hours_before_sunset
            ),
        )
        logger.debug(
            "Evaluated %s low tide %s: %s",
            candidate.date,
            candidate.low_tide.date_time,
            {v.factor.value: v.status.value for v in verdicts.all()},
        )
        return verdicts
