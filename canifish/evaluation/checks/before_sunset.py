"""Daylight check: low tide must leave enough light before sunset."""

from canifish.config.schema import LowerBoundThreshold
from canifish.evaluation.thresholds import classify_lower, format_hours
from canifish.models.window import Factor, Verdict


def check(hours_before_sunset: float, threshold: LowerBoundThreshold) -> Verdict:
    status = classify_lower(hours_before_sunset, threshold)
    direction = "before" if hours_before_sunset >= 0 else "after"
    return Verdict(
        factor=Factor.BEFORE_SUNSET,
        status=status,
        value=hours_before_sunset,
        threshold=f"≥{threshold.min:g} hours before sunset",
        rationale=f"{format_hours(hours_before_sunset, status)}hrs {direction} sunset",
    )
