"""Daylight check: low tide must fall far enough after sunrise."""

from canifish.config.schema import LowerBoundThreshold
from canifish.evaluation.thresholds import classify_lower, format_hours
from canifish.models.window import Factor, Verdict


def check(hours_after_sunrise: float, threshold: LowerBoundThreshold) -> Verdict:
    status = classify_lower(hours_after_sunrise, threshold)
    direction = "after" if hours_after_sunrise >= 0 else "before"
    return Verdict(
        factor=Factor.AFTER_SUNRISE,
        status=status,
        value=hours_after_sunrise,
        threshold=f"≥{threshold.min:g} hours after sunrise",
        rationale=f"{format_hours(hours_after_sunrise, status)}hrs {direction} sunrise",
    )
