"""Tier classification shared by the factor checks."""

import math

from canifish.config.schema import LowerBoundThreshold, Outcome, UpperBoundThreshold
from canifish.models.window import VerdictStatus

_OUTCOME_STATUS = {
    Outcome.FAIL: VerdictStatus.FAIL,
    Outcome.HARD_FAIL: VerdictStatus.HARD_FAIL,
}


def outcome_status(outcome: Outcome) -> VerdictStatus:
    return _OUTCOME_STATUS[outcome]


def classify_upper(value: float, threshold: UpperBoundThreshold) -> VerdictStatus:
    if value <= threshold.pass_max:
        return VerdictStatus.PASS
    if threshold.partial_max is not None and value <= threshold.partial_max:
        return VerdictStatus.PARTIAL
    return outcome_status(threshold.otherwise)


def classify_lower(value: float, threshold: LowerBoundThreshold) -> VerdictStatus:
    if value >= threshold.min:
        return VerdictStatus.PASS
    return outcome_status(threshold.otherwise)


def describe_upper(threshold: UpperBoundThreshold, unit: str) -> str:
    """E.g. '≤0.4m pass, ≤0.6m partial'."""
    parts = [f"≤{threshold.pass_max:g}{unit} pass"]
    if threshold.partial_max is not None:
        parts.append(f"≤{threshold.partial_max:g}{unit} partial")
    return ", ".join(parts)


def format_hours(hours: float, status: VerdictStatus) -> str:
    """Absolute hours for a rationale.

    Non-passing values are truncated to two decimals so a near miss such as
    1.996 never prints as the threshold itself.
    """
    if status == VerdictStatus.PASS:
        return f"{abs(hours):.1f}"
    return f"{math.floor(round(abs(hours) * 100, 6)) / 100:.2f}"
