"""Swell height check."""

from canifish.config.schema import UpperBoundThreshold
from canifish.evaluation.thresholds import classify_upper, describe_upper
from canifish.models.window import Factor, Verdict, VerdictStatus


def check(height_m: float, threshold: UpperBoundThreshold) -> Verdict:
    status = classify_upper(height_m, threshold)
    if status == VerdictStatus.PASS:
        rationale = f"Swell {height_m:g}m within {threshold.pass_max:g}m"
    elif status == VerdictStatus.PARTIAL:
        rationale = f"Swell {height_m:g}m above {threshold.pass_max:g}m but within {threshold.partial_max:g}m"
    else:
        limit = threshold.partial_max if threshold.partial_max is not None else threshold.pass_max
        rationale = f"Swell {height_m:g}m exceeds {limit:g}m"
    return Verdict(
        factor=Factor.SWELL_HEIGHT,
        status=status,
        value=height_m,
        threshold=describe_upper(threshold, "m"),
        rationale=rationale,
    )
