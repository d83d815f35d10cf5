"""Swell period check: shorter periods mean gentler surges on the rocks."""

from canifish.config.schema import UpperBoundThreshold
from canifish.evaluation.thresholds import classify_upper, describe_upper
from canifish.models.window import Factor, Verdict, VerdictStatus


def check(period_s: float, threshold: UpperBoundThreshold) -> Verdict:
    status = classify_upper(period_s, threshold)
    if status == VerdictStatus.PASS:
        rationale = f"Swell period {period_s:g}s within {threshold.pass_max:g}s"
    elif status == VerdictStatus.PARTIAL:
        rationale = f"Swell period {period_s:g}s above {threshold.pass_max:g}s but within {threshold.partial_max:g}s"
    else:
        limit = threshold.partial_max if threshold.partial_max is not None else threshold.pass_max
        rationale = f"Swell period {period_s:g}s exceeds {limit:g}s"
    return Verdict(
        factor=Factor.SWELL_PERIOD,
        status=status,
        value=period_s,
        threshold=describe_upper(threshold, "s"),
        rationale=rationale,
    )
