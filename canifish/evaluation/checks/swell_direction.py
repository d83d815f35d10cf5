"""Swell direction check: blocks compass directions the spot is exposed to."""

from canifish.config.schema import DirectionThreshold
from canifish.evaluation.thresholds import outcome_status
from canifish.models.window import Factor, Verdict, VerdictStatus


def check(direction_text: str, threshold: DirectionThreshold) -> Verdict:
    excluded = {d.upper() for d in threshold.excluded}
    if direction_text.upper() in excluded:
        status = outcome_status(threshold.otherwise)
        rationale = f"Swell from {direction_text} is excluded"
    else:
        status = VerdictStatus.PASS
        rationale = f"Swell from {direction_text} is not excluded"
    return Verdict(
        factor=Factor.SWELL_DIRECTION,
        status=status,
        value=direction_text,
        threshold=f"not in {', '.join(threshold.excluded)}",
        rationale=rationale,
    )
