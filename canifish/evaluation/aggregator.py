"""Score aggregator: weighted pass/partial/fail average with hard-fail override."""

from collections.abc import Mapping
from enum import StrEnum

from canifish.models.window import FactorVerdicts, VerdictStatus

MULTIPLIERS = {
    VerdictStatus.PASS: 1.0,
    VerdictStatus.PARTIAL: 0.5,
    VerdictStatus.FAIL: 0.0,
}

OPTIMAL_SCORE = 100.0
PARTIAL_FLOOR = 50.0


class ScoreBucket(StrEnum):
    OPTIMAL = "optimal"
    PARTIAL = "partial"
    UNSUITABLE = "unsuitable"


def aggregate(verdicts: FactorVerdicts, weights: Mapping[str, float]) -> float:
    """Combine factor verdicts into a 0-100 score.

    Any hard_fail verdict forces 0. Factors without a weight only gate.
    """
    if verdicts.has_hard_fail:
        return 0.0

    total_weight = 0.0
    weighted = 0.0
    for verdict in verdicts.all():
        weight = weights.get(verdict.factor.value, 0.0)
        if weight <= 0:
            continue
        total_weight += weight
        weighted += weight * MULTIPLIERS[verdict.status]

    if total_weight == 0 or weighted == total_weight:
        return OPTIMAL_SCORE
    return weighted * 100.0 / total_weight


def score_bucket(score: float) -> ScoreBucket:
    """Display bucket for a score."""
    if score >= OPTIMAL_SCORE:
        return ScoreBucket.OPTIMAL
    if score >= PARTIAL_FLOOR:
        return ScoreBucket.PARTIAL
    return ScoreBucket.UNSUITABLE
