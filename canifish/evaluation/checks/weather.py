"""Weather check: grades the forecast precis code against two vocabularies."""

from canifish.config.schema import WeatherThreshold
from canifish.evaluation.thresholds import outcome_status
from canifish.models.window import Factor, Verdict, VerdictStatus


def check(precis_code: str, precis: str, threshold: WeatherThreshold) -> Verdict:
    if precis_code in threshold.pass_codes:
        status = VerdictStatus.PASS
        rationale = f"{precis} ({precis_code}) is good fishing weather"
    elif precis_code in threshold.partial_codes:
        status = VerdictStatus.PARTIAL
        rationale = f"{precis} ({precis_code}) is fishable weather"
    else:
        status = outcome_status(threshold.otherwise)
        rationale = f"{precis} ({precis_code}) is unsuitable weather"
    return Verdict(
        factor=Factor.WEATHER,
        status=status,
        value=precis_code,
        threshold=f"pass: {', '.join(threshold.pass_codes)}; partial: {', '.join(threshold.partial_codes)}",
        rationale=rationale,
    )
