"""Delivery policy: decides whether a report is worth sending."""

from datetime import date

from canifish.config.schema import DeliveryConfig
from canifish.evaluation.aggregator import ScoreBucket, score_bucket
from canifish.models.reporting import DeliveryDecision
from canifish.models.window import FishingWindow

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def decide_delivery(
    windows: list[FishingWindow], today: date, config: DeliveryConfig
) -> DeliveryDecision:
    """Send when an optimal window exists, on the weekly digest day, or in a
    non-production environment listed in ``always_send_environments``."""
    optimal = sum(1 for w in windows if score_bucket(w.overall_score) == ScoreBucket.OPTIMAL)
    if optimal:
        return DeliveryDecision(send=True, reason=f"{optimal} optimal window(s) found")

    weekday = WEEKDAYS[today.weekday()]
    if config.weekly_day and config.weekly_day.lower() == weekday:
        return DeliveryDecision(send=True, reason=f"weekly report day ({weekday})")

    if config.environment in config.always_send_environments:
        return DeliveryDecision(
            send=True, reason=f"running in {config.environment} environment"
        )

    return DeliveryDecision(
        send=False, reason="no optimal windows and not a weekly report day"
    )
