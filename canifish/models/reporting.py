"""Reporting and delivery models."""

from dataclasses import dataclass, field

from canifish.models.window import FishingWindow


@dataclass
class RunSummary:
    run_id: str
    location: str
    days_total: int = 0
    days_skipped: int = 0
    windows_total: int = 0
    optimal: int = 0
    partial: int = 0
    unsuitable: int = 0
    best_score: float = 0.0
    best_label: str = ""
    duration_seconds: float = 0.0
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DeliveryDecision:
    send: bool
    reason: str


@dataclass(frozen=True)
class CheckResult:
    summary: RunSummary
    windows: list[FishingWindow]
    subject: str
    report: str
    delivery: DeliveryDecision
