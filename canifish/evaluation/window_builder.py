"""Window builder: scores every low tide of every complete forecast day."""

import logging
from dataclasses import dataclass

from canifish.config.schema import CanIFishConfig
from canifish.evaluation.aggregator import ScoreBucket, aggregate, score_bucket
from canifish.evaluation.aligner import find_nearest
from canifish.evaluation.evaluator import ConditionEvaluator
from canifish.evaluation.partitioner import partition_days
from canifish.models.forecast import CalendarDay, RawForecastBundle
from canifish.models.window import NOT_PASSING, CandidateWindow, FishingWindow

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    days_total: int = 0
    days_skipped: int = 0
    candidates_skipped: int = 0


@dataclass(frozen=True)
class BuildResult:
    windows: list[FishingWindow]
    stats: BuildStats


class WindowBuilder:
    def __init__(self, config: CanIFishConfig):
        self.config = config
        self.evaluator = ConditionEvaluator(config.thresholds)

    def build(self, bundle: RawForecastBundle) -> BuildResult:
        """Evaluate all candidate windows in natural forecast order.

        Incomplete days and candidates without a swell or weather sample are
        skipped and counted in the returned stats. An empty window list is a
        valid "no windows" result.
        """
        stats = BuildStats()
        windows: list[FishingWindow] = []

        days = partition_days(bundle)
        stats.days_total = len(days)
        logger.info("Processing %d forecast days", len(days))

        for day in days:
            if not day.is_complete:
                stats.days_skipped += 1
                continue
            windows.extend(self._build_day(day, stats))

        logger.info("Completed processing: %d fishing windows", len(windows))
        log_windows_summary(windows)
        return BuildResult(windows=windows, stats=stats)

    def _build_day(self, day: CalendarDay, stats: BuildStats) -> list[FishingWindow]:
        assert day.swell_day is not None
        assert day.weather_day is not None
        assert day.sunrise_sunset_day is not None

        if not day.sunrise_sunset_day.entries:
            logger.info("No sunrise/sunset entry for %s, skipping day", day.date)
            stats.days_skipped += 1
            return []
        sun = day.sunrise_sunset_day.entries[0]

        low_tides = day.low_tides
        logger.info("Found %d low tides on %s", len(low_tides), day.date)

        windows: list[FishingWindow] = []
        for low_tide in low_tides:
            target = low_tide.instant
            swell = find_nearest(day.swell_day.entries, target)
            weather = find_nearest(day.weather_day.entries, target)
            if swell is None or weather is None:
                logger.info(
                    "Missing samples for %s %s: swell=%s weather=%s",
                    day.date, low_tide.date_time, swell is not None, weather is not None,
                )
                stats.candidates_skipped += 1
                continue

            candidate = CandidateWindow(
                date=day.date,
                low_tide=low_tide,
                swell=swell,
                weather=weather,
                sunrise=sun.sunrise,
                sunset=sun.sunset,
            )
            verdicts = self.evaluator.evaluate(candidate)
            score = aggregate(verdicts, self.config.scoring.weights)
            logger.info(
                "Window %s %s: tide=%.2fm swell=%.1fm/%gs/%s weather=%s score=%.1f",
                day.date, low_tide.date_time, low_tide.height,
                swell.height, swell.period, swell.direction_text,
                weather.precis_code, score,
            )
            windows.append(
                FishingWindow(candidate=candidate, verdicts=verdicts, overall_score=score)
            )
        return windows


def log_windows_summary(windows: list[FishingWindow]) -> None:
    """Log optimal/partial/unsuitable counts and non-passing rationales."""
    buckets: dict[ScoreBucket, list[FishingWindow]] = {b: [] for b in ScoreBucket}
    for w in windows:
        buckets[score_bucket(w.overall_score)].append(w)

    logger.info(
        "=== Fishing Windows Summary === total=%d optimal=%d partial=%d unsuitable=%d",
        len(windows),
        len(buckets[ScoreBucket.OPTIMAL]),
        len(buckets[ScoreBucket.PARTIAL]),
        len(buckets[ScoreBucket.UNSUITABLE]),
    )
    for bucket, items in buckets.items():
        for w in items:
            issues = [
                f"{v.factor.value}={v.status.value} ({v.rationale})"
                for v in w.verdicts.with_status(*NOT_PASSING)
            ]
            logger.info(
                "[%s] %s %s score=%.1f%s",
                bucket.value, w.date, w.low_tide_time, w.overall_score,
                f" issues: {'; '.join(issues)}" if issues else "",
            )
