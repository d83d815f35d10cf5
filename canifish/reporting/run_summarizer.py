"""Run summarizer: aggregates pipeline outputs into a RunSummary."""

from canifish.evaluation.aggregator import ScoreBucket, score_bucket
from canifish.evaluation.window_builder import BuildStats
from canifish.models.reporting import RunSummary
from canifish.models.window import FishingWindow


class RunSummarizer:
    def __init__(self, run_id: str, location: str):
        self.summary = RunSummary(run_id=run_id, location=location)

    def record_build(self, stats: BuildStats) -> None:
        self.summary.days_total = stats.days_total
        self.summary.days_skipped = stats.days_skipped

    def record_windows(self, windows: list[FishingWindow]) -> None:
        self.summary.windows_total = len(windows)
        for w in windows:
            bucket = score_bucket(w.overall_score)
            if bucket == ScoreBucket.OPTIMAL:
                self.summary.optimal += 1
            elif bucket == ScoreBucket.PARTIAL:
                self.summary.partial += 1
            else:
                self.summary.unsuitable += 1
        if windows:
            # max() keeps the first of equal scores, i.e. the earliest window
            best = max(windows, key=lambda w: w.overall_score)
            self.summary.best_score = best.overall_score
            self.summary.best_label = best.low_tide_time

    def record_location(self, location: str) -> None:
        self.summary.location = location

    def record_duration(self, seconds: float) -> None:
        self.summary.duration_seconds = seconds

    def record_error(self, error: str) -> None:
        self.summary.errors.append(error)

    def finalize(self) -> RunSummary:
        return self.summary
