"""Tests for reporting: summarizer, formatters, delivery policy."""

import json
from datetime import UTC, date, datetime

from canifish.config.schema import DeliveryConfig
from canifish.evaluation.window_builder import BuildStats, WindowBuilder
from canifish.models.reporting import RunSummary
from canifish.reporting.delivery import decide_delivery
from canifish.reporting.formatters import (
    format_report_text,
    format_subject,
    format_summary_text,
    format_windows_json,
)
from canifish.reporting.run_summarizer import RunSummarizer

GENERATED_AT = datetime(2026, 3, 14, 5, 30, tzinfo=UTC)


def _windows(config, bundle):
    return WindowBuilder(config).build(bundle).windows


class TestRunSummarizer:
    def test_basic_flow(self, default_config, fixture_bundle):
        s = RunSummarizer("run1", "Norah Head")
        s.record_build(BuildStats(days_total=3, days_skipped=1))
        s.record_windows(_windows(default_config, fixture_bundle))
        s.record_duration(1.5)

        summary = s.finalize()
        assert summary.days_total == 3
        assert summary.days_skipped == 1
        assert summary.windows_total == 4
        assert summary.optimal == 1
        assert summary.partial == 1
        assert summary.unsuitable == 2
        assert summary.best_score == 100.0
        assert summary.best_label == "2026-03-14 07:15:00"
        assert summary.errors == []

    def test_no_windows(self):
        s = RunSummarizer("run1", "Norah Head")
        s.record_windows([])
        summary = s.finalize()
        assert summary.windows_total == 0
        assert summary.best_label == ""

    def test_errors_and_location(self):
        s = RunSummarizer("run1", "Norah Head")
        s.record_location("Norah Head Lighthouse")
        s.record_error("timeout")
        summary = s.finalize()
        assert summary.location == "Norah Head Lighthouse"
        assert summary.errors == ["timeout"]


class TestSummaryFormatters:
    def test_text_format(self):
        summary = RunSummary(
            run_id="abcdef123456",
            location="Norah Head",
            days_total=3,
            days_skipped=1,
            windows_total=4,
            optimal=1,
            partial=1,
            unsuitable=2,
            best_score=100.0,
            best_label="2026-03-14 07:15",
            duration_seconds=0.42,
        )
        text = format_summary_text(summary)
        assert "Run abcdef12" in text
        assert "(Norah Head)" in text
        assert "4 evaluated, 1 optimal, 1 partial, 2 unsuitable" in text
        assert "Best score: 100.0%" in text
        assert "Errors" not in text

    def test_text_format_with_errors(self):
        summary = RunSummary(run_id="run1", location="Norah Head", errors=["boom"])
        text = format_summary_text(summary)
        assert "Errors: 1" in text
        assert "Best score" not in text


class TestReportFormatters:
    def test_subject_with_optimal(self, default_config, fixture_bundle):
        windows = _windows(default_config, fixture_bundle)
        subject = format_subject(windows, "Norah Head", GENERATED_AT)
        assert subject == "✅ Norah Head Fishing Report 2026-03-14 05:30"

    def test_subject_without_optimal(self):
        subject = format_subject([], "Norah Head", GENERATED_AT)
        assert subject.startswith("❌ Norah Head")

    def test_report_sections(self, default_config, fixture_bundle):
        windows = _windows(default_config, fixture_bundle)
        report = format_report_text(windows, "Norah Head", GENERATED_AT)
        assert report.startswith("Fishing Conditions Report")
        assert "for Norah Head" in report

        optimal = report.index("✅ Optimal Conditions")
        partial = report.index("⚠️ Partial Conditions")
        unsuitable = report.index("❌ Unsuitable Conditions")
        assert optimal < partial < unsuitable

        assert "Sat Mar 14 at 7:15 AM" in report[optimal:partial]
        assert "Tide: 0.3m" in report[optimal:partial]
        assert "Swell: 0.8m 5s NE" in report[optimal:partial]
        assert "Sun Mar 15 at 8:05 AM [70.0%]" in report[partial:unsuitable]
        assert "Generated at 2026-03-14 05:30" in report

    def test_unsuitable_lists_failures_only(self, default_config, fixture_bundle):
        windows = _windows(default_config, fixture_bundle)
        report = format_report_text(windows, "Norah Head", GENERATED_AT)
        section = report[report.index("❌ Unsuitable Conditions"):]
        assert "Sat Mar 14 at 7:40 PM [0.0%]" in section
        assert "0.41hrs after sunset [hard_fail]" in section
        assert "Swell 1.3m exceeds 1m [hard_fail]" in section
        assert "[pass]" not in section

    def test_empty_report(self):
        report = format_report_text([], "Norah Head", GENERATED_AT)
        assert "No optimal fishing windows found for this period" in report
        assert "No partial matches found for this period" in report
        assert "No unsuitable conditions found for this period" in report

    def test_windows_json(self, default_config, fixture_bundle):
        windows = _windows(default_config, fixture_bundle)
        data = json.loads(format_windows_json(windows))
        assert len(data) == 4
        first = data[0]
        assert first["low_tide_time"] == "2026-03-14 07:15:00"
        assert first["bucket"] == "optimal"
        assert first["hours_after_sunrise"] == 1.08
        assert set(first["verdicts"]) == {
            "tide_height",
            "swell_height",
            "swell_period",
            "swell_direction",
            "weather",
            "after_sunrise",
            "before_sunset",
        }
        assert data[2]["verdicts"]["weather"]["status"] == "partial"


class TestDecideDelivery:
    # 2026-03-15 is a Sunday, 2026-03-16 a Monday
    def test_optimal_window_sends(self, default_config, fixture_bundle):
        windows = _windows(default_config, fixture_bundle)
        decision = decide_delivery(windows, date(2026, 3, 16), DeliveryConfig())
        assert decision.send
        assert decision.reason == "1 optimal window(s) found"

    def test_weekly_day_sends(self):
        decision = decide_delivery([], date(2026, 3, 15), DeliveryConfig())
        assert decision.send
        assert decision.reason == "weekly report day (sunday)"

    def test_quiet_day_skips(self):
        decision = decide_delivery([], date(2026, 3, 16), DeliveryConfig())
        assert not decision.send

    def test_weekly_day_disabled(self):
        config = DeliveryConfig(weekly_day=None)
        assert not decide_delivery([], date(2026, 3, 15), config).send

    def test_non_production_always_sends(self):
        config = DeliveryConfig(environment="development")
        decision = decide_delivery([], date(2026, 3, 16), config)
        assert decision.send
        assert decision.reason == "running in development environment"
