"""Tests for CheckPipeline with a mocked forecast fetcher."""

from datetime import UTC, datetime, timedelta, timezone
from unittest.mock import MagicMock

import httpx
import pytest

from canifish.config.schema import CanIFishConfig
from canifish.ingest.forecast_fetcher import ForecastFetcher
from canifish.models.common import local_now
from canifish.models.forecast import LocationInfo, RawForecastBundle
from canifish.pipeline import check_pipeline
from canifish.pipeline.check_pipeline import CheckPipeline

MONDAY = datetime(2026, 3, 16, 8, 0, tzinfo=UTC)
SUNDAY = datetime(2026, 3, 15, 8, 0, tzinfo=UTC)
# Sunday morning in Sydney is still Saturday in UTC
SYDNEY_SUNDAY = datetime(2026, 3, 15, 8, 0, tzinfo=timezone(timedelta(hours=11)))

LOCATION = LocationInfo(
    id=5187,
    name="Norah Head",
    region="Central Coast",
    state="NSW",
    time_zone="Australia/Sydney",
    latitude=-33.2816,
    longitude=151.5674,
    distance_km=1.1,
)


@pytest.fixture
def fetcher(fixture_bundle: RawForecastBundle) -> MagicMock:
    mock = MagicMock(spec=ForecastFetcher)
    mock.fetch.return_value = (LOCATION, fixture_bundle)
    return mock


class TestCheckPipeline:
    def test_run(self, default_config: CanIFishConfig, fetcher: MagicMock):
        result = CheckPipeline(default_config, fetcher=fetcher, now=MONDAY).run()

        fetcher.fetch.assert_called_once_with(default_config.location)
        assert len(result.windows) == 4
        assert result.summary.optimal == 1
        assert result.summary.days_skipped == 1
        assert result.summary.errors == []
        assert result.subject == "✅ Norah Head Fishing Report 2026-03-16 08:00"
        assert "Fishing Conditions Report" in result.report
        assert result.delivery.send

    def test_fetch_failure(self, default_config: CanIFishConfig, fetcher: MagicMock):
        fetcher.fetch.side_effect = httpx.ConnectError("connection refused")
        result = CheckPipeline(default_config, fetcher=fetcher, now=SUNDAY).run()

        assert result.windows == []
        assert result.summary.errors == ["connection refused"]
        assert not result.delivery.send
        assert result.delivery.reason == "check failed"
        assert result.subject.startswith("❌")

    def test_run_requires_fetcher(self, default_config: CanIFishConfig):
        with pytest.raises(ValueError):
            CheckPipeline(default_config).run()

    def test_run_bundle(self, default_config: CanIFishConfig, fixture_bundle):
        result = CheckPipeline(default_config, now=MONDAY).run_bundle(fixture_bundle)
        assert [w.overall_score for w in result.windows] == [100.0, 0.0, 70.0, 0.0]
        assert result.summary.location == "Norah Head"
        assert result.summary.windows_total == 4

    def test_no_optimal_windows_on_quiet_day(self, fixture_bundle):
        config = CanIFishConfig.model_validate(
            {"thresholds": {"tide_height_m": {"pass_max": 0.1, "partial_max": 0.6}}}
        )
        result = CheckPipeline(config, now=MONDAY).run_bundle(fixture_bundle)
        assert result.summary.optimal == 0
        assert not result.delivery.send
        assert result.subject.startswith("❌")

    def test_empty_bundle(self, default_config: CanIFishConfig):
        bundle = RawForecastBundle(tides=[], swell=[], weather=[], sunrisesunset=[])
        result = CheckPipeline(default_config, now=SUNDAY).run_bundle(bundle)
        assert result.windows == []
        assert result.delivery.reason == "weekly report day (sunday)"

    def test_default_clock_uses_local_date(self, default_config, monkeypatch):
        monkeypatch.setattr(check_pipeline, "local_now", lambda: SYDNEY_SUNDAY)
        bundle = RawForecastBundle(tides=[], swell=[], weather=[], sunrisesunset=[])
        result = CheckPipeline(default_config).run_bundle(bundle)
        assert SYDNEY_SUNDAY.astimezone(UTC).date().isoweekday() == 6
        assert result.delivery.send
        assert result.delivery.reason == "weekly report day (sunday)"
        assert result.subject.endswith("2026-03-15 08:00")


def test_local_now_is_aware():
    now = local_now()
    assert now.tzinfo is not None
    assert now.utcoffset() == datetime.now().astimezone().utcoffset()
