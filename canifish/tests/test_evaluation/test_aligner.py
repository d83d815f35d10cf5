"""Tests for nearest-in-time series alignment."""

from datetime import UTC, datetime

from canifish.evaluation.aligner import find_nearest
from canifish.models.forecast import SwellEntry, WeatherEntry


def _swell(ts: str, height: float = 0.8) -> SwellEntry:
    return SwellEntry(date_time=ts, height=height, period=5, direction_text="N")


def _at(ts: str) -> datetime:
    return datetime.fromisoformat(ts).replace(tzinfo=UTC)


class TestFindNearest:
    def test_empty_series(self):
        assert find_nearest([], _at("2026-03-14 07:00:00")) is None

    def test_single_entry(self):
        entry = _swell("2026-03-14 12:00:00")
        assert find_nearest([entry], _at("2026-03-14 01:00:00")) is entry

    def test_picks_closest(self):
        entries = [
            _swell("2026-03-14 06:00:00", 0.5),
            _swell("2026-03-14 09:00:00", 0.6),
            _swell("2026-03-14 12:00:00", 0.7),
        ]
        assert find_nearest(entries, _at("2026-03-14 10:00:00")).height == 0.6
        assert find_nearest(entries, _at("2026-03-14 11:00:00")).height == 0.7

    def test_target_before_and_after_series(self):
        entries = [_swell("2026-03-14 06:00:00", 0.5), _swell("2026-03-14 09:00:00", 0.6)]
        assert find_nearest(entries, _at("2026-03-13 23:00:00")).height == 0.5
        assert find_nearest(entries, _at("2026-03-15 02:00:00")).height == 0.6

    def test_tie_goes_to_first_listed(self):
        first = _swell("2026-03-14 06:00:00", 0.5)
        second = _swell("2026-03-14 09:00:00", 0.6)
        target = _at("2026-03-14 07:30:00")
        assert find_nearest([first, second], target) is first
        assert find_nearest([second, first], target) is second

    def test_unordered_series(self):
        entries = [
            _swell("2026-03-14 18:00:00", 0.9),
            _swell("2026-03-14 06:00:00", 0.5),
            _swell("2026-03-14 12:00:00", 0.7),
        ]
        assert find_nearest(entries, _at("2026-03-14 05:00:00")).height == 0.5

    def test_result_has_minimal_delta(self):
        entries = [_swell(f"2026-03-14 {h:02d}:00:00", h / 10) for h in (0, 3, 6, 9, 12, 15)]
        for hour in range(24):
            target = _at(f"2026-03-14 {hour:02d}:20:00")
            best = find_nearest(entries, target)
            best_delta = abs(best.instant - target)
            assert all(best_delta <= abs(e.instant - target) for e in entries)

    def test_works_for_weather_entries(self):
        entries = [
            WeatherEntry("2026-03-14 06:00:00", "fine", "Sunny"),
            WeatherEntry("2026-03-14 18:00:00", "cloudy", "Cloudy"),
        ]
        assert find_nearest(entries, _at("2026-03-14 16:00:00")).precis_code == "cloudy"
