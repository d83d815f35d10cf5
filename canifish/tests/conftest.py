"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from canifish.config.defaults import DEFAULT_LOCATION
from canifish.config.schema import CanIFishConfig
from canifish.ingest.forecast_fetcher import extract_bundle
from canifish.models.forecast import RawForecastBundle


@pytest.fixture
def default_config() -> CanIFishConfig:
    """Return default CanIFishConfig with the default location."""
    return CanIFishConfig(location=DEFAULT_LOCATION)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "thresholds": {"tide_height_m": {"pass_max": 0.4, "partial_max": 0.6}},
        "delivery": {"weekly_day": "sunday", "environment": "production"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def weather_response(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "willyweather_weather.json") as f:
        return json.load(f)


@pytest.fixture
def location_response(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "willyweather_location.json") as f:
        return json.load(f)


@pytest.fixture
def fixture_bundle(weather_response: dict) -> RawForecastBundle:
    return extract_bundle(weather_response)
