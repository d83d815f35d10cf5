"""WillyWeather v2 API client."""

import logging

import httpx

logger = logging.getLogger(__name__)

WILLYWEATHER_BASE_URL = "https://api.willyweather.com.au/v2"
DEFAULT_USER_AGENT = "canifish/0.1.0"
FORECAST_TYPES = "weather,tides,swell,sunrisesunset"


class WillyWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = WILLYWEATHER_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def search_location(self, lat: float, lng: float) -> dict:
        """Find the nearest provider location to a coordinate."""
        return self._get("search.json", {"lat": lat, "lng": lng, "distance": "km"})

    def get_weather(self, location_id: int) -> dict:
        """Fetch weather, tide, swell and sunrise/sunset forecasts for a location."""
        return self._get(
            f"locations/{location_id}/weather.json", {"forecasts": FORECAST_TYPES}
        )

    def _get(self, endpoint: str, params: dict) -> dict:
        # The API key is part of the path; keep it out of the logs
        url = f"{self.base_url}/{self.api_key}/{endpoint}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        logger.debug("GET %s params=%s", endpoint, params)
        resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()
