"""Open-Meteo geocoding, forecast and archive client with retry and rate limit handling."""

import logging
import time

import httpx

from skywatch.config.schema import ApiConfig

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "skywatch/0.1.0"

CURRENT_FIELDS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,precipitation,"
    "weather_code,cloud_cover,pressure_msl,wind_speed_10m,wind_direction_10m,"
    "wind_gusts_10m"
)
DAILY_FIELDS = (
    "weather_code,temperature_2m_max,temperature_2m_min,precipitation_sum,"
    "precipitation_probability_max,wind_speed_10m_max"
)
ARCHIVE_DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,precipitation_sum"


class OpenMeteoClient:
    def __init__(
        self,
        config: ApiConfig | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.config = config or ApiConfig()
        self.user_agent = user_agent

    def search(self, name: str) -> dict:
        """Geocode a free-text place name."""
        return self._get(
            f"{self.config.geocoding_url}/search",
            {
                "name": name,
                "count": self.config.geocode_count,
                "language": "en",
                "format": "json",
            },
        )

    def get_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch current conditions plus the daily forecast."""
        return self._get(
            f"{self.config.forecast_url}/forecast",
            {
                "latitude": latitude,
                "longitude": longitude,
                "current": CURRENT_FIELDS,
                "daily": DAILY_FIELDS,
                "timezone": "auto",
                "forecast_days": self.config.forecast_days,
            },
        )

    def get_archive(
        self, latitude: float, longitude: float, start_date: str, end_date: str
    ) -> dict:
        """Fetch historical daily max/min temperature and precipitation."""
        return self._get(
            f"{self.config.archive_url}/archive",
            {
                "latitude": latitude,
                "longitude": longitude,
                "start_date": start_date,
                "end_date": end_date,
                "daily": ARCHIVE_DAILY_FIELDS,
                "timezone": "auto",
            },
        )

    def _get(self, url: str, params: dict) -> dict:
        """GET with retries on 503/429 and transport errors, exponential backoff."""
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        max_retries = self.config.max_retries
        base_delay = self.config.retry_base_delay

        last_error: Exception | None = None
        for attempt in range(max_retries + 1):
            try:
                resp = httpx.get(
                    url, params=params, headers=headers, timeout=self.config.timeout_seconds
                )
                if resp.status_code in (503, 429) and attempt < max_retries:
                    delay = base_delay * (2**attempt)
                    logger.warning(
                        "Open-Meteo %s returned %d, retrying in %.1fs (attempt %d/%d)",
                        url, resp.status_code, delay, attempt + 1, max_retries,
                    )
                    time.sleep(delay)
                    continue
                resp.raise_for_status()
                return resp.json()
            except httpx.RequestError as e:
                last_error = e
                if attempt < max_retries:
                    delay = base_delay * (2**attempt)
                    logger.warning(
                        "Open-Meteo request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                raise

        assert last_error is not None
        raise last_error
