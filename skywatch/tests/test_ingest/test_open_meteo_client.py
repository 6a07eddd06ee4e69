"""Tests for the Open-Meteo client with mocked httpx."""

from unittest.mock import patch

import httpx
import pytest
import respx

from skywatch.config.schema import ApiConfig
from skywatch.ingest.open_meteo_client import OpenMeteoClient

FORECAST_URL = "https://test-forecast.example.com/v1/forecast"
GEOCODE_URL = "https://test-geo.example.com/v1/search"
ARCHIVE_URL = "https://test-archive.example.com/v1/archive"


@pytest.fixture
def client() -> OpenMeteoClient:
    return OpenMeteoClient(
        ApiConfig(
            geocoding_url="https://test-geo.example.com/v1",
            forecast_url="https://test-forecast.example.com/v1",
            archive_url="https://test-archive.example.com/v1",
            max_retries=1,
            retry_base_delay=0.01,
        )
    )


class TestSearch:
    @respx.mock
    def test_query_params(self, client: OpenMeteoClient, geocode_payload: dict):
        route = respx.get(GEOCODE_URL, params={"name": "Tirupati"}).mock(
            return_value=httpx.Response(200, json=geocode_payload)
        )

        result = client.search("Tirupati")
        assert len(result["results"]) == 2
        params = route.calls[0].request.url.params
        assert params["count"] == "10"
        assert params["language"] == "en"
        assert params["format"] == "json"


class TestGetForecast:
    @respx.mock
    def test_success(self, client: OpenMeteoClient, forecast_payload: dict):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        result = client.get_forecast(13.63, 79.42)
        assert result["current"]["weather_code"] == 2
        params = route.calls[0].request.url.params
        assert params["timezone"] == "auto"
        assert params["forecast_days"] == "7"
        assert "precipitation_probability_max" in params["daily"]
        assert "wind_gusts_10m" in params["current"]

    @respx.mock
    def test_user_agent_header(self, client: OpenMeteoClient, forecast_payload: dict):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        client.get_forecast(13.63, 79.42)
        assert "skywatch" in route.calls[0].request.headers["user-agent"]

    @respx.mock
    def test_retry_on_503(self, client: OpenMeteoClient, forecast_payload: dict):
        route = respx.get(FORECAST_URL).mock(
            side_effect=[
                httpx.Response(503),
                httpx.Response(200, json=forecast_payload),
            ]
        )

        with patch("skywatch.ingest.open_meteo_client.time.sleep"):
            result = client.get_forecast(13.63, 79.42)
        assert "current" in result
        assert route.call_count == 2

    @respx.mock
    def test_retry_on_429(self, client: OpenMeteoClient, forecast_payload: dict):
        route = respx.get(FORECAST_URL).mock(
            side_effect=[
                httpx.Response(429),
                httpx.Response(200, json=forecast_payload),
            ]
        )

        with patch("skywatch.ingest.open_meteo_client.time.sleep") as sleep:
            client.get_forecast(13.63, 79.42)
        assert route.call_count == 2
        sleep.assert_called_once_with(0.01)

    @respx.mock
    def test_exhausted_retries(self, client: OpenMeteoClient):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(503))

        with patch("skywatch.ingest.open_meteo_client.time.sleep"), pytest.raises(
            httpx.HTTPStatusError
        ):
            client.get_forecast(13.63, 79.42)

    @respx.mock
    def test_transport_error_retried(self, client: OpenMeteoClient, forecast_payload: dict):
        route = respx.get(FORECAST_URL).mock(
            side_effect=[
                httpx.ConnectError("connection refused"),
                httpx.Response(200, json=forecast_payload),
            ]
        )

        with patch("skywatch.ingest.open_meteo_client.time.sleep"):
            client.get_forecast(13.63, 79.42)
        assert route.call_count == 2

    @respx.mock
    def test_client_error_not_retried(self, client: OpenMeteoClient):
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(400))

        with pytest.raises(httpx.HTTPStatusError):
            client.get_forecast(13.63, 79.42)
        assert route.call_count == 1


class TestGetArchive:
    @respx.mock
    def test_date_range(self, client: OpenMeteoClient):
        route = respx.get(ARCHIVE_URL).mock(
            return_value=httpx.Response(200, json={"daily": {}})
        )

        client.get_archive(13.63, 79.42, "2025-11-01", "2025-11-28")
        params = route.calls[0].request.url.params
        assert params["start_date"] == "2025-11-01"
        assert params["end_date"] == "2025-11-28"
        assert params["daily"] == "temperature_2m_max,temperature_2m_min,precipitation_sum"
