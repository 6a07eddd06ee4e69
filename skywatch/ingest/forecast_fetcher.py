"""Forecast fetcher: geocodes place names and parses Open-Meteo forecasts.

Upstream failures never propagate: geocoding degrades to an empty list and
forecasts to None, with the error logged.
"""

import logging

from skywatch.ingest import weather_codes
from skywatch.ingest.open_meteo_client import OpenMeteoClient
from skywatch.models.common import round_half_up
from skywatch.models.weather import (
    CurrentConditions,
    DailyForecast,
    ForecastBundle,
    GeoLocation,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2


class ForecastFetcher:
    def __init__(self, client: OpenMeteoClient):
        self.client = client

    def search_cities(self, query: str) -> list[GeoLocation]:
        """Geocode a query. Returns [] on no match or on any failure."""
        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []
        try:
            raw = self.client.search(query)
            return _extract_locations(raw)
        except Exception:
            logger.exception("City search failed for %r", query)
            return []

    def fetch(self, latitude: float, longitude: float) -> ForecastBundle | None:
        """Fetch current conditions and the daily forecast, or None on failure."""
        try:
            raw = self.client.get_forecast(latitude, longitude)
            return _extract_bundle(raw)
        except Exception:
            logger.exception(
                "Failed to fetch forecast for (%s, %s)", latitude, longitude
            )
            return None


def make_snapshot(name: str, country: str, current: CurrentConditions) -> WeatherSnapshot:
    return WeatherSnapshot(
        location_name=name,
        country_code=country,
        temperature_c=current.temperature_c,
        feels_like_c=current.feels_like_c,
        weather_code=current.weather_code,
        humidity_percent=current.humidity_percent,
        wind_speed_kmh=current.wind_speed_kmh,
        precipitation_mm=current.precipitation_mm,
        description=weather_codes.describe(current.weather_code),
    )


def _extract_locations(raw: dict) -> list[GeoLocation]:
    results = raw.get("results") or []
    return [
        GeoLocation(
            name=r["name"],
            country=r.get("country") or "",
            admin_region=r.get("admin1") or "",
            latitude=float(r["latitude"]),
            longitude=float(r["longitude"]),
            population=int(r.get("population") or 0),
        )
        for r in results
    ]


def _extract_bundle(raw: dict) -> ForecastBundle:
    current = raw["current"]
    gust = current.get("wind_gusts_10m")
    conditions = CurrentConditions(
        temperature_c=round_half_up(current["temperature_2m"]),
        feels_like_c=round_half_up(current["apparent_temperature"]),
        humidity_percent=float(current["relative_humidity_2m"]),
        wind_speed_kmh=round(float(current["wind_speed_10m"]), 1),
        wind_gust_kmh=round(float(gust), 1) if gust else 0.0,
        wind_direction_deg=current.get("wind_direction_10m", 0),
        pressure_hpa=round_half_up(current["pressure_msl"]),
        cloud_cover_percent=current.get("cloud_cover", 0),
        precipitation_mm=round(float(current["precipitation"]), 1),
        weather_code=int(current["weather_code"]),
    )

    daily_raw = raw.get("daily") or {}
    daily = DailyForecast(
        time=list(daily_raw.get("time") or []),
        weather_code=list(daily_raw.get("weather_code") or []),
        temperature_max_c=list(daily_raw.get("temperature_2m_max") or []),
        temperature_min_c=list(daily_raw.get("temperature_2m_min") or []),
        precipitation_sum_mm=list(daily_raw.get("precipitation_sum") or []),
        precipitation_probability_percent=list(
            daily_raw.get("precipitation_probability_max") or []
        ),
        wind_speed_max_kmh=list(daily_raw.get("wind_speed_10m_max") or []),
    )
    return ForecastBundle(current=conditions, daily=daily)
