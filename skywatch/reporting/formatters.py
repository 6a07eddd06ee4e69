"""Output formatters for forecasts, climate outlooks and alerts."""

from datetime import date

from skywatch.ingest import weather_codes
from skywatch.models.alert import AlertDecision, AlertSettings, DeliveryOutcome
from skywatch.models.common import round_half_up
from skywatch.models.weather import (
    CurrentConditions,
    DailyForecast,
    MonthlyClimate,
    WeatherSnapshot,
)


def format_current_text(snapshot: WeatherSnapshot, current: CurrentConditions) -> str:
    """Plain text current-conditions card."""
    return "\n".join([
        f"=== {snapshot.location_name}, {snapshot.country_code} ===",
        f"{weather_codes.icon(current.weather_code)} {current.temperature_c}°C "
        f"{snapshot.description}",
        f"Feels like: {current.feels_like_c}°C | Humidity: {current.humidity_percent:g}%",
        f"Wind: {current.wind_speed_kmh:.1f} km/h (gusts {current.wind_gust_kmh:.1f}) | "
        f"Pressure: {current.pressure_hpa} hPa",
        f"Cloud: {current.cloud_cover_percent}% | Rain: {current.precipitation_mm:.1f} mm",
    ])


def format_daily_text(daily: DailyForecast, max_days: int = 7) -> str:
    lines = ["7-day forecast:"]
    for i in range(min(max_days, len(daily))):
        day = daily.day(i)
        label = _day_label(day.date_iso)
        hi = "?" if day.temperature_max_c is None else round_half_up(day.temperature_max_c)
        lo = "?" if day.temperature_min_c is None else round_half_up(day.temperature_min_c)
        rain_mm = "?" if day.precipitation_sum_mm is None else f"{day.precipitation_sum_mm:.1f}"
        rain_pct = (
            "?" if day.precipitation_probability_percent is None
            else f"{day.precipitation_probability_percent:g}"
        )
        lines.append(
            f"  {label:<16} {weather_codes.icon(day.weather_code)} "
            f"{hi}°/{lo}°C  rain {rain_mm} mm ({rain_pct}%)"
        )
    return "\n".join(lines)


def format_climate_text(months: list[MonthlyClimate]) -> str:
    if not months:
        return "No climate data available"
    lines = ["Climate outlook:"]
    for m in months:
        lines.append(
            f"  {m.full_name:<15} {weather_codes.icon(m.weather_code)} "
            f"{m.high_c}°/{m.low_c}°C avg {m.avg_c}°C  "
            f"{m.precipitation_mm} mm ({m.precipitation_probability_percent}%)  "
            f"[{m.data_source}]"
        )
    return "\n".join(lines)


def format_alerts_text(alerts: list[tuple[AlertDecision, DeliveryOutcome]]) -> str:
    if not alerts:
        return "No new alerts"
    return "\n".join(f"{d.title} ({outcome})" for d, outcome in alerts)


def format_settings_text(settings: AlertSettings) -> str:
    return (
        f"Alerts: {'ON' if settings.alerts_enabled else 'OFF'} | "
        f"Prompted: {settings.alerts_prompted_once} | "
        f"Permission: {settings.permission}"
    )


def _day_label(date_iso: str) -> str:
    try:
        return date.fromisoformat(date_iso).strftime("%a %b %d")
    except ValueError:
        return date_iso
