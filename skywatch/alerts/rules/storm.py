"""Storm rule: fires on thunderstorm weather codes."""

from skywatch.config.schema import AlertRulesConfig
from skywatch.models.weather import DailyForecastDay


def check(day: DailyForecastDay, config: AlertRulesConfig) -> bool:
    code = day.weather_code
    return code is not None and code >= config.storm_code_min
