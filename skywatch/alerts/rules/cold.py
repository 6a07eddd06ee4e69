"""Cold rule: fires when the day's minimum drops to the cold threshold."""

from skywatch.config.schema import AlertRulesConfig
from skywatch.models.weather import DailyForecastDay


def check(day: DailyForecastDay, config: AlertRulesConfig) -> bool:
    t_min = day.temperature_min_c
    return t_min is not None and t_min <= config.cold_min_threshold_c
