"""Heat rule: fires when the day's maximum reaches the heat threshold."""

from skywatch.config.schema import AlertRulesConfig
from skywatch.models.weather import DailyForecastDay


def check(day: DailyForecastDay, config: AlertRulesConfig) -> bool:
    t_max = day.temperature_max_c
    return t_max is not None and t_max >= config.heat_max_threshold_c
