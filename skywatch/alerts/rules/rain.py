"""Rain rule: fires on high precipitation probability OR a large expected sum."""

from skywatch.config.schema import AlertRulesConfig
from skywatch.models.weather import DailyForecastDay


def check(day: DailyForecastDay, config: AlertRulesConfig) -> bool:
    prob = day.precipitation_probability_percent
    total = day.precipitation_sum_mm
    if prob is not None and prob >= config.rain_probability_threshold:
        return True
    return total is not None and total >= config.rain_mm_threshold
