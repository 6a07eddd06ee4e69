"""Alert policy: runs all four rules (no short-circuit) and dedups each hit."""

import logging

from skywatch.alerts.dedup import DedupStore, make_dedup_key
from skywatch.alerts.rules import cold, heat, rain, storm
from skywatch.config.schema import AlertRulesConfig
from skywatch.models.alert import AlertDecision, AlertType
from skywatch.models.common import round_half_up
from skywatch.models.weather import DailyForecastDay, WeatherSnapshot

logger = logging.getLogger(__name__)


def _num(value: float | None) -> str:
    if value is None:
        return "NA"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class AlertPolicy:
    def __init__(self, config: AlertRulesConfig, dedup: DedupStore):
        self.config = config
        self.dedup = dedup

    def evaluate(
        self,
        snapshot: WeatherSnapshot,
        today: DailyForecastDay,
        city_key: str,
        day_iso: str,
    ) -> list[AlertDecision]:
        """Evaluate today's forecast. Each rule fires at most once per city and day."""
        city = snapshot.location_name
        candidates: list[tuple[AlertType, str, str]] = []

        # 1. Rain
        if rain.check(today, self.config):
            candidates.append((
                AlertType.RAIN,
                f"Rain alert: {city}",
                f"Chance: {_num(today.precipitation_probability_percent)}% | "
                f"Expected: {_num(today.precipitation_sum_mm)} mm. "
                "Carry an umbrella / raincoat.",
            ))

        # 2. Heat
        if heat.check(today, self.config):
            candidates.append((
                AlertType.HEAT,
                f"Heat warning: {city}",
                f"Day max around {round_half_up(today.temperature_max_c)}°C. "
                "Stay hydrated and avoid peak sun.",
            ))

        # 3. Cold
        if cold.check(today, self.config):
            candidates.append((
                AlertType.COLD,
                f"Cold warning: {city}",
                f"Night min around {round_half_up(today.temperature_min_c)}°C. "
                "Dress in layers.",
            ))

        # 4. Storm
        if storm.check(today, self.config):
            candidates.append((
                AlertType.STORM,
                f"Storm alert: {city}",
                "Thunderstorm conditions possible today. "
                "Prefer staying indoors if needed.",
            ))

        decisions: list[AlertDecision] = []
        for alert_type, title, body in candidates:
            key = make_dedup_key(alert_type, city_key, day_iso)
            if not self.dedup.should_send(key):
                logger.debug("Skipping %s alert, already sent for %s", alert_type, key)
                continue
            logger.info("Alert %s fired for %s on %s", alert_type, city_key, day_iso)
            decisions.append(
                AlertDecision(alert_type=alert_type, title=title, body=body, dedup_key=key)
            )
        return decisions
