"""Climate fetcher: multi-year monthly averages for the months ahead."""

import calendar
import logging
from datetime import date

from skywatch.config.schema import ClimateConfig
from skywatch.ingest.open_meteo_client import OpenMeteoClient
from skywatch.models.common import round_half_up
from skywatch.models.weather import MonthlyClimate

logger = logging.getLogger(__name__)

# Archive ranges stop at the 28th so every month has the same span
LAST_DAY = 28
# Monthly precipitation that maps to a 100% chance
PRECIP_FOR_CERTAINTY_MM = 30.0


def _mean(values: list) -> float | None:
    nums = [v for v in values if isinstance(v, (int, float))]
    if not nums:
        return None
    return sum(nums) / len(nums)


def _add_months(d: date, months: int) -> tuple[int, int]:
    index = d.month - 1 + months
    return d.year + index // 12, index % 12 + 1


class ClimateFetcher:
    def __init__(self, client: OpenMeteoClient, config: ClimateConfig | None = None):
        self.client = client
        self.config = config or ClimateConfig()

    def fetch(
        self, latitude: float, longitude: float, today: date | None = None
    ) -> list[MonthlyClimate]:
        """Average each upcoming month over the previous years.

        Years that fail are skipped; a month with no usable year is omitted.
        """
        today = today or date.today()
        months: list[MonthlyClimate] = []

        for offset in range(self.config.months_ahead):
            year, month = _add_months(today, offset)
            climate = self._average_month(latitude, longitude, year, month)
            if climate is not None:
                months.append(climate)

        logger.info(
            "Climate outlook for (%s, %s): %d/%d months",
            latitude, longitude, len(months), self.config.months_ahead,
        )
        return months

    def _average_month(
        self, latitude: float, longitude: float, year: int, month: int
    ) -> MonthlyClimate | None:
        total_max = 0.0
        total_min = 0.0
        total_precip = 0.0
        valid_years = 0

        for years_back in range(1, self.config.years_back + 1):
            hist_year = year - years_back
            start = f"{hist_year}-{month:02d}-01"
            end = f"{hist_year}-{month:02d}-{LAST_DAY}"
            try:
                raw = self.client.get_archive(latitude, longitude, start, end)
            except Exception as e:
                logger.info("Skipping year %d: %s", hist_year, e)
                continue

            daily = raw.get("daily") or {}
            avg_max = _mean(daily.get("temperature_2m_max") or [])
            avg_min = _mean(daily.get("temperature_2m_min") or [])
            if avg_max is None or avg_min is None:
                continue

            precips = daily.get("precipitation_sum") or []
            total_max += avg_max
            total_min += avg_min
            total_precip += sum(p for p in precips if isinstance(p, (int, float)))
            valid_years += 1

        if valid_years == 0:
            return None

        avg_max = total_max / valid_years
        avg_min = total_min / valid_years
        avg_precip = total_precip / valid_years

        if avg_precip > 50:
            code = 61
        elif avg_precip > 10:
            code = 3
        else:
            code = 0

        return MonthlyClimate(
            name=calendar.month_abbr[month],
            full_name=f"{calendar.month_name[month]} {year}",
            high_c=round_half_up(avg_max),
            low_c=round_half_up(avg_min),
            avg_c=round_half_up((avg_max + avg_min) / 2),
            precipitation_mm=round_half_up(avg_precip),
            precipitation_probability_percent=min(
                100, round_half_up(avg_precip / PRECIP_FOR_CERTAINTY_MM * 100)
            ),
            weather_code=code,
            years_used=valid_years,
        )
