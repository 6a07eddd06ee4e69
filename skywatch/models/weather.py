"""Weather data models: locations, current conditions, daily forecasts, climate."""

from dataclasses import dataclass, field


def _number_at(values: list | None, index: int) -> float | None:
    """Return values[index] if it is a real number, else None."""
    if not values or index >= len(values):
        return None
    v = values[index]
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    return v


@dataclass(frozen=True)
class GeoLocation:
    name: str
    country: str
    admin_region: str
    latitude: float
    longitude: float
    population: int = 0

    @property
    def display_name(self) -> str:
        return f"{self.name}, {self.admin_region}" if self.admin_region else self.name


@dataclass(frozen=True)
class CurrentConditions:
    temperature_c: int
    feels_like_c: int
    humidity_percent: float
    wind_speed_kmh: float
    wind_gust_kmh: float
    wind_direction_deg: float
    pressure_hpa: int
    cloud_cover_percent: float
    precipitation_mm: float
    weather_code: int


@dataclass(frozen=True)
class DailyForecastDay:
    date_iso: str
    precipitation_probability_percent: float | None = None
    precipitation_sum_mm: float | None = None
    temperature_max_c: float | None = None
    temperature_min_c: float | None = None
    weather_code: int | None = None


@dataclass(frozen=True)
class DailyForecast:
    """Parallel daily arrays indexed by day offset (0 = today)."""

    time: list[str] = field(default_factory=list)
    weather_code: list = field(default_factory=list)
    temperature_max_c: list = field(default_factory=list)
    temperature_min_c: list = field(default_factory=list)
    precipitation_sum_mm: list = field(default_factory=list)
    precipitation_probability_percent: list = field(default_factory=list)
    wind_speed_max_kmh: list = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.time)

    def day(self, index: int, fallback_date: str = "") -> DailyForecastDay:
        """Build the forecast for one day; absent entries stay None."""
        date_iso = self.time[index] if index < len(self.time) and self.time[index] else fallback_date
        code = _number_at(self.weather_code, index)
        return DailyForecastDay(
            date_iso=date_iso,
            precipitation_probability_percent=_number_at(
                self.precipitation_probability_percent, index
            ),
            precipitation_sum_mm=_number_at(self.precipitation_sum_mm, index),
            temperature_max_c=_number_at(self.temperature_max_c, index),
            temperature_min_c=_number_at(self.temperature_min_c, index),
            weather_code=int(code) if code is not None else None,
        )


@dataclass(frozen=True)
class ForecastBundle:
    current: CurrentConditions
    daily: DailyForecast


@dataclass(frozen=True)
class WeatherSnapshot:
    location_name: str
    country_code: str
    temperature_c: float
    feels_like_c: float
    weather_code: int
    humidity_percent: float
    wind_speed_kmh: float
    precipitation_mm: float
    description: str = ""

    @property
    def city_key(self) -> str:
        return f"{self.location_name or ''}|{self.country_code or ''}".lower()


@dataclass(frozen=True)
class MonthlyClimate:
    name: str
    full_name: str
    high_c: int
    low_c: int
    avg_c: int
    precipitation_mm: int
    precipitation_probability_percent: int
    weather_code: int
    years_used: int

    @property
    def data_source(self) -> str:
        return f"{self.years_used}-year avg"
