"""Default city loaded when the dashboard starts without a search."""

from skywatch.config.schema import CityConfig

DEFAULT_CITY = CityConfig(
    name="Tirupati",
    country="India",
    latitude=13.6288,
    longitude=79.4192,
)
