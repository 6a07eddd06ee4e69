"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field


class CityConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    country: str = ""
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class AlertRulesConfig(BaseModel):
    model_config = {"extra": "forbid"}

    rain_probability_threshold: float = Field(default=60.0, ge=0.0, le=100.0)
    rain_mm_threshold: float = Field(default=5.0, ge=0.0)
    heat_max_threshold_c: float = 38.0
    cold_min_threshold_c: float = 10.0
    storm_code_min: int = Field(default=95, ge=0)
    toast_ttl_seconds: float = Field(default=6.5, gt=0.0)


class OutfitConfig(BaseModel):
    model_config = {"extra": "forbid"}

    wind_chill_trigger_kmh: float = Field(default=15.0, ge=0.0)
    wind_chill_adjustment_c: float = Field(default=2.0, ge=0.0)
    humid_threshold_percent: float = Field(default=75.0, ge=0.0, le=100.0)
    windy_threshold_kmh: float = Field(default=20.0, ge=0.0)


class PresenterConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_outer: int = Field(default=2, ge=0)
    max_top: int = Field(default=2, ge=0)
    max_bottom: int = Field(default=2, ge=0)
    max_footwear: int = Field(default=1, ge=0)
    max_accessories: int = Field(default=3, ge=0)
    max_extras: int = Field(default=2, ge=0)
    humid_tag_percent: float = Field(default=70.0, ge=0.0, le=100.0)
    windy_tag_kmh: float = Field(default=15.0, ge=0.0)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1"
    forecast_url: str = "https://api.open-meteo.com/v1"
    archive_url: str = "https://archive-api.open-meteo.com/v1"
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=2.0, ge=0.0)
    forecast_days: int = Field(default=7, ge=1, le=16)
    geocode_count: int = Field(default=10, ge=1, le=100)


class ClimateConfig(BaseModel):
    model_config = {"extra": "forbid"}

    months_ahead: int = Field(default=6, ge=1, le=12)
    years_back: int = Field(default=10, ge=1, le=50)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    alerts: AlertRulesConfig = AlertRulesConfig()
    outfit: OutfitConfig = OutfitConfig()
    presenter: PresenterConfig = PresenterConfig()
    api: ApiConfig = ApiConfig()
    climate: ClimateConfig = ClimateConfig()
    default_city: CityConfig | None = None
