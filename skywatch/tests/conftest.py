"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path

import pytest
import yaml

from skywatch.alerts.dedup import SqliteDedupStore
from skywatch.alerts.dispatcher import NotificationDispatcher
from skywatch.alerts.policy import AlertPolicy
from skywatch.alerts.settings import AlertFlags, MemoryKeyValueStore
from skywatch.assistant import WeatherAssistant
from skywatch.config.defaults import DEFAULT_CITY
from skywatch.config.schema import AlertRulesConfig, AppConfig
from skywatch.ingest.forecast_fetcher import ForecastFetcher
from skywatch.models.alert import PermissionState, Toast
from skywatch.models.weather import WeatherSnapshot
from skywatch.outfit.engine import OutfitRuleEngine
from skywatch.outfit.presenter import OutfitPresenter
from skywatch.storage.database import connect, run_migrations

FIXTURE_DIR = Path(__file__).parent / "fixtures"


class RecordingToasts:
    def __init__(self) -> None:
        self.shown: list[Toast] = []

    def show(self, toast: Toast) -> None:
        self.shown.append(toast)

    @property
    def titles(self) -> list[str]:
        return [t.title for t in self.shown]


class FakePlatform:
    """Native notification platform double."""

    def __init__(
        self,
        supported: bool = True,
        permission: PermissionState = PermissionState.DEFAULT,
        grant_on_request: PermissionState = PermissionState.GRANTED,
        fail_send: bool = False,
    ):
        self.supported = supported
        self._permission = permission
        self.grant_on_request = grant_on_request
        self.fail_send = fail_send
        self.requests = 0
        self.sent: list[tuple[str, str, str]] = []

    def permission(self) -> PermissionState:
        return self._permission

    def request_permission(self) -> PermissionState:
        self.requests += 1
        self._permission = self.grant_on_request
        return self._permission

    def send(self, title: str, body: str, tag: str) -> None:
        if self.fail_send:
            raise OSError("notification daemon unavailable")
        self.sent.append((title, body, tag))


@pytest.fixture
def tmp_db(tmp_path: Path) -> sqlite3.Connection:
    """Create a temporary, fully migrated SQLite database."""
    conn = connect(tmp_path / "test.db")
    run_migrations(conn)
    yield conn
    conn.close()


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig(default_city=DEFAULT_CITY)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "alerts": {"heat_max_threshold_c": 38.0},
        "outfit": {"windy_threshold_kmh": 20.0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "open_meteo_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def geocode_payload() -> dict:
    with open(FIXTURE_DIR / "open_meteo_geocode.json") as f:
        return json.load(f)


@pytest.fixture
def snapshot() -> WeatherSnapshot:
    return WeatherSnapshot(
        location_name="Tirupati",
        country_code="India",
        temperature_c=20,
        feels_like_c=20,
        weather_code=2,
        humidity_percent=60,
        wind_speed_kmh=25.0,
        precipitation_mm=0.0,
        description="Partly cloudy",
    )


@pytest.fixture
def toasts() -> RecordingToasts:
    return RecordingToasts()


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def dispatcher(platform: FakePlatform, toasts: RecordingToasts) -> NotificationDispatcher:
    return NotificationDispatcher(
        AlertFlags(MemoryKeyValueStore()), platform, toasts, AlertRulesConfig()
    )


@pytest.fixture
def make_assistant(tmp_db: sqlite3.Connection, dispatcher: NotificationDispatcher):
    """Build an assistant around a given fetcher, sharing the tmp_db dedup store."""

    def _make(fetcher: ForecastFetcher) -> WeatherAssistant:
        return WeatherAssistant(
            fetcher=fetcher,
            policy=AlertPolicy(AlertRulesConfig(), SqliteDedupStore(tmp_db)),
            dispatcher=dispatcher,
            engine=OutfitRuleEngine(),
            presenter=OutfitPresenter(),
        )

    return _make
