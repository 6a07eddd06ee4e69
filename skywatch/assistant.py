"""Weather assistant: owns the current snapshot and routes it through the rule engines."""

import logging
import sqlite3
from dataclasses import dataclass, field
from enum import StrEnum

from skywatch.alerts.dedup import SqliteDedupStore
from skywatch.alerts.dispatcher import NotificationDispatcher, NotificationPlatform, ToastSink
from skywatch.alerts.policy import AlertPolicy
from skywatch.alerts.settings import AlertFlags, SqliteKeyValueStore
from skywatch.config.schema import AppConfig
from skywatch.ingest.climate_fetcher import ClimateFetcher
from skywatch.ingest.forecast_fetcher import ForecastFetcher, make_snapshot
from skywatch.ingest.open_meteo_client import OpenMeteoClient
from skywatch.models.alert import AlertDecision, DeliveryOutcome
from skywatch.models.common import today_iso
from skywatch.models.outfit import (
    NO_LOCATION,
    NoLocationSelected,
    OutfitPresentation,
    OutfitRecommendation,
)
from skywatch.models.weather import (
    DailyForecast,
    ForecastBundle,
    GeoLocation,
    MonthlyClimate,
    WeatherSnapshot,
)
from skywatch.outfit.engine import OutfitRuleEngine
from skywatch.outfit.presenter import OutfitPresenter

logger = logging.getLogger(__name__)


class LoadStatus(StrEnum):
    LOADED = "loaded"
    NOT_FOUND = "not-found"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class LoadResult:
    status: LoadStatus
    location: GeoLocation | None = None
    snapshot: WeatherSnapshot | None = None
    forecast: ForecastBundle | None = None
    alerts: list[tuple[AlertDecision, DeliveryOutcome]] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.status == LoadStatus.NOT_FOUND:
            return "City not found"
        if self.status == LoadStatus.UNAVAILABLE:
            return "Unable to fetch data"
        return f"Loaded {self.snapshot.location_name}" if self.snapshot else "Loaded"


class WeatherAssistant:
    def __init__(
        self,
        fetcher: ForecastFetcher,
        policy: AlertPolicy,
        dispatcher: NotificationDispatcher,
        engine: OutfitRuleEngine,
        presenter: OutfitPresenter,
        climate: ClimateFetcher | None = None,
    ):
        self.fetcher = fetcher
        self.policy = policy
        self.dispatcher = dispatcher
        self.engine = engine
        self.presenter = presenter
        self.climate = climate
        self._snapshot: WeatherSnapshot | None = None
        self._forecast: ForecastBundle | None = None
        self._location: GeoLocation | None = None

    @property
    def snapshot(self) -> WeatherSnapshot | None:
        return self._snapshot

    @property
    def forecast(self) -> ForecastBundle | None:
        return self._forecast

    @property
    def location(self) -> GeoLocation | None:
        return self._location

    def load_city(self, query: str) -> LoadResult:
        """Geocode a query and load the first match."""
        matches = self.fetcher.search_cities(query)
        if not matches:
            logger.info("No city found for %r", query)
            return LoadResult(status=LoadStatus.NOT_FOUND)
        return self.load_location(matches[0])

    def load_location(self, location: GeoLocation) -> LoadResult:
        """Fetch the forecast and replace the snapshot; a failed fetch keeps the old one."""
        bundle = self.fetcher.fetch(location.latitude, location.longitude)
        if bundle is None:
            return LoadResult(status=LoadStatus.UNAVAILABLE, location=location)

        snapshot = make_snapshot(location.name, location.country, bundle.current)
        self._snapshot = snapshot
        self._forecast = bundle
        self._location = location
        logger.info(
            "Loaded %s (%s): %s°C, code %d",
            snapshot.location_name, snapshot.country_code,
            snapshot.temperature_c, snapshot.weather_code,
        )

        alerts = self.on_forecast_loaded(snapshot, bundle.daily)
        return LoadResult(
            status=LoadStatus.LOADED,
            location=location,
            snapshot=snapshot,
            forecast=bundle,
            alerts=alerts,
        )

    def on_forecast_loaded(
        self, snapshot: WeatherSnapshot, daily: DailyForecast | None
    ) -> list[tuple[AlertDecision, DeliveryOutcome]]:
        """Evaluate today's forecast (day 0 only) and dispatch every decision."""
        if daily is None:
            return []
        fallback = today_iso()
        today = daily.day(0, fallback_date=fallback)
        day_iso = today.date_iso or fallback

        results = []
        for decision in self.policy.evaluate(snapshot, today, snapshot.city_key, day_iso):
            outcome = self.dispatcher.notify(decision)
            logger.info("%s -> %s", decision.dedup_key.tag, outcome)
            results.append((decision, outcome))
        return results

    def recommend(self) -> OutfitRecommendation | NoLocationSelected:
        s = self._snapshot
        if s is None:
            return NO_LOCATION
        return self.engine.recommend(
            s.temperature_c,
            s.weather_code,
            s.precipitation_mm,
            s.humidity_percent,
            s.wind_speed_kmh,
        )

    def request_outfit(self) -> OutfitPresentation | NoLocationSelected:
        """Outfit for the current snapshot, or NO_LOCATION before any city is loaded."""
        outfit = self.recommend()
        if isinstance(outfit, NoLocationSelected):
            return outfit
        s = self._snapshot
        return self.presenter.present(
            outfit, s.temperature_c, s.description, s.humidity_percent, s.wind_speed_kmh
        )

    def load_climate(self) -> list[MonthlyClimate]:
        if self.climate is None or self._location is None:
            return []
        return self.climate.fetch(self._location.latitude, self._location.longitude)


def build_assistant(
    config: AppConfig,
    conn: sqlite3.Connection,
    platform: NotificationPlatform,
    toasts: ToastSink | None,
    client: OpenMeteoClient | None = None,
) -> WeatherAssistant:
    """Wire an assistant against a migrated database."""
    client = client or OpenMeteoClient(config.api)
    flags = AlertFlags(SqliteKeyValueStore(conn))
    return WeatherAssistant(
        fetcher=ForecastFetcher(client),
        policy=AlertPolicy(config.alerts, SqliteDedupStore(conn)),
        dispatcher=NotificationDispatcher(flags, platform, toasts, config.alerts),
        engine=OutfitRuleEngine(config.outfit),
        presenter=OutfitPresenter(config.presenter),
        climate=ClimateFetcher(client, config.climate),
    )
