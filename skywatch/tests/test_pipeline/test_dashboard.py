"""Tests for the dashboard API."""

import runpy
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from skywatch.config.schema import AppConfig
from skywatch.dashboard import create_app
from skywatch.ingest.open_meteo_client import OpenMeteoClient
from skywatch.models.alert import PermissionState

from conftest import FakePlatform


@pytest.fixture
def meteo(forecast_payload: dict, geocode_payload: dict) -> MagicMock:
    client = MagicMock(spec=OpenMeteoClient)
    client.search.return_value = geocode_payload
    client.get_forecast.return_value = forecast_payload
    client.get_archive.return_value = {
        "daily": {
            "temperature_2m_max": [30.0],
            "temperature_2m_min": [20.0],
            "precipitation_sum": [12.0],
        }
    }
    return client


@pytest.fixture
def api(tmp_path: Path, default_config: AppConfig, meteo: MagicMock):
    app = create_app(config=default_config, db_path=tmp_path / "dash.db", client=meteo)
    with TestClient(app) as client:
        yield client


class TestBeforeLoad:
    def test_health(self, api: TestClient):
        body = api.get("/api/health").json()
        assert body["status"] == "ok"
        assert body["location"] is None

    def test_weather_404(self, api: TestClient):
        assert api.get("/api/weather").status_code == 404

    def test_outfit_advisory(self, api: TestClient):
        body = api.get("/api/outfit").json()
        assert body["available"] is False
        assert "search for a city" in body["message"]

    def test_climate_empty(self, api: TestClient):
        assert api.get("/api/climate").json() == []


class TestLoad:
    def test_search(self, api: TestClient):
        results = api.get("/api/search", params={"q": "Tirupati"}).json()
        assert results[0]["admin_region"] == "Andhra Pradesh"

    def test_load_and_alerts(self, api: TestClient):
        resp = api.post("/api/load", params={"city": "Tirupati"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["snapshot"]["location_name"] == "Tirupati"
        assert [a["type"] for a in body["alerts"]] == ["rain", "heat", "storm"]
        assert body["daily"]["time"][0] == "2026-10-19"

        toasts = api.get("/api/toasts").json()
        assert [t["title"] for t in toasts][0] == "Rain alert: Tirupati"
        assert toasts[0]["ttl_seconds"] == 6.5
        assert api.get("/api/toasts").json() == []

        again = api.post("/api/load", params={"city": "Tirupati"}).json()
        assert again["alerts"] == []

    def test_not_found(self, api: TestClient, meteo: MagicMock):
        meteo.search.return_value = {}
        resp = api.post("/api/load", params={"city": "Atlantis"})
        assert resp.status_code == 404
        assert resp.json()["detail"] == "City not found"

    def test_unavailable(self, api: TestClient, meteo: MagicMock):
        meteo.get_forecast.side_effect = httpx.ConnectError("down")
        resp = api.post("/api/load", params={"city": "Tirupati"})
        assert resp.status_code == 503

    def test_outfit_and_weather(self, api: TestClient):
        api.post("/api/load", params={"city": "Tirupati"})
        assert api.get("/api/weather").json()["temperature_c"] == 20
        body = api.get("/api/outfit").json()
        assert body["available"] is True
        assert body["conditions"] == ["🌤️ Mild", "💨 Windy"]

    def test_climate(self, api: TestClient):
        api.post("/api/load", params={"city": "Tirupati"})
        months = api.get("/api/climate").json()
        assert len(months) == 6
        assert months[0]["high_c"] == 30
        assert months[0]["data_source"] == "10-year avg"

    def test_chat(self, api: TestClient):
        api.post("/api/load", params={"city": "Tirupati"})
        body = api.post("/api/chat", json={"message": "what should I wear"}).json()
        assert body["text"].startswith("Weather Analysis:")
        assert len(body["items"]) > 0


class TestAlertControls:
    def test_enable_disable(self, api: TestClient):
        body = api.post("/api/alerts/enable").json()
        assert body["native"] is False
        assert body["alerts_enabled"] is True

        body = api.post("/api/alerts/disable").json()
        assert body["alerts_enabled"] is False
        assert body["permission"] == "default"

    def test_prompt_once(self, api: TestClient):
        assert api.post("/api/alerts/prompt").json() == {"shown": True}
        assert api.post("/api/alerts/prompt").json() == {"shown": False}
        toast = api.get("/api/toasts").json()[0]
        assert toast["ttl_seconds"] is None
        assert [a["label"] for a in toast["actions"]] == ["Enable", "Not now"]


class LockCheckingPlatform(FakePlatform):
    """Records whether the dashboard lock was held on each permission read."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.app = None
        self.locked_reads: list[bool] = []

    def permission(self):
        self.locked_reads.append(self.app.state.lock.locked())
        return super().permission()


class TestSettingsConsistency:
    @pytest.fixture
    def locked_api(self, tmp_path: Path, default_config: AppConfig, meteo: MagicMock):
        platform = LockCheckingPlatform(permission=PermissionState.GRANTED)
        app = create_app(
            config=default_config, db_path=tmp_path / "dash.db", platform=platform, client=meteo
        )
        platform.app = app
        with TestClient(app) as client:
            yield client, platform

    def test_enable_reports_written_state(self, locked_api):
        api, platform = locked_api
        body = api.post("/api/alerts/enable").json()
        assert body == {
            "native": True,
            "alerts_enabled": True,
            "alerts_prompted_once": False,
            "permission": "granted",
        }
        assert platform.locked_reads and all(platform.locked_reads)

    def test_settings_read_under_lock(self, locked_api):
        api, platform = locked_api
        api.post("/api/alerts/disable")
        platform.locked_reads.clear()
        assert api.get("/api/alerts").json()["alerts_enabled"] is False
        assert platform.locked_reads == [True]


class TestEntryPoint:
    def test_main_serves_with_uvicorn(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("uvicorn.run") as run:
            runpy.run_module("skywatch.dashboard", run_name="__main__")
        run.assert_called_once()
        app = run.call_args.args[0]
        assert isinstance(app, FastAPI)
        assert run.call_args.kwargs == {"host": "0.0.0.0", "port": 8777}
