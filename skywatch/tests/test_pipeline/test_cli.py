"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
import respx
import yaml

from skywatch.cli import main

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
GEOCODE_URL = "https://geocoding-api.open-meteo.com/v1/search"


@pytest.fixture
def paths(tmp_path: Path) -> list[str]:
    config_path = tmp_path / "test.yaml"
    config_path.write_text("")
    return ["--config", str(config_path), "--db", str(tmp_path / "test.db")]


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show(self, paths: list[str], capsys):
        assert main([*paths, "config", "show"]) == 0
        out = capsys.readouterr().out
        assert "heat_max_threshold_c" in out
        assert "Tirupati" in out

    def test_config_set(self, tmp_path: Path, paths: list[str], capsys):
        result = main([*paths, "config", "set", "alerts.heat_max_threshold_c=40"])
        assert result == 0
        assert "Set alerts.heat_max_threshold_c = 40.0" in capsys.readouterr().out

        saved = yaml.safe_load((tmp_path / "test.yaml").read_text())
        assert saved["alerts"]["heat_max_threshold_c"] == 40.0

    def test_config_set_unknown_key(self, paths: list[str], capsys):
        assert main([*paths, "config", "set", "alerts.bogus=1"]) == 1
        assert "Error" in capsys.readouterr().out

    def test_config_set_bad_format(self, paths: list[str], capsys):
        assert main([*paths, "config", "set", "alerts.heat_max_threshold_c"]) == 1

    def test_alerts_status(self, paths: list[str], capsys):
        assert main([*paths, "alerts", "status"]) == 0
        assert "Alerts: OFF" in capsys.readouterr().out

    def test_alerts_enable_persists(self, paths: list[str], capsys):
        assert main([*paths, "alerts", "enable"]) == 0
        out = capsys.readouterr().out
        assert "[Alerts enabled]" in out

        main([*paths, "alerts", "status"])
        assert "Alerts: ON" in capsys.readouterr().out

        main([*paths, "alerts", "disable"])
        assert "Alerts: OFF" in capsys.readouterr().out

    def test_alerts_prompt_once(self, paths: list[str], capsys):
        main([*paths, "alerts", "prompt"])
        out = capsys.readouterr().out
        assert "[Enable weather alerts?]" in out
        assert "(Enable / Not now)" in out

        main([*paths, "alerts", "prompt"])
        out = capsys.readouterr().out
        assert "Already prompted" in out
        assert "Prompted: True" in out


class TestWeatherCommands:
    @respx.mock
    def test_weather_default_city(self, paths: list[str], forecast_payload: dict, capsys):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))

        assert main([*paths, "weather"]) == 0
        out = capsys.readouterr().out
        assert "=== Tirupati, India ===" in out
        assert "7-day forecast:" in out
        assert "[Heat warning: Tirupati]" in out
        assert "Rain alert: Tirupati (delivered-toast)" in out

    @respx.mock
    def test_weather_alerts_once_per_day(self, paths: list[str], forecast_payload: dict, capsys):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))

        main([*paths, "weather"])
        capsys.readouterr()
        main([*paths, "weather"])
        assert "No new alerts" in capsys.readouterr().out

    @respx.mock
    def test_city_not_found(self, paths: list[str], capsys):
        respx.get(GEOCODE_URL).mock(return_value=httpx.Response(200, json={}))

        assert main([*paths, "weather", "Atlantis"]) == 1
        assert "City not found" in capsys.readouterr().out

    @respx.mock
    def test_forecast_unavailable(self, paths: list[str], capsys):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(503))

        with patch("skywatch.ingest.open_meteo_client.time.sleep"):
            assert main([*paths, "outfit"]) == 1
        assert "Unable to fetch data" in capsys.readouterr().out

    @respx.mock
    def test_outfit(
        self, paths: list[str], forecast_payload: dict, geocode_payload: dict, capsys
    ):
        respx.get(GEOCODE_URL).mock(return_value=httpx.Response(200, json=geocode_payload))
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))

        assert main([*paths, "outfit", "Tirupati"]) == 0
        out = capsys.readouterr().out
        assert "Weather Analysis: 🌤️ Mild, 💨 Windy" in out
        assert "👔 Smart Outfit Recommendation" in out
        assert "💡 Pro Tip:" in out

    @respx.mock
    def test_chat(self, paths: list[str], forecast_payload: dict, capsys):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))

        assert main([*paths, "chat", "Will it rain?"]) == 0
        assert "Precipitation Analysis for Tirupati" in capsys.readouterr().out
