"""CLI entry point for the weather assistant."""

import argparse
import logging

from skywatch.alerts.dispatcher import ConsoleToastSink, UnsupportedPlatform
from skywatch.assistant import LoadResult, LoadStatus, WeatherAssistant, build_assistant
from skywatch.chat.responder import ChatResponder
from skywatch.config.loader import get_config_value, load_config, save_config, set_config_value
from skywatch.config.schema import AppConfig
from skywatch.models.outfit import NoLocationSelected
from skywatch.models.weather import GeoLocation
from skywatch.outfit.presenter import format_outfit_text, pro_tip
from skywatch.reporting.formatters import (
    format_alerts_text,
    format_climate_text,
    format_current_text,
    format_daily_text,
    format_settings_text,
)
from skywatch.storage.database import open_database

DEFAULT_CONFIG = "ops/configs/default.yaml"
DEFAULT_DB = "data/skywatch.db"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skywatch",
        description="Weather dashboard with alerts and outfit advice",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=DEFAULT_DB, help="SQLite DB path")

    sub = parser.add_subparsers(dest="command")

    # weather / outfit / climate
    weather_p = sub.add_parser("weather", help="Current conditions, 7-day forecast and alerts")
    weather_p.add_argument("city", nargs="?", help="City name (default city if omitted)")
    outfit_p = sub.add_parser("outfit", help="Outfit recommendation for a city")
    outfit_p.add_argument("city", nargs="?", help="City name (default city if omitted)")
    climate_p = sub.add_parser("climate", help="Multi-year monthly climate outlook")
    climate_p.add_argument("city", nargs="?", help="City name (default city if omitted)")

    # chat
    chat_p = sub.add_parser("chat", help="Ask a question about the weather")
    chat_p.add_argument("message", help="Question text")
    chat_p.add_argument("--city", help="City to load first (default city if omitted)")

    # alerts enable / disable / status / prompt
    alerts_p = sub.add_parser("alerts", help="Weather alert settings")
    alerts_p.add_argument("action", choices=["enable", "disable", "status", "prompt"])

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "config":
        return _cmd_config(config, args)

    conn = open_database(args.db)
    try:
        assistant = build_assistant(config, conn, UnsupportedPlatform(), ConsoleToastSink())
        if args.command == "weather":
            return _cmd_weather(assistant, config, args)
        elif args.command == "outfit":
            return _cmd_outfit(assistant, config, args)
        elif args.command == "climate":
            return _cmd_climate(assistant, config, args)
        elif args.command == "chat":
            return _cmd_chat(assistant, config, args)
        elif args.command == "alerts":
            return _cmd_alerts(assistant, args)
        parser.print_help()
        return 1
    finally:
        conn.close()


def _load(assistant: WeatherAssistant, config: AppConfig, city: str | None) -> LoadResult:
    if city:
        return assistant.load_city(city)
    default = config.default_city
    assert default is not None
    return assistant.load_location(
        GeoLocation(
            name=default.name,
            country=default.country,
            admin_region="",
            latitude=default.latitude,
            longitude=default.longitude,
        )
    )


def _cmd_weather(assistant: WeatherAssistant, config: AppConfig, args) -> int:
    assistant.dispatcher.maybe_prompt_once()
    result = _load(assistant, config, args.city)
    if result.status != LoadStatus.LOADED:
        print(result.message)
        return 1
    print(format_current_text(result.snapshot, result.forecast.current))
    print()
    print(format_daily_text(result.forecast.daily))
    print()
    print(format_alerts_text(result.alerts))
    return 0


def _cmd_outfit(assistant: WeatherAssistant, config: AppConfig, args) -> int:
    result = _load(assistant, config, args.city)
    if result.status != LoadStatus.LOADED:
        print(result.message)
        return 1
    presentation = assistant.request_outfit()
    if isinstance(presentation, NoLocationSelected):
        print(presentation.message)
        return 1
    s = assistant.snapshot
    print(format_outfit_text(presentation, pro_tip(s.temperature_c, s.humidity_percent)))
    return 0


def _cmd_climate(assistant: WeatherAssistant, config: AppConfig, args) -> int:
    result = _load(assistant, config, args.city)
    if result.status != LoadStatus.LOADED:
        print(result.message)
        return 1
    print(format_climate_text(assistant.load_climate()))
    return 0


def _cmd_chat(assistant: WeatherAssistant, config: AppConfig, args) -> int:
    result = _load(assistant, config, args.city)
    if result.status != LoadStatus.LOADED:
        print(result.message)
    reply = ChatResponder(assistant).respond(args.message)
    print(reply.text)
    for item in reply.items:
        print(f"  • {item}")
    return 0


def _cmd_alerts(assistant: WeatherAssistant, args) -> int:
    dispatcher = assistant.dispatcher
    if args.action == "enable":
        dispatcher.request_enable()
    elif args.action == "disable":
        dispatcher.disable()
    elif args.action == "prompt":
        if not dispatcher.maybe_prompt_once():
            print("Already prompted")
    print(format_settings_text(dispatcher.settings()))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except (KeyError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"Set {key.strip()} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1
