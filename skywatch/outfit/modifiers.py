"""Condition modifiers applied on top of the base band, in a fixed order.

Humidity prefixing must see the categories after the rain and snow rules
have rewritten them, so the order of MODIFIERS is significant.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from skywatch.config.schema import OutfitConfig


@dataclass
class OutfitDraft:
    top: list[str] = field(default_factory=list)
    bottom: list[str] = field(default_factory=list)
    outer: list[str] = field(default_factory=list)
    accessories: list[str] = field(default_factory=list)
    footwear: list[str] = field(default_factory=list)
    extras: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Conditions:
    weather_code: int | None
    humidity_percent: float
    wind_speed_kmh: float


def rain(draft: OutfitDraft, c: Conditions, config: OutfitConfig) -> None:
    if c.weather_code is None or not 51 <= c.weather_code <= 67:
        return
    draft.outer[:0] = ["Waterproof rain jacket", "Raincoat"]
    draft.accessories[:0] = ["Umbrella", "Waterproof bag"]
    draft.footwear = ["Waterproof boots", "Rain boots", "Water-resistant shoes"]
    draft.extras.append("Waterproof phone case")


def snow(draft: OutfitDraft, c: Conditions, config: OutfitConfig) -> None:
    if c.weather_code is None or not 71 <= c.weather_code <= 77:
        return
    draft.outer[:0] = ["Insulated waterproof jacket"]
    draft.accessories[:0] = ["Waterproof gloves", "Snow boots"]
    draft.footwear = ["Insulated snow boots", "Waterproof winter boots"]


def storm(draft: OutfitDraft, c: Conditions, config: OutfitConfig) -> None:
    if c.weather_code is None or c.weather_code < 95:
        return
    draft.extras.extend(["Avoid outdoor activities if possible", "Stay indoors during storm"])


def humid(draft: OutfitDraft, c: Conditions, config: OutfitConfig) -> None:
    if not c.humidity_percent > config.humid_threshold_percent:
        return
    draft.top = [f"Moisture-wicking {item}" for item in draft.top]
    draft.extras.extend(["Anti-chafing cream", "Extra change of clothes"])


def windy(draft: OutfitDraft, c: Conditions, config: OutfitConfig) -> None:
    if not c.wind_speed_kmh > config.windy_threshold_kmh:
        return
    draft.outer.append("Windbreaker")
    draft.accessories.append("Secure hat with strap")
    draft.extras.append("Wind protection advised")


def sunny(draft: OutfitDraft, c: Conditions, config: OutfitConfig) -> None:
    if c.weather_code in (0, 1):
        draft.extras.append("UV-protective clothing recommended")


Modifier = Callable[[OutfitDraft, Conditions, OutfitConfig], None]

MODIFIERS: tuple[Modifier, ...] = (rain, snow, storm, humid, windy, sunny)
