"""Outfit presenter: mood tags, summary text and a capped display list."""

from skywatch.config.schema import PresenterConfig
from skywatch.models.outfit import OutfitPresentation, OutfitRecommendation


class OutfitPresenter:
    def __init__(self, config: PresenterConfig | None = None):
        self.config = config or PresenterConfig()

    def conditions(
        self, temp_c: float, humidity_percent: float, wind_speed_kmh: float
    ) -> list[str]:
        """Mood tags. These bands are independent of the outfit bands."""
        if temp_c > 30:
            tags = ["🔥 Hot"]
        elif temp_c > 24:
            tags = ["☀️ Warm"]
        elif temp_c > 18:
            tags = ["🌤️ Mild"]
        elif temp_c > 12:
            tags = ["🌥️ Cool"]
        else:
            tags = ["❄️ Cold"]

        if humidity_percent > self.config.humid_tag_percent:
            tags.append("💧 Humid")
        if wind_speed_kmh > self.config.windy_tag_kmh:
            tags.append("💨 Windy")
        return tags

    def display_items(self, outfit: OutfitRecommendation) -> list[str]:
        """Flat list in priority order; longer categories are truncated."""
        c = self.config
        items: list[str] = []
        items.extend(outfit.outer[: c.max_outer])
        items.extend(outfit.top[: c.max_top])
        items.extend(outfit.bottom[: c.max_bottom])
        items.extend(outfit.footwear[: c.max_footwear])
        items.extend(outfit.accessories[: c.max_accessories])
        items.extend(outfit.extras[: c.max_extras])
        return items

    def present(
        self,
        outfit: OutfitRecommendation,
        temp_c: float,
        weather_description: str,
        humidity_percent: float,
        wind_speed_kmh: float,
    ) -> OutfitPresentation:
        tags = self.conditions(temp_c, humidity_percent, wind_speed_kmh)
        summary = (
            f"Weather Analysis: {', '.join(tags)}\n"
            f"Conditions: {weather_description}\n\n"
        )
        return OutfitPresentation(
            summary_text=summary,
            display_items=self.display_items(outfit),
            conditions=tags,
        )


def pro_tip(temp_c: float, humidity_percent: float) -> str:
    if temp_c > 30:
        tip = "Stay hydrated and avoid outdoor activities during peak afternoon hours (12-3 PM)."
    elif temp_c < 10:
        tip = (
            "Layer your clothing to trap warm air and adjust easily to "
            "indoor/outdoor temperature changes."
        )
    elif humidity_percent > 70:
        tip = (
            "Choose breathable fabrics like cotton or moisture-wicking "
            "materials to stay comfortable."
        )
    else:
        tip = "This is ideal weather! Dress comfortably and enjoy your day."
    return f"💡 Pro Tip: {tip}"


def format_outfit_text(presentation: OutfitPresentation, tip: str = "") -> str:
    """Plain text rendering for the CLI and chat."""
    lines = [presentation.summary_text.rstrip("\n"), "", "👔 Smart Outfit Recommendation"]
    lines.extend(f"  • {item}" for item in presentation.display_items)
    if tip:
        lines.extend(["", tip])
    return "\n".join(lines)
