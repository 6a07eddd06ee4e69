"""Rule-matched chat replies about the currently loaded weather."""

import random
import re
from dataclasses import dataclass, field

from skywatch.assistant import WeatherAssistant
from skywatch.models.outfit import NoLocationSelected
from skywatch.outfit.presenter import pro_tip

ALERTS_ON = re.compile(r"enable alerts|turn on alerts|alerts on", re.I)
ALERTS_OFF = re.compile(r"disable alerts|turn off alerts|alerts off", re.I)
ALERTS_STATUS = re.compile(r"alerts status", re.I)

# Checked in order; the first match wins.
INTENTS: tuple[tuple[str, re.Pattern], ...] = (
    ("clothing", re.compile(r"cloth|wear|outfit|dress|apparel|attire|garment|wardrobe", re.I)),
    ("weather", re.compile(r"weather|forecast|climate|condition|atmospheric", re.I)),
    ("temperature", re.compile(r"temp|hot|cold|warm|cool|heat|chill", re.I)),
    ("rain", re.compile(r"rain|precipitation|shower|drizzle|downpour|wet", re.I)),
    ("humidity", re.compile(r"humid|moisture|damp|muggy", re.I)),
    ("wind", re.compile(r"wind|breeze|gust|blow", re.I)),
    ("planning", re.compile(r"plan|trip|travel|visit|go|going|tomorrow|weekend|next", re.I)),
    ("greeting", re.compile(r"hello|hi|hey|greetings|good morning|good evening", re.I)),
    ("thanks", re.compile(r"thank|thanks|appreciate|grateful", re.I)),
    ("capability", re.compile(r"can you|are you able|what can|help me|features", re.I)),
)

GREETINGS = (
    "Hello! I'm your weather companion. How may I assist you today?",
    "Greetings! Ready to provide you with weather intelligence and personalized recommendations!",
    "Hi there! Ask me anything about weather, forecasts, or clothing suggestions!",
)
THANKS = (
    "You're very welcome! Always happy to help with weather insights. 😊",
    "My pleasure! Feel free to ask if you need anything else!",
    "Glad I could help! Stay weather-ready! ⚡",
)
FALLBACKS = (
    "I'm here to help with weather insights! Try asking about temperature, rain, "
    "clothing suggestions, or search for a specific city.",
    "Not sure I understood that completely. I specialize in weather forecasts, "
    "outfit recommendations, and climate analysis. What would you like to know?",
    "Let me help you better! I can provide weather forecasts, smart clothing advice, "
    "and travel planning tips. Search for a city or ask a specific weather question.",
    "I'm your weather assistant! Ask me about current conditions, forecasts, "
    "what to wear, or any weather-related questions.",
)
CAPABILITIES = (
    "I'm your weather assistant! Here's what I can do:\n\n"
    "🌡️ Weather Analysis\n• Real-time conditions\n• 7-day forecasts\n• 6-month climate outlook\n\n"
    "👔 Smart Recommendations\n• Personalized outfit suggestions\n• Activity planning advice\n\n"
    "🔔 Alerts\n• Rain, heat, cold and storm warnings once per day\n\n"
    "Just load a city and start asking questions! Try:\n"
    "• \"What should I wear?\"\n• \"Will it rain?\"\n• \"alerts status\""
)
NO_CITY = {
    "weather": (
        "I can provide weather analysis for any location worldwide! Search for a "
        "city, and I'll give you temperature, humidity, wind and precipitation details."
    ),
    "temperature": "Search for a city to get accurate temperature data with feels-like analysis!",
    "rain": (
        "I can provide detailed rain forecasts! Search for a location to see current "
        "precipitation and 7-day rain probability data."
    ),
    "humidity": "Search for a city to check humidity levels with personalized comfort advice!",
    "wind": (
        "I can analyze wind conditions for any location! Search for a city to get "
        "wind speed data with safety recommendations."
    ),
    "planning": (
        "I can help you plan your trip with weather forecasts! Search for your "
        "destination city, and I'll provide forecasts and clothing recommendations."
    ),
}


@dataclass(frozen=True)
class ChatReply:
    text: str
    items: list[str] = field(default_factory=list)


class ChatResponder:
    def __init__(self, assistant: WeatherAssistant, rng: random.Random | None = None):
        self.assistant = assistant
        self.rng = rng or random.Random()

    def respond(self, message: str) -> ChatReply:
        if ALERTS_ON.search(message):
            self.assistant.dispatcher.request_enable()
            return ChatReply(
                "Weather alerts request sent. If permission is granted, "
                "notifications will be enabled."
            )
        if ALERTS_OFF.search(message):
            self.assistant.dispatcher.disable()
            return ChatReply("Weather alerts are disabled.")
        if ALERTS_STATUS.search(message):
            status = "ON" if self.assistant.dispatcher.settings().alerts_enabled else "OFF"
            return ChatReply(f"Alerts status: {status}.")

        intent = next((name for name, pattern in INTENTS if pattern.search(message)), None)
        if intent is None and "help" in message.lower():
            intent = "capability"

        if intent == "clothing":
            return self._clothing()
        if intent in ("greeting", "thanks"):
            return ChatReply(self.rng.choice(GREETINGS if intent == "greeting" else THANKS))
        if intent == "capability":
            return ChatReply(CAPABILITIES)
        if intent in NO_CITY:
            if self.assistant.snapshot is None:
                return ChatReply(NO_CITY[intent])
            return ChatReply(getattr(self, f"_{intent}")())
        return ChatReply(self.rng.choice(FALLBACKS))

    def _clothing(self) -> ChatReply:
        presentation = self.assistant.request_outfit()
        if isinstance(presentation, NoLocationSelected):
            return ChatReply(presentation.message)
        s = self.assistant.snapshot
        text = presentation.summary_text + pro_tip(s.temperature_c, s.humidity_percent)
        return ChatReply(text, items=presentation.display_items)

    def _weather(self) -> str:
        s = self.assistant.snapshot
        lines = [
            f"🌍 {s.location_name} Weather Report",
            "",
            f"Current: {s.temperature_c}°C (Feels like {s.feels_like_c}°C)",
            f"Conditions: {s.description}",
            f"Humidity: {s.humidity_percent:g}%",
            f"Wind: {s.wind_speed_kmh} km/h",
            f"Precipitation: {s.precipitation_mm} mm",
            "",
        ]
        if s.temperature_c > 28:
            lines.append("⚠️ It's quite hot! Stay hydrated and use sun protection.")
        elif s.temperature_c < 12:
            lines.append("🧥 Bundle up! It's cold outside.")
        else:
            lines.append("✨ Pleasant weather conditions!")
        return "\n".join(lines)

    def _temperature(self) -> str:
        s = self.assistant.snapshot
        text = (
            f"🌡️ Temperature in {s.location_name}:\n\n"
            f"Actual: {s.temperature_c}°C\n"
            f"Feels Like: {s.feels_like_c}°C\n"
        )
        diff = s.feels_like_c - s.temperature_c
        if abs(diff) > 3:
            cause = "humidity factors." if diff > 0 else "wind chill effect."
            direction = "warmer" if diff > 0 else "cooler"
            text += (
                f"\nNote: The \"feels like\" temperature is {abs(diff):.1f}°C "
                f"{direction} due to {cause}"
            )
        return text

    def _rain(self) -> str:
        s = self.assistant.snapshot
        text = f"🌧️ Precipitation Analysis for {s.location_name}:\n\nCurrent: {s.precipitation_mm} mm\n"
        if s.precipitation_mm > 5:
            text += "\n⚠️ Heavy rainfall detected! Carry an umbrella and wear waterproof footwear."
        elif s.precipitation_mm > 0.5:
            text += "\n☔ Light rain expected. An umbrella might be handy."
        else:
            text += "\n☀️ No rain currently. Enjoy dry conditions!"
        return text

    def _humidity(self) -> str:
        s = self.assistant.snapshot
        h = s.humidity_percent
        if h > 80:
            advice = (
                "Very humid! You might feel sticky and uncomfortable. Wear breathable "
                "fabrics and stay in air-conditioned spaces when possible."
            )
        elif h > 60:
            advice = "Moderately humid. Light, moisture-wicking clothing recommended."
        elif h > 40:
            advice = "Comfortable humidity levels. Ideal conditions!"
        else:
            advice = "Low humidity. Use moisturizer and stay hydrated to avoid dry skin."
        return f"💧 Humidity in {s.location_name}: {h:g}%\n\n{advice}"

    def _wind(self) -> str:
        s = self.assistant.snapshot
        w = s.wind_speed_kmh
        if w > 40:
            advice = "⚠️ Strong winds! Secure loose objects and avoid outdoor activities."
        elif w > 25:
            advice = "Quite windy. Wear a windbreaker and be cautious with umbrellas."
        elif w > 15:
            advice = "Breezy conditions. Pleasant for outdoor activities!"
        else:
            advice = "Calm winds. Perfect weather for any outdoor plans!"
        return f"💨 Wind Conditions in {s.location_name}:\n\nSpeed: {w} km/h\n\n{advice}"

    def _planning(self) -> str:
        s = self.assistant.snapshot
        return (
            f"Planning a trip to {s.location_name}? Great choice!\n\n"
            f"Current weather: {s.temperature_c}°C, {s.description}.\n\n"
            "Check the 7-day forecast to plan your activities, or the climate "
            "outlook for long-term travel planning.\n\n"
            "Would you like outfit suggestions for your trip? Just ask \"what should I wear?\""
        )
