"""WMO weather code descriptions and icons."""

# (upper bound inclusive, description, icon), checked in order after code 0
_CODE_TABLE: tuple[tuple[int, str, str], ...] = (
    (3, "Partly cloudy", "⛅"),
    (48, "Foggy", "🌫️"),
    (67, "Rainy", "🌧️"),
    (77, "Snowy", "❄️"),
    (82, "Showers", "🌦️"),
    (99, "Thunderstorm", "⛈️"),
)


def describe(code: int | None) -> str:
    if code == 0:
        return "Clear sky"
    if code is not None:
        for upper, desc, _ in _CODE_TABLE:
            if code <= upper:
                return desc
    return "Clear"


def icon(code: int | None) -> str:
    if code == 0:
        return "☀️"
    if code is not None:
        for upper, _, glyph in _CODE_TABLE:
            if code <= upper:
                return glyph
    return "🌤️"
