"""Base outfit bands keyed by effective (wind-adjusted) temperature.

Bands are half-open [low, high) and together cover every real value.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class OutfitBand:
    name: str
    low: float
    high: float
    top: tuple[str, ...]
    bottom: tuple[str, ...]
    outer: tuple[str, ...]
    accessories: tuple[str, ...]
    footwear: tuple[str, ...]
    extras: tuple[str, ...] = ()

    def contains(self, temp_c: float) -> bool:
        return self.low <= temp_c < self.high


BANDS: tuple[OutfitBand, ...] = (
    OutfitBand(
        name="freezing",
        low=-math.inf,
        high=5,
        top=("Thermal base layer", "Warm fleece", "Heavy sweater"),
        bottom=("Thermal leggings", "Insulated pants", "Warm jeans"),
        outer=("Heavy winter coat", "Down jacket", "Parka"),
        accessories=("Thick scarf", "Insulated gloves", "Wool beanie", "Ear muffs"),
        footwear=("Insulated boots", "Winter boots"),
        extras=("Hand warmers", "Lip balm"),
    ),
    OutfitBand(
        name="cold",
        low=5,
        high=12,
        top=("Long sleeve thermal", "Sweater", "Turtleneck"),
        bottom=("Jeans", "Warm trousers", "Corduroy pants"),
        outer=("Winter jacket", "Wool coat", "Puffer jacket"),
        accessories=("Scarf", "Gloves", "Beanie"),
        footwear=("Boots", "Closed-toe shoes"),
        extras=("Moisturizer for dry skin",),
    ),
    OutfitBand(
        name="cool",
        low=12,
        high=18,
        top=("Long sleeve shirt", "Light sweater", "Flannel shirt"),
        bottom=("Jeans", "Chinos", "Casual pants"),
        outer=("Light jacket", "Denim jacket", "Cardigan"),
        accessories=("Light scarf", "Sunglasses"),
        footwear=("Sneakers", "Loafers", "Ankle boots"),
    ),
    OutfitBand(
        name="mild",
        low=18,
        high=24,
        top=("T-shirt", "Polo shirt", "Cotton shirt"),
        bottom=("Jeans", "Chinos", "Casual pants"),
        outer=("Light hoodie (optional)", "Denim jacket (optional)"),
        accessories=("Sunglasses", "Cap"),
        footwear=("Sneakers", "Casual shoes", "Loafers"),
    ),
    OutfitBand(
        name="warm",
        low=24,
        high=30,
        top=("Light T-shirt", "Tank top", "Breathable shirt"),
        bottom=("Shorts", "Light pants", "Linen pants"),
        outer=(),
        accessories=("Sunglasses", "Cap", "Sunscreen SPF 30+"),
        footwear=("Sneakers", "Sandals", "Canvas shoes"),
        extras=("Water bottle", "Sweat towel"),
    ),
    OutfitBand(
        name="hot",
        low=30,
        high=math.inf,
        top=("Moisture-wicking T-shirt", "Breathable cotton tee", "Sleeveless shirt"),
        bottom=("Lightweight shorts", "Linen pants"),
        outer=(),
        accessories=("Wide-brim hat", "Sunglasses", "Sunscreen SPF 50+"),
        footwear=("Breathable sandals", "Light sneakers"),
        extras=("Water bottle (essential)", "Cooling towel", "Electrolyte drink"),
    ),
)


def select_band(temp_c: float) -> OutfitBand:
    # NaN and +inf fall through to the hottest band
    for band in BANDS:
        if band.contains(temp_c):
            return band
    return BANDS[-1]
