"""Outfit rule engine: wind-chill banding plus additive condition modifiers."""

import logging

from skywatch.config.schema import OutfitConfig
from skywatch.models.outfit import OutfitRecommendation
from skywatch.outfit.bands import select_band
from skywatch.outfit.modifiers import MODIFIERS, Conditions, OutfitDraft

logger = logging.getLogger(__name__)


class OutfitRuleEngine:
    def __init__(self, config: OutfitConfig | None = None):
        self.config = config or OutfitConfig()

    def wind_chill(self, temp_c: float, wind_speed_kmh: float) -> float:
        """Flat adjustment above the trigger speed, not a physical wind-chill formula."""
        if wind_speed_kmh > self.config.wind_chill_trigger_kmh:
            return temp_c - self.config.wind_chill_adjustment_c
        return temp_c

    def recommend(
        self,
        temp_c: float,
        weather_code: int | None,
        precipitation_mm: float,
        humidity_percent: float,
        wind_speed_kmh: float,
    ) -> OutfitRecommendation:
        # precipitation_mm does not change the result; rain gear follows the weather code
        effective = self.wind_chill(temp_c, wind_speed_kmh)
        band = select_band(effective)
        logger.debug("Effective %.1f°C -> band %s", effective, band.name)

        draft = OutfitDraft(
            top=list(band.top),
            bottom=list(band.bottom),
            outer=list(band.outer),
            accessories=list(band.accessories),
            footwear=list(band.footwear),
            extras=list(band.extras),
        )
        conditions = Conditions(
            weather_code=weather_code,
            humidity_percent=humidity_percent,
            wind_speed_kmh=wind_speed_kmh,
        )
        for modifier in MODIFIERS:
            modifier(draft, conditions, self.config)

        return OutfitRecommendation(
            top=tuple(draft.top),
            bottom=tuple(draft.bottom),
            outer=tuple(draft.outer),
            accessories=tuple(draft.accessories),
            footwear=tuple(draft.footwear),
            extras=tuple(draft.extras),
        )
