"""Outfit recommendation models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OutfitRecommendation:
    top: tuple[str, ...] = ()
    bottom: tuple[str, ...] = ()
    outer: tuple[str, ...] = ()
    accessories: tuple[str, ...] = ()
    footwear: tuple[str, ...] = ()
    extras: tuple[str, ...] = ()


@dataclass(frozen=True)
class OutfitPresentation:
    summary_text: str
    display_items: list[str]
    conditions: list[str]


class NoLocationSelected:
    """Sentinel result for outfit requests made before any city is loaded."""

    message = (
        "I'd love to help you choose the perfect outfit! Please search for a "
        "city first, and I'll analyze the weather conditions to provide "
        "personalized clothing recommendations."
    )

    def __repr__(self) -> str:
        return "NO_LOCATION"

    def __bool__(self) -> bool:
        return False


NO_LOCATION = NoLocationSelected()
