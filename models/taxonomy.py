"""Canonical taxonomy definitions for closet items and occasions.

This module centralises the closed label sets (categories, patterns, seasons,
occasions), the slot groups used to compose outfits and the static
per-occasion outfit configuration. Helper functions keep validation logic
consistent across the engine, tools and API schemas.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Literal, Mapping, Optional, Tuple, get_args


ClothingCategory = Literal[
    "t-shirt",
    "shirt",
    "blouse",
    "sweater",
    "hoodie",
    "jacket",
    "coat",
    "jeans",
    "pants",
    "shorts",
    "skirt",
    "dress",
    "shoes",
    "sneakers",
    "boots",
    "accessories",
    "hat",
    "bag",
    "other",
]
Pattern = Literal["solid", "striped", "plaid", "floral", "geometric", "polka-dot", "other"]
Season = Literal["spring", "summer", "fall", "winter", "all-season"]
Occasion = Literal["casual", "work", "formal", "party", "date", "gym", "outdoor", "beach", "other"]

CATEGORIES: Tuple[str, ...] = get_args(ClothingCategory)
PATTERNS: Tuple[str, ...] = get_args(Pattern)
SEASONS: Tuple[str, ...] = get_args(Season)
OCCASIONS: Tuple[str, ...] = get_args(Occasion)

ALL_SEASON = "all-season"
DEFAULT_CATEGORY = "t-shirt"

SLOT_GROUPS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "tops": ("t-shirt", "shirt", "blouse", "sweater", "hoodie"),
        "bottoms": ("jeans", "pants", "shorts", "skirt"),
        "dresses": ("dress",),
        "outerwear": ("jacket", "coat"),
        "footwear": ("shoes", "sneakers", "boots"),
        "accessories": ("accessories", "hat", "bag"),
    }
)

_CATEGORY_TO_SLOT: Dict[str, str] = {
    category: slot for slot, categories in SLOT_GROUPS.items() for category in categories
}


@dataclass(frozen=True)
class OutfitConfig:
    """Required and optional slot groups for an occasion."""

    required_slots: Tuple[str, ...]
    optional_slots: Tuple[str, ...] = ()


_CORE_SLOTS = ("tops", "bottoms", "footwear")

OCCASION_RULES: Mapping[str, OutfitConfig] = MappingProxyType(
    {
        "casual": OutfitConfig(_CORE_SLOTS, ("accessories",)),
        "work": OutfitConfig(_CORE_SLOTS, ("outerwear", "accessories")),
        "formal": OutfitConfig(_CORE_SLOTS, ("outerwear", "accessories")),
        "party": OutfitConfig(_CORE_SLOTS, ("accessories",)),
        "date": OutfitConfig(_CORE_SLOTS, ("accessories",)),
        "gym": OutfitConfig(_CORE_SLOTS),
        "outdoor": OutfitConfig(_CORE_SLOTS, ("outerwear",)),
        "beach": OutfitConfig(_CORE_SLOTS, ("accessories",)),
        "other": OutfitConfig(("tops", "bottoms"), ("footwear", "accessories")),
    }
)


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return "-".join(str(value).strip().lower().replace("_", " ").split())


def normalize_category(value: str) -> str:
    """Return the canonical form of a category without rejecting unknown values."""

    return _normalize_key(value)


def slot_for_category(category: str) -> Optional[str]:
    """Return the slot group a category belongs to, or ``None`` if it has none."""

    return _CATEGORY_TO_SLOT.get(normalize_category(category))


def validate_pattern(value: str) -> str:
    """Validate and normalise a pattern value."""

    key = _normalize_key(value)
    if key not in PATTERNS:
        raise ValueError(f"Unsupported pattern '{value}'. Allowed: {list(PATTERNS)}")
    return key


def validate_season(value: str) -> str:
    """Validate and normalise a season value.

    Raises a :class:`ValueError` if the season is not part of the canonical
    taxonomy.
    """

    key = _normalize_key(value)
    if key not in SEASONS:
        raise ValueError(f"Unsupported season '{value}'. Allowed: {list(SEASONS)}")
    return key


def validate_occasion(value: str) -> str:
    """Validate and normalise an occasion value."""

    key = _normalize_key(value)
    if key not in OCCASIONS:
        raise ValueError(f"Unsupported occasion '{value}'. Allowed: {list(OCCASIONS)}")
    return key


def get_outfit_config(occasion: str) -> OutfitConfig:
    """Return the static :class:`OutfitConfig` for an occasion."""

    return OCCASION_RULES[validate_occasion(occasion)]


__all__ = [
    "ClothingCategory",
    "Pattern",
    "Season",
    "Occasion",
    "CATEGORIES",
    "PATTERNS",
    "SEASONS",
    "OCCASIONS",
    "ALL_SEASON",
    "DEFAULT_CATEGORY",
    "SLOT_GROUPS",
    "OCCASION_RULES",
    "OutfitConfig",
    "normalize_category",
    "slot_for_category",
    "validate_pattern",
    "validate_season",
    "validate_occasion",
    "get_outfit_config",
]
