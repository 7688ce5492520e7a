"""Deterministic scoring for candidate outfits."""

from __future__ import annotations

from itertools import combinations
from typing import List

from models.closet_item import ClosetItem
from models.color_theory import any_colors_compatible, is_trending_color
from models.outfit import OutfitScores

WEIGHTS = {
    "color": 0.4,
    "trend": 0.3,
    "occasion": 0.3,
}

COMPATIBLE_PAIR_SCORE = 1.0
CLASHING_PAIR_SCORE = 0.3
DEFAULT_OCCASION_SCORE = 0.7

FORMAL_OCCASIONS = frozenset({"formal", "work"})
CASUAL_OCCASIONS = frozenset({"casual", "gym"})
FORMAL_CATEGORIES = frozenset({"shirt", "blouse", "dress", "coat"})
CASUAL_CATEGORIES = frozenset({"t-shirt", "jeans", "sneakers", "hoodie"})


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def calculate_color_score(outfit_items: List[ClosetItem]) -> float:
    """Average pairwise color compatibility across the outfit."""

    if len(outfit_items) < 2:
        return 1.0
    pair_scores = [
        COMPATIBLE_PAIR_SCORE if any_colors_compatible(first.colors, second.colors) else CLASHING_PAIR_SCORE
        for first, second in combinations(outfit_items, 2)
    ]
    return sum(pair_scores) / len(pair_scores)


def calculate_trend_score(outfit_items: List[ClosetItem]) -> float:
    """Share of items wearing at least one trending color."""

    trendy = [item for item in outfit_items if any(is_trending_color(color) for color in item.colors)]
    return len(trendy) / len(outfit_items)


def calculate_occasion_score(outfit_items: List[ClosetItem], occasion: str) -> float:
    if occasion in FORMAL_OCCASIONS:
        matching = [item for item in outfit_items if item.category in FORMAL_CATEGORIES]
    elif occasion in CASUAL_OCCASIONS:
        matching = [item for item in outfit_items if item.category in CASUAL_CATEGORIES]
    else:
        return DEFAULT_OCCASION_SCORE
    return len(matching) / len(outfit_items)


def score_outfit(outfit_items: List[ClosetItem], occasion: str) -> OutfitScores:
    """Calculate the three sub scores for a non-empty outfit."""

    return OutfitScores(
        color_score=calculate_color_score(outfit_items),
        trend_score=calculate_trend_score(outfit_items),
        occasion_score=calculate_occasion_score(outfit_items, occasion),
    )


def calculate_confidence(scores: OutfitScores) -> float:
    """Combine sub scores with the fixed weighting policy."""

    return _clamp(
        scores.color_score * WEIGHTS["color"]
        + scores.trend_score * WEIGHTS["trend"]
        + scores.occasion_score * WEIGHTS["occasion"]
    )


__all__ = [
    "WEIGHTS",
    "calculate_color_score",
    "calculate_trend_score",
    "calculate_occasion_score",
    "score_outfit",
    "calculate_confidence",
]
