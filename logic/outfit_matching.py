"""Outfit matching pipeline composing the generator and scorer."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from logic.outfit_builder import generate_combinations, group_items_by_category
from logic.outfit_scoring import calculate_confidence, score_outfit
from models.closet_item import ClosetItem
from models.outfit import OutfitMatch
from models.taxonomy import ALL_SEASON, get_outfit_config, validate_occasion, validate_season

logger = logging.getLogger(__name__)

CONFIDENCE_THRESHOLD = 0.5
MAX_MATCHES = 10


def filter_by_season(items: Sequence[ClosetItem], season: Optional[str]) -> List[ClosetItem]:
    """Keep items wearable in ``season``; all items when no season is given."""

    if not season:
        return list(items)
    season = validate_season(season)
    return [item for item in items if season in item.seasons or ALL_SEASON in item.seasons]


def generate_outfit_matches(
    items: Sequence[ClosetItem], occasion: str, season: Optional[str] = None
) -> List[OutfitMatch]:
    """Return up to ``MAX_MATCHES`` outfits above the confidence threshold, best first."""

    occasion = validate_occasion(occasion)
    config = get_outfit_config(occasion)

    seasonal_items = filter_by_season(items, season)
    grouped = group_items_by_category(seasonal_items)
    candidates = generate_combinations(grouped, config)

    matches: List[OutfitMatch] = []
    for outfit in candidates:
        scores = score_outfit(outfit, occasion)
        confidence = calculate_confidence(scores)
        if confidence > CONFIDENCE_THRESHOLD:
            matches.append(
                OutfitMatch(outfit=outfit, confidence=confidence, scores=scores, occasion=occasion)
            )

    # sorted() is stable, so ties keep generator order.
    ranked = sorted(matches, key=lambda match: match.confidence, reverse=True)[:MAX_MATCHES]
    logger.info(
        "Matched %s outfits for occasion=%s season=%s (%s items, %s candidates, %s above threshold)",
        len(ranked),
        occasion,
        season,
        len(seasonal_items),
        len(candidates),
        len(matches),
    )
    return ranked


__all__ = ["generate_outfit_matches", "filter_by_season", "CONFIDENCE_THRESHOLD", "MAX_MATCHES"]
