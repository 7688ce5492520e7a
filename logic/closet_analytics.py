"""Wardrobe-wide usage statistics and sustainability scoring."""
from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from models.closet_item import ClosetItem
from models.outfit import ClosetAnalytics
from models.taxonomy import DEFAULT_CATEGORY, SEASONS

UNDERUSED_AFTER = timedelta(days=30)
UNDERWORN_THRESHOLD = 2
TARGET_WEARS_PER_ITEM = 10
DEFAULT_COST_SCORE = 70.0

SUSTAINABILITY_WEIGHTS = {
    "usage": 0.4,
    "utilization": 0.3,
    "cost": 0.3,
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are treated as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _empty_season_distribution() -> Dict[str, int]:
    return {season: 0 for season in SEASONS}


def rank_categories_by_wear(items: Sequence[ClosetItem]) -> List[Tuple[str, int]]:
    """Return ``(category, total_wears)`` pairs, most worn first.

    Ties keep the order in which categories were first encountered.
    """

    wear_counts: Dict[str, int] = {}
    for item in items:
        wear_counts[item.category] = wear_counts.get(item.category, 0) + item.wear_count
    return sorted(wear_counts.items(), key=lambda entry: entry[1], reverse=True)


def count_underused_items(items: Sequence[ClosetItem], now: Optional[datetime] = None) -> int:
    """Count items never worn or not worn within the last 30 days."""

    cutoff = _as_utc(now or datetime.now(timezone.utc)) - UNDERUSED_AFTER
    return sum(1 for item in items if item.last_used is None or _as_utc(item.last_used) < cutoff)


def calculate_closet_analytics(
    items: Sequence[ClosetItem], now: Optional[datetime] = None
) -> ClosetAnalytics:
    """Calculate aggregate closet statistics independent of any occasion."""

    if not items:
        return ClosetAnalytics(
            total_items=0,
            most_used_category=DEFAULT_CATEGORY,
            least_used_category=DEFAULT_CATEGORY,
            underused_items=0,
            average_wear_count=0,
            color_distribution={},
            season_distribution=_empty_season_distribution(),
            sustainability_score=0,
        )

    ranking = rank_categories_by_wear(items)
    total_wears = sum(item.wear_count for item in items)

    color_distribution: Dict[str, int] = {}
    season_distribution = _empty_season_distribution()
    for item in items:
        for color in item.colors:
            color_distribution[color] = color_distribution.get(color, 0) + 1
        for season in item.seasons:
            season_distribution[season] += 1

    return ClosetAnalytics(
        total_items=len(items),
        most_used_category=ranking[0][0],
        least_used_category=ranking[-1][0],
        underused_items=count_underused_items(items, now),
        average_wear_count=_round_half_up(total_wears / len(items)),
        color_distribution=color_distribution,
        season_distribution=season_distribution,
        sustainability_score=calculate_sustainability_score(items),
    )


def calculate_sustainability_score(items: Sequence[ClosetItem]) -> int:
    """Score from 0 to 100 estimating how efficiently the closet is used.

    The score blends three factors:

    * usage rate: average wears per item against a target of ten wears,
    * utilization: share of items worn at least twice,
    * cost efficiency: average cost per wear over priced, worn items, with a
      flat default when no item has both a price and a wear.
    """

    if not items:
        return 0

    count = len(items)
    total_wears = sum(item.wear_count for item in items)
    usage_score = min(total_wears / count / TARGET_WEARS_PER_ITEM * 100, 100)

    underworn = sum(1 for item in items if item.wear_count < UNDERWORN_THRESHOLD)
    utilization_score = (count - underworn) / count * 100

    priced = [item for item in items if item.price and item.wear_count > 0]
    if priced:
        avg_cost_per_wear = sum(item.price / item.wear_count for item in priced) / len(priced)
        cost_score = max(100 - avg_cost_per_wear * 2, 0)
    else:
        cost_score = DEFAULT_COST_SCORE

    score = (
        usage_score * SUSTAINABILITY_WEIGHTS["usage"]
        + utilization_score * SUSTAINABILITY_WEIGHTS["utilization"]
        + cost_score * SUSTAINABILITY_WEIGHTS["cost"]
    )
    return _round_half_up(min(score, 100))


def calculate_cost_per_wear(item: ClosetItem) -> float:
    """Price divided by wears; the full price when unworn, 0 when unpriced."""

    if not item.price or item.wear_count == 0:
        return item.price or 0.0
    return item.price / item.wear_count


def format_currency(amount: float) -> str:
    """Format an amount as US dollars, e.g. ``$1,234.50``."""

    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


__all__ = [
    "calculate_closet_analytics",
    "calculate_sustainability_score",
    "calculate_cost_per_wear",
    "count_underused_items",
    "rank_categories_by_wear",
    "format_currency",
]
