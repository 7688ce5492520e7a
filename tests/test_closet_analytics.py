"""Closet analytics and sustainability scoring tests."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.closet_analytics import (
    calculate_closet_analytics,
    calculate_cost_per_wear,
    calculate_sustainability_score,
    count_underused_items,
    format_currency,
    rank_categories_by_wear,
)
from models.closet_item import ClosetItem

NOW = datetime(2026, 1, 31, 12, 0, tzinfo=timezone.utc)


def _item(item_id: str, category: str = "t-shirt", **fields) -> ClosetItem:
    return ClosetItem(item_id=item_id, user_id="demo", category=category, **fields)


def test_empty_closet_returns_defaults():
    analytics = calculate_closet_analytics([])
    assert analytics.total_items == 0
    assert analytics.most_used_category == "t-shirt"
    assert analytics.least_used_category == "t-shirt"
    assert analytics.underused_items == 0
    assert analytics.average_wear_count == 0
    assert analytics.color_distribution == {}
    assert analytics.season_distribution == {
        "spring": 0,
        "summer": 0,
        "fall": 0,
        "winter": 0,
        "all-season": 0,
    }
    assert analytics.sustainability_score == 0


def test_category_ranking_breaks_ties_by_first_appearance():
    items = [
        _item("a", "t-shirt", wear_count=5),
        _item("b", "jeans", wear_count=0),
        _item("c", "shirt", wear_count=3),
        _item("d", "shirt", wear_count=2),
        _item("e", "dress", wear_count=0),
    ]
    assert rank_categories_by_wear(items) == [("t-shirt", 5), ("shirt", 5), ("jeans", 0), ("dress", 0)]

    analytics = calculate_closet_analytics(items, now=NOW)
    assert analytics.most_used_category == "t-shirt"
    assert analytics.least_used_category == "dress"


def test_underused_items_use_thirty_day_window():
    items = [
        _item("never"),
        _item("recent", last_used=NOW - timedelta(days=5)),
        _item("stale", last_used=NOW - timedelta(days=45)),
        _item("boundary", last_used=NOW - timedelta(days=30)),
        _item("naive_recent", last_used=datetime(2026, 1, 30, 9, 0)),
    ]
    assert count_underused_items(items, now=NOW) == 2


def test_average_wear_count_rounds_half_up():
    items = [_item("a", wear_count=1), _item("b", wear_count=2)]
    assert calculate_closet_analytics(items, now=NOW).average_wear_count == 2
    items = [_item("a"), _item("b"), _item("c", wear_count=1)]
    assert calculate_closet_analytics(items, now=NOW).average_wear_count == 0


def test_color_and_season_distribution():
    items = [
        _item("a", colors=["black", "white"], seasons=["summer", "all-season"]),
        _item("b", colors=["black"], seasons=["summer"]),
    ]
    analytics = calculate_closet_analytics(items, now=NOW)
    assert analytics.total_items == 2
    assert analytics.color_distribution == {"black": 2, "white": 1}
    assert analytics.season_distribution == {
        "spring": 0,
        "summer": 2,
        "fall": 0,
        "winter": 0,
        "all-season": 1,
    }


def test_unworn_unpriced_closet_scores_default_cost_component():
    items = [_item(f"item{i}") for i in range(10)]
    assert calculate_sustainability_score(items) == 21
    assert calculate_closet_analytics(items, now=NOW).sustainability_score == 21


def test_sustainability_blends_usage_utilization_and_cost():
    items = [
        _item("a", wear_count=10, price=100),
        _item("b", wear_count=4),
    ]
    # usage 70 * 0.4 + utilization 100 * 0.3 + cost (100 - 10 * 2) * 0.3
    assert calculate_sustainability_score(items) == 82


def test_sustainability_caps_usage_and_floors_cost():
    assert calculate_sustainability_score([_item("a", wear_count=200)]) == 91
    assert calculate_sustainability_score([_item("a", wear_count=1, price=1000)]) == 4


def test_zero_price_counts_as_unpriced():
    assert calculate_sustainability_score([_item("a", wear_count=3, price=0)]) == 63


def test_sustainability_score_is_bounded():
    items = [_item("a", wear_count=50, price=1), _item("b", wear_count=80, price=2)]
    assert 0 <= calculate_sustainability_score(items) <= 100


def test_cost_per_wear():
    assert calculate_cost_per_wear(_item("a", price=100)) == 100
    assert calculate_cost_per_wear(_item("a", price=100, wear_count=4)) == 25
    assert calculate_cost_per_wear(_item("a", wear_count=4)) == 0
    assert calculate_cost_per_wear(_item("a", price=0)) == 0


@pytest.mark.parametrize(
    "amount, expected",
    [(0, "$0.00"), (25, "$25.00"), (1234.5, "$1,234.50"), (-3.456, "-$3.46")],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected
