"""Deterministic outfit combination generator.

Enumeration is a bounded heuristic rather than an exhaustive search: dress
outfits first, then top/bottom outfits, each drawing from the first few items
of every slot and stopping at a global cap.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from models.closet_item import ClosetItem
from models.taxonomy import SLOT_GROUPS, OutfitConfig, slot_for_category

logger = logging.getLogger(__name__)

MAX_COMBINATIONS = 50
MAX_DRESSES = 5
MAX_TOPS = 5
MAX_BOTTOMS = 3
MAX_FOOTWEAR = 3


def group_items_by_category(items: Iterable[ClosetItem]) -> Dict[str, List[ClosetItem]]:
    """Partition items into the six slot groups, preserving input order."""

    grouped: Dict[str, List[ClosetItem]] = {slot: [] for slot in SLOT_GROUPS}
    for item in items:
        slot = slot_for_category(item.category)
        if slot is None:
            logger.debug("Dropping item %s with unslotted category '%s'", item.item_id, item.category)
            continue
        grouped[slot].append(item)
    return grouped


def generate_combinations(
    items_by_category: Dict[str, List[ClosetItem]], config: OutfitConfig
) -> List[List[ClosetItem]]:
    """Enumerate up to ``MAX_COMBINATIONS`` candidate outfits.

    ``config`` is accepted for the occasion being planned but the two fixed
    phases below do not consult its slot lists.
    """

    combinations: List[List[ClosetItem]] = []
    dresses = items_by_category.get("dresses", [])
    tops = items_by_category.get("tops", [])
    bottoms = items_by_category.get("bottoms", [])
    footwear = items_by_category.get("footwear", [])[:MAX_FOOTWEAR]
    outerwear = items_by_category.get("outerwear", [])
    logger.debug(
        "Generating combinations (required=%s optional=%s)", config.required_slots, config.optional_slots
    )

    if dresses:
        for dress in dresses[:MAX_DRESSES]:
            for shoes in footwear:
                combinations.append([dress, shoes])
                if len(combinations) >= MAX_COMBINATIONS:
                    return combinations

    for top in tops[:MAX_TOPS]:
        for bottom in bottoms[:MAX_BOTTOMS]:
            for shoes in footwear:
                combinations.append([top, bottom, shoes])
                if len(combinations) >= MAX_COMBINATIONS:
                    return combinations
                if outerwear:
                    combinations.append([top, bottom, shoes, outerwear[0]])
                    if len(combinations) >= MAX_COMBINATIONS:
                        return combinations

    logger.debug("Generated %s combinations", len(combinations))
    return combinations


__all__ = [
    "group_items_by_category",
    "generate_combinations",
    "MAX_COMBINATIONS",
]
