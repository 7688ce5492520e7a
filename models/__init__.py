"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.closet_item import ClosetItem, from_raw_metadata
from models.outfit import ClosetAnalytics, OutfitMatch, OutfitScores

__all__ = ["ClosetItem", "from_raw_metadata", "ClosetAnalytics", "OutfitMatch", "OutfitScores"]
