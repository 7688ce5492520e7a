"""Outfit match and closet analytics schemas."""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from models.closet_item import ClosetItem


@dataclass(frozen=True)
class OutfitScores:
    color_score: float
    trend_score: float
    occasion_score: float


@dataclass(frozen=True)
class OutfitMatch:
    """A scored outfit candidate.

    ``explanation`` stays ``None`` until a text generation step fills it in.
    """

    outfit: List[ClosetItem]
    confidence: float
    scores: OutfitScores
    occasion: str
    explanation: Optional[str] = None

    def with_explanation(self, explanation: str) -> "OutfitMatch":
        return replace(self, explanation=explanation)


@dataclass
class ClosetAnalytics:
    total_items: int
    most_used_category: str
    least_used_category: str
    underused_items: int
    average_wear_count: int
    color_distribution: Dict[str, int] = field(default_factory=dict)
    season_distribution: Dict[str, int] = field(default_factory=dict)
    sustainability_score: int = 0
