"""Records produced by the external image analysis step."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from models.closet_item import ClosetItem

MANUAL_LABEL = "manually-tagged"


@dataclass(frozen=True)
class VisionAnalysis:
    """Attributes extracted from a garment photo."""

    category: str
    colors: List[str]
    pattern: str
    seasons: List[str]
    confidence: float
    labels: List[str] = field(default_factory=list)
    fabric: Optional[str] = None


def create_manual_analysis(
    category: str,
    colors: Iterable[str],
    pattern: str,
    seasons: Iterable[str],
    fabric: Optional[str] = None,
) -> VisionAnalysis:
    """Build an analysis record for items tagged by hand instead of by the vision service."""

    return VisionAnalysis(
        category=category,
        colors=list(colors),
        pattern=pattern,
        seasons=list(seasons),
        confidence=1.0,
        labels=[MANUAL_LABEL],
        fabric=fabric,
    )


def item_from_analysis(
    analysis: VisionAnalysis,
    item_id: str,
    user_id: str,
    image_url: str = "",
    price: Optional[float] = None,
    created_at: Optional[datetime] = None,
) -> ClosetItem:
    """Create the :class:`ClosetItem` stored at the end of an upload cycle."""

    return ClosetItem(
        item_id=item_id,
        user_id=user_id,
        category=analysis.category,
        colors=list(analysis.colors),
        pattern=analysis.pattern,
        seasons=list(analysis.seasons),
        confidence=analysis.confidence,
        image_url=image_url,
        fabric=analysis.fabric,
        price=price,
        created_at=created_at,
        tags=list(analysis.labels),
    )


__all__ = ["VisionAnalysis", "create_manual_analysis", "item_from_analysis", "MANUAL_LABEL"]
