"""Dict-in, dict-out wrappers around the outfit and analytics engines."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from closet_app.logging_config import get_logger
from logic.closet_analytics import (
    calculate_closet_analytics,
    calculate_cost_per_wear,
    calculate_sustainability_score,
    format_currency,
)
from logic.outfit_matching import generate_outfit_matches
from logic.validation import ClosetToolInput, OutfitMatchToolInput
from models.closet_item import ClosetItem, from_raw_metadata
from tools.explanation import ExplanationProvider, TemplateExplanationProvider, explain_matches
from tools.observability import instrument_tool

logger = get_logger(__name__)


class ClosetTools:
    """Exposes closet operations over raw stored documents.

    Instrumented methods validate their keyword arguments, so call them with
    keywords only.
    """

    def __init__(self, explanation_provider: Optional[ExplanationProvider] = None) -> None:
        self.explanation_provider = explanation_provider or TemplateExplanationProvider()

    def _coerce_items(self, raw_items: List[Dict[str, Any]]) -> List[ClosetItem]:
        items: List[ClosetItem] = []
        for raw in raw_items:
            try:
                items.append(from_raw_metadata(raw))
            except ValueError as exc:
                logger.warning("Skipping closet entry due to validation error: %s", exc)
        return items

    @instrument_tool("generate_outfit_matches", input_model=OutfitMatchToolInput)
    def generate_outfit_matches(
        self,
        items: List[Dict[str, Any]],
        occasion: str,
        season: Optional[str] = None,
        explain: bool = False,
    ) -> List[Dict[str, Any]]:
        matches = generate_outfit_matches(self._coerce_items(items), occasion, season)
        if explain:
            matches = explain_matches(matches, self.explanation_provider)
        return [asdict(match) for match in matches]

    @instrument_tool("calculate_closet_analytics", input_model=ClosetToolInput)
    def calculate_closet_analytics(self, items: List[Dict[str, Any]]) -> Dict[str, Any]:
        return asdict(calculate_closet_analytics(self._coerce_items(items)))

    @instrument_tool("calculate_sustainability_score", input_model=ClosetToolInput)
    def calculate_sustainability_score(self, items: List[Dict[str, Any]]) -> int:
        return calculate_sustainability_score(self._coerce_items(items))

    @instrument_tool("calculate_cost_per_wear")
    def calculate_cost_per_wear(self, item: Dict[str, Any]) -> Dict[str, Any]:
        closet_item = from_raw_metadata(item)
        cost = calculate_cost_per_wear(closet_item)
        return {
            "item_id": closet_item.item_id,
            "cost_per_wear": cost,
            "formatted": format_currency(cost),
        }


__all__ = ["ClosetTools"]
