"""Natural-language explanations for scored outfits.

Explanations are produced after scoring by a separate provider so the
matching engine never waits on text generation.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from google import generativeai as genai

from closet_app.logging_config import get_logger, log_event
from models.closet_item import ClosetItem
from models.outfit import OutfitMatch

logger = get_logger(__name__)

_TEMPLATES = (
    "This {categories} combination works beautifully with the {colors} color palette, "
    "creating a harmonious and balanced look.",
    "The {colors} tones complement each other perfectly, following classic color theory "
    "principles for a cohesive outfit.",
    "This outfit balances structure and comfort, with the {categories} creating visual "
    "interest while maintaining wearability.",
    "The color coordination between {colors} creates a sophisticated aesthetic that's both "
    "trendy and timeless.",
)


def _unique_colors(outfit: Sequence[ClosetItem]) -> List[str]:
    colors: List[str] = []
    for item in outfit:
        for color in item.colors:
            if color not in colors:
                colors.append(color)
    return colors


def describe_outfit(outfit: Sequence[ClosetItem]) -> str:
    """Return a compact ``category in color/color (pattern)`` description."""

    return ", ".join(f"{item.category} in {'/'.join(item.colors)} ({item.pattern})" for item in outfit)


class ExplanationProvider:
    """Interface for services that explain why an outfit works."""

    name = "base"

    def explain(self, outfit: Sequence[ClosetItem]) -> str:
        raise NotImplementedError


class TemplateExplanationProvider(ExplanationProvider):
    """Offline provider filling one of a few canned sentences."""

    name = "template"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def explain(self, outfit: Sequence[ClosetItem]) -> str:
        template = self.rng.choice(_TEMPLATES)
        return template.format(
            categories=", ".join(item.category for item in outfit),
            colors=", ".join(_unique_colors(outfit)),
        )


class GeminiExplanationProvider(ExplanationProvider):
    """Asks a Gemini model for a short stylist explanation."""

    name = "gemini"

    def __init__(self, model: str, api_key: Optional[str] = None) -> None:
        if api_key:
            genai.configure(api_key=api_key)
        self.model_name = model
        self._model = genai.GenerativeModel(model)

    def explain(self, outfit: Sequence[ClosetItem]) -> str:
        prompt = (
            "You are a fashion expert. Explain why this outfit works using color theory and "
            f"trends: {describe_outfit(outfit)}. Keep it under 100 words."
        )
        response = self._model.generate_content(
            prompt,
            generation_config={"max_output_tokens": 100, "temperature": 0.7},
        )
        return response.text.strip()


def explain_matches(matches: Sequence[OutfitMatch], provider: ExplanationProvider) -> List[OutfitMatch]:
    """Return copies of ``matches`` with explanations filled in.

    A provider failure leaves that match's explanation unset.
    """

    explained: List[OutfitMatch] = []
    for match in matches:
        try:
            explained.append(match.with_explanation(provider.explain(match.outfit)))
        except Exception as exc:  # noqa: BLE001
            log_event(
                logger,
                logging.WARNING,
                "explanation_failed",
                provider=provider.name,
                error=str(exc),
            )
            explained.append(match)
    return explained


def build_explanation_provider(
    backend: str, model: str, api_key: Optional[str] = None
) -> ExplanationProvider:
    if backend == "gemini":
        return GeminiExplanationProvider(model=model, api_key=api_key)
    return TemplateExplanationProvider()


__all__ = [
    "ExplanationProvider",
    "TemplateExplanationProvider",
    "GeminiExplanationProvider",
    "explain_matches",
    "describe_outfit",
    "build_explanation_provider",
]
