"""Pydantic schemas for validating tool inputs and API payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from models.taxonomy import Occasion, Pattern, Season


class ClosetItemPayload(BaseModel):
    """Closet item as sent by clients.

    ``category`` stays a free string: unknown categories are accepted and left
    out of outfit slots rather than rejected.
    """

    item_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    category: str = Field(min_length=1)
    colors: List[str] = []
    pattern: Pattern = "solid"
    seasons: List[Season] = []
    confidence: float = Field(1.0, ge=0.0, le=1.0)
    wear_count: int = Field(0, ge=0)
    image_url: str = ""
    fabric: Optional[str] = None
    price: Optional[float] = Field(None, ge=0.0)
    last_used: Optional[datetime] = None
    purchase_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    tags: List[str] = []


class OutfitMatchToolInput(BaseModel):
    """Input contract for outfit matching over raw closet documents."""

    items: List[Dict[str, Any]]
    occasion: Occasion
    season: Optional[Season] = None
    explain: bool = False


class ClosetToolInput(BaseModel):
    """Input contract for closet-wide analytics over raw closet documents."""

    items: List[Dict[str, Any]]


class OutfitMatchRequest(BaseModel):
    items: List[ClosetItemPayload]
    occasion: Occasion
    season: Optional[Season] = None
    explain: bool = False


class ClosetItemsRequest(BaseModel):
    items: List[ClosetItemPayload]


class CostPerWearRequest(BaseModel):
    item: ClosetItemPayload


class FieldIssue(BaseModel):
    """One rejected field: dotted location and pydantic's message."""

    location: str
    message: str


class ValidationResult(BaseModel):
    """Payload describing why a closet request was rejected."""

    status: Literal["invalid"] = "invalid"
    message: str
    issues: List[FieldIssue]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate pydantic errors into a :class:`ValidationResult` dict.

    Only locations and messages are kept; rejected input values are dropped so
    the result can be logged or returned without leaking closet contents.
    """

    issues = [
        FieldIssue(location=".".join(str(part) for part in error["loc"]), message=error["msg"])
        for error in exc.errors()
    ]
    return ValidationResult(message=message, issues=issues).model_dump()


__all__ = [
    "ClosetItemPayload",
    "OutfitMatchToolInput",
    "ClosetToolInput",
    "OutfitMatchRequest",
    "ClosetItemsRequest",
    "CostPerWearRequest",
    "FieldIssue",
    "ValidationResult",
    "validation_failure",
]
