"""Closet item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from models.taxonomy import normalize_category, validate_pattern, validate_season


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def _clean_colors(values: Iterable[str]) -> List[str]:
    """Trim and deduplicate color names while keeping their first spelling."""

    cleaned = []
    seen = set()
    for value in values:
        color = str(value).strip()
        if color and color.lower() not in seen:
            cleaned.append(color)
            seen.add(color.lower())
    return cleaned


def _normalise_seasons(values: Iterable[str]) -> List[str]:
    seasons: List[str] = []
    for value in values:
        season = validate_season(value)
        if season not in seasons:
            seasons.append(season)
    return seasons


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


@dataclass
class ClosetItem:
    """Represents one garment in the user's closet."""

    item_id: str
    user_id: str
    category: str
    colors: List[str] = field(default_factory=list)
    pattern: str = "solid"
    seasons: List[str] = field(default_factory=list)
    confidence: float = 1.0
    wear_count: int = 0
    image_url: str = ""
    fabric: Optional[str] = None
    price: Optional[float] = None
    last_used: Optional[datetime] = None
    purchase_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Unknown categories are kept; the outfit engine leaves them out of every slot.
        self.category = normalize_category(self.category)
        self.colors = _clean_colors(_ensure_list(self.colors))
        self.pattern = validate_pattern(self.pattern)
        self.seasons = _normalise_seasons(_ensure_list(self.seasons))
        self.confidence = float(self.confidence)
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")
        self.wear_count = int(self.wear_count)
        if self.wear_count < 0:
            raise ValueError(f"wear_count cannot be negative, got {self.wear_count}")
        if self.price is not None:
            self.price = float(self.price)
        self.tags = [str(tag).strip() for tag in _ensure_list(self.tags) if str(tag).strip()]


def _pick(metadata: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if metadata.get(key) is not None:
            return metadata[key]
    return default


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def from_raw_metadata(metadata: Dict[str, Any]) -> ClosetItem:
    """Factory to build a :class:`ClosetItem` from a loose stored document.

    Both snake_case keys and the camelCase keys written by the mobile client
    are accepted.
    """

    required = {
        "item_id": ("item_id", "id"),
        "user_id": ("user_id", "userId"),
        "category": ("category",),
    }
    missing = [name for name, keys in required.items() if _is_blank(_pick(metadata, *keys))]
    if missing:
        raise ValueError(f"Missing required fields for ClosetItem: {missing}")

    return ClosetItem(
        item_id=str(_pick(metadata, "item_id", "id")),
        user_id=str(_pick(metadata, "user_id", "userId")),
        category=str(metadata["category"]),
        colors=_ensure_list(metadata.get("colors")),
        pattern=str(_pick(metadata, "pattern", default="solid")),
        seasons=_ensure_list(_pick(metadata, "seasons", "season")),
        confidence=_pick(metadata, "confidence", default=1.0),
        wear_count=_pick(metadata, "wear_count", "wearCount", default=0),
        image_url=str(_pick(metadata, "image_url", "imageUrl", default="")),
        fabric=metadata.get("fabric"),
        price=metadata.get("price"),
        last_used=_parse_datetime(_pick(metadata, "last_used", "lastUsed")),
        purchase_date=_parse_datetime(_pick(metadata, "purchase_date", "purchaseDate")),
        created_at=_parse_datetime(_pick(metadata, "created_at", "createdAt")),
        tags=_ensure_list(metadata.get("tags")),
    )


__all__ = ["ClosetItem", "from_raw_metadata"]
