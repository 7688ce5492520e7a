"""Static color harmony tables for deterministic outfit scoring."""
from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping


COLOR_COMPATIBILITY: Mapping[str, FrozenSet[str]] = MappingProxyType(
    {
        "black": frozenset(
            {"white", "grey", "red", "blue", "pink", "beige", "brown", "green", "yellow"}
        ),
        "white": frozenset({"black", "blue", "red", "green", "brown", "grey", "navy", "pink"}),
        "blue": frozenset({"white", "beige", "brown", "grey", "navy", "black"}),
        "navy": frozenset({"white", "beige", "grey", "red", "pink"}),
        "grey": frozenset({"black", "white", "blue", "pink", "yellow", "purple"}),
        "brown": frozenset({"beige", "cream", "white", "olive", "tan"}),
        "beige": frozenset({"brown", "white", "navy", "blue", "olive", "tan"}),
        "red": frozenset({"black", "white", "navy", "grey"}),
        "pink": frozenset({"white", "grey", "navy", "black"}),
        "green": frozenset({"beige", "brown", "white", "black"}),
        "olive": frozenset({"brown", "beige", "white", "black"}),
    }
)

# Earth tones.
TRENDING_COLORS: FrozenSet[str] = frozenset({"beige", "brown", "olive", "cream", "tan"})

_HEX_COLOR_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "#000000": "black",
        "#FFFFFF": "white",
        "#808080": "grey",
        "#0000FF": "blue",
        "#000080": "navy",
        "#FF0000": "red",
        "#FFC0CB": "pink",
        "#A52A2A": "brown",
        "#F5F5DC": "beige",
        "#008000": "green",
    }
)

_EMPTY: FrozenSet[str] = frozenset()


def color_compatible(color1: str, color2: str) -> bool:
    """Return True when two color names are identical or listed as harmonious.

    The table is stored one way round; either direction counts.
    """

    c1, c2 = color1.strip().lower(), color2.strip().lower()
    if c1 == c2:
        return True
    return c2 in COLOR_COMPATIBILITY.get(c1, _EMPTY) or c1 in COLOR_COMPATIBILITY.get(c2, _EMPTY)


def any_colors_compatible(colors1: Iterable[str], colors2: Iterable[str]) -> bool:
    """Return True when any color of the first set harmonises with any of the second."""

    others = list(colors2)
    return any(color_compatible(c1, c2) for c1 in colors1 for c2 in others)


def is_trending_color(color: str) -> bool:
    return color.strip().lower() in TRENDING_COLORS


def get_color_name(hex_code: str) -> str:
    """Map a hex code to a known color name, returning the input when unknown."""

    return _HEX_COLOR_NAMES.get(hex_code.strip().upper(), hex_code)


__all__ = [
    "COLOR_COMPATIBILITY",
    "TRENDING_COLORS",
    "color_compatible",
    "any_colors_compatible",
    "is_trending_color",
    "get_color_name",
]
