"""
Display lookups for matrix cells, roof cells and bands.

Colors are Tailwind class strings consumed directly by the web client.
"""

from __future__ import annotations

from typing import Any

from qfd_engine.models.enums import RelationshipStrength, CorrelationType, LevelBand

_EMPTY_CELL_COLOR = "bg-gray-100 text-gray-400 hover:bg-gray-200"

RELATIONSHIP_SYMBOLS = {
    RelationshipStrength.STRONG: "●●",
    RelationshipStrength.MEDIUM: "●",
    RelationshipStrength.WEAK: "▲",
}

RELATIONSHIP_COLORS = {
    RelationshipStrength.STRONG: "bg-green-500 text-white",
    RelationshipStrength.MEDIUM: "bg-yellow-500 text-white",
    RelationshipStrength.WEAK: "bg-red-500 text-white",
}

CORRELATION_SYMBOLS = {
    CorrelationType.STRONG_POSITIVE: "++",
    CorrelationType.POSITIVE: "+",
    CorrelationType.NEGATIVE: "-",
    CorrelationType.STRONG_NEGATIVE: "--",
}

CORRELATION_COLORS = {
    CorrelationType.STRONG_POSITIVE: "bg-green-600 text-white",
    CorrelationType.POSITIVE: "bg-green-400 text-white",
    CorrelationType.NEGATIVE: "bg-red-400 text-white",
    CorrelationType.STRONG_NEGATIVE: "bg-red-600 text-white",
}

CORRELATION_TITLES = {
    CorrelationType.STRONG_POSITIVE: "Strong Positive Correlation",
    CorrelationType.POSITIVE: "Positive Correlation",
    CorrelationType.NEGATIVE: "Negative Correlation",
    CorrelationType.STRONG_NEGATIVE: "Strong Negative Correlation",
}

CHALLENGE_COLORS = {
    LevelBand.CRITICAL: "bg-red-100 text-red-800 border-red-200",
    LevelBand.HIGH: "bg-orange-100 text-orange-800 border-orange-200",
    LevelBand.MEDIUM: "bg-yellow-100 text-yellow-800 border-yellow-200",
    LevelBand.LOW: "bg-green-100 text-green-800 border-green-200",
}

IMPORTANCE_COLORS = {
    LevelBand.CRITICAL: "bg-purple-100 text-purple-800 border-purple-200",
    LevelBand.HIGH: "bg-blue-100 text-blue-800 border-blue-200",
    LevelBand.MEDIUM: "bg-indigo-100 text-indigo-800 border-indigo-200",
    LevelBand.LOW: "bg-gray-100 text-gray-800 border-gray-200",
}


def relationship_symbol(strength: RelationshipStrength | int) -> str:
    return RELATIONSHIP_SYMBOLS.get(RelationshipStrength(strength), "")


def relationship_color(strength: RelationshipStrength | int) -> str:
    return RELATIONSHIP_COLORS.get(RelationshipStrength(strength), _EMPTY_CELL_COLOR)


def correlation_symbol(correlation: CorrelationType | int) -> str:
    return CORRELATION_SYMBOLS.get(CorrelationType(correlation), "")


def correlation_color(correlation: CorrelationType | int) -> str:
    return CORRELATION_COLORS.get(CorrelationType(correlation), _EMPTY_CELL_COLOR)


def correlation_title(correlation: CorrelationType | int) -> str:
    return CORRELATION_TITLES.get(CorrelationType(correlation), "No Correlation")


def challenge_color(band: LevelBand | str) -> str:
    return CHALLENGE_COLORS[LevelBand(band)]


def importance_color(band: LevelBand | str) -> str:
    return IMPORTANCE_COLORS[LevelBand(band)]


def legend() -> dict[str, Any]:
    """Every lookup in one payload, keyed by enum value."""
    return {
        "relationships": [
            {
                "value": int(s),
                "name": s.name,
                "symbol": relationship_symbol(s),
                "color": relationship_color(s),
            }
            for s in RelationshipStrength
        ],
        "correlations": [
            {
                "value": int(c),
                "name": c.name,
                "symbol": correlation_symbol(c),
                "color": correlation_color(c),
                "title": correlation_title(c),
            }
            for c in CorrelationType
        ],
        "challenge_colors": {b.value: challenge_color(b) for b in LevelBand},
        "importance_colors": {b.value: importance_color(b) for b in LevelBand},
    }
