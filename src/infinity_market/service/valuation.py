"""Valuation engine: derives a website's economic value from its attributes.

The value is always recomputed from scratch; nothing here keeps state
between calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType

from infinity_market.models.website import ToolType, Website
from infinity_market.models.world import WORLD_ARCHETYPES

DEFAULT_BASE_VALUE = 1000
DEFAULT_TOOL_VALUE = 50
PAGE_VALUE = 100
UNIQUENESS_UNIT = 100
DIVERSITY_STEP = 0.1
BUILD_TIME_UNIT_MS = 60_000  # one unit per minute of active building
MAX_BUILD_BONUS = 500

TOOL_VALUES: MappingProxyType[str, int] = MappingProxyType(
    {
        ToolType.CALCULATOR: 150,
        ToolType.CONVERTER: 120,
        ToolType.CHART: 200,
        ToolType.DATA_TABLE: 180,
        ToolType.TIMELINE: 160,
        ToolType.QUIZ: 220,
        ToolType.FLASHCARDS: 170,
        ToolType.CHECKLIST: 100,
        ToolType.FORM: 130,
        ToolType.CALENDAR: 140,
        ToolType.MAP: 250,
        ToolType.SIMULATOR: 300,
        ToolType.CODE_PLAYGROUND: 280,
        ToolType.CONTENT_HUB: 120,
        ToolType.GLOSSARY: 90,
        ToolType.POLL: 110,
    }
)


@dataclass(frozen=True)
class ValuationBreakdown:
    """Every term of the value formula, plus the final total."""

    base_value: float
    rarity_bonus: float
    page_value: float
    tool_value: float
    uniqueness_bonus: float
    active_build_bonus: float
    tool_diversity_score: int
    diversity_multiplier: float
    total: int


def get_tool_value(tool_type: str) -> int:
    """Flat value of a single tool; unrecognized types are worth ``DEFAULT_TOOL_VALUE``."""
    return TOOL_VALUES.get(tool_type, DEFAULT_TOOL_VALUE)


def _base_value(website: Website) -> float:
    if website.world_archetype is None:
        return DEFAULT_BASE_VALUE
    world = WORLD_ARCHETYPES.get(website.world_archetype)
    return world.base_value if world is not None else DEFAULT_BASE_VALUE


def _exact_total(
    base_value: float,
    rarity: float,
    uniqueness: float,
    active_build_bonus: float,
    page_value: int,
    tool_value: int,
    diversity: int,
) -> int:
    """Evaluate the formula in rational arithmetic.

    Used when finite but extreme attributes overflow the float computation.
    """
    base = Fraction(base_value)
    subtotal = (
        base
        + page_value
        + tool_value
        + Fraction(uniqueness) * UNIQUENESS_UNIT
        + base * (Fraction(rarity) - 1)
        + Fraction(active_build_bonus)
    )
    multiplier = 1 + diversity * Fraction(str(DIVERSITY_STEP))
    return max(0, math.floor(subtotal * multiplier))


def value_breakdown(website: Website) -> ValuationBreakdown:
    """Compute the value formula for *website*, keeping each intermediate term."""
    rarity = 1.0 if website.rarity_multiplier is None else website.rarity_multiplier
    uniqueness = 1.0 if website.uniqueness_score is None else website.uniqueness_score
    build_ms = 0 if website.active_build_time is None else website.active_build_time

    base_value = _base_value(website)
    rarity_bonus = base_value * (rarity - 1.0)

    diversity = len({tool.type for tool in website.tools})
    diversity_multiplier = 1 + diversity * DIVERSITY_STEP

    page_value = len(website.pages) * PAGE_VALUE
    tool_value = sum(get_tool_value(tool.type) for tool in website.tools)
    uniqueness_bonus = uniqueness * UNIQUENESS_UNIT
    active_build_bonus = min(build_ms / BUILD_TIME_UNIT_MS, MAX_BUILD_BONUS)

    subtotal = (
        base_value
        + page_value
        + tool_value
        + uniqueness_bonus
        + rarity_bonus
        + active_build_bonus
    )
    weighted = subtotal * diversity_multiplier
    if math.isfinite(weighted):
        # Only a rarity multiplier far below zero can push the total negative
        total = max(0, math.floor(weighted))
    else:
        total = _exact_total(
            base_value, rarity, uniqueness, active_build_bonus, page_value, tool_value, diversity
        )

    return ValuationBreakdown(
        base_value=base_value,
        rarity_bonus=rarity_bonus,
        page_value=page_value,
        tool_value=tool_value,
        uniqueness_bonus=uniqueness_bonus,
        active_build_bonus=active_build_bonus,
        tool_diversity_score=diversity,
        diversity_multiplier=diversity_multiplier,
        total=total,
    )


def compute_value(website: Website) -> int:
    """Return the non-negative integer value of *website*."""
    return value_breakdown(website).total
