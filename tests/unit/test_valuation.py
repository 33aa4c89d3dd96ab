"""Unit tests for the valuation engine."""

from __future__ import annotations

import math
from fractions import Fraction

import pytest
from pydantic import ValidationError

from infinity_market.models.website import Page, Website
from infinity_market.models.world import WORLD_ARCHETYPES, WorldArchetype
from infinity_market.service.valuation import (
    DEFAULT_BASE_VALUE,
    DEFAULT_TOOL_VALUE,
    TOOL_VALUES,
    compute_value,
    get_tool_value,
    value_breakdown,
)
from tests.conftest import make_tool, make_website


class TestBaseValue:
    def test_plain_website(self) -> None:
        # base value plus the default uniqueness bonus (1.0 x 100)
        assert compute_value(make_website()) == DEFAULT_BASE_VALUE + 100

    def test_no_tools_means_no_diversity_boost(self) -> None:
        b = value_breakdown(make_website())
        assert b.tool_diversity_score == 0
        assert b.diversity_multiplier == 1
        assert b.rarity_bonus == 0
        assert b.active_build_bonus == 0

    def test_world_archetype_base_value(self) -> None:
        website = make_website(world_archetype=WorldArchetype.TRADE_EMPIRE)
        expected = WORLD_ARCHETYPES[WorldArchetype.TRADE_EMPIRE].base_value + 100
        assert compute_value(website) == expected

    def test_world_archetype_from_wire_name(self) -> None:
        website = make_website(worldArchetype="space-colony")
        assert value_breakdown(website).base_value == 3000

    def test_unset_attributes_take_defaults(self) -> None:
        website = make_website(
            rarity_multiplier=None, uniqueness_score=None, active_build_time=None
        )
        assert compute_value(website) == compute_value(make_website())


class TestRarity:
    def test_rarity_above_one_adds_bonus(self) -> None:
        b = value_breakdown(make_website(rarity_multiplier=1.5))
        assert b.rarity_bonus == 500
        assert b.total == 1600

    def test_rarity_below_one_penalizes(self) -> None:
        b = value_breakdown(make_website(rarity_multiplier=0.5))
        assert b.rarity_bonus == -500
        assert b.total == 600

    def test_rarity_scales_with_archetype_base(self) -> None:
        website = make_website(world_archetype=WorldArchetype.SPACE_COLONY, rarity_multiplier=2.0)
        assert value_breakdown(website).rarity_bonus == 3000

    def test_total_never_negative(self) -> None:
        assert compute_value(make_website(rarity_multiplier=-5.0)) == 0


class TestBuildTime:
    @pytest.mark.parametrize(
        ("build_ms", "bonus"),
        [(0, 0), (30_000_000, 500), (60_000_000, 500)],
    )
    def test_bonus_is_capped(self, build_ms: int, bonus: int) -> None:
        b = value_breakdown(make_website(active_build_time=build_ms))
        assert b.active_build_bonus == bonus

    def test_one_unit_per_minute(self) -> None:
        b = value_breakdown(make_website(active_build_time=90_000))
        assert b.active_build_bonus == pytest.approx(1.5)
        assert b.total == 1101


class TestTools:
    def test_duplicate_types_count_once_for_diversity(self) -> None:
        website = make_website(
            tools=[make_tool("calculator", "tool-a"), make_tool("calculator", "tool-b")]
        )
        b = value_breakdown(website)
        assert b.tool_diversity_score == 1
        assert b.diversity_multiplier == pytest.approx(1.1)
        assert b.tool_value == 2 * TOOL_VALUES["calculator"]
        assert b.total == 1540

    def test_distinct_types_each_add_diversity(self) -> None:
        website = make_website(tools=[make_tool("calculator", "a"), make_tool("chart", "b")])
        b = value_breakdown(website)
        assert b.tool_diversity_score == 2
        assert b.diversity_multiplier == pytest.approx(1.2)

    def test_unknown_tool_type_uses_default_value(self) -> None:
        website = make_website(tools=[make_tool("hologram")])
        b = value_breakdown(website)
        assert b.tool_value == DEFAULT_TOOL_VALUE
        assert b.total == 1265

    def test_get_tool_value(self) -> None:
        assert get_tool_value("map") == TOOL_VALUES["map"]
        assert get_tool_value("not-a-tool") == DEFAULT_TOOL_VALUE


class TestPages:
    def test_each_page_adds_one_hundred(self) -> None:
        pages = [Page(id=f"page-{i}", title="P", content="", query="q") for i in range(3)]
        b = value_breakdown(make_website(pages=pages))
        assert b.page_value == 300
        assert b.total == 1400


class TestMonotonicity:
    def test_non_decreasing_in_page_count(self) -> None:
        values = [
            compute_value(
                make_website(
                    pages=[Page(id=f"p{i}", title="P", content="", query="q") for i in range(n)]
                )
            )
            for n in range(6)
        ]
        assert values == sorted(values)

    def test_non_decreasing_in_uniqueness(self) -> None:
        scores = [0.0, 0.25, 0.5, 1.0, 2.0, 10.0]
        values = [compute_value(make_website(uniqueness_score=s)) for s in scores]
        assert values == sorted(values)

    def test_non_decreasing_in_tool_value(self) -> None:
        cheap = make_website(tools=[make_tool("glossary")])
        pricey = make_website(tools=[make_tool("simulator")])
        assert compute_value(cheap) <= compute_value(pricey)

    def test_deterministic(self) -> None:
        website = make_website(
            rarity_multiplier=1.3,
            uniqueness_score=2.5,
            active_build_time=1_234_567,
            tools=[make_tool("quiz", "a"), make_tool("map", "b")],
        )
        assert compute_value(website) == compute_value(website)


class TestExtremeAttributes:
    def test_huge_rarity_is_valued_exactly(self) -> None:
        b = value_breakdown(make_website(rarity_multiplier=1e308))
        expected = math.floor(1100 + Fraction(1000) * (Fraction(1e308) - 1))
        assert b.total == expected
        assert b.total > 10**310

    def test_huge_negative_rarity_clamps_to_zero(self) -> None:
        assert compute_value(make_website(rarity_multiplier=-1e308)) == 0

    def test_opposing_overflows(self) -> None:
        # float arithmetic would give inf - inf here
        website = make_website(rarity_multiplier=1e308, uniqueness_score=-1e308)
        expected = math.floor(
            1000 + Fraction(-1e308) * 100 + Fraction(1000) * (Fraction(1e308) - 1)
        )
        assert compute_value(website) == expected > 0

    def test_overflow_keeps_diversity_multiplier(self) -> None:
        plain = compute_value(make_website(uniqueness_score=1e308))
        diverse = compute_value(
            make_website(uniqueness_score=1e308, tools=[make_tool("quiz", "a")])
        )
        assert diverse == math.floor((plain + 220) * Fraction(11, 10))

    def test_monotonic_past_float_range(self) -> None:
        scores = [1e300, 1e307, 1e308]
        values = [compute_value(make_website(uniqueness_score=s)) for s in scores]
        assert values == sorted(values)


class TestNonFiniteAttributes:
    @pytest.mark.parametrize("field", ["rarityMultiplier", "uniquenessScore", "activeBuildTime"])
    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_rejected_from_json(self, field: str, literal: str) -> None:
        with pytest.raises(ValidationError):
            Website.model_validate_json(f'{{"id": "s", "title": "t", "{field}": {literal}}}')

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_rejected_from_python(self, value: float) -> None:
        with pytest.raises(ValidationError):
            make_website(rarity_multiplier=value)
