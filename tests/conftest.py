"""Shared test fixtures for Infinity Market."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from infinity_market.classifier.keyword import KeywordIntentClassifier
from infinity_market.models.website import ToolComponent, ToolSpecification, Website
from infinity_market.service.generation import GenerationService
from infinity_market.service.synthesizer import ContentSynthesizer

WALLET = "0x" + "ab" * 20


@pytest.fixture
def wallet() -> str:
    return WALLET


@pytest.fixture
def offline_service() -> GenerationService:
    """GenerationService with the keyword classifier and no generative backend."""
    return GenerationService(KeywordIntentClassifier(), ContentSynthesizer(None))


@pytest.fixture
def sample_specs() -> list[ToolSpecification]:
    return [
        ToolSpecification(type="calculator", title="Loan Calculator", description="Monthly payments"),
        ToolSpecification(type="chart", title="Rate Chart", description="Rates over time",
                          config={"chartType": "line"}),
        ToolSpecification(type="calculator", title="Tax Calculator", description="Tax owed"),
    ]


def make_tool(tool_type: str, tool_id: str = "tool-1") -> ToolComponent:
    return ToolComponent(
        id=tool_id,
        type=tool_type,
        title=tool_type.title(),
        description=f"A {tool_type}",
        added_at=datetime(2026, 1, 1, tzinfo=UTC),
        added_by=WALLET,
    )


def make_website(**overrides: object) -> Website:
    fields: dict[str, object] = {"id": "site-test", "title": "Test Site"}
    fields.update(overrides)
    return Website(**fields)
