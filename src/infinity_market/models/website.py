"""Website artifacts, their pages, and the tool components embedded in them."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from infinity_market.models.world import WorldArchetype


class ToolType(StrEnum):
    CALCULATOR = "calculator"
    CONVERTER = "converter"
    CHART = "chart"
    DATA_TABLE = "data-table"
    TIMELINE = "timeline"
    QUIZ = "quiz"
    FLASHCARDS = "flashcards"
    CHECKLIST = "checklist"
    FORM = "form"
    CALENDAR = "calendar"
    MAP = "map"
    SIMULATOR = "simulator"
    CODE_PLAYGROUND = "code-playground"
    CONTENT_HUB = "content-hub"
    GLOSSARY = "glossary"
    POLL = "poll"


class ToolSpecification(BaseModel):
    """A tool as proposed by intent classification, before materialization."""

    type: str
    title: str
    description: str
    config: dict[str, Any] = Field(default_factory=dict)


class ToolComponent(BaseModel):
    """A materialized functional unit embedded in a website or page."""

    id: str
    type: str
    title: str
    description: str
    config: dict[str, Any] = Field(default_factory=dict)
    added_at: datetime = Field(alias="addedAt")
    added_by: str = Field(alias="addedBy")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Page(BaseModel):
    """A named content unit attached to a website."""

    id: str
    title: str
    content: str
    query: str = Field(description="The request the page was generated from")
    tools: list[ToolComponent] = Field(default_factory=list)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), alias="createdAt"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Website(BaseModel):
    """A tokenized website artifact.

    ``value`` is derived: callers recompute it with
    :func:`infinity_market.service.valuation.compute_value` after every
    structural change and store the result here.
    """

    id: str
    token_id: str | None = Field(None, alias="tokenId")
    title: str
    description: str | None = None
    content: str = ""
    query: str | None = None
    owner_wallet: str | None = Field(None, alias="ownerWallet")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), alias="createdAt"
    )
    world_archetype: WorldArchetype | None = Field(None, alias="worldArchetype")
    rarity_multiplier: float | None = Field(1.0, alias="rarityMultiplier", allow_inf_nan=False)
    uniqueness_score: float | None = Field(1.0, alias="uniquenessScore", allow_inf_nan=False)
    active_build_time: float | None = Field(
        0,
        alias="activeBuildTime",
        allow_inf_nan=False,
        description="Accumulated authoring time in milliseconds",
    )
    pages: list[Page] = Field(default_factory=list)
    tools: list[ToolComponent] = Field(default_factory=list)
    value: int = Field(0, ge=0)

    model_config = ConfigDict(populate_by_name=True)


class GeneratedContent(BaseModel):
    """Text produced for a site, world, or page (pages carry no description)."""

    title: str
    description: str | None = None
    content: str
