"""API request/response Pydantic schemas.

Field names are exposed in camelCase on the wire, matching the website
records in :mod:`infinity_market.models.website`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from infinity_market.models.website import ToolComponent, Website


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(_CamelModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
    generative_backend: str | None = Field(None, description="None when serving offline content")


# ---------------------------------------------------------------------------
# Catalog schemas
# ---------------------------------------------------------------------------


class ToolTypeInfo(_CamelModel):
    """A recognized tool kind and its contribution to website value."""

    type: str
    value: int


class ToolTypeListResponse(_CamelModel):
    """Response for GET /tools."""

    tools: list[ToolTypeInfo] = []
    default_value: int


class WorldInfo(_CamelModel):
    """A world archetype as listed by GET /worlds."""

    key: str
    name: str
    emoji: str
    base_value: int
    description: str
    educational_goal: str
    tools: list[str] = []


class WorldListResponse(_CamelModel):
    """Response for GET /worlds."""

    worlds: list[WorldInfo] = []


# ---------------------------------------------------------------------------
# Generation schemas
# ---------------------------------------------------------------------------


class SiteGenerateRequest(_CamelModel):
    """Request body for POST /generate/site."""

    query: str = Field(min_length=1, description="What the website should be about")
    author_wallet: str = Field(min_length=1)


class WorldGenerateRequest(_CamelModel):
    """Request body for POST /generate/world."""

    archetype: str
    author_wallet: str = Field(min_length=1)
    slot_combination: str | None = None


class PageGenerateRequest(_CamelModel):
    """Request body for POST /generate/page."""

    website_context: str = Field(min_length=1, description="What the parent website is about")
    page_query: str = Field(min_length=1)
    author_wallet: str = Field(min_length=1)


class SiteContentResponse(_CamelModel):
    """Response for POST /generate/site and POST /generate/world."""

    title: str
    description: str
    content: str
    tools: list[ToolComponent] = []


class PageContentResponse(_CamelModel):
    """Response for POST /generate/page (pages have no description)."""

    title: str
    content: str
    tools: list[ToolComponent] = []


# ---------------------------------------------------------------------------
# Website & valuation schemas
# ---------------------------------------------------------------------------


class WebsiteCreateRequest(_CamelModel):
    """Request body for POST /websites.

    Either ``query`` (free-form website) or ``archetype`` (world website)
    must be given.
    """

    query: str | None = None
    archetype: str | None = None
    slot_combination: str | None = None
    owner_wallet: str = Field(min_length=1)


class PageAddRequest(_CamelModel):
    """Request body for POST /websites/pages."""

    website: Website
    page_query: str = Field(min_length=1)
    author_wallet: str = Field(min_length=1)


class ValuationRequest(_CamelModel):
    """Request body for POST /valuation."""

    website: Website


class ValuationBreakdownResponse(_CamelModel):
    """Each term of the value formula.

    Terms that exceed the float range are reported as ``None``; ``value`` is
    still exact.
    """

    base_value: float
    rarity_bonus: float | None
    page_value: float
    tool_value: float
    uniqueness_bonus: float | None
    active_build_bonus: float
    tool_diversity_score: int
    diversity_multiplier: float


class ValuationResponse(_CamelModel):
    """Response for POST /valuation."""

    value: int
    breakdown: ValuationBreakdownResponse
