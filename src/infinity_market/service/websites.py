"""Turn generated content into website records and keep their value current.

Each helper returns a new :class:`Website` with ``value`` recomputed from the
updated attributes; the input record is never modified.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import UTC, datetime

from infinity_market.models.website import Page, ToolComponent, Website
from infinity_market.models.world import WorldArchetype
from infinity_market.service.generation import PageContent, SiteContent
from infinity_market.service.identifiers import new_page_id, new_token_id, new_website_id
from infinity_market.service.valuation import compute_value


def _revalued(website: Website, **changes: object) -> Website:
    updated = website.model_copy(update=changes)
    return updated.model_copy(update={"value": compute_value(updated)})


def assemble_website(
    content: SiteContent,
    *,
    query: str,
    owner_wallet: str,
    world_archetype: WorldArchetype | None = None,
) -> Website:
    """Create a freshly minted website (with its own token id) from *content*."""
    website = Website(
        id=new_website_id(),
        token_id=new_token_id(),
        title=content.title,
        description=content.description,
        content=content.content,
        query=query,
        owner_wallet=owner_wallet,
        created_at=datetime.now(UTC),
        world_archetype=world_archetype,
        tools=list(content.tools),
    )
    return _revalued(website)


def add_page(website: Website, content: PageContent, *, query: str) -> Website:
    page = Page(
        id=new_page_id(),
        title=content.title,
        content=content.content,
        query=query,
        tools=list(content.tools),
    )
    return _revalued(website, pages=[*website.pages, page])


def add_tools(website: Website, tools: Sequence[ToolComponent]) -> Website:
    return _revalued(website, tools=[*website.tools, *tools])


def record_build_time(website: Website, elapsed_ms: float) -> Website:
    """Add *elapsed_ms* of active building to the website's accumulated build time."""
    if not math.isfinite(elapsed_ms) or elapsed_ms < 0:
        raise ValueError(f"elapsed_ms must be finite and non-negative, got {elapsed_ms}")
    total = (website.active_build_time or 0) + elapsed_ms
    return _revalued(website, active_build_time=total)
