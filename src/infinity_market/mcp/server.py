"""FastMCP server exposing Infinity Market's generation and valuation as MCP tools.

Run via::

    infinity-market-mcp                       # reads .env (default: stdio)
    MCP_TRANSPORT=http infinity-market-mcp    # streamable HTTP on port 9000
    MCP_TRANSPORT=sse  infinity-market-mcp    # legacy SSE on port 9000

Tools return plain text summaries; ``compute_value`` accepts a website record
as JSON.  Settings are loaded from environment variables and ``.env`` file;
see ``.env.example`` for available options.
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import ValidationError

from infinity_market import __version__
from infinity_market.classifier.base import IntentClassificationError
from infinity_market.models.website import ToolComponent, ToolType, Website
from infinity_market.service.generation import (
    GenerationService,
    UnknownWorldError,
    build_generation_service,
)
from infinity_market.service.valuation import DEFAULT_TOOL_VALUE, get_tool_value, value_breakdown
from infinity_market.settings import Settings

# ---------------------------------------------------------------------------
# Server + shared state
# ---------------------------------------------------------------------------

logger = logging.getLogger("infinity_market.mcp")

mcp = FastMCP("Infinity Market")
_generation_service: GenerationService | None = None


def _service() -> GenerationService:
    if _generation_service is None:
        raise ToolError("Generation service not initialised")
    return _generation_service


def _format_tools(tools: list[ToolComponent]) -> list[str]:
    if not tools:
        return ["Tools: none"]
    lines = [f"Tools ({len(tools)}):"]
    lines.extend(f"  - [{t.type}] {t.title} (id: {t.id}): {t.description}" for t in tools)
    return lines


# ---------------------------------------------------------------------------
# Generation tools
# ---------------------------------------------------------------------------


@mcp.tool
async def generate_site(query: str, author_wallet: str) -> str:
    """Generate homepage content and functional tools for a new website.

    Args:
        query: What the website should be about, in plain language.
        author_wallet: Wallet address credited as the tools' author.
    """
    logger.info("generate_site called (query length=%d)", len(query))
    try:
        result = await _service().create_site_content(query, author_wallet)
    except IntentClassificationError as exc:
        raise ToolError(str(exc)) from exc
    parts = [f"Title: {result.title}", f"Description: {result.description}"]
    parts.extend(_format_tools(result.tools))
    parts.extend(["", result.content])
    return "\n".join(parts)


@mcp.tool
async def generate_world(
    archetype: str, author_wallet: str, slot_combination: str | None = None
) -> str:
    """Generate a world-themed website from one of the archetypes in ``list_worlds``.

    Args:
        archetype: World archetype key, e.g. ``trade-empire``.
        author_wallet: Wallet address credited as the tools' author.
        slot_combination: Optional slot combination that produced this world.
    """
    logger.info("generate_world called (archetype=%s)", archetype)
    try:
        result = await _service().create_world_content(
            archetype, author_wallet, slot_combination
        )
    except UnknownWorldError as exc:
        raise ToolError(str(exc)) from exc
    parts = [f"Title: {result.title}", f"Description: {result.description}"]
    parts.extend(_format_tools(result.tools))
    parts.extend(["", result.content])
    return "\n".join(parts)


@mcp.tool
async def generate_page(website_context: str, page_query: str, author_wallet: str) -> str:
    """Generate a new page (content plus tools) for an existing website.

    Args:
        website_context: What the parent website is about.
        page_query: What the new page should cover.
        author_wallet: Wallet address credited as the tools' author.
    """
    logger.info("generate_page called (page query length=%d)", len(page_query))
    try:
        result = await _service().create_page_content(website_context, page_query, author_wallet)
    except IntentClassificationError as exc:
        raise ToolError(str(exc)) from exc
    parts = [f"Title: {result.title}"]
    parts.extend(_format_tools(result.tools))
    parts.extend(["", result.content])
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Valuation & catalog tools
# ---------------------------------------------------------------------------


@mcp.tool
def compute_value(website_json: str) -> str:
    """Compute a website's value and show how each attribute contributes.

    Args:
        website_json: The website record as JSON (camelCase or snake_case keys).
    """
    try:
        website = Website.model_validate_json(website_json)
    except ValidationError as exc:
        raise ToolError(f"Invalid website JSON: {exc}") from exc
    b = value_breakdown(website)
    return "\n".join(
        [
            f"Value: {b.total}",
            f"  base value:        {b.base_value:g}",
            f"  rarity bonus:      {b.rarity_bonus:g}",
            f"  pages:             {b.page_value:g}",
            f"  tools:             {b.tool_value:g}",
            f"  uniqueness bonus:  {b.uniqueness_bonus:g}",
            f"  build time bonus:  {b.active_build_bonus:g}",
            f"  diversity:         {b.tool_diversity_score} tool types "
            f"(x{b.diversity_multiplier:g})",
        ]
    )


@mcp.tool
def list_worlds() -> str:
    """List the world archetypes available to ``generate_world``."""
    lines = []
    for key, world in _service().worlds.items():
        lines.append(
            f"{key}: {world.emoji} {world.name} (base value {world.base_value}) "
            f"tools: {', '.join(world.tools)}"
        )
        lines.append(f"    {world.description}")
    return "\n".join(lines)


@mcp.tool
def list_tool_types() -> str:
    """List the recognized tool kinds and what each adds to a website's value."""
    lines = [f"{t.value}: {get_tool_value(t)}" for t in ToolType]
    lines.append(f"(any other type: {DEFAULT_TOOL_VALUE})")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "Infinity Market MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    global _generation_service  # noqa: PLW0603
    _generation_service = build_generation_service(settings)

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
