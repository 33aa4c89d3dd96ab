"""Catalog endpoints: GET /tools and GET /worlds."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from infinity_market.api.deps import get_generation_service
from infinity_market.api.schemas import (
    ToolTypeInfo,
    ToolTypeListResponse,
    WorldInfo,
    WorldListResponse,
)
from infinity_market.models.website import ToolType
from infinity_market.models.world import WorldDefinition
from infinity_market.service.generation import GenerationService, UnknownWorldError
from infinity_market.service.valuation import DEFAULT_TOOL_VALUE, get_tool_value

tools_router = APIRouter()
worlds_router = APIRouter()


def _world_info(key: str, world: WorldDefinition) -> WorldInfo:
    return WorldInfo(
        key=str(key),
        name=world.name,
        emoji=world.emoji,
        base_value=world.base_value,
        description=world.description,
        educational_goal=world.educational_goal,
        tools=list(world.tools),
    )


@tools_router.get("", response_model=ToolTypeListResponse)
async def list_tool_types() -> ToolTypeListResponse:
    """List the recognized tool kinds and what each adds to a website's value."""
    return ToolTypeListResponse(
        tools=[ToolTypeInfo(type=t.value, value=get_tool_value(t)) for t in ToolType],
        default_value=DEFAULT_TOOL_VALUE,
    )


@worlds_router.get("", response_model=WorldListResponse)
async def list_worlds(
    service: GenerationService = Depends(get_generation_service),  # noqa: B008
) -> WorldListResponse:
    """List all world archetypes."""
    return WorldListResponse(
        worlds=[_world_info(key, world) for key, world in service.worlds.items()]
    )


@worlds_router.get("/{archetype}", response_model=WorldInfo)
async def get_world(
    archetype: str,
    service: GenerationService = Depends(get_generation_service),  # noqa: B008
) -> WorldInfo:
    """Get a single world archetype."""
    try:
        world = service.get_world(archetype)
    except UnknownWorldError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from None
    return _world_info(archetype, world)
