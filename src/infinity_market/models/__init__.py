"""Pydantic domain models for Infinity Market."""

from infinity_market.models.website import (
    GeneratedContent,
    Page,
    ToolComponent,
    ToolSpecification,
    ToolType,
    Website,
)
from infinity_market.models.world import WORLD_ARCHETYPES, WorldArchetype, WorldDefinition

__all__ = [
    "GeneratedContent",
    "Page",
    "ToolComponent",
    "ToolSpecification",
    "ToolType",
    "WORLD_ARCHETYPES",
    "Website",
    "WorldArchetype",
    "WorldDefinition",
]
