"""Tool materializer: stamps tool specifications into tool components."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from infinity_market.models.website import ToolComponent, ToolSpecification, ToolType
from infinity_market.models.world import WorldDefinition
from infinity_market.service.identifiers import new_tool_id


def materialize(
    specs: Iterable[ToolSpecification],
    author_wallet: str,
    *,
    now: datetime | None = None,
) -> list[ToolComponent]:
    """Turn *specs* into components, one per spec and in the same order.

    Every component in the batch shares one ``added_at`` timestamp and the
    same author, and gets its own identifier.
    """
    added_at = now or datetime.now(UTC)
    return [
        ToolComponent(
            id=new_tool_id(),
            type=spec.type,
            title=spec.title,
            description=spec.description,
            config=dict(spec.config),
            added_at=added_at,
            added_by=author_wallet,
        )
        for spec in specs
    ]


def tool_title(tool_kind: str) -> str:
    """``"map-explorer"`` -> ``"Map Explorer"``."""
    return " ".join(word[:1].upper() + word[1:] for word in tool_kind.split("-"))


def world_tool_specs(archetype: str, world: WorldDefinition) -> list[ToolSpecification]:
    """Specifications for a world's fixed tool kinds, hosted as content hubs."""
    return [
        ToolSpecification(
            type=ToolType.CONTENT_HUB.value,
            title=tool_title(kind),
            description=f"{kind} for {world.name}",
            config={"worldType": str(archetype), "toolName": kind},
        )
        for kind in world.tools
    ]
