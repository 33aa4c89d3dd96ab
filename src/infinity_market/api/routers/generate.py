"""Content generation endpoints: POST /generate/{site,world,page}."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from infinity_market.api.deps import get_generation_service
from infinity_market.api.schemas import (
    PageContentResponse,
    PageGenerateRequest,
    SiteContentResponse,
    SiteGenerateRequest,
    WorldGenerateRequest,
)
from infinity_market.classifier.base import IntentClassificationError
from infinity_market.service.generation import GenerationService, UnknownWorldError

router = APIRouter()


def _classification_failed(exc: IntentClassificationError) -> HTTPException:
    return HTTPException(
        status_code=502, detail=f"Could not determine tools for the request: {exc.reason}"
    )


@router.post("/site", response_model=SiteContentResponse)
async def generate_site(
    body: SiteGenerateRequest,
    service: GenerationService = Depends(get_generation_service),  # noqa: B008
) -> SiteContentResponse:
    """Generate homepage content and tools for a new website."""
    try:
        result = await service.create_site_content(body.query, body.author_wallet)
    except IntentClassificationError as exc:
        raise _classification_failed(exc) from None
    return SiteContentResponse(
        title=result.title,
        description=result.description,
        content=result.content,
        tools=result.tools,
    )


@router.post("/world", response_model=SiteContentResponse)
async def generate_world(
    body: WorldGenerateRequest,
    service: GenerationService = Depends(get_generation_service),  # noqa: B008
) -> SiteContentResponse:
    """Generate content and tools for a world-archetype website."""
    try:
        result = await service.create_world_content(
            body.archetype, body.author_wallet, body.slot_combination
        )
    except UnknownWorldError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from None
    return SiteContentResponse(
        title=result.title,
        description=result.description,
        content=result.content,
        tools=result.tools,
    )


@router.post("/page", response_model=PageContentResponse)
async def generate_page(
    body: PageGenerateRequest,
    service: GenerationService = Depends(get_generation_service),  # noqa: B008
) -> PageContentResponse:
    """Generate content and tools for a new page on an existing website."""
    try:
        result = await service.create_page_content(
            body.website_context, body.page_query, body.author_wallet
        )
    except IntentClassificationError as exc:
        raise _classification_failed(exc) from None
    return PageContentResponse(title=result.title, content=result.content, tools=result.tools)
