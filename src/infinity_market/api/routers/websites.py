"""Website endpoints: mint a website from a request, add pages to one."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from infinity_market.api.deps import get_generation_service
from infinity_market.api.schemas import PageAddRequest, WebsiteCreateRequest
from infinity_market.classifier.base import IntentClassificationError
from infinity_market.models.website import Website
from infinity_market.models.world import WorldArchetype
from infinity_market.service.generation import GenerationService, UnknownWorldError
from infinity_market.service.websites import add_page, assemble_website

router = APIRouter()

# Receives a whole website record; create_app gives it the larger body limit
PAGES_PATH = "/pages"


def _known_archetype(key: str | None) -> WorldArchetype | None:
    """Archetypes outside the built-in enum (custom catalogs) carry no base value."""
    if key is None:
        return None
    try:
        return WorldArchetype(key)
    except ValueError:
        return None


@router.post("", response_model=Website, status_code=201)
async def create_website(
    body: WebsiteCreateRequest,
    service: GenerationService = Depends(get_generation_service),  # noqa: B008
) -> Website:
    """Generate a new website (free-form or world-themed) with its value computed."""
    if bool(body.query) == bool(body.archetype):
        raise HTTPException(
            status_code=422, detail="Provide exactly one of 'query' or 'archetype'"
        )
    try:
        if body.archetype:
            content = await service.create_world_content(
                body.archetype, body.owner_wallet, body.slot_combination
            )
            query = service.get_world(body.archetype).name
        else:
            content = await service.create_site_content(body.query, body.owner_wallet)
            query = body.query
    except UnknownWorldError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from None
    except IntentClassificationError as exc:
        raise HTTPException(
            status_code=502, detail=f"Could not determine tools for the request: {exc.reason}"
        ) from None
    return assemble_website(
        content,
        query=query,
        owner_wallet=body.owner_wallet,
        world_archetype=_known_archetype(body.archetype),
    )


@router.post(PAGES_PATH, response_model=Website)
async def add_website_page(
    body: PageAddRequest,
    service: GenerationService = Depends(get_generation_service),  # noqa: B008
) -> Website:
    """Generate a page, attach it to the given website and return the revalued website."""
    website = body.website
    context = website.query or website.title
    try:
        content = await service.create_page_content(context, body.page_query, body.author_wallet)
    except IntentClassificationError as exc:
        raise HTTPException(
            status_code=502, detail=f"Could not determine tools for the request: {exc.reason}"
        ) from None
    return add_page(website, content, query=body.page_query)
