"""Content synthesizer: generative text with a deterministic offline fallback.

Every public method returns a complete :class:`GeneratedContent`.  Backend
failures (no backend, errors, timeouts, unparseable replies) are logged and
answered with the scenario's template content instead of being raised.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any

from infinity_market.backend.base import (
    BackendError,
    BackendUnavailableError,
    MalformedResponseError,
    TextBackend,
)
from infinity_market.models.website import GeneratedContent
from infinity_market.models.world import WorldDefinition
from infinity_market.service import prompts

logger = logging.getLogger("infinity_market.synthesizer")

DEFAULT_MODEL = "gpt-4o"
SITE_TAGLINE = "An Infinity-powered website"

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


# ---------------------------------------------------------------------------
# Fallback templates
# ---------------------------------------------------------------------------


def site_fallback(query: str) -> GeneratedContent:
    return GeneratedContent(
        title=query,
        description=SITE_TAGLINE,
        content=site_fallback_body(query),
    )


def site_fallback_body(query: str) -> str:
    return (
        f"## {query}\n\n"
        f"This website was created to explore: {query}\n\n"
        "Content generation is in progress..."
    )


def world_fallback(world: WorldDefinition) -> GeneratedContent:
    return GeneratedContent(
        title=world.name,
        description=world.description,
        content=world_fallback_body(world),
    )


def world_fallback_body(world: WorldDefinition) -> str:
    return (
        f"## {world.name}\n\n"
        f"{world.description}\n\n"
        f"### Educational Goal\n\n{world.educational_goal}\n\n"
        "### Get Started\n\n"
        "Explore the tools below to begin your learning journey."
    )


def page_fallback(page_query: str) -> GeneratedContent:
    return GeneratedContent(title=page_query, content=page_fallback_body(page_query))


def page_fallback_body(page_query: str) -> str:
    return f"## {page_query}\n\nThis page explores {page_query} in detail."


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------


def parse_json_document(text: str) -> dict[str, Any]:
    """Parse a backend reply into a JSON object.

    A surrounding markdown code fence is tolerated.  Raises
    :class:`MalformedResponseError` for anything that is not a JSON object.
    """
    stripped = text.strip()
    fenced = _CODE_FENCE.match(stripped)
    if fenced:
        stripped = fenced.group(1)
    try:
        document = json.loads(stripped)
    except (ValueError, RecursionError) as exc:
        # ValueError also covers integer literals past the digit limit
        raise MalformedResponseError(f"Reply is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise MalformedResponseError(
            f"Reply is a JSON {type(document).__name__}, expected an object"
        )
    return document


def _field(document: dict[str, Any], key: str) -> str | None:
    """Return a non-blank string field, or ``None`` so the caller can default it."""
    value = document.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


# ---------------------------------------------------------------------------
# ContentSynthesizer
# ---------------------------------------------------------------------------


class ContentSynthesizer:
    """Produces titles, descriptions and markdown bodies for new content.

    *backend* may be ``None``, in which case every call serves template
    content.  When *timeout_seconds* is set, a backend call that runs longer
    is abandoned and treated like any other backend failure.
    """

    def __init__(
        self,
        backend: TextBackend | None = None,
        *,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float | None = None,
    ) -> None:
        self._backend = backend
        self._model = model
        self._timeout = timeout_seconds

    @property
    def backend(self) -> TextBackend | None:
        return self._backend

    async def synthesize_site(self, query: str) -> GeneratedContent:
        """Homepage content for a website about *query*."""
        try:
            document = await self._request(prompts.site_prompt(query))
        except BackendError as exc:
            logger.warning("Site generation failed, using template content: %s", exc)
            return site_fallback(query)
        return GeneratedContent(
            title=_field(document, "title") or query,
            description=_field(document, "description") or SITE_TAGLINE,
            content=_field(document, "content") or site_fallback_body(query),
        )

    async def synthesize_world(
        self, world: WorldDefinition, slot_combination: str | None = None
    ) -> GeneratedContent:
        """Landing content for a website built from a world archetype."""
        try:
            document = await self._request(prompts.world_prompt(world, slot_combination))
        except BackendError as exc:
            logger.warning(
                "World generation failed for %s, using template content: %s", world.name, exc
            )
            return world_fallback(world)
        return GeneratedContent(
            title=_field(document, "title") or world.name,
            description=_field(document, "description") or world.description,
            content=_field(document, "content") or world_fallback_body(world),
        )

    async def synthesize_page(self, website_context: str, page_query: str) -> GeneratedContent:
        """Content for a new page about *page_query* on an existing website."""
        try:
            document = await self._request(prompts.page_prompt(website_context, page_query))
        except BackendError as exc:
            logger.warning("Page generation failed, using template content: %s", exc)
            return page_fallback(page_query)
        return GeneratedContent(
            title=_field(document, "title") or page_query,
            content=_field(document, "content") or page_fallback_body(page_query),
        )

    async def _request(self, prompt: str) -> dict[str, Any]:
        """One backend round trip; every failure surfaces as :class:`BackendError`."""
        if self._backend is None:
            raise BackendUnavailableError("No generative backend configured")
        try:
            reply = await asyncio.wait_for(
                self._backend.complete(prompt, model=self._model, json_mode=True),
                timeout=self._timeout,
            )
        except BackendError:
            raise
        except TimeoutError as exc:
            raise BackendError(f"Backend did not answer within {self._timeout}s") from exc
        except Exception as exc:
            raise BackendError(f"{type(exc).__name__}: {exc}") from exc
        if not isinstance(reply, str):
            raise MalformedResponseError(f"Reply is a {type(reply).__name__}, expected text")
        return parse_json_document(reply)
