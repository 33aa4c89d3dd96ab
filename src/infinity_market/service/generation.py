"""Generation facade: classification + materialization + synthesis in one call."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from infinity_market.backend.factory import create_backend
from infinity_market.classifier.base import IntentClassificationError, IntentClassifier
from infinity_market.classifier.keyword import KeywordIntentClassifier
from infinity_market.models.website import ToolComponent, ToolSpecification
from infinity_market.models.world import WORLD_ARCHETYPES, WorldDefinition
from infinity_market.service.materializer import materialize, world_tool_specs
from infinity_market.service.synthesizer import ContentSynthesizer
from infinity_market.settings import Settings

logger = logging.getLogger("infinity_market.generation")


class UnknownWorldError(KeyError):
    """Raised when a world archetype key is not in the catalog."""

    def __init__(self, archetype: str, available: list[str]) -> None:
        self.archetype = archetype
        self.available = available
        super().__init__(f"Unknown world archetype '{archetype}'. Available: {', '.join(available)}")

    def __str__(self) -> str:
        return self.args[0]


@dataclass
class SiteContent:
    """Generated content for a new website (plain or world-themed)."""

    title: str
    description: str
    content: str
    tools: list[ToolComponent] = field(default_factory=list)


@dataclass
class PageContent:
    """Generated content for a new page.  Pages have no description."""

    title: str
    content: str
    tools: list[ToolComponent] = field(default_factory=list)


class GenerationService:
    """Entry points that turn user intent into content plus tool components.

    Content synthesis never fails (it falls back to templates).  A failing
    intent classifier is not masked: it surfaces as
    :class:`IntentClassificationError`.
    """

    def __init__(
        self,
        classifier: IntentClassifier,
        synthesizer: ContentSynthesizer,
        *,
        worlds: Mapping[str, WorldDefinition] = WORLD_ARCHETYPES,
    ) -> None:
        self._classifier = classifier
        self._synthesizer = synthesizer
        self._worlds = worlds

    @property
    def synthesizer(self) -> ContentSynthesizer:
        return self._synthesizer

    @property
    def worlds(self) -> Mapping[str, WorldDefinition]:
        return self._worlds

    def get_world(self, archetype: str) -> WorldDefinition:
        """Look up a world definition, raising :class:`UnknownWorldError` if missing."""
        world = self._worlds.get(archetype)
        if world is None:
            raise UnknownWorldError(str(archetype), sorted(str(k) for k in self._worlds))
        return world

    async def create_site_content(self, query: str, author_wallet: str) -> SiteContent:
        """Classify *query* into tools and generate homepage content for it."""
        tools = materialize(self._classify(query), author_wallet)
        generated = await self._synthesizer.synthesize_site(query)
        return SiteContent(
            title=generated.title,
            description=generated.description or "",
            content=generated.content,
            tools=tools,
        )

    async def create_world_content(
        self,
        archetype: str,
        author_wallet: str,
        slot_combination: str | None = None,
    ) -> SiteContent:
        """Build a world-themed website from the archetype's fixed tool list."""
        world = self.get_world(archetype)
        tools = materialize(world_tool_specs(archetype, world), author_wallet)
        generated = await self._synthesizer.synthesize_world(world, slot_combination)
        return SiteContent(
            title=generated.title,
            description=generated.description or world.description,
            content=generated.content,
            tools=tools,
        )

    async def create_page_content(
        self, website_context: str, page_query: str, author_wallet: str
    ) -> PageContent:
        """Classify *page_query* into tools and generate a page for an existing website."""
        tools = materialize(self._classify(page_query), author_wallet)
        generated = await self._synthesizer.synthesize_page(website_context, page_query)
        return PageContent(title=generated.title, content=generated.content, tools=tools)

    def _classify(self, query: str) -> list[ToolSpecification]:
        try:
            return self._classifier.classify(query)
        except IntentClassificationError:
            logger.warning("Intent classification failed for query %r", query)
            raise
        except Exception as exc:
            logger.warning("Intent classifier raised %s for query %r", type(exc).__name__, query)
            raise IntentClassificationError(query, str(exc)) from exc


def build_generation_service(settings: Settings) -> GenerationService:
    """Wire classifier, backend and synthesizer according to *settings*."""
    synthesizer = ContentSynthesizer(
        create_backend(settings),
        model=settings.llm_model,
        timeout_seconds=settings.llm_timeout_seconds,
    )
    classifier = KeywordIntentClassifier(max_tools=settings.classifier_max_tools)
    return GenerationService(classifier, synthesizer)
