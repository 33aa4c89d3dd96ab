"""Unit tests for the generation facade."""

from __future__ import annotations

import json
from types import MappingProxyType

import pytest

from infinity_market.backend.factory import create_backend
from infinity_market.classifier.base import IntentClassificationError
from infinity_market.classifier.keyword import KeywordIntentClassifier
from infinity_market.models.website import ToolSpecification
from infinity_market.models.world import WorldArchetype, WorldDefinition
from infinity_market.service.generation import (
    GenerationService,
    UnknownWorldError,
    build_generation_service,
)
from infinity_market.service.synthesizer import ContentSynthesizer, site_fallback
from infinity_market.settings import Settings
from tests.fakes import BrokenClassifier, FixedClassifier, StubBackend


def _service(specs: list[ToolSpecification], backend: StubBackend | None = None, **kwargs):
    classifier = FixedClassifier(specs)
    return GenerationService(classifier, ContentSynthesizer(backend), **kwargs), classifier


class TestCreateSiteContent:
    async def test_merges_tools_and_content(
        self, sample_specs: list[ToolSpecification], wallet: str
    ) -> None:
        reply = json.dumps({"title": "Loans", "description": "Borrow wisely", "content": "## Rates"})
        service, classifier = _service(sample_specs, StubBackend(reply))
        result = await service.create_site_content("loan planning", wallet)
        assert classifier.queries == ["loan planning"]
        assert result.title == "Loans"
        assert result.description == "Borrow wisely"
        assert result.content == "## Rates"
        assert [t.title for t in result.tools] == [s.title for s in sample_specs]
        assert {t.added_by for t in result.tools} == {wallet}

    async def test_backend_failure_still_returns_tools(
        self, sample_specs: list[ToolSpecification], wallet: str
    ) -> None:
        service, _ = _service(sample_specs, StubBackend(error=RuntimeError("down")))
        result = await service.create_site_content("loan planning", wallet)
        fallback = site_fallback("loan planning")
        assert (result.title, result.description, result.content) == (
            fallback.title,
            fallback.description,
            fallback.content,
        )
        assert len(result.tools) == 3

    async def test_classifier_failure_propagates(self, wallet: str) -> None:
        service = GenerationService(BrokenClassifier(), ContentSynthesizer(None))
        with pytest.raises(IntentClassificationError, match="classifier offline"):
            await service.create_site_content("anything", wallet)

    async def test_classifier_error_is_not_rewrapped(self, wallet: str) -> None:
        class Refusing(FixedClassifier):
            def classify(self, query: str) -> list[ToolSpecification]:
                raise IntentClassificationError(query, "refused")

        service = GenerationService(Refusing([]), ContentSynthesizer(None))
        with pytest.raises(IntentClassificationError) as excinfo:
            await service.create_site_content("anything", wallet)
        assert excinfo.value.reason == "refused"


class TestCreateWorldContent:
    async def test_known_archetype_tools(self, offline_service: GenerationService, wallet: str) -> None:
        result = await offline_service.create_world_content(WorldArchetype.TRADE_EMPIRE, wallet)
        assert [t.title for t in result.tools] == ["Map Explorer", "Trade Post"]
        assert len({t.id for t in result.tools}) == 2
        assert result.title == "Trade Empire"
        assert result.description == offline_service.get_world("trade-empire").description

    async def test_plain_string_key(self, offline_service: GenerationService, wallet: str) -> None:
        result = await offline_service.create_world_content("space-colony", wallet)
        assert len(result.tools) == 3
        assert result.tools[0].config == {"worldType": "space-colony", "toolName": "resource-scanner"}

    async def test_unknown_archetype(self, offline_service: GenerationService, wallet: str) -> None:
        with pytest.raises(UnknownWorldError, match="Unknown world archetype 'atlantis'"):
            await offline_service.create_world_content("atlantis", wallet)

    async def test_unknown_archetype_is_key_error(self, offline_service: GenerationService) -> None:
        with pytest.raises(KeyError):
            offline_service.get_world("atlantis")

    async def test_custom_catalog(self, wallet: str) -> None:
        worlds = MappingProxyType(
            {
                "harbor": WorldDefinition(
                    name="Harbor",
                    emoji="~",
                    base_value=100,
                    description="Ships",
                    educational_goal="Buoyancy",
                    tools=("map-explorer", "trade-post"),
                )
            }
        )
        service, _ = _service([], worlds=worlds)
        result = await service.create_world_content("harbor", wallet)
        assert [t.title for t in result.tools] == ["Map Explorer", "Trade Post"]
        assert "Buoyancy" in result.content

    async def test_does_not_classify(self, wallet: str) -> None:
        service, classifier = _service([])
        await service.create_world_content("music-realm", wallet)
        assert classifier.queries == []


class TestCreatePageContent:
    async def test_page_has_no_description(
        self, sample_specs: list[ToolSpecification], wallet: str
    ) -> None:
        service, classifier = _service(sample_specs)
        result = await service.create_page_content("personal finance", "refinancing", wallet)
        assert classifier.queries == ["refinancing"]
        assert not hasattr(result, "description")
        assert result.title == "refinancing"
        assert len(result.tools) == 3

    async def test_generated_page(self, wallet: str) -> None:
        backend = StubBackend('{"title": "Refinancing 101", "content": "## When to refinance"}')
        service, _ = _service([], backend)
        result = await service.create_page_content("personal finance", "refinancing", wallet)
        assert result.title == "Refinancing 101"
        assert result.tools == []
        assert "personal finance" in backend.calls[0]["prompt"]


class TestBuildGenerationService:
    def test_offline_without_api_key(self) -> None:
        service = build_generation_service(Settings(llm_api_key=None))
        assert service.synthesizer.backend is None

    async def test_with_api_key(self) -> None:
        service = build_generation_service(Settings(llm_api_key="sk-test"))
        assert service.synthesizer.backend is not None
        assert service.synthesizer.backend.name == "openai-compatible"
        await service.synthesizer.backend.aclose()

    def test_keyword_classifier_is_used(self) -> None:
        settings = Settings(llm_api_key=None, classifier_max_tools=1)
        assert create_backend(settings) is None
        assert isinstance(build_generation_service(settings)._classifier, KeywordIntentClassifier)
