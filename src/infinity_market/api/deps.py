"""Dependency injection for FastAPI: the GenerationService singleton."""

from __future__ import annotations

from infinity_market.service.generation import GenerationService

_generation_service: GenerationService | None = None


def init_generation_service(service: GenerationService) -> None:
    """Set the global GenerationService (called at app startup)."""
    global _generation_service  # noqa: PLW0603
    _generation_service = service


def get_generation_service() -> GenerationService:
    """FastAPI ``Depends`` provider for GenerationService."""
    if _generation_service is None:
        raise RuntimeError(
            "GenerationService not initialised; call init_generation_service() first"
        )
    return _generation_service


def reset_generation_service() -> None:
    """Clear the global GenerationService (for tests)."""
    global _generation_service  # noqa: PLW0603
    _generation_service = None
