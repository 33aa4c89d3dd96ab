"""Build the configured generative backend, if any."""

from __future__ import annotations

import logging

from infinity_market.backend.base import TextBackend
from infinity_market.backend.openai_compat import OpenAICompatibleBackend
from infinity_market.settings import Settings

logger = logging.getLogger("infinity_market.backend")


def create_backend(settings: Settings) -> TextBackend | None:
    """Return a backend for *settings*, or ``None`` when no API key is set.

    ``None`` means generation always serves the offline template content.
    """
    if not settings.llm_api_key:
        logger.info("No LLM API key configured; serving offline template content")
        return None
    logger.info("Using generative backend at %s (model=%s)", settings.llm_base_url, settings.llm_model)
    return OpenAICompatibleBackend(
        settings.llm_base_url,
        settings.llm_api_key,
        timeout_seconds=settings.llm_timeout_seconds,
    )
