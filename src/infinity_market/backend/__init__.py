"""Generative text backends for content synthesis."""

from infinity_market.backend.base import (
    BackendError,
    BackendUnavailableError,
    MalformedResponseError,
    TextBackend,
)
from infinity_market.backend.factory import create_backend
from infinity_market.backend.openai_compat import OpenAICompatibleBackend

__all__ = [
    "BackendError",
    "BackendUnavailableError",
    "MalformedResponseError",
    "OpenAICompatibleBackend",
    "TextBackend",
    "create_backend",
]
