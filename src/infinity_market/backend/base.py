"""Generative text backend contract: submit a prompt, receive one text payload."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BackendError(Exception):
    """A generation request failed or produced an unusable response."""


class BackendUnavailableError(BackendError):
    """No generative backend is configured."""


class MalformedResponseError(BackendError):
    """The backend answered, but not with the JSON document that was asked for."""


class TextBackend(ABC):
    """Abstract base for generative text backends."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    async def complete(self, prompt: str, *, model: str, json_mode: bool = True) -> str:
        """Submit *prompt* and return the raw text reply.

        With *json_mode* the backend is asked to reply with a JSON document.
        Raises :class:`BackendError` on failure.
        """

    async def aclose(self) -> None:  # noqa: B027
        """Release network resources held by the backend."""
