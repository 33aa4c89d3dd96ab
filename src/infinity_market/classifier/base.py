"""Intent classifier contract: free text in, ordered tool specifications out."""

from __future__ import annotations

from abc import ABC, abstractmethod

from infinity_market.models.website import ToolSpecification


class IntentClassificationError(Exception):
    """Raised when a classifier cannot turn a query into tool specifications."""

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        self.reason = reason
        super().__init__(f"Intent classification failed for {query!r}: {reason}")


class IntentClassifier(ABC):
    """Maps a user's request to the tools a website or page should embed."""

    @abstractmethod
    def classify(self, query: str) -> list[ToolSpecification]:
        """Return tool specifications for *query*, most relevant first."""
