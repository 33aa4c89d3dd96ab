"""Intent classification: turning a free-text request into tool specifications."""

from infinity_market.classifier.base import IntentClassificationError, IntentClassifier
from infinity_market.classifier.keyword import KeywordIntentClassifier

__all__ = [
    "IntentClassificationError",
    "IntentClassifier",
    "KeywordIntentClassifier",
]
