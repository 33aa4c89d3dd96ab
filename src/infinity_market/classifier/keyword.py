"""Deterministic keyword classifier used when no smarter classifier is wired in."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from infinity_market.classifier.base import IntentClassifier
from infinity_market.models.website import ToolSpecification, ToolType


@dataclass(frozen=True)
class KeywordRule:
    """Emits one tool specification when any keyword occurs in the query."""

    tool_type: ToolType
    keywords: tuple[str, ...]
    title: str
    description: str
    config: dict[str, Any] = field(default_factory=dict)

    def matches(self, text: str) -> bool:
        return bool(self.keywords) and _keyword_pattern(self.keywords).search(text) is not None


@lru_cache(maxsize=64)
def _keyword_pattern(keywords: tuple[str, ...]) -> re.Pattern[str]:
    """Whole-word match for any keyword, allowing simple plural/verb suffixes."""
    alternatives = "|".join(re.escape(k) for k in keywords)
    return re.compile(rf"\b(?:{alternatives})(?:s|es|ing|ed)?\b")


# Order matters: earlier rules win when the tool cap is reached.
DEFAULT_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        ToolType.CALCULATOR,
        ("calculate", "calculator", "budget", "cost", "price", "loan", "interest", "mortgage"),
        "Calculator",
        "Run the numbers for {topic}",
        {"precision": 2},
    ),
    KeywordRule(
        ToolType.CONVERTER,
        ("convert", "conversion", "unit", "currency", "exchange rate"),
        "Converter",
        "Convert values related to {topic}",
    ),
    KeywordRule(
        ToolType.CHART,
        ("chart", "graph", "trend", "statistics", "stats", "growth", "analytics"),
        "Trend Chart",
        "Visualize data about {topic}",
        {"chartType": "line"},
    ),
    KeywordRule(
        ToolType.DATA_TABLE,
        ("table", "compare", "comparison", "dataset", "spreadsheet"),
        "Data Table",
        "Compare facts about {topic} side by side",
    ),
    KeywordRule(
        ToolType.QUIZ,
        ("quiz", "test", "exam", "trivia", "learn", "study"),
        "Knowledge Quiz",
        "Check what you know about {topic}",
        {"questionCount": 5},
    ),
    KeywordRule(
        ToolType.FLASHCARDS,
        ("flashcard", "memorize", "vocabulary", "language"),
        "Flashcards",
        "Memorize key terms of {topic}",
    ),
    KeywordRule(
        ToolType.TIMELINE,
        ("history", "timeline", "era", "century", "evolution"),
        "Timeline",
        "Key moments in {topic}",
    ),
    KeywordRule(
        ToolType.MAP,
        ("map", "travel", "city", "country", "geography", "route", "location"),
        "Interactive Map",
        "Explore places connected to {topic}",
        {"zoom": 3},
    ),
    KeywordRule(
        ToolType.CALENDAR,
        ("schedule", "calendar", "event", "plan", "itinerary"),
        "Calendar",
        "Plan dates around {topic}",
    ),
    KeywordRule(
        ToolType.CHECKLIST,
        ("checklist", "todo", "to-do", "steps", "guide", "how to"),
        "Checklist",
        "Step-by-step checklist for {topic}",
    ),
    KeywordRule(
        ToolType.FORM,
        ("signup", "sign up", "register", "contact", "form", "survey"),
        "Sign-up Form",
        "Collect responses about {topic}",
    ),
    KeywordRule(
        ToolType.POLL,
        ("poll", "vote", "opinion"),
        "Poll",
        "Ask visitors what they think about {topic}",
    ),
    KeywordRule(
        ToolType.SIMULATOR,
        ("simulate", "simulation", "physics", "experiment", "model"),
        "Simulator",
        "Experiment with {topic}",
    ),
    KeywordRule(
        ToolType.CODE_PLAYGROUND,
        ("code", "coding", "programming", "python", "javascript", "algorithm"),
        "Code Playground",
        "Write and run code about {topic}",
        {"language": "python"},
    ),
    KeywordRule(
        ToolType.GLOSSARY,
        ("glossary", "definition", "terms", "dictionary"),
        "Glossary",
        "Definitions for {topic}",
    ),
)

_FALLBACK_RULE = KeywordRule(
    ToolType.CONTENT_HUB,
    (),
    "Resource Hub",
    "Curated resources about {topic}",
)

_WHITESPACE = re.compile(r"\s+")


def _normalize(query: str) -> str:
    return _WHITESPACE.sub(" ", query.strip().lower())


class KeywordIntentClassifier(IntentClassifier):
    """Rule-based classifier: first matching rules win, one tool per type.

    Never raises; a query matching nothing yields a single content hub.
    """

    def __init__(
        self, max_tools: int = 3, rules: tuple[KeywordRule, ...] = DEFAULT_RULES
    ) -> None:
        if max_tools < 1:
            raise ValueError("max_tools must be at least 1")
        self._max_tools = max_tools
        self._rules = rules

    def classify(self, query: str) -> list[ToolSpecification]:
        text = _normalize(query)
        topic = query.strip() or "this topic"
        matched = [rule for rule in self._rules if rule.matches(text)]
        if not matched:
            matched = [_FALLBACK_RULE]

        specs: list[ToolSpecification] = []
        seen: set[str] = set()
        for rule in matched:
            if rule.tool_type in seen:
                continue
            seen.add(rule.tool_type)
            specs.append(
                ToolSpecification(
                    type=rule.tool_type.value,
                    title=rule.title,
                    description=rule.description.format(topic=topic),
                    config=dict(rule.config),
                )
            )
            if len(specs) == self._max_tools:
                break
        return specs
