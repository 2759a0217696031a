"""Fuzzy lookup of meal descriptions in the static food table."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from calorie_tracker.domain.nutrition import NutritionEstimate, StaticEntry
from calorie_tracker.services.food_table import STATIC_FOODS, STATIC_SOURCE

EXACT_CONFIDENCE = 0.95
FUZZY_CONFIDENCE = 0.85

STOP_WORDS = frozenset(
    {
        "a",
        "an",
        "the",
        "with",
        "and",
        "or",
        "of",
        "in",
        "on",
        "large",
        "small",
        "medium",
        "1",
        "2",
        "3",
        "one",
        "two",
        "three",
    }
)

_MIN_TOKEN_LENGTH = 3
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase, trim and collapse whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", text.lower().strip())


def meaningful_tokens(normalized: str) -> list[str]:
    """Split normalized text and drop stop words and very short words."""
    return [
        word
        for word in normalized.split(" ")
        if word not in STOP_WORDS and len(word) >= _MIN_TOKEN_LENGTH
    ]


@dataclass
class FoodMatcher:
    """Resolve free text to static table entries."""

    table: Mapping[str, StaticEntry] = field(default_factory=lambda: STATIC_FOODS)
    source: str = STATIC_SOURCE

    def match_key(self, text: str) -> str | None:
        """Return the matching table key, trying exact, token, then phrase."""
        normalized = normalize_text(text)
        if normalized in self.table:
            return normalized
        tokens = meaningful_tokens(normalized)
        return self._match_token(tokens) or self._match_phrase(tokens)

    def resolve(self, text: str) -> NutritionEstimate | None:
        """Return a static estimate for the text, if any key matches."""
        key = self.match_key(text)
        if key is None:
            return None
        confidence = (
            EXACT_CONFIDENCE if key == normalize_text(text) else FUZZY_CONFIDENCE
        )
        return NutritionEstimate.from_static(self.table[key], confidence, self.source)

    def is_known(self, text: str) -> bool:
        """Return True when the normalized text is itself a table key."""
        return normalize_text(text) in self.table

    def known_foods(self) -> list[str]:
        """Return all table keys in iteration order."""
        return list(self.table)

    def _match_token(self, tokens: list[str]) -> str | None:
        for token in tokens:
            if token in self.table:
                return token
            for key in self.table:
                if token in key or key in token:
                    return key
        return None

    def _match_phrase(self, tokens: list[str]) -> str | None:
        for length in range(len(tokens), 0, -1):
            for start in range(len(tokens) - length + 1):
                phrase = " ".join(tokens[start : start + length])
                if phrase in self.table:
                    return phrase
        return None
