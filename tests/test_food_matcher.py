"""Tests for static table fuzzy matching."""

from calorie_tracker.domain.nutrition import StaticEntry
from calorie_tracker.services.food_matcher import (
    FoodMatcher,
    meaningful_tokens,
    normalize_text,
)
from calorie_tracker.services.food_table import STATIC_FOODS, STATIC_SOURCE


def _entry(calories: int) -> StaticEntry:
    return StaticEntry(
        calories=calories, protein=1, carbs=2, fat=3, explanation="test entry"
    )


def test_normalize_text_collapses_case_and_whitespace() -> None:
    assert normalize_text("  Grilled \t Cheese\n ") == "grilled cheese"


def test_meaningful_tokens_drop_stop_words_and_short_words() -> None:
    assert meaningful_tokens("a large bowl of rice with 2 eggs") == [
        "bowl",
        "rice",
        "eggs",
    ]


def test_exact_match_returns_high_confidence() -> None:
    result = FoodMatcher().resolve("apple")

    assert result is not None
    assert (result.calories, result.protein, result.carbs, result.fat) == (
        95,
        0,
        25,
        0,
    )
    assert result.confidence == 0.95
    assert result.sources == (STATIC_SOURCE,)


def test_exact_match_ignores_case_and_spacing() -> None:
    result = FoodMatcher().resolve("  Chicken   BREAST ")

    assert result is not None
    assert result.calories == STATIC_FOODS["chicken breast"].calories
    assert result.confidence == 0.95


def test_token_match_returns_fuzzy_confidence() -> None:
    matcher = FoodMatcher()

    assert matcher.match_key("one large banana") == "banana"
    result = matcher.resolve("one large banana")
    assert result is not None
    assert result.confidence == 0.85


def test_token_match_uses_substring_containment() -> None:
    matcher = FoodMatcher()

    assert matcher.match_key("two scrambled eggs") == "scrambled eggs"
    assert matcher.match_key("grilled cheese sandwich") == "grilled cheese"


def test_token_match_prefers_first_key_in_table_order() -> None:
    matcher = FoodMatcher()

    # "watermelon" is listed before "water"; "cheese" before "cake".
    assert matcher.match_key("watermelons") == "watermelon"
    assert matcher.match_key("cheesecake") == "cheese"


def test_token_match_follows_token_order() -> None:
    assert FoodMatcher().match_key("pizza and apple") == "pizza"


def test_phrase_match_scans_longest_phrase_first() -> None:
    matcher = FoodMatcher(
        table={
            "red beans": _entry(100),
            "red beans rice": _entry(200),
        }
    )

    assert matcher._match_phrase(["spicy", "red", "beans", "rice"]) == (
        "red beans rice"
    )
    assert matcher._match_phrase(["red", "beans", "soup"]) == "red beans"
    assert matcher._match_phrase(["soup"]) is None


def test_no_match_returns_none() -> None:
    matcher = FoodMatcher()

    assert matcher.match_key("zqxv blorp") is None
    assert matcher.resolve("zqxv blorp") is None


def test_custom_table_and_known_foods() -> None:
    matcher = FoodMatcher(table={"dal": _entry(230), "roti": _entry(120)})

    assert matcher.known_foods() == ["dal", "roti"]
    assert matcher.is_known(" ROTI ")
    assert not matcher.is_known("butter roti")
    result = matcher.resolve("butter roti")
    assert result is not None
    assert result.calories == 120
    assert result.confidence == 0.85


def test_static_table_is_read_only() -> None:
    try:
        STATIC_FOODS["new food"] = _entry(1)  # type: ignore[index]
    except TypeError:
        pass
    else:
        raise AssertionError("static table accepted a write")
    assert "new food" not in STATIC_FOODS
