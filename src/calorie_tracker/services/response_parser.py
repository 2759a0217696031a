"""Prompt and parsing for AI nutrition responses.

Parsing runs in two explicit stages: a strict JSON reading of the model
output, then a loose regex scan of free text when the JSON stage yields
nothing usable.
"""

import json
import logging
import math
import re
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    StrictFloat,
    StrictInt,
    ValidationError,
    field_validator,
)

from calorie_tracker.domain.errors import AnalysisError, ErrorCode
from calorie_tracker.domain.nutrition import NutritionEstimate

NUTRITION_PROMPT = """You are a nutrition analysis assistant. When given a meal \
description, analyze and return the nutritional information.

CRITICAL: You MUST respond with ONLY a valid JSON object, no other text before or \
after. Use this exact format:

{
  "calories": 450,
  "protein": 25,
  "carbs": 35,
  "fat": 15,
  "explanation": "A detailed explanation of how you calculated these values, \
including sources and assumptions",
  "confidence": 0.85,
  "sources": ["USDA FoodData Central", "nutrition database"]
}

Rules:
- All numeric values must be numbers (not strings)
- calories, protein, carbs, fat are REQUIRED
- explanation should include your reasoning and sources
- confidence is a number between 0 and 1 (e.g., 0.85 for 85% confident)
- sources is an array of strings naming your data sources
- If the description is vague, make reasonable assumptions (standard portion \
sizes) and explain them
- Return ONLY the JSON object, no markdown, no code blocks, no extra text"""

DEFAULT_EXPLANATION = "No explanation provided"
DEFAULT_CONFIDENCE = 0.8
TEXT_FALLBACK_CONFIDENCE = 0.6
TEXT_FALLBACK_EXPLANATION_CHARS = 500
TEXT_FALLBACK_DEFAULTS = {"protein": 20, "carbs": 30, "fat": 10}

_CODE_FENCE = re.compile(r"```(?:json)?\s*\n?(.*?)\n?```", re.DOTALL)
_CALORIES = re.compile(r"(\d+)\s*(?:cal|kcal|calories)", re.IGNORECASE)
_PROTEIN = re.compile(r"(\d+)\s*(?:g|grams?)?\s*(?:of\s+)?protein", re.IGNORECASE)
_CARBS = re.compile(r"(\d+)\s*(?:g|grams?)?\s*(?:of\s+)?carb", re.IGNORECASE)
_FAT = re.compile(r"(\d+)\s*(?:g|grams?)?\s*(?:of\s+)?fat", re.IGNORECASE)

_logger = logging.getLogger(__name__)


def _finite_non_negative(value: float) -> float:
    try:
        number = float(value)
    except OverflowError:
        raise ValueError("macro value is out of range") from None
    if not math.isfinite(number) or number < 0:
        raise ValueError("macro values must be finite and non-negative")
    return value


Macro = Annotated[StrictInt | StrictFloat, AfterValidator(_finite_non_negative)]


class ProviderNutrition(BaseModel):
    """Nutrition payload as returned by the model."""

    model_config = ConfigDict(extra="ignore")

    calories: Macro
    protein: Macro
    carbs: Macro
    fat: Macro
    explanation: str | None = None
    confidence: float | None = None
    sources: list[str] | None = None

    @field_validator("explanation", mode="before")
    @classmethod
    def text_only(cls, value: object) -> object:
        return value if isinstance(value, str) else None

    @field_validator("confidence", mode="before")
    @classmethod
    def bounded_confidence(cls, value: object) -> object:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return None
        try:
            number = float(value)
        except OverflowError:
            return None
        if not math.isfinite(number):
            return None
        return min(max(number, 0.0), 1.0)

    @field_validator("sources", mode="before")
    @classmethod
    def string_sources(cls, value: object) -> object:
        if not isinstance(value, list):
            return None
        return [item for item in value if isinstance(item, str)]


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, halves away from zero for positives."""
    return math.floor(value + 0.5)


def strip_code_fence(content: str) -> str:
    """Return the body of a fenced code block if the content contains one."""
    cleaned = content.strip()
    match = _CODE_FENCE.search(cleaned)
    if match:
        return match.group(1).strip()
    return cleaned


def parse_json_estimate(content: str) -> NutritionEstimate | None:
    """Read a strict JSON nutrition object, or return None if unusable."""
    cleaned = strip_code_fence(content)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError:
        return None
    if not isinstance(payload, dict):
        return None
    try:
        parsed = ProviderNutrition.model_validate(payload)
    except ValidationError as exc:
        _logger.debug("AI response failed validation: %s", exc)
        return None
    return NutritionEstimate(
        calories=round_half_up(parsed.calories),
        protein=round_half_up(parsed.protein),
        carbs=round_half_up(parsed.carbs),
        fat=round_half_up(parsed.fat),
        explanation=parsed.explanation or DEFAULT_EXPLANATION,
        confidence=parsed.confidence or DEFAULT_CONFIDENCE,
        sources=tuple(parsed.sources or ()),
    )


def parse_text_estimate(text: str) -> NutritionEstimate | None:
    """Pull numbers out of free text; None when no calorie figure is present."""
    calories = _CALORIES.search(text)
    if calories is None:
        return None
    protein = _PROTEIN.search(text)
    carbs = _CARBS.search(text)
    fat = _FAT.search(text)
    return NutritionEstimate(
        calories=int(calories.group(1)),
        protein=(
            int(protein.group(1)) if protein else TEXT_FALLBACK_DEFAULTS["protein"]
        ),
        carbs=int(carbs.group(1)) if carbs else TEXT_FALLBACK_DEFAULTS["carbs"],
        fat=int(fat.group(1)) if fat else TEXT_FALLBACK_DEFAULTS["fat"],
        explanation=text[:TEXT_FALLBACK_EXPLANATION_CHARS],
        confidence=TEXT_FALLBACK_CONFIDENCE,
        sources=(),
    )


def parse_nutrition_response(content: str) -> NutritionEstimate:
    """Parse model output as JSON, falling back to text extraction."""
    estimate = parse_json_estimate(content)
    if estimate is not None:
        return estimate
    _logger.info("JSON parse failed, falling back to text extraction")
    estimate = parse_text_estimate(content)
    if estimate is not None:
        return estimate
    raise AnalysisError(
        "Could not extract calorie information from AI response",
        ErrorCode.PARSE_ERROR,
        retryable=False,
    )
