"""AI providers that estimate nutrition for a meal description."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.adapters.chat_completions_client import ChatCompletionsClient
from calorie_tracker.domain.errors import AnalysisError, ErrorCode
from calorie_tracker.domain.nutrition import NutritionEstimate
from calorie_tracker.services.response_parser import (
    NUTRITION_PROMPT,
    parse_nutrition_response,
)

OPENROUTER_HEADERS = {
    "HTTP-Referer": "https://calorie-tracker-app.com",
    "X-Title": "Calorie Tracker",
}

_PERPLEXITY_RESEARCH_HINT = """.

Search for accurate nutrition data from reliable international sources including:
- WHO Global Food Composition Database
- USDA FoodData Central (USA)
- McCance and Widdowson (UK)
- Canadian Nutrient File (Canada)
- AUSNUT (Australia)
- EuroFIR (Europe)
- Indian Food Composition Database
- Regional nutrition databases when applicable

Prioritize region-appropriate sources for the food item. For example, use UK \
sources for British foods, Indian sources for Indian foods, etc."""

_logger = logging.getLogger(__name__)


class NutritionProvider(Protocol):
    """Interface for AI nutrition estimation."""

    async def analyze(self, meal_text: str) -> NutritionEstimate:
        """Return an estimate for the meal text."""


@dataclass
class OpenRouterProvider(NutritionProvider):
    """Provider backed by OpenRouter chat completions."""

    client: ChatCompletionsClient
    model: str
    temperature: float = 0.3
    max_tokens: int = 1024
    debug: bool = False

    async def analyze(self, meal_text: str) -> NutritionEstimate:
        """Request an estimate and parse the model output."""
        # Gemini models reject OpenAI's response_format parameter.
        is_gemini = "gemini" in self.model.lower()
        payload: dict[str, object] = {
            "model": self.model,
            "messages": _messages(_user_prompt(meal_text)),
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        if not is_gemini:
            payload["response_format"] = {"type": "json_object"}
        if self.debug:
            _logger.info(
                "OpenRouter request: model=%s response_format=%s",
                self.model,
                not is_gemini,
            )
        response = await self.client.create(payload)
        return parse_nutrition_response(_message_content(response))


@dataclass
class PerplexityProvider(NutritionProvider):
    """Provider backed by Perplexity Sonar with web citations."""

    client: ChatCompletionsClient
    model: str
    temperature: float = 0.3
    debug: bool = False

    async def analyze(self, meal_text: str) -> NutritionEstimate:
        """Request an estimate, filling empty sources from citations."""
        payload: dict[str, object] = {
            "model": self.model,
            "messages": _messages(
                _user_prompt(meal_text) + _PERPLEXITY_RESEARCH_HINT
            ),
            "temperature": self.temperature,
            "return_citations": True,
        }
        if self.debug:
            _logger.info("Perplexity request: model=%s", self.model)
        response = await self.client.create(payload)
        estimate = parse_nutrition_response(_message_content(response))
        raw_citations = response.get("citations")
        citations = (
            [citation for citation in raw_citations if isinstance(citation, str)]
            if isinstance(raw_citations, list)
            else []
        )
        if citations and not estimate.sources:
            return estimate.with_sources(tuple(citations))
        return estimate


def _user_prompt(meal_text: str) -> str:
    return f'Analyze the nutritional content of: "{meal_text}"'


def _messages(user_content: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": NUTRITION_PROMPT},
        {"role": "user", "content": user_content},
    ]


def _message_content(response: dict[str, object]) -> str:
    """Return the first choice's message text or raise EMPTY_RESPONSE."""
    choices = response.get("choices") if isinstance(response, dict) else None
    content = None
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        message = choices[0].get("message") or {}
        if isinstance(message, dict):
            content = message.get("content")
    if not isinstance(content, str) or not content:
        raise AnalysisError(
            "No response from AI", ErrorCode.EMPTY_RESPONSE, retryable=True
        )
    return content
