"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx
import pytest

from calorie_tracker.adapters.chat_completions_client import ChatCompletionsClient
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.nutrition import NutritionEstimate
from calorie_tracker.services.debounce import SupersedingAnalyzer
from calorie_tracker.services.food_matcher import FoodMatcher
from calorie_tracker.services.key_value_store import InMemoryKeyValueStore
from calorie_tracker.services.nutrition import NutritionAnalysisService
from calorie_tracker.services.providers import NutritionProvider
from calorie_tracker.services.request_queue import RequestQueue
from calorie_tracker.services.response_cache import ResponseCache


def make_estimate(**overrides: object) -> NutritionEstimate:
    """Build an estimate with sensible defaults."""
    values: dict[str, object] = {
        "calories": 520,
        "protein": 32,
        "carbs": 48,
        "fat": 18,
        "explanation": "Chicken curry with rice, standard portion.",
        "confidence": 0.82,
        "sources": ("USDA FoodData Central",),
    }
    values.update(overrides)
    return NutritionEstimate(**values)  # type: ignore[arg-type]


def http_status_error(status_code: int) -> httpx.HTTPStatusError:
    """Build an httpx status error for the given status code."""
    request = httpx.Request("POST", "https://api.test/chat/completions")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(
        f"HTTP {status_code}", request=request, response=response
    )


def chat_response(content: str | None, **extra: object) -> dict[str, object]:
    """Build a chat completion response body."""
    return {
        "id": "chatcmpl-1",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
        **extra,
    }


@dataclass
class FrozenClock:
    """Controllable clock for cache expiry tests."""

    now: datetime = field(default_factory=lambda: datetime(2025, 1, 1, tzinfo=UTC))

    def __call__(self) -> datetime:
        return self.now


@dataclass
class FailingKeyValueStore:
    """Key-value store whose every operation fails."""

    def get(self, key: str) -> str | None:
        raise OSError("storage unavailable")

    def set(self, key: str, value: str) -> None:
        raise OSError("storage unavailable")

    def remove(self, key: str) -> None:
        raise OSError("storage unavailable")

    def list_keys(self) -> list[str]:
        raise OSError("storage unavailable")

    def remove_many(self, keys: list[str]) -> None:
        raise OSError("storage unavailable")


@dataclass
class FakeChatCompletionsClient(ChatCompletionsClient):
    """Fake chat client that records payloads and returns a fixed response."""

    response: dict[str, object] = field(
        default_factory=lambda: chat_response(
            '{"calories": 610, "protein": 28.4, "carbs": 70.5, "fat": 22, '
            '"explanation": "Pad thai with shrimp.", "confidence": 0.7, '
            '"sources": ["USDA FoodData Central"]}'
        )
    )
    payloads: list[dict[str, object]] = field(default_factory=list)

    async def create(self, payload: dict[str, object]) -> dict[str, object]:
        self.payloads.append(payload)
        return self.response


@dataclass
class ScriptedProvider(NutritionProvider):
    """Provider that plays back a script of results or exceptions."""

    outcomes: list[NutritionEstimate | Exception] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    on_call: Callable[[str], None] | None = None

    async def analyze(self, meal_text: str) -> NutritionEstimate:
        self.calls.append(meal_text)
        if self.on_call is not None:
            self.on_call(meal_text)
        outcome = self.outcomes.pop(0) if self.outcomes else make_estimate()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ai_provider="perplexity",
        perplexity_api_key="pplx-key",
        openrouter_api_key="or-key",
        admin_token="admin-token",
    )


@pytest.fixture
def provider() -> ScriptedProvider:
    return ScriptedProvider()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def response_cache(clock: FrozenClock) -> ResponseCache:
    return ResponseCache(store=InMemoryKeyValueStore(), clock=clock)


@pytest.fixture
def analysis_service(
    provider: ScriptedProvider, response_cache: ResponseCache
) -> NutritionAnalysisService:
    return NutritionAnalysisService(
        matcher=FoodMatcher(),
        response_cache=response_cache,
        request_queue=RequestQueue(min_delay_seconds=0),
        provider=provider,
        cached_result_delay_seconds=0,
        retry_base_delay_seconds=0,
    )


@pytest.fixture
def container(
    settings: Settings,
    provider: ScriptedProvider,
    response_cache: ResponseCache,
    analysis_service: NutritionAnalysisService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        key_value_store=response_cache.store,
        food_matcher=analysis_service.matcher,
        response_cache=response_cache,
        request_queue=analysis_service.request_queue,
        provider=provider,
        analysis_service=analysis_service,
        superseding_analyzer=SupersedingAnalyzer(
            service=analysis_service, debounce_seconds=0
        ),
        close_resources=close_resources,
    )
