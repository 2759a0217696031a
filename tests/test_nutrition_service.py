"""Tests for the nutrition analysis pipeline."""

import asyncio
from dataclasses import dataclass

import pytest

from calorie_tracker.domain.errors import AnalysisError, ErrorCode
from calorie_tracker.services.food_matcher import FoodMatcher
from calorie_tracker.services.key_value_store import InMemoryKeyValueStore
from calorie_tracker.services.nutrition import NutritionAnalysisService
from calorie_tracker.services.providers import PerplexityProvider
from calorie_tracker.services.request_queue import RequestQueue
from calorie_tracker.services.response_cache import CACHE_SOURCE, ResponseCache
from tests.conftest import (
    FailingKeyValueStore,
    FakeChatCompletionsClient,
    ScriptedProvider,
    chat_response,
    http_status_error,
    make_estimate,
)


@dataclass
class CountingRequestQueue(RequestQueue):
    """Request queue that counts submitted operations."""

    submitted: int = 0

    async def enqueue(self, operation):  # type: ignore[no-untyped-def]
        self.submitted += 1
        return await super().enqueue(operation)


def _service(
    provider: ScriptedProvider | PerplexityProvider,
    cache: ResponseCache | None = None,
) -> tuple[NutritionAnalysisService, CountingRequestQueue]:
    queue = CountingRequestQueue(min_delay_seconds=0)
    service = NutritionAnalysisService(
        matcher=FoodMatcher(),
        response_cache=cache or ResponseCache(store=InMemoryKeyValueStore()),
        request_queue=queue,
        provider=provider,
        cached_result_delay_seconds=0,
        retry_base_delay_seconds=0,
    )
    return service, queue


def test_static_food_never_reaches_queue() -> None:
    provider = ScriptedProvider()
    service, queue = _service(provider)

    result = asyncio.run(service.analyze("apple"))

    assert (result.calories, result.protein, result.carbs, result.fat) == (
        95,
        0,
        25,
        0,
    )
    assert result.confidence == 0.95
    assert queue.submitted == 0
    assert provider.calls == []


def test_fuzzy_static_match_has_lower_confidence() -> None:
    provider = ScriptedProvider()
    service, queue = _service(provider)

    result = asyncio.run(service.analyze("A Large Banana"))

    assert result.calories == 105
    assert result.confidence == 0.85
    assert queue.submitted == 0


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_empty_input_is_rejected(text: str) -> None:
    provider = ScriptedProvider()
    service, queue = _service(provider)

    with pytest.raises(AnalysisError) as excinfo:
        asyncio.run(service.analyze(text))

    assert excinfo.value.code is ErrorCode.EMPTY_INPUT
    assert excinfo.value.retryable is False
    assert queue.submitted == 0


def test_cache_miss_queues_one_call_and_caches_result() -> None:
    provider = ScriptedProvider(outcomes=[make_estimate(confidence=0.75)])
    service, queue = _service(provider)

    first = asyncio.run(service.analyze("Lamb vindaloo"))
    second = asyncio.run(service.analyze("lamb  VINDALOO "))

    assert queue.submitted == 1
    assert provider.calls == ["Lamb vindaloo"]
    assert first.confidence == 0.75
    assert (second.calories, second.protein, second.carbs, second.fat) == (
        first.calories,
        first.protein,
        first.carbs,
        first.fat,
    )
    assert second.confidence == 0.9
    assert CACHE_SOURCE in second.sources


def test_cached_response_skips_provider(response_cache: ResponseCache) -> None:
    asyncio.run(response_cache.put("nasi lemak", make_estimate(calories=480)))
    provider = ScriptedProvider()
    service, queue = _service(provider, response_cache)

    result = asyncio.run(service.analyze("Nasi Lemak"))

    assert result.calories == 480
    assert queue.submitted == 0
    assert provider.calls == []


def test_server_errors_are_retried_inside_one_queued_call() -> None:
    provider = ScriptedProvider(
        outcomes=[
            http_status_error(503),
            http_status_error(503),
            make_estimate(calories=700),
        ]
    )
    service, queue = _service(provider)

    result = asyncio.run(service.analyze("bibimbap"))

    assert result.calories == 700
    assert len(provider.calls) == 3
    assert queue.submitted == 1


def test_exhausted_retries_raise_server_error_without_caching(
    response_cache: ResponseCache,
) -> None:
    provider = ScriptedProvider(outcomes=[http_status_error(500)] * 3)
    service, _queue = _service(provider, response_cache)

    with pytest.raises(AnalysisError) as excinfo:
        asyncio.run(service.analyze("bibimbap"))

    assert excinfo.value.code is ErrorCode.SERVER_ERROR
    assert excinfo.value.retryable is True
    assert len(provider.calls) == 3
    assert asyncio.run(response_cache.get("bibimbap")) is None


def test_auth_error_is_not_retried() -> None:
    provider = ScriptedProvider(outcomes=[http_status_error(401)])
    service, _queue = _service(provider)

    with pytest.raises(AnalysisError) as excinfo:
        asyncio.run(service.analyze("bibimbap"))

    assert excinfo.value.code is ErrorCode.AUTH_ERROR
    assert len(provider.calls) == 1


def test_provider_analysis_errors_pass_through() -> None:
    provider = ScriptedProvider(
        outcomes=[
            AnalysisError(
                "Could not extract calorie information from AI response",
                ErrorCode.PARSE_ERROR,
                retryable=False,
            )
        ]
    )
    service, _queue = _service(provider)

    with pytest.raises(AnalysisError) as excinfo:
        asyncio.run(service.analyze("mystery stew"))

    assert excinfo.value.code is ErrorCode.PARSE_ERROR


def test_broken_cache_does_not_fail_analysis() -> None:
    provider = ScriptedProvider(outcomes=[make_estimate(calories=333)])
    service, _queue = _service(provider, ResponseCache(store=FailingKeyValueStore()))

    result = asyncio.run(service.analyze("arepa"))

    assert result.calories == 333


def test_concurrent_misses_each_queue_one_call() -> None:
    provider = ScriptedProvider()
    service, queue = _service(provider)
    texts = ["pho ga", "banh mi", "bun cha"]

    async def run() -> None:
        await asyncio.gather(*(service.analyze(text) for text in texts))

    asyncio.run(run())

    assert queue.submitted == 3
    assert sorted(provider.calls) == sorted(texts)


def test_text_fallback_through_provider_path() -> None:
    client = FakeChatCompletionsClient(
        response=chat_response("This meal has about 450 calories and 30g protein")
    )
    provider = PerplexityProvider(client=client, model="sonar-pro")
    service, queue = _service(provider)  # type: ignore[arg-type]

    result = asyncio.run(service.analyze("leftover casserole"))

    assert (result.calories, result.protein, result.carbs, result.fat) == (
        450,
        30,
        30,
        10,
    )
    assert result.confidence == 0.6
    assert queue.submitted == 1
