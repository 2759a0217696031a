"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from calorie_tracker.adapters.chat_completions_client import (
    HttpxChatCompletionsClient,
)
from calorie_tracker.adapters.supabase_kv_store import SupabaseKeyValueStore
from calorie_tracker.config import Settings
from calorie_tracker.services.debounce import SupersedingAnalyzer
from calorie_tracker.services.food_matcher import FoodMatcher
from calorie_tracker.services.key_value_store import (
    InMemoryKeyValueStore,
    KeyValueStore,
)
from calorie_tracker.services.nutrition import NutritionAnalysisService
from calorie_tracker.services.providers import (
    OPENROUTER_HEADERS,
    NutritionProvider,
    OpenRouterProvider,
    PerplexityProvider,
)
from calorie_tracker.services.request_queue import RequestQueue
from calorie_tracker.services.response_cache import ResponseCache


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    key_value_store: KeyValueStore
    food_matcher: FoodMatcher
    response_cache: ResponseCache
    request_queue: RequestQueue
    provider: NutritionProvider
    analysis_service: NutritionAnalysisService
    superseding_analyzer: SupersedingAnalyzer
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    provider_config = resolved_settings.provider_config()

    key_value_store: KeyValueStore
    if resolved_settings.uses_supabase():
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        key_value_store = SupabaseKeyValueStore(supabase_client)
    else:
        key_value_store = InMemoryKeyValueStore()

    chat_client = HttpxChatCompletionsClient.create_client(
        api_key=provider_config.api_key,
        base_url=provider_config.base_url,
        timeout_seconds=resolved_settings.request_timeout_seconds,
        extra_headers=(
            OPENROUTER_HEADERS if provider_config.provider == "openrouter" else None
        ),
    )
    provider: NutritionProvider
    if provider_config.provider == "openrouter":
        provider = OpenRouterProvider(
            client=chat_client,
            model=provider_config.model,
            debug=resolved_settings.debug,
        )
    else:
        provider = PerplexityProvider(
            client=chat_client,
            model=provider_config.model,
            debug=resolved_settings.debug,
        )

    food_matcher = FoodMatcher()
    response_cache = ResponseCache(
        store=key_value_store,
        ttl=timedelta(days=resolved_settings.cache_ttl_days),
    )
    # One queue per process: every outbound AI call goes through it.
    request_queue = RequestQueue(
        min_delay_seconds=resolved_settings.request_min_delay_seconds
    )
    analysis_service = NutritionAnalysisService(
        matcher=food_matcher,
        response_cache=response_cache,
        request_queue=request_queue,
        provider=provider,
        cached_result_delay_seconds=resolved_settings.cached_result_delay_seconds,
        max_retries=resolved_settings.retry_max_attempts,
        retry_base_delay_seconds=resolved_settings.retry_base_delay_seconds,
        debug=resolved_settings.debug,
    )
    superseding_analyzer = SupersedingAnalyzer(
        service=analysis_service,
        debounce_seconds=resolved_settings.debounce_seconds,
    )

    async def close_resources() -> None:
        await chat_client.close()

    return AppContainer(
        settings=resolved_settings,
        key_value_store=key_value_store,
        food_matcher=food_matcher,
        response_cache=response_cache,
        request_queue=request_queue,
        provider=provider,
        analysis_service=analysis_service,
        superseding_analyzer=superseding_analyzer,
        close_resources=close_resources,
    )
