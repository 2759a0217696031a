"""Nutrition analysis pipeline: static table, response cache, then AI."""

import asyncio
import logging
from dataclasses import dataclass

from calorie_tracker.domain.errors import AnalysisError, ErrorCode
from calorie_tracker.domain.nutrition import NutritionEstimate
from calorie_tracker.services.errors import translate_error
from calorie_tracker.services.food_matcher import FoodMatcher
from calorie_tracker.services.providers import NutritionProvider
from calorie_tracker.services.request_queue import RequestQueue
from calorie_tracker.services.response_cache import ResponseCache
from calorie_tracker.services.retry import call_with_retry

_logger = logging.getLogger(__name__)


@dataclass
class NutritionAnalysisService:
    """Resolve meal text to a nutrition estimate through tiered lookups."""

    matcher: FoodMatcher
    response_cache: ResponseCache
    request_queue: RequestQueue
    provider: NutritionProvider
    cached_result_delay_seconds: float = 0.35
    max_retries: int = 2
    retry_base_delay_seconds: float = 1.0
    debug: bool = False

    async def analyze(self, meal_text: str) -> NutritionEstimate:
        """Return an estimate for the meal text.

        Lookups run in order: the static food table, the response cache, and
        finally a queued, retried provider call whose result is cached.
        Failures surface as ``AnalysisError``.
        """
        if not meal_text or not meal_text.strip():
            raise AnalysisError(
                "Meal text cannot be empty", ErrorCode.EMPTY_INPUT, retryable=False
            )

        static_result = self.matcher.resolve(meal_text)
        if static_result is not None:
            if self.debug:
                _logger.info("Static cache hit: %s", meal_text)
            await self._pace_cached_result()
            return static_result

        cached_result = await self.response_cache.get(meal_text)
        if cached_result is not None:
            if self.debug:
                _logger.info("API cache hit: %s", meal_text)
            await self._pace_cached_result()
            return cached_result

        if self.debug:
            _logger.info("Cache miss, queuing API request: %s", meal_text)
        try:
            result = await self.request_queue.enqueue(
                lambda: call_with_retry(
                    lambda: self.provider.analyze(meal_text),
                    max_retries=self.max_retries,
                    base_delay_seconds=self.retry_base_delay_seconds,
                )
            )
        except Exception as exc:
            error = translate_error(exc)
            _logger.warning("Nutrition analysis failed (code=%s): %s", error.code, exc)
            raise error from exc

        await self.response_cache.put(meal_text, result)
        return result

    async def _pace_cached_result(self) -> None:
        if self.cached_result_delay_seconds > 0:
            await asyncio.sleep(self.cached_result_delay_seconds)
