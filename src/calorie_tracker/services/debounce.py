"""Debounced analysis where newer requests supersede older ones."""

import asyncio
from collections import defaultdict
from dataclasses import dataclass, field

from calorie_tracker.domain.nutrition import NutritionEstimate
from calorie_tracker.services.nutrition import NutritionAnalysisService


@dataclass
class SupersedingAnalyzer:
    """Debounce analysis per slot and drop results of superseded requests.

    Each call for a slot takes a new sequence number. A call superseded while
    debouncing never reaches the service; a call superseded after that still
    runs (queued work is not cancellable) but its result is discarded.
    """

    service: NutritionAnalysisService
    debounce_seconds: float = 1.5
    _sequence: defaultdict[str, int] = field(
        default_factory=lambda: defaultdict(int), init=False, repr=False
    )

    async def analyze(self, slot: str, meal_text: str) -> NutritionEstimate | None:
        """Return the estimate, or None if a newer request took the slot."""
        self._sequence[slot] += 1
        ticket = self._sequence[slot]
        await asyncio.sleep(self.debounce_seconds)
        if self._is_stale(slot, ticket):
            return None
        try:
            result = await self.service.analyze(meal_text)
        except Exception:
            if self._is_stale(slot, ticket):
                return None
            raise
        if self._is_stale(slot, ticket):
            return None
        return result

    def _is_stale(self, slot: str, ticket: int) -> bool:
        return self._sequence[slot] != ticket
