"""Time-boxed cache of AI nutrition responses.

Entries live in a key-value store as JSON documents keyed by the normalized
meal text. Storage failures are logged and treated as cache misses so that a
broken store never fails an analysis.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from pydantic import BaseModel

from calorie_tracker.domain.nutrition import CacheStats, NutritionEstimate
from calorie_tracker.services.food_matcher import normalize_text
from calorie_tracker.services.key_value_store import KeyValueStore

CACHE_PREFIX = "api_cache_"
CACHE_SOURCE = "Local Cache (Recent API Response)"
CACHE_SOURCE_MARKER = "Local Cache"
CACHED_MIN_CONFIDENCE = 0.9
DEFAULT_CONFIDENCE = 0.8

_logger = logging.getLogger(__name__)


class CacheEntry(BaseModel):
    """Stored AI response with its lifetime."""

    data: NutritionEstimate
    created_at: datetime
    expires_at: datetime


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ResponseCache:
    """Cache of AI estimates keyed by normalized meal text."""

    store: KeyValueStore
    ttl: timedelta = timedelta(days=7)
    prefix: str = CACHE_PREFIX
    clock: Callable[[], datetime] = field(default=_utcnow)

    def cache_key(self, text: str) -> str:
        """Return the storage key for a meal text."""
        return f"{self.prefix}{normalize_text(text)}"

    async def get(self, text: str) -> NutritionEstimate | None:
        """Return a cached estimate unless missing, expired or unreadable."""
        key = self.cache_key(text)
        try:
            raw = await asyncio.to_thread(self.store.get, key)
            if raw is None:
                return None
            entry = CacheEntry.model_validate_json(raw)
            if self._is_expired(entry):
                await asyncio.to_thread(self.store.remove, key)
                return None
        except Exception:
            _logger.exception("Failed to read API response cache: key=%s", key)
            return None
        return _mark_cached(entry.data)

    async def put(self, text: str, estimate: NutritionEstimate) -> None:
        """Store an estimate, replacing any previous entry for the text."""
        key = self.cache_key(text)
        now = self.clock()
        entry = CacheEntry(data=estimate, created_at=now, expires_at=now + self.ttl)
        try:
            await asyncio.to_thread(self.store.set, key, entry.model_dump_json())
        except Exception:
            _logger.exception("Failed to save API response cache: key=%s", key)

    async def purge_expired(self) -> int:
        """Delete expired or malformed entries and return how many were removed."""
        removed = 0
        try:
            keys = await self._cache_keys()
        except Exception:
            _logger.exception("Failed to list API response cache keys")
            return removed
        for key in keys:
            try:
                raw = await asyncio.to_thread(self.store.get, key)
                if raw is None:
                    continue
                entry = self._parse(raw)
                if entry is None or self._is_expired(entry):
                    await asyncio.to_thread(self.store.remove, key)
                    removed += 1
            except Exception:
                _logger.exception("Failed to purge API response cache: key=%s", key)
        return removed

    async def clear(self) -> None:
        """Delete every cached response."""
        try:
            keys = await self._cache_keys()
            await asyncio.to_thread(self.store.remove_many, keys)
        except Exception:
            _logger.exception("Failed to clear API response cache")

    async def stats(self) -> CacheStats:
        """Count cached entries and how many are expired or malformed."""
        try:
            keys = await self._cache_keys()
            expired = 0
            for key in keys:
                raw = await asyncio.to_thread(self.store.get, key)
                if raw is None:
                    continue
                entry = self._parse(raw)
                if entry is None or self._is_expired(entry):
                    expired += 1
        except Exception:
            _logger.exception("Failed to read API response cache stats")
            return CacheStats(total=0, expired=0)
        return CacheStats(total=len(keys), expired=expired)

    async def _cache_keys(self) -> list[str]:
        keys = await asyncio.to_thread(self.store.list_keys)
        return [key for key in keys if key.startswith(self.prefix)]

    def _is_expired(self, entry: CacheEntry) -> bool:
        return self.clock() > entry.expires_at

    @staticmethod
    def _parse(raw: str) -> CacheEntry | None:
        try:
            return CacheEntry.model_validate_json(raw)
        except ValueError:
            return None


def _mark_cached(estimate: NutritionEstimate) -> NutritionEstimate:
    """Tag an estimate as served from cache and raise its confidence floor."""
    sources = estimate.sources
    if not any(CACHE_SOURCE_MARKER in source for source in sources):
        sources = (*sources, CACHE_SOURCE)
    confidence = max(estimate.confidence or DEFAULT_CONFIDENCE, CACHED_MIN_CONFIDENCE)
    return estimate.with_sources(sources).with_confidence(confidence)
