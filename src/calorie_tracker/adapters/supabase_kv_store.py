"""Supabase-backed key-value store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from calorie_tracker.services.key_value_store import KeyValueStore

_TABLE = "kv_cache"


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Supabase implementation storing values in a single key/value table."""

    client: Client

    def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        response = (
            self.client.table(_TABLE)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value for a key."""
        self.client.table(_TABLE).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()

    def remove(self, key: str) -> None:
        """Delete a key."""
        self.client.table(_TABLE).delete().eq("key", key).execute()

    def list_keys(self) -> list[str]:
        """Return all stored keys."""
        response = self.client.table(_TABLE).select("key").execute()
        return [row["key"] for row in response.data or []]

    def remove_many(self, keys: list[str]) -> None:
        """Delete several keys in one request."""
        if not keys:
            return
        self.client.table(_TABLE).delete().in_("key", keys).execute()
