"""Supabase-backed key/value backend."""

import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from sugar_tracker.services.storage import KeyValueBackend


@dataclass
class SupabaseKeyValueBackend(KeyValueBackend):
    """Supabase implementation storing one row per key.

    Expects a table with a text primary key ``key``, a text ``value`` column
    and an ``updated_at`` timestamp.
    """

    client: Client
    table: str = "kv_store"

    async def get_item(self, key: str) -> str | None:
        """Return the stored value for a key."""
        return await asyncio.to_thread(self._get_item, key)

    async def set_item(self, key: str, value: str) -> None:
        """Insert or replace the row for a key."""
        await asyncio.to_thread(self._set_item, key, value)

    async def remove_item(self, key: str) -> None:
        """Delete the row for a key."""
        await asyncio.to_thread(self._remove_item, key)

    def _get_item(self, key: str) -> str | None:
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        if value is None:
            return None
        if not isinstance(value, str):
            raise RuntimeError(f"Unexpected value type for key {key!r}")
        return value

    def _set_item(self, key: str, value: str) -> None:
        self.client.table(self.table).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()

    def _remove_item(self, key: str) -> None:
        self.client.table(self.table).delete().eq("key", key).execute()
