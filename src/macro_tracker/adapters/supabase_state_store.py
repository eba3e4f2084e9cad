"""Supabase-backed key-value state store."""

import json
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from macro_tracker.services.persistence import StateStore


@dataclass
class SupabaseStateStore(StateStore):
    """Supabase implementation storing one JSON document per key.

    Rows are scoped by ``namespace`` so several profiles or environments can
    share a table keyed on ``(namespace, key)``.
    """

    client: Client
    table: str = "app_state"
    namespace: str = "default"

    def load(self, key: str) -> bytes | None:
        """Return the stored document for a key."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("namespace", self.namespace)
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
            # jsonb columns come back already decoded
            value = json.dumps(value)
        return value.encode("utf-8")

    def save(self, key: str, value: bytes) -> None:
        """Insert or replace the document for a key."""
        self.client.table(self.table).upsert(
            {
                "namespace": self.namespace,
                "key": key,
                "value": value.decode("utf-8"),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="namespace,key",
        ).execute()
