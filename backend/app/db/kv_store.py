"""Key-value store adapter.

Every entity lives under a string key holding an opaque JSON value:

    inquiry:<id>      one customer inquiry
    knowledge:<id>    one knowledge base item
    ai_config         the singleton AI configuration
    learning_stats    the running approval tally

The adapter never interprets values. Prefix scans return pairs in whatever
order the backend yields; callers sort when order matters.
"""

import copy
import json
import logging
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Iterator

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from app.core.config import Settings
from app.core.errors import StorageFailure

from .client import create_supabase_client

logger = logging.getLogger(__name__)


class KVStore(ABC):
    """Contract shared by all key-value backends."""

    def __init__(self) -> None:
        # Serializes read-modify-write sequences issued through update()
        self._write_lock = threading.Lock()

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the value stored at key, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value at key, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Deleting an absent key is not an error."""

    @abstractmethod
    def get_by_prefix(self, prefix: str) -> list[tuple[str, Any]]:
        """Return all (key, value) pairs whose key starts with prefix."""

    def update(self, key: str, fn: Callable[[Any], Any], default: Any) -> Any:
        """Atomically replace the value at key with fn(current).

        When the key is absent, fn receives a copy of default. If fn raises,
        nothing is written and the exception propagates. Returns the
        value that was written.
        """
        with self._write_lock:
            current = self.get(key)
            if current is None:
                current = copy.deepcopy(default)
            new_value = fn(current)
            self.set(key, new_value)
            return new_value

    def close(self) -> None:
        """Release backend resources. Called once at application shutdown."""


class InMemoryKVStore(KVStore):
    """Process-local store for development and tests.

    Values are round-tripped through JSON on the way in and out, so callers
    never share mutable state with the store and non-JSON values fail early.
    """

    def __init__(self) -> None:
        super().__init__()
        self._data: dict[str, str] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            raw = self._data.get(key)
        return None if raw is None else json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise StorageFailure(f"Value for {key} is not JSON serializable: {exc}") from exc
        with self._lock:
            self._data[key] = raw

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def get_by_prefix(self, prefix: str) -> list[tuple[str, Any]]:
        with self._lock:
            items = [(k, v) for k, v in self._data.items() if k.startswith(prefix)]
        return [(k, json.loads(v)) for k, v in items]

    def keys(self) -> list[str]:
        """All keys currently stored (test and diagnostics helper)."""
        with self._lock:
            return list(self._data)


class SupabaseKVStore(KVStore):
    """Store backed by a two-column Supabase table (key text primary key, value jsonb)."""

    def __init__(self, client: Client, table: str):
        super().__init__()
        self._client = client
        self._table = table

    @contextmanager
    def _translate_errors(self, operation: str, key: str) -> Iterator[None]:
        try:
            yield
        except APIError as exc:
            logger.error("Supabase error during %s of %s: %s", operation, key, exc.message)
            raise StorageFailure(exc.message or str(exc)) from exc
        except httpx.HTTPError as exc:
            logger.error("Transport error during %s of %s: %s", operation, key, exc)
            raise StorageFailure(str(exc)) from exc

    def get(self, key: str) -> Any | None:
        with self._translate_errors("get", key):
            result = (
                self._client.table(self._table)
                .select("value")
                .eq("key", key)
                .maybe_single()
                .execute()
            )
        # maybe_single() yields no response at all for zero rows on some client versions
        if result is None or not result.data:
            return None
        return result.data.get("value")

    def set(self, key: str, value: Any) -> None:
        with self._translate_errors("set", key):
            self._client.table(self._table).upsert({"key": key, "value": value}).execute()

    def delete(self, key: str) -> None:
        with self._translate_errors("delete", key):
            self._client.table(self._table).delete().eq("key", key).execute()

    def get_by_prefix(self, prefix: str) -> list[tuple[str, Any]]:
        with self._translate_errors("prefix scan", prefix):
            result = (
                self._client.table(self._table)
                .select("key, value")
                .like("key", f"{prefix}%")
                .execute()
            )
        rows = result.data or []
        # LIKE treats "_" as a wildcard, so re-check the literal prefix
        return [(row["key"], row["value"]) for row in rows if row["key"].startswith(prefix)]

    def close(self) -> None:
        self._client = None  # type: ignore[assignment]


def create_kv_store(settings: Settings) -> KVStore:
    """Build the store selected by settings.kv_backend."""
    if settings.kv_backend == "memory":
        logger.info("Using in-memory key-value store")
        return InMemoryKVStore()

    logger.info("Using Supabase key-value store (table=%s)", settings.kv_table)
    return SupabaseKVStore(create_supabase_client(settings), settings.kv_table)
