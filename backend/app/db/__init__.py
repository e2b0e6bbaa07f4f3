"""Database module - Supabase client and key-value store adapters."""

from .kv_store import InMemoryKVStore, KVStore, SupabaseKVStore, create_kv_store

__all__ = ["InMemoryKVStore", "KVStore", "SupabaseKVStore", "create_kv_store"]
