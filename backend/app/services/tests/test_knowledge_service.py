"""Tests for the knowledge base repository."""

from datetime import UTC, datetime

import pytest

from app.core.errors import CorruptRecord
from app.services.knowledge_service import KNOWLEDGE_PREFIX, knowledge_key


class TestKnowledgeRepository:
    def test_create_assigns_id_and_timestamp(self, knowledge, store):
        item = knowledge.create("Cennik", "Strona: 3000 zł")
        assert item.id.startswith("knowledge_")
        assert item.created_at is not None
        assert store.get(knowledge_key(item.id))["title"] == "Cennik"

    def test_list_returns_all(self, knowledge):
        created = {knowledge.create(f"t{n}", "c").id for n in range(3)}
        assert {item.id for item in knowledge.list()} == created

    def test_list_empty(self, knowledge):
        assert knowledge.list() == []

    def test_legacy_item_without_created_at(self, knowledge, store):
        store.set(f"{KNOWLEDGE_PREFIX}old", {"title": "Stare", "content": "x"})
        (item,) = knowledge.list()
        assert item.id == "old"
        assert item.created_at is None

    def test_naive_created_at_read_as_utc(self, knowledge, store):
        store.set(
            f"{KNOWLEDGE_PREFIX}old",
            {"title": "Stare", "content": "x", "createdAt": "2025-01-02T10:00:00"},
        )
        (item,) = knowledge.list()
        assert item.created_at == datetime(2025, 1, 2, 10, 0, tzinfo=UTC)

    def test_delete(self, knowledge):
        item = knowledge.create("t", "c")
        knowledge.delete(item.id)
        assert knowledge.list() == []

    def test_delete_missing_is_idempotent(self, knowledge):
        knowledge.delete("does-not-exist")
        knowledge.delete("does-not-exist")

    def test_corrupt_item(self, knowledge, store):
        store.set(f"{KNOWLEDGE_PREFIX}bad", ["not", "an", "object"])
        with pytest.raises(CorruptRecord):
            knowledge.list()
