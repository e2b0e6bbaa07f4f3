"""Knowledge base repository over ``knowledge:*`` keys."""

import logging
import uuid
from datetime import UTC, datetime

from pydantic import ValidationError

from ..core.errors import CorruptRecord
from ..db.kv_store import KVStore
from ..schemas.knowledge import KnowledgeItem

logger = logging.getLogger(__name__)

KNOWLEDGE_PREFIX = "knowledge:"


def knowledge_key(item_id: str) -> str:
    return f"{KNOWLEDGE_PREFIX}{item_id}"


def _generate_item_id() -> str:
    return f"knowledge_{uuid.uuid4().hex[:12]}"


class KnowledgeRepository:
    """Plain CRUD over knowledge items. No ordering is guaranteed by list()."""

    def __init__(self, store: KVStore):
        self.store = store

    def create(self, title: str, content: str) -> KnowledgeItem:
        item = KnowledgeItem(
            id=_generate_item_id(),
            title=title,
            content=content,
            created_at=datetime.now(UTC),
        )
        self.store.set(knowledge_key(item.id), item.to_store())
        logger.info("Added knowledge item %s (%s)", item.id, item.title)
        return item

    def list(self) -> list[KnowledgeItem]:
        items: list[KnowledgeItem] = []
        for key, value in self.store.get_by_prefix(KNOWLEDGE_PREFIX):
            try:
                items.append(
                    KnowledgeItem.model_validate({**value, "id": key.removeprefix(KNOWLEDGE_PREFIX)})
                )
            except (ValidationError, TypeError) as exc:
                raise CorruptRecord(key, str(exc)) from exc
        return items

    def delete(self, item_id: str) -> None:
        """Remove the item. Succeeds whether or not it exists."""
        self.store.delete(knowledge_key(item_id))
        logger.info("Deleted knowledge item %s", item_id)
