"""Singleton AI configuration record."""

import logging

from pydantic import ValidationError

from ..core.errors import CorruptRecord
from ..db.kv_store import KVStore
from ..schemas.ai_config import AIConfig

logger = logging.getLogger(__name__)

CONFIG_KEY = "ai_config"


class ConfigStore:
    """Reads and writes the ``ai_config`` key."""

    def __init__(self, store: KVStore):
        self.store = store

    def get(self) -> AIConfig:
        """Persisted config, or the built-in default when none was saved yet."""
        value = self.store.get(CONFIG_KEY)
        if value is None:
            return AIConfig()
        try:
            return AIConfig.model_validate(value)
        except ValidationError as exc:
            raise CorruptRecord(CONFIG_KEY, str(exc)) from exc

    def get_or_default(self) -> AIConfig:
        """Like get(), but a corrupt record yields the default instead of raising."""
        try:
            return self.get()
        except CorruptRecord as exc:
            logger.warning("Ignoring unreadable AI config: %s", exc)
            return AIConfig()

    def set(self, config: AIConfig) -> AIConfig:
        """Save config.

        Only the fields the caller actually supplied are applied; omitted
        fields keep their currently effective value instead of being lost.
        A corrupt stored record is replaced by merging onto the default.
        """
        provided = config.model_dump(include=config.model_fields_set)
        merged = self.get_or_default().model_copy(update=provided)
        self.store.set(CONFIG_KEY, merged.to_store())
        logger.info("Updated AI config fields: %s", sorted(provided) or "none")
        return merged
