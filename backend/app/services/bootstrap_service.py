"""One-time, idempotent demo bootstrap.

Writes the default AI config, the seed knowledge items, the sample
inquiries and the initial stats. Each key is written only when absent, so
re-running never touches existing data. A failure on one key is logged and
the remaining keys are still attempted; calling bootstrap again retries
whatever was missed.
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from ..core.errors import StorageFailure
from ..data.seed import SEED_INQUIRIES, SEED_KNOWLEDGE, SEED_STATS
from ..db.kv_store import KVStore
from ..schemas.ai_config import AIConfig
from ..schemas.inquiries import Inquiry
from ..schemas.knowledge import KnowledgeItem
from ..schemas.stats import LearningStats
from .config_service import CONFIG_KEY
from .inquiry_service import inquiry_key
from .knowledge_service import knowledge_key
from .stats_service import STATS_KEY

logger = logging.getLogger(__name__)


@dataclass
class BootstrapReport:
    """Keys written, already present, or failed during one bootstrap run."""

    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.failed:
            return (
                f"Initialized with {len(self.failed)} failures "
                f"({len(self.written)} written, {len(self.skipped)} already present)"
            )
        return "Initialized successfully with sample data"


def seed_records(now: datetime) -> list[tuple[str, dict]]:
    """All (key, value) pairs the bootstrap wants present, in write order."""
    records: list[tuple[str, dict]] = [(CONFIG_KEY, AIConfig().to_store())]

    for raw in SEED_KNOWLEDGE:
        item = KnowledgeItem(**raw, created_at=now)
        records.append((knowledge_key(item.id), item.to_store()))

    for raw in SEED_INQUIRIES:
        fields = {k: v for k, v in raw.items() if k != "hours_ago"}
        inquiry = Inquiry.model_validate(
            {**fields, "timestamp": now - timedelta(hours=raw["hours_ago"])}
        )
        records.append((inquiry_key(inquiry.id), inquiry.to_store()))

    records.append((STATS_KEY, LearningStats.model_validate(SEED_STATS).to_store()))
    return records


def bootstrap(store: KVStore) -> BootstrapReport:
    """Populate missing demo data without overwriting anything."""
    report = BootstrapReport()

    for key, value in seed_records(datetime.now(UTC)):
        try:
            if store.get(key) is not None:
                report.skipped.append(key)
                continue
            store.set(key, value)
            report.written.append(key)
        except StorageFailure as exc:
            logger.warning("Bootstrap could not seed %s: %s", key, exc)
            report.failed.append(key)

    logger.info(
        "Bootstrap finished: %d written, %d skipped, %d failed",
        len(report.written),
        len(report.skipped),
        len(report.failed),
    )
    return report
