"""Running approval statistics, updated on every inquiry status transition."""

import logging

from pydantic import ValidationError

from ..core.errors import CorruptRecord
from ..db.kv_store import KVStore
from ..schemas.stats import LearningStats

logger = logging.getLogger(__name__)

STATS_KEY = "learning_stats"


def _approval_rate(approved: int, total: int) -> int:
    """Percentage of approved transitions, halves rounded up."""
    if total <= 0:
        return 0
    return (approved * 200 + total) // (2 * total)


def _parse(value: dict) -> LearningStats:
    try:
        return LearningStats.model_validate(value)
    except ValidationError as exc:
        raise CorruptRecord(STATS_KEY, str(exc)) from exc


class StatsAggregator:
    """Maintains the single ``learning_stats`` record."""

    def __init__(self, store: KVStore):
        self.store = store

    def get(self) -> LearningStats:
        """Current stats, or the built-in default before anything was recorded."""
        value = self.store.get(STATS_KEY)
        if value is None:
            return LearningStats()
        return _parse(value)

    def record(self, status: str, confidence: int | None = None) -> LearningStats:
        """Count one status transition.

        ``approved`` and ``rejected`` bump their own counter; any other status
        only bumps ``total_processed``. The whole read-modify-write runs
        through the store's atomic update so concurrent reviews do not lose
        counts.
        """

        def _apply(current: dict) -> dict:
            stats = _parse(current)
            if status == "approved":
                stats.approved += 1
            elif status == "rejected":
                stats.rejected += 1
            stats.total_processed += 1
            stats.avg_accuracy = _approval_rate(stats.approved, stats.total_processed)
            return stats.to_store()

        written = self.store.update(STATS_KEY, _apply, LearningStats().to_store())
        stats = LearningStats.model_validate(written)
        logger.info(
            "Recorded %s transition (confidence=%s): approved=%d rejected=%d total=%d accuracy=%d",
            status,
            confidence,
            stats.approved,
            stats.rejected,
            stats.total_processed,
            stats.avg_accuracy,
        )
        return stats
