"""Tests for the running approval statistics."""

import threading

import pytest

from app.core.errors import CorruptRecord
from app.schemas.stats import LearningStats
from app.services.stats_service import STATS_KEY, StatsAggregator, _approval_rate


class TestGet:
    def test_default_when_absent(self, stats):
        assert stats.get() == LearningStats(approved=0, rejected=0, avg_accuracy=87, total_processed=0)

    def test_reads_persisted(self, stats, store):
        store.set(STATS_KEY, {"approved": 4, "rejected": 1, "avgAccuracy": 91, "totalProcessed": 8})
        assert stats.get().total_processed == 8

    def test_corrupt(self, stats, store):
        store.set(STATS_KEY, {"approved": -3})
        with pytest.raises(CorruptRecord):
            stats.get()


class TestRecord:
    def test_first_approval(self, stats, store):
        result = stats.record("approved", 92)
        assert result == LearningStats(approved=1, rejected=0, avg_accuracy=100, total_processed=1)
        assert store.get(STATS_KEY) == {
            "approved": 1,
            "rejected": 0,
            "avgAccuracy": 100,
            "totalProcessed": 1,
        }

    def test_rejection(self, stats):
        stats.record("approved")
        result = stats.record("rejected")
        assert result.rejected == 1
        assert result.total_processed == 2
        assert result.avg_accuracy == 50

    def test_other_status_only_counts_total(self, stats):
        result = stats.record("pending")
        assert result.approved == 0
        assert result.rejected == 0
        assert result.total_processed == 1
        assert result.avg_accuracy == 0

    def test_builds_on_seeded_stats(self, stats, store):
        store.set(STATS_KEY, {"approved": 4, "rejected": 1, "avgAccuracy": 91, "totalProcessed": 8})
        result = stats.record("approved", 80)
        assert result.approved == 5
        assert result.total_processed == 9
        assert result.avg_accuracy == 56  # 5/9 = 55.6%

    def test_concurrent_records_are_not_lost(self, stats):
        threads = [
            threading.Thread(target=stats.record, args=("approved" if n % 2 else "rejected",))
            for n in range(40)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        result = stats.get()
        assert result.total_processed == 40
        assert result.approved == 20
        assert result.rejected == 20


class TestApprovalRate:
    @pytest.mark.parametrize(
        "approved,total,expected",
        [(1, 1, 100), (0, 5, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 8, 38), (0, 0, 0)],
    )
    def test_half_up_rounding(self, approved, total, expected):
        assert _approval_rate(approved, total) == expected
