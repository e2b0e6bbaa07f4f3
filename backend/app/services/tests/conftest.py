"""Shared fixtures for service tests."""

from unittest.mock import MagicMock

import pytest

from app.core.errors import StorageFailure
from app.db.kv_store import InMemoryKVStore
from app.schemas.inquiries import InquiryCreateRequest
from app.services.classifier import KeywordRuleClassifier
from app.services.config_service import ConfigStore
from app.services.inquiry_service import InquiryRepository
from app.services.knowledge_service import KnowledgeRepository
from app.services.stats_service import StatsAggregator


@pytest.fixture
def store():
    return InMemoryKVStore()


@pytest.fixture
def stats(store):
    return StatsAggregator(store)


@pytest.fixture
def knowledge(store):
    return KnowledgeRepository(store)


@pytest.fixture
def config_store(store):
    return ConfigStore(store)


@pytest.fixture
def inquiries(store, stats, knowledge):
    return InquiryRepository(store, KeywordRuleClassifier(), stats, knowledge)


@pytest.fixture
def failing_store():
    """A store whose every call raises, for failure-path tests."""
    s = MagicMock(spec=InMemoryKVStore)
    for method in ("get", "set", "delete", "get_by_prefix", "update"):
        getattr(s, method).side_effect = StorageFailure("connection refused")
    return s


# ── Sample data ─────────────────────────────────────────────────────


def _make_request(message: str = "dzień dobry", **overrides):
    fields = dict(
        customer_name="Jan Nowak",
        email="jan@example.com",
        subject="Pytanie",
        message=message,
        category="general",
    )
    fields.update(overrides)
    return InquiryCreateRequest(**fields)


@pytest.fixture
def make_request():
    """Factory for inquiry creation payloads."""
    return _make_request
