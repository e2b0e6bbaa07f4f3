"""Dependency injection for FastAPI routes.

The key-value store is created once in the application lifespan and kept
on ``app.state``; repositories are cheap wrappers built per request around
that shared handle.
"""

import secrets

from fastapi import Depends, Header, HTTPException, Request

from app.core.config import Settings, get_settings
from app.db.kv_store import KVStore
from app.services.config_service import ConfigStore
from app.services.inquiry_service import InquiryRepository
from app.services.knowledge_service import KnowledgeRepository
from app.services.stats_service import StatsAggregator


def get_store(request: Request) -> KVStore:
    """The process-wide store handle created at startup."""
    return request.app.state.kv_store


def get_stats_aggregator(store: KVStore = Depends(get_store)) -> StatsAggregator:
    return StatsAggregator(store)


def get_knowledge_repository(store: KVStore = Depends(get_store)) -> KnowledgeRepository:
    return KnowledgeRepository(store)


def get_config_store(store: KVStore = Depends(get_store)) -> ConfigStore:
    return ConfigStore(store)


def get_inquiry_repository(
    store: KVStore = Depends(get_store),
    stats: StatsAggregator = Depends(get_stats_aggregator),
    knowledge: KnowledgeRepository = Depends(get_knowledge_repository),
    config_store: ConfigStore = Depends(get_config_store),
) -> InquiryRepository:
    # Classifier is built per create from the stored AI config
    return InquiryRepository(store, None, stats, knowledge, config_store)


def require_bearer_token(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Check the static bearer credential when one is configured.

    With no token configured the check is left to the hosting platform.
    """
    expected = settings.api_bearer_token
    if not expected:
        return
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not secrets.compare_digest(token, expected):
        raise HTTPException(status_code=401, detail="Invalid or missing bearer token")
