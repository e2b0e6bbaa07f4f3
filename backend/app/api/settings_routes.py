"""AI configuration, learning statistics and demo bootstrap endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import get_config_store, get_stats_aggregator, get_store
from app.db.kv_store import KVStore
from app.schemas.ai_config import AIConfig
from app.schemas.bootstrap import BootstrapStatus
from app.schemas.common import ApiResponse
from app.schemas.stats import LearningStats
from app.services.bootstrap_service import bootstrap
from app.services.config_service import ConfigStore
from app.services.stats_service import StatsAggregator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["settings"])


@router.get("/config", response_model=ApiResponse[AIConfig], response_model_exclude_none=True)
def get_config(config_store: ConfigStore = Depends(get_config_store)) -> ApiResponse[AIConfig]:
    try:
        return ApiResponse(data=config_store.get())
    except Exception as exc:
        logger.exception("Error fetching config")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.put("/config", response_model=ApiResponse[AIConfig], response_model_exclude_none=True)
def update_config(
    body: AIConfig,
    config_store: ConfigStore = Depends(get_config_store),
) -> ApiResponse[AIConfig]:
    """Save the AI configuration. Omitted fields keep their current value."""
    try:
        return ApiResponse(data=config_store.set(body))
    except Exception as exc:
        logger.exception("Error updating config")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("/stats", response_model=ApiResponse[LearningStats], response_model_exclude_none=True)
def get_stats(stats: StatsAggregator = Depends(get_stats_aggregator)) -> ApiResponse[LearningStats]:
    try:
        return ApiResponse(data=stats.get())
    except Exception as exc:
        logger.exception("Error fetching stats")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("/init", response_model=ApiResponse[BootstrapStatus], response_model_exclude_none=True)
def init_demo_data(store: KVStore = Depends(get_store)) -> ApiResponse[BootstrapStatus]:
    """Seed default config, knowledge, sample inquiries and stats where absent."""
    try:
        report = bootstrap(store)
    except Exception as exc:
        logger.exception("Error initializing data")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return ApiResponse(
        data=BootstrapStatus(
            message=report.message,
            written=report.written,
            skipped=report.skipped,
            failed=report.failed,
        )
    )
