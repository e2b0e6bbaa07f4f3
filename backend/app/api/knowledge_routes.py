"""Knowledge base API endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import get_knowledge_repository
from app.schemas.common import ApiResponse
from app.schemas.knowledge import KnowledgeItem, KnowledgeItemCreate
from app.services.knowledge_service import KnowledgeRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["knowledge"])


@router.get(
    "/knowledge",
    response_model=ApiResponse[List[KnowledgeItem]],
    response_model_exclude_none=True,
)
def list_knowledge(
    repo: KnowledgeRepository = Depends(get_knowledge_repository),
) -> ApiResponse[List[KnowledgeItem]]:
    try:
        return ApiResponse(data=repo.list())
    except Exception as exc:
        logger.exception("Error fetching knowledge base")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.post(
    "/knowledge",
    response_model=ApiResponse[KnowledgeItem],
    response_model_exclude_none=True,
)
def add_knowledge_item(
    body: KnowledgeItemCreate,
    repo: KnowledgeRepository = Depends(get_knowledge_repository),
) -> ApiResponse[KnowledgeItem]:
    try:
        return ApiResponse(data=repo.create(body.title, body.content))
    except Exception as exc:
        logger.exception("Error adding knowledge item")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.delete(
    "/knowledge/{item_id}",
    response_model=ApiResponse[dict],
    response_model_exclude_none=True,
)
def delete_knowledge_item(
    item_id: str,
    repo: KnowledgeRepository = Depends(get_knowledge_repository),
) -> ApiResponse[dict]:
    """Delete an item; deleting an unknown id also succeeds."""
    try:
        repo.delete(item_id)
    except Exception as exc:
        logger.exception("Error deleting knowledge item %s", item_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return ApiResponse(data={})
