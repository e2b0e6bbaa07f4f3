"""Inquiry API endpoints: list, create, and review (approve/reject)."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import get_inquiry_repository
from app.core.errors import InquiryNotFound, InvalidTransition
from app.schemas.common import ApiResponse
from app.schemas.inquiries import Inquiry, InquiryCreateRequest, StatusUpdateRequest
from app.services.inquiry_service import InquiryRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["inquiries"])


@router.get(
    "/inquiries",
    response_model=ApiResponse[List[Inquiry]],
    response_model_exclude_none=True,
)
def list_inquiries(
    repo: InquiryRepository = Depends(get_inquiry_repository),
) -> ApiResponse[List[Inquiry]]:
    """All inquiries, newest first."""
    try:
        return ApiResponse(data=repo.list())
    except Exception as exc:
        logger.exception("Error fetching inquiries")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.post(
    "/inquiries",
    response_model=ApiResponse[Inquiry],
    response_model_exclude_none=True,
)
def create_inquiry(
    body: InquiryCreateRequest,
    repo: InquiryRepository = Depends(get_inquiry_repository),
) -> ApiResponse[Inquiry]:
    """Store a new inquiry together with its draft suggestion."""
    try:
        return ApiResponse(data=repo.create(body))
    except Exception as exc:
        logger.exception("Error creating inquiry")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.put(
    "/inquiries/{inquiry_id}/status",
    response_model=ApiResponse[Inquiry],
    response_model_exclude_none=True,
)
def update_inquiry_status(
    inquiry_id: str,
    body: StatusUpdateRequest,
    repo: InquiryRepository = Depends(get_inquiry_repository),
) -> ApiResponse[Inquiry]:
    """Approve or reject a pending inquiry, optionally with an edited final response."""
    try:
        inquiry = repo.set_status(inquiry_id, body.status, body.final_response)
    except InquiryNotFound as exc:
        logger.warning("Status update for unknown inquiry %s", inquiry_id)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InvalidTransition as exc:
        logger.warning("Rejected status update: %s", exc)
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error updating inquiry status for %s", inquiry_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return ApiResponse(data=inquiry)
