"""Schemas module - Pydantic models for stored records and API payloads."""

from .ai_config import AIConfig
from .bootstrap import BootstrapStatus
from .common import ApiResponse, CamelModel, UtcDatetime
from .inquiries import (
    Category,
    Inquiry,
    InquiryCreateRequest,
    InquiryStatus,
    ReviewStatus,
    StatusUpdateRequest,
)
from .knowledge import KnowledgeItem, KnowledgeItemCreate
from .stats import LearningStats

__all__ = [
    # Common
    "ApiResponse",
    "CamelModel",
    "UtcDatetime",
    # Config
    "AIConfig",
    # Bootstrap
    "BootstrapStatus",
    # Inquiries
    "Category",
    "Inquiry",
    "InquiryCreateRequest",
    "InquiryStatus",
    "ReviewStatus",
    "StatusUpdateRequest",
    # Knowledge
    "KnowledgeItem",
    "KnowledgeItemCreate",
    # Stats
    "LearningStats",
]
