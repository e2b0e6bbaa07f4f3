"""Pydantic models for customer inquiries and their status transitions."""

from typing import Literal

from pydantic import Field

from .common import CamelModel, UtcDatetime

Category = Literal["pricing", "timeline", "product", "general"]
InquiryStatus = Literal["pending", "approved", "rejected"]
ReviewStatus = Literal["approved", "rejected"]

TERMINAL_STATUSES: frozenset[str] = frozenset({"approved", "rejected"})


class Inquiry(CamelModel):
    """One customer request and its handling history.

    ``category`` is what the customer declared; ``ai_suggestion`` and
    ``confidence`` are the classifier's opinion. The two may disagree.
    """

    id: str
    customer_name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""
    category: Category = "general"
    ai_suggestion: str = ""
    confidence: int = Field(ge=0, le=100)
    final_response: str | None = None
    status: InquiryStatus = "pending"
    timestamp: UtcDatetime
    updated_at: UtcDatetime | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


class InquiryCreateRequest(CamelModel):
    """Payload for POST /inquiries. Missing text fields are stored as empty strings."""

    customer_name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""
    category: Category = "general"


class StatusUpdateRequest(CamelModel):
    """Payload for PUT /inquiries/{id}/status."""

    status: ReviewStatus
    # Set only when the reviewer edited the draft before approving
    final_response: str | None = None
