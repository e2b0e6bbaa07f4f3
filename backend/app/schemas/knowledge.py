"""Pydantic models for knowledge base items."""

from .common import CamelModel, UtcDatetime


class KnowledgeItem(CamelModel):
    """A titled fact shown to reviewers alongside suggestions."""

    id: str
    title: str = ""
    content: str = ""
    created_at: UtcDatetime | None = None


class KnowledgeItemCreate(CamelModel):
    """Payload for POST /knowledge."""

    title: str = ""
    content: str = ""
