"""Inquiry repository and status state machine.

Inquiries are stored under ``inquiry:<id>``. Every operation re-reads the
store; nothing is cached between requests.

    pending ──► approved
        └─────► rejected

Both targets are terminal. A status change on a terminal inquiry raises
InvalidTransition and leaves the record and the statistics untouched.
"""

import logging
import uuid
from datetime import UTC, datetime

from pydantic import ValidationError

from ..core.errors import CorruptRecord, InquiryNotFound, InvalidTransition
from ..db.kv_store import KVStore
from ..schemas.inquiries import Inquiry, InquiryCreateRequest, ReviewStatus
from .classifier import KeywordRuleClassifier, SuggestionClassifier
from .config_service import ConfigStore
from .knowledge_service import KnowledgeRepository
from .stats_service import StatsAggregator

logger = logging.getLogger(__name__)

INQUIRY_PREFIX = "inquiry:"


def inquiry_key(inquiry_id: str) -> str:
    return f"{INQUIRY_PREFIX}{inquiry_id}"


def _generate_inquiry_id() -> str:
    """Generate an inquiry id in inquiry_{12-char-hex} format."""
    return f"inquiry_{uuid.uuid4().hex[:12]}"


def _parse(key: str, value) -> Inquiry:
    try:
        return Inquiry.model_validate({**value, "id": key.removeprefix(INQUIRY_PREFIX)})
    except (ValidationError, TypeError) as exc:
        raise CorruptRecord(key, str(exc)) from exc


class InquiryRepository:
    """Creates, lists and reviews inquiries.

    Without an explicit classifier, each create builds the keyword
    classifier from the stored AI config so the generic draft names the
    currently configured company.
    """

    def __init__(
        self,
        store: KVStore,
        classifier: SuggestionClassifier | None,
        stats: StatsAggregator,
        knowledge: KnowledgeRepository | None = None,
        config: ConfigStore | None = None,
    ):
        self.store = store
        self.classifier = classifier
        self.stats = stats
        self.knowledge = knowledge or KnowledgeRepository(store)
        self.config = config or ConfigStore(store)

    def _classifier(self) -> SuggestionClassifier:
        if self.classifier is not None:
            return self.classifier
        return KeywordRuleClassifier(company_name=self.config.get_or_default().company_name)

    def create(self, request: InquiryCreateRequest) -> Inquiry:
        """Classify the message, persist a pending inquiry and return it."""
        suggestion = self._classifier().classify(request.message, self.knowledge.list())

        inquiry = Inquiry(
            id=_generate_inquiry_id(),
            customer_name=request.customer_name,
            email=request.email,
            subject=request.subject,
            message=request.message,
            category=request.category,
            ai_suggestion=suggestion.draft_text,
            confidence=suggestion.confidence,
            status="pending",
            timestamp=datetime.now(UTC),
        )
        self.store.set(inquiry_key(inquiry.id), inquiry.to_store())

        logger.info(
            "Created inquiry %s (category=%s, intent=%s, confidence=%d)",
            inquiry.id,
            inquiry.category,
            suggestion.intent,
            inquiry.confidence,
        )
        return inquiry

    def get(self, inquiry_id: str) -> Inquiry:
        key = inquiry_key(inquiry_id)
        value = self.store.get(key)
        if value is None:
            raise InquiryNotFound(inquiry_id)
        return _parse(key, value)

    def list(self) -> list[Inquiry]:
        """All inquiries, newest first."""
        inquiries = [_parse(key, value) for key, value in self.store.get_by_prefix(INQUIRY_PREFIX)]
        inquiries.sort(key=lambda inquiry: inquiry.timestamp, reverse=True)
        return inquiries

    def set_status(
        self,
        inquiry_id: str,
        status: ReviewStatus,
        final_response: str | None = None,
    ) -> Inquiry:
        """Approve or reject a pending inquiry and count it in the statistics.

        ``final_response`` is stored only when given, i.e. when the reviewer
        edited the draft. The check and the write run as one store update, so
        concurrent reviews of the same inquiry count it once.
        """
        key = inquiry_key(inquiry_id)

        def transition(value) -> dict:
            if value is None:
                raise InquiryNotFound(inquiry_id)
            inquiry = _parse(key, value)
            if inquiry.is_terminal:
                raise InvalidTransition(inquiry_id, inquiry.status, status)
            inquiry.status = status
            inquiry.updated_at = datetime.now(UTC)
            if final_response:
                inquiry.final_response = final_response
            return inquiry.to_store()

        inquiry = _parse(key, self.store.update(key, transition, None))
        logger.info("Inquiry %s marked %s", inquiry_id, status)

        self.stats.record(status, inquiry.confidence)
        return inquiry
