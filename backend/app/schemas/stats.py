"""Pydantic model for the running review statistics."""

from pydantic import Field

from .common import CamelModel


class LearningStats(CamelModel):
    """Approved/rejected tally.

    ``avg_accuracy`` is the approval rate in percent, not a quality score.
    The default of 87 only shows before the first recorded transition.
    """

    approved: int = Field(default=0, ge=0)
    rejected: int = Field(default=0, ge=0)
    avg_accuracy: int = Field(default=87, ge=0, le=100)
    total_processed: int = Field(default=0, ge=0)
