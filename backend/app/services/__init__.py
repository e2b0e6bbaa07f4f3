"""Services module - repositories, classifier, statistics and bootstrap."""

from .bootstrap_service import BootstrapReport, bootstrap
from .classifier import (
    ClassificationRule,
    KeywordRuleClassifier,
    Suggestion,
    SuggestionClassifier,
    classify,
)
from .config_service import ConfigStore
from .inquiry_service import InquiryRepository
from .knowledge_service import KnowledgeRepository
from .stats_service import StatsAggregator

__all__ = [
    "BootstrapReport",
    "bootstrap",
    "ClassificationRule",
    "KeywordRuleClassifier",
    "Suggestion",
    "SuggestionClassifier",
    "classify",
    "ConfigStore",
    "InquiryRepository",
    "KnowledgeRepository",
    "StatsAggregator",
]
