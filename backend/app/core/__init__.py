"""Core module - configuration and domain errors."""

from .config import get_settings, Settings
from .errors import (
    CorruptRecord,
    InquiryDeskError,
    InquiryNotFound,
    InvalidTransition,
    StorageFailure,
)

__all__ = [
    "get_settings",
    "Settings",
    "CorruptRecord",
    "InquiryDeskError",
    "InquiryNotFound",
    "InvalidTransition",
    "StorageFailure",
]
