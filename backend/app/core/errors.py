"""Domain errors raised by the repositories and mapped to HTTP status codes by the routes."""


class InquiryDeskError(Exception):
    """Base class for all domain errors."""


class InquiryNotFound(InquiryDeskError):
    """The referenced inquiry id does not exist in the store."""

    def __init__(self, inquiry_id: str):
        super().__init__("Inquiry not found")
        self.inquiry_id = inquiry_id


class InvalidTransition(InquiryDeskError):
    """A status change was requested for an inquiry that is already terminal."""

    def __init__(self, inquiry_id: str, current: str, requested: str):
        super().__init__(
            f"Inquiry {inquiry_id} is already {current}; cannot change status to {requested}"
        )
        self.inquiry_id = inquiry_id
        self.current = current
        self.requested = requested


class StorageFailure(InquiryDeskError):
    """The backing key-value store failed. The low-level message is kept as-is."""


class CorruptRecord(StorageFailure):
    """A persisted value could not be parsed into its record type."""

    def __init__(self, key: str, detail: str):
        super().__init__(f"Corrupt record at {key}: {detail}")
        self.key = key
