"""Response model for the bootstrap endpoint."""

from pydantic import BaseModel


class BootstrapStatus(BaseModel):
    """Outcome of GET /init."""

    message: str
    written: list[str] = []
    skipped: list[str] = []
    failed: list[str] = []
