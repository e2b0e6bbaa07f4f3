"""Shared schema pieces: camelCase base model, UTC timestamps and the response envelope."""

from datetime import UTC, datetime
from typing import Annotated, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def _assume_utc(value: datetime) -> datetime:
    # Records written without an offset are read as UTC
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


UtcDatetime = Annotated[datetime, AfterValidator(_assume_utc)]


class CamelModel(BaseModel):
    """Base for stored records: snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_store(self) -> dict:
        """JSON-ready dict in the layout persisted in the key-value store."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every API response: {success, data?, error?}."""

    success: bool = True
    data: T | None = None
    error: str | None = None
