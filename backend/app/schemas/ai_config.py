"""Pydantic model for the singleton AI configuration record."""

from pydantic import Field

from .common import CamelModel

DEFAULT_RESPONSE_TEMPLATE = "Dziękuję za zapytanie! Na podstawie Państwa wymagań..."


class AIConfig(CamelModel):
    """Tunable thresholds and templates. Field defaults are the built-in config."""

    confidence_threshold: int = Field(default=85, ge=50, le=100)
    auto_response: bool = False
    response_template: str = DEFAULT_RESPONSE_TEMPLATE
    company_name: str = "Nardos House"
    contact_email: str = "kontakt@nardoshouse.pl"
