"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

# .env lives at the project root (one level above backend/)
_ENV_FILE = Path(__file__).resolve().parents[3] / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Inquiry Desk Backend"
    debug: bool = False
    log_level: str = "INFO"

    # Key-value store
    kv_backend: Literal["supabase", "memory"] = "supabase"
    kv_table: str = "kv_store_f77676c4"

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # HTTP edge
    cors_origins: str = "*"
    # When empty, the bearer credential is enforced by the hosting platform
    api_bearer_token: str = ""

    class Config:
        env_file = str(_ENV_FILE)
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
