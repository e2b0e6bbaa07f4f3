"""Supabase client factory."""

from supabase import Client, create_client

from app.core.config import Settings


def create_supabase_client(settings: Settings) -> Client:
    """Create a Supabase client from settings.

    Called once per process by the application lifespan; the resulting
    client is owned by the key-value store built on top of it.
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise ValueError(
            "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables must be set"
        )

    return create_client(settings.supabase_url, settings.supabase_service_role_key)
