"""API module - FastAPI route handlers."""

from . import inquiry_routes, knowledge_routes, settings_routes

__all__ = ["inquiry_routes", "knowledge_routes", "settings_routes"]
