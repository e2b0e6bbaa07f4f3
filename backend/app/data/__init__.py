"""Data module - demo records used by the bootstrap operation."""

from .seed import SEED_INQUIRIES, SEED_KNOWLEDGE, SEED_STATS

__all__ = ["SEED_INQUIRIES", "SEED_KNOWLEDGE", "SEED_STATS"]
