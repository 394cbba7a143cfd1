"""Storage backends for Tailspin campaigns."""

from .base import CampaignStore
from .memory_store import MemoryStore

__all__ = ["CampaignStore", "MemoryStore"]
