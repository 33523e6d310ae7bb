"""Repository implementations for the storage layer."""

from .faq_repo import FaqMatch, FaqRepository

__all__ = ["FaqMatch", "FaqRepository"]
