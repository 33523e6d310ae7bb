"""Ingestion layer for FAQ vector search.

Turns the FAQ input file into records. It does not embed, store or search.
"""

from .loader import FaqLoader
from .models import FaqRecord

__all__ = [
    # Models
    "FaqRecord",
    # Loading
    "FaqLoader",
]
