"""Storage layer for FAQ vector search.

Owns the database connection and every SQL statement. It does not generate
embeddings or parse input files.
"""

from .db import DatabaseHelper
from .repositories import FaqMatch, FaqRepository

__all__ = [
    # Database
    "DatabaseHelper",
    # Repositories
    "FaqRepository",
    "FaqMatch",
]
