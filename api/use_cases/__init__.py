"""Use case orchestration for FAQ vector search."""

from .ingest import IngestFailure, IngestResult, IngestUseCase
from .search import SearchUseCase

__all__ = ["IngestUseCase", "IngestResult", "IngestFailure", "SearchUseCase"]
