"""Shared utilities and configuration for FAQ vector search."""

from .config import AppConfig, load_config
from .exceptions import FaqSearchError
from .vectors import format_vector_literal, validate_dimension

__all__ = [
    "AppConfig",
    "load_config",
    "FaqSearchError",
    "format_vector_literal",
    "validate_dimension",
]
