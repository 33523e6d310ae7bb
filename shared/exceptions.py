"""Error taxonomy shared by every layer.

Library code raises these; only the CLI turns them into exit codes.
A nearest-neighbor miss is not an error and is reported as ``None``.
"""

from typing import Optional


class FaqSearchError(Exception):
    """Base class for all expected failures."""


class ConfigError(FaqSearchError):
    """Missing or malformed environment configuration."""


class DatabaseConnectionError(FaqSearchError):
    """The database could not be reached."""


class LoaderError(FaqSearchError):
    """The FAQ input file could not be turned into records."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class FileOpenError(LoaderError):
    pass


class ParseError(LoaderError):
    def __init__(self, message: str, path: Optional[str] = None, index: Optional[int] = None):
        super().__init__(message, path)
        self.index = index


class StorageError(FaqSearchError):
    """A database operation on the faqs table failed."""


class QueryError(StorageError):
    pass


class InsertError(StorageError):
    pass


class DimensionError(StorageError):
    """Vector length does not match the configured embedding dimension."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"embedding dimension mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class EmbeddingError(FaqSearchError):
    """The embedding endpoint did not produce a vector."""


class TransportError(EmbeddingError):
    pass


class APIError(EmbeddingError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"embedding API returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(EmbeddingError):
    pass


class EmptyResultError(EmbeddingError):
    pass


__all__ = [
    "FaqSearchError",
    "ConfigError",
    "DatabaseConnectionError",
    "LoaderError",
    "FileOpenError",
    "ParseError",
    "StorageError",
    "QueryError",
    "InsertError",
    "DimensionError",
    "EmbeddingError",
    "TransportError",
    "APIError",
    "DecodeError",
    "EmptyResultError",
]
