"""Embedding layer: turns text into vectors via a remote endpoint."""

from .client import EmbeddingClientProtocol, OpenAIEmbeddingClient

__all__ = ["EmbeddingClientProtocol", "OpenAIEmbeddingClient"]
