"""HTTP client for an OpenAI-compatible embedding endpoint."""

from typing import Any, List, Optional, Protocol

import requests

from shared.config import AppConfig
from shared.exceptions import APIError, DecodeError, EmptyResultError, TransportError


class EmbeddingClientProtocol(Protocol):
    """Protocol for embedding clients (dependency inversion)."""

    def embed(self, text: str) -> List[float]:
        """Return the embedding vector for ``text``."""
        ...


class OpenAIEmbeddingClient:
    """Thin client around ``POST <API_URL>`` returning one embedding per call.

    No retries and no caching: every failure surfaces as an EmbeddingError
    subclass for the caller to handle.

    Example:
        >>> client = OpenAIEmbeddingClient.from_config(config)
        >>> vector = client.embed("What is X?")
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        model: str,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url
        self.model = model
        self._api_key = api_key
        self._session = session or requests.Session()

    @classmethod
    def from_config(
        cls, config: AppConfig, session: Optional[requests.Session] = None
    ) -> "OpenAIEmbeddingClient":
        return cls(
            api_url=config.api_url,
            api_key=config.openai_api_key,
            model=config.embedding_model,
            session=session,
        )

    def embed(self, text: str) -> List[float]:
        """Embed a single string.

        Args:
            text: Input text sent verbatim to the endpoint

        Returns:
            The embedding of the first result entry

        Raises:
            TransportError: connection, timeout or DNS failure
            APIError: non-200 response
            DecodeError: body is not the expected JSON shape
            EmptyResultError: ``data`` holds no entries
        """
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        payload = {"input": text, "model": self.model}
        try:
            response = self._session.post(self.api_url, json=payload, headers=headers)
        except requests.RequestException as exc:
            raise TransportError(f"request to {self.api_url} failed: {exc}") from exc

        if response.status_code != 200:
            raise APIError(response.status_code, response.text)

        try:
            body = response.json()
        except ValueError as exc:
            raise DecodeError(f"response is not valid JSON: {exc}") from exc
        return self._extract_vec(body)

    @staticmethod
    def _extract_vec(body: Any) -> List[float]:
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            raise DecodeError("response missing 'data' array")
        if not data:
            raise EmptyResultError("embedding API returned no data")

        first = data[0]
        embedding = first.get("embedding") if isinstance(first, dict) else None
        if not isinstance(embedding, list):
            raise DecodeError("response entry missing 'embedding' array")
        if any(isinstance(x, bool) or not isinstance(x, (int, float)) for x in embedding):
            raise DecodeError("embedding contains non-numeric values")
        return [float(x) for x in embedding]

    def close(self) -> None:
        self._session.close()


__all__ = ["EmbeddingClientProtocol", "OpenAIEmbeddingClient"]
