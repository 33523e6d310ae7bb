"""Search use case: embed one query and fetch the closest stored FAQ."""

from typing import Optional, Protocol, Sequence

from embedding import EmbeddingClientProtocol
from storage import FaqMatch


class FaqSearchProtocol(Protocol):
    def nearest_neighbor(self, embedding: Sequence[float]) -> Optional[FaqMatch]:
        ...


class SearchUseCase:
    """Answers a query with the single nearest stored FAQ.

    Embedding failures propagate to the caller. A miss (empty table or a
    failed lookup) is ``None``.
    """

    def __init__(self, store: FaqSearchProtocol, embeddings_client: EmbeddingClientProtocol):
        self.store = store
        self.embeddings_client = embeddings_client

    def execute(self, query: str) -> Optional[FaqMatch]:
        vector = self.embeddings_client.embed(query)
        return self.store.nearest_neighbor(vector)


__all__ = ["SearchUseCase", "FaqSearchProtocol"]
