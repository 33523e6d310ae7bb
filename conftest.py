"""Shared fakes for the test suite. No live database or network is used."""

import math
from typing import Dict, List, Optional, Sequence, Set

import psycopg
import pytest

from shared.exceptions import APIError
from shared.vectors import validate_dimension
from storage import FaqMatch

TEST_DIM = 3

ENV = {
    "OPENAI_API_KEY": "sk-test",
    "API_URL": "https://embeddings.example.test/v1/embeddings",
    "POSTGRES_USER": "faq",
    "POSTGRES_PW": "secret",
    "POSTGRES_HOST": "localhost",
    "POSTGRES_PORT": "5432",
    "POSTGRES_DB": "faqdb",
}


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, text: str = "", bad_json: bool = False):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Stands in for requests.Session; replays queued responses or errors."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: List[dict] = []
        self.closed = False

    def post(self, url, json=None, headers=None):
        self.calls.append({"url": url, "json": json, "headers": headers})
        outcome = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


def embedding_response(vector: Sequence[float]) -> FakeResponse:
    return FakeResponse(200, {"object": "list", "data": [{"index": 0, "embedding": list(vector)}]})


class FakeEmbeddingClient:
    """Deterministic embeddings keyed by text; unknown text maps to a fallback."""

    def __init__(self, vectors: Optional[Dict[str, List[float]]] = None, dim: int = TEST_DIM,
                 fail_on: Optional[Set[str]] = None):
        self.vectors = vectors or {}
        self.dim = dim
        self.fail_on = fail_on or set()
        self.calls: List[str] = []

    def embed(self, text: str) -> List[float]:
        self.calls.append(text)
        if text in self.fail_on:
            raise APIError(500, "internal error")
        if text in self.vectors:
            return list(self.vectors[text])
        return [float(len(text))] + [0.0] * (self.dim - 1)


class InMemoryFaqStore:
    """Keeps rows in a list and ranks them by L2 distance like pgvector's <->."""

    def __init__(self, embedding_dim: int = TEST_DIM, rows=None):
        self.embedding_dim = embedding_dim
        self.rows: List[tuple] = list(rows or [])
        self.insert_calls: List[str] = []

    def list_existing_questions(self) -> Set[str]:
        return {question for question, _, _ in self.rows}

    def insert(self, question: str, answer: str, embedding: Sequence[float]) -> None:
        self.insert_calls.append(question)
        validate_dimension(embedding, self.embedding_dim)
        self.rows.append((question, answer, list(embedding)))

    def nearest_neighbor(self, embedding: Sequence[float]) -> Optional[FaqMatch]:
        if not self.rows:
            return None
        scored = [(math.dist(vec, embedding), q, a) for q, a, vec in self.rows]
        distance, question, answer = min(scored, key=lambda item: item[0])
        return FaqMatch(question, answer, distance)

    def count(self) -> int:
        return len(self.rows)


class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self.conn = conn

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((" ".join(sql.split()), params))
        if self.conn.error is not None:
            raise self.conn.error

    def fetchall(self):
        return list(self.conn.rows)

    def fetchone(self):
        return self.conn.rows[0] if self.conn.rows else None


class FakeConnection:
    """Minimal psycopg connection double recording every statement."""

    def __init__(self, rows=None, error: Optional[psycopg.Error] = None):
        self.rows = list(rows or [])
        self.error = error
        self.executed: List[tuple] = []

    def cursor(self):
        return FakeCursor(self)


@pytest.fixture
def env(monkeypatch, tmp_path):
    """Complete configuration in a clean working directory without a .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("EMBEDDING_MODEL", "EMBEDDING_DIM", "FAQ_FILE"):
        monkeypatch.delenv(name, raising=False)
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    return tmp_path
