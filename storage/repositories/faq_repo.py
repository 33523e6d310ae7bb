"""FAQ repository implementation.

Stores question/answer pairs with their embeddings in the ``faqs`` table and
answers nearest-neighbor lookups with pgvector's ``<->`` (L2) operator.
The table is expected to exist already.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Set

import psycopg  # type: ignore

from shared.exceptions import DimensionError, InsertError, QueryError
from shared.vectors import format_vector_literal, validate_dimension


@dataclass(frozen=True)
class FaqMatch:
    """Closest stored FAQ for a query.

    Attributes:
        question: Stored question text
        answer: Stored answer text
        distance: L2 distance between stored and query embeddings
    """

    question: str
    answer: str
    distance: float


class FaqRepository:
    """Repository for the ``faqs`` table.

    Works through one connection owned by the caller; it never opens or
    closes connections itself.

    Example:
        >>> with DatabaseHelper.connect(config) as conn:
        ...     repo = FaqRepository(conn, config.embedding_dim)
        ...     known = repo.list_existing_questions()
    """

    table = "faqs"

    def __init__(self, conn: psycopg.Connection, embedding_dim: int):
        self.conn = conn
        self.embedding_dim = embedding_dim

    def list_existing_questions(self) -> Set[str]:
        """Return every stored question.

        Raises:
            QueryError: on any database failure while reading
        """
        sql = f"SELECT question FROM {self.table}"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql)
                return {row[0] for row in cur.fetchall()}
        except psycopg.Error as exc:
            raise QueryError(f"failed to fetch existing questions: {exc}") from exc

    def insert(self, question: str, answer: str, embedding: Sequence[float]) -> None:
        """Append one row.

        Raises:
            DimensionError: embedding length differs from the configured dimension
            InsertError: the database rejected the row
        """
        validate_dimension(embedding, self.embedding_dim)
        sql = f"""
        INSERT INTO {self.table} (question, answer, embedding)
        VALUES (%s, %s, %s::vector)
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (question, answer, format_vector_literal(embedding)))
        except psycopg.Error as exc:
            raise InsertError(f"failed to insert FAQ {question!r}: {exc}") from exc

    def nearest_neighbor(self, embedding: Sequence[float]) -> Optional[FaqMatch]:
        """Return the stored FAQ closest to ``embedding``.

        An empty table, a wrong-sized query vector and database errors all
        come back as ``None``; ties follow the engine's row order.
        """
        try:
            validate_dimension(embedding, self.embedding_dim)
        except DimensionError as exc:
            print(f"[warn] search skipped: {exc}")
            return None

        literal = format_vector_literal(embedding)
        sql = f"""
        SELECT question, answer, embedding <-> %s::vector AS distance
        FROM {self.table}
        ORDER BY embedding <-> %s::vector
        LIMIT 1
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (literal, literal))
                row = cur.fetchone()
        except psycopg.Error as exc:
            print(f"[warn] search failed: {exc}")
            return None

        if row is None:
            return None
        question, answer, distance = row
        return FaqMatch(
            question=question,
            answer=answer,
            distance=float(distance) if distance is not None else 0.0,
        )

    def count(self) -> int:
        """Number of stored rows.

        Raises:
            QueryError: on any database failure while reading
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(f"SELECT COUNT(*) FROM {self.table}")
                row = cur.fetchone()
        except psycopg.Error as exc:
            raise QueryError(f"failed to count FAQs: {exc}") from exc
        return row[0] if row else 0


__all__ = ["FaqMatch", "FaqRepository"]
