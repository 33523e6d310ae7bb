"""Ingestion use case orchestration.

Loads FAQ records, skips questions already stored, and embeds and inserts the
rest one at a time.
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Set, Union

from embedding import EmbeddingClientProtocol
from ingestion import FaqLoader, FaqRecord
from shared.exceptions import FaqSearchError


class FaqStoreProtocol(Protocol):
    """The subset of FaqRepository ingestion needs."""

    def list_existing_questions(self) -> Set[str]:
        ...

    def insert(self, question: str, answer: str, embedding: Sequence[float]) -> None:
        ...


@dataclass
class IngestFailure:
    question: str
    error: FaqSearchError


@dataclass
class IngestResult:
    """Result of ingestion operation.

    Attributes:
        inserted: Questions stored during this run, in file order
        skipped: Questions that were already stored
        failures: Records whose embedding or insert failed
        aborted: True when a failure stopped the remaining records
    """

    inserted: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failures: List[IngestFailure] = field(default_factory=list)
    aborted: bool = False

    @property
    def ok(self) -> bool:
        return not self.failures


class IngestUseCase:
    """Orchestrates the FAQ ingestion pipeline.

    Pipeline:
    1. Load records from the input file (ingestion layer)
    2. Read the questions already stored (storage layer)
    3. Embed each new question (embedding layer)
    4. Insert question, answer and embedding (storage layer)

    By default the first embedding or insert failure stops the run
    (fail-fast). With ``continue_on_error=True`` every record is attempted
    and all failures are reported in the result.

    Example:
        >>> use_case = IngestUseCase(repo, client)
        >>> result = use_case.ingest_file("faqs.json")
    """

    def __init__(
        self,
        store: FaqStoreProtocol,
        embeddings_client: EmbeddingClientProtocol,
        loader: Optional[FaqLoader] = None,
        continue_on_error: bool = False,
    ):
        self.store = store
        self.embeddings_client = embeddings_client
        self.loader = loader or FaqLoader()
        self.continue_on_error = continue_on_error

    def ingest_file(self, path: Union[str, Path]) -> IngestResult:
        """Load ``path`` and ingest its records.

        Loader and storage read errors propagate; they are fatal for the run.
        """
        records = self.loader.load(path)
        return self.execute(records)

    def execute(self, records: Sequence[FaqRecord]) -> IngestResult:
        """Ingest already-loaded records.

        Raises:
            QueryError: the stored questions could not be read
        """
        known = set(self.store.list_existing_questions())
        result = IngestResult()

        for record in records:
            if record.question in known:
                print(f"[skip] existing question: {record.question}")
                result.skipped.append(record.question)
                continue

            try:
                vector = self.embeddings_client.embed(record.question)
                self.store.insert(record.question, record.answer, vector)
            except FaqSearchError as exc:
                print(f"[error] {record.question}: {exc}", file=sys.stderr)
                result.failures.append(IngestFailure(record.question, exc))
                if not self.continue_on_error:
                    result.aborted = True
                    break
                continue

            known.add(record.question)
            result.inserted.append(record.question)
            print(f"[ok] inserted: {record.question}")

        print(
            f"[ingest] inserted={len(result.inserted)} skipped={len(result.skipped)} "
            f"failed={len(result.failures)}" + (" (aborted)" if result.aborted else "")
        )
        return result


__all__ = ["IngestUseCase", "IngestResult", "IngestFailure", "FaqStoreProtocol"]
