"""Command-line entry point: ingest the FAQ file, then answer one question.

Usage:
    python -m api.cli
    python -m api.cli --faqs data/faqs.json --continue-on-error
    python -m api.cli --skip-ingest --query "What is X?"
"""

import argparse
import sys
from typing import List, Optional

from embedding import OpenAIEmbeddingClient
from ingestion import FaqLoader
from shared.config import load_config
from shared.exceptions import EmbeddingError, FaqSearchError, QueryError
from storage import DatabaseHelper, FaqMatch, FaqRepository

from ..use_cases import IngestUseCase, SearchUseCase

PROMPT = "質問を入力してください:"
NOT_FOUND_MESSAGE = "該当するFAQが見つかりませんでした。"
INGEST_DONE_MESSAGE = "全てのFAQデータが登録されました。"


def print_error(message: object) -> None:
    print(f"[error] {message}", file=sys.stderr)


def read_query() -> str:
    print(PROMPT)
    sys.stdout.flush()
    return sys.stdin.readline().strip()


def print_match(match: Optional[FaqMatch]) -> None:
    if match is None:
        print(NOT_FOUND_MESSAGE)
        return
    print(f"Q: {match.question}")
    print(f"A: {match.answer}")


def run_cli(args: argparse.Namespace) -> int:
    try:
        config = load_config()
    except FaqSearchError as exc:
        print_error(exc)
        return 1

    # Load before touching the network or the database so a bad file fails fast.
    records = None
    if not args.skip_ingest:
        faq_path = args.faqs or config.faq_file
        try:
            records = FaqLoader().load(faq_path)
        except FaqSearchError as exc:
            print_error(exc)
            return 1

    embeddings_client = OpenAIEmbeddingClient.from_config(config)
    try:
        with DatabaseHelper.connect(config) as conn:
            repo = FaqRepository(conn, config.embedding_dim)

            if records is not None:
                use_case = IngestUseCase(
                    repo,
                    embeddings_client,
                    continue_on_error=args.continue_on_error,
                )
                result = use_case.execute(records)
                if not result.ok:
                    print_error(f"ingestion failed for {len(result.failures)} FAQ(s); skipping search")
                    return 1
                print(INGEST_DONE_MESSAGE)
                try:
                    print(f"[ingest] faqs table holds {repo.count()} row(s)")
                except QueryError as exc:
                    print(f"[warn] row count unavailable: {exc}")

            query = args.query.strip() if args.query is not None else read_query()
            try:
                match = SearchUseCase(repo, embeddings_client).execute(query)
            except EmbeddingError as exc:
                print_error(f"embedding generation failed: {exc}")
                return 1
            print_match(match)
            return 0
    except FaqSearchError as exc:
        print_error(exc)
        return 1
    finally:
        embeddings_client.close()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ingest FAQs into pgvector and answer one question by nearest neighbor"
    )
    parser.add_argument(
        "--faqs",
        help="Path to the FAQ JSON file (default: FAQ_FILE or faqs.json)",
    )
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Keep ingesting after a failed FAQ and report all failures",
    )
    parser.add_argument(
        "--skip-ingest",
        action="store_true",
        help="Only run the search step",
    )
    parser.add_argument(
        "--query",
        help="Question to search for instead of prompting on stdin",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    return run_cli(parser.parse_args(argv))


__all__ = ["run_cli", "create_parser", "main"]
