"""Database connection helper."""

from contextlib import contextmanager
from typing import Iterator

import psycopg  # type: ignore

from shared.config import AppConfig
from shared.exceptions import DatabaseConnectionError


class DatabaseHelper:
    """Opens the single long-lived connection a run works through."""

    @staticmethod
    @contextmanager
    def connect(config: AppConfig) -> Iterator[psycopg.Connection]:
        """Yield an autocommit connection and close it when the block exits.

        Raises:
            DatabaseConnectionError: if the server cannot be reached
        """
        try:
            conn = psycopg.connect(config.pg_conn, autocommit=True)
        except psycopg.Error as exc:
            raise DatabaseConnectionError(
                f"failed to connect to {config.pg_host}:{config.pg_port}/{config.pg_database}: {exc}"
            ) from exc
        with conn:
            yield conn


__all__ = ["DatabaseHelper"]
