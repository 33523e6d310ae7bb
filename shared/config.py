import os
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigError


EMBEDDING_MODEL_DEFAULT = "text-embedding-ada-002"
EMBEDDING_DIM_DEFAULT = 1536
FAQ_FILE_DEFAULT = "faqs.json"

REQUIRED_ENV = (
    "OPENAI_API_KEY",
    "API_URL",
    "POSTGRES_USER",
    "POSTGRES_PW",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
)


@dataclass(frozen=True)
class AppConfig:
    """Configuration for the FAQ ingest-and-query run."""

    openai_api_key: str
    api_url: str
    pg_user: str
    pg_password: str
    pg_host: str
    pg_port: int
    pg_database: str
    embedding_model: str = EMBEDDING_MODEL_DEFAULT
    embedding_dim: int = EMBEDDING_DIM_DEFAULT
    faq_file: str = FAQ_FILE_DEFAULT

    @property
    def pg_conn(self) -> str:
        """PostgreSQL connection URI built from the individual settings."""
        user = quote(self.pg_user, safe="")
        password = quote(self.pg_password, safe="")
        return f"postgres://{user}:{password}@{self.pg_host}:{self.pg_port}/{self.pg_database}"


def _parse_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


def load_config(dotenv_path: Optional[str] = None) -> AppConfig:
    """Load configuration from environment variables.

    A ``.env`` file found from the working directory upward is read first when
    present; variables already set in the process environment win over it.

    Raises:
        ConfigError: if a required variable is missing or a value is malformed
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))

    missing: List[str] = [name for name in REQUIRED_ENV if not os.getenv(name)]
    if missing:
        raise ConfigError("missing required environment variables: " + ", ".join(missing))

    pg_port = _parse_int("POSTGRES_PORT", os.getenv("POSTGRES_PORT"), 0)
    embedding_dim = _parse_int("EMBEDDING_DIM", os.getenv("EMBEDDING_DIM"), EMBEDDING_DIM_DEFAULT)
    if embedding_dim <= 0:
        raise ConfigError(f"EMBEDDING_DIM must be positive, got {embedding_dim}")

    return AppConfig(
        openai_api_key=os.environ["OPENAI_API_KEY"],
        api_url=os.environ["API_URL"],
        pg_user=os.environ["POSTGRES_USER"],
        pg_password=os.environ["POSTGRES_PW"],
        pg_host=os.environ["POSTGRES_HOST"],
        pg_port=pg_port,
        pg_database=os.environ["POSTGRES_DB"],
        embedding_model=os.getenv("EMBEDDING_MODEL") or EMBEDDING_MODEL_DEFAULT,
        embedding_dim=embedding_dim,
        faq_file=os.getenv("FAQ_FILE") or FAQ_FILE_DEFAULT,
    )


__all__ = ["AppConfig", "load_config", "EMBEDDING_DIM_DEFAULT", "EMBEDDING_MODEL_DEFAULT"]
