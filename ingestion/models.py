"""Data models for ingestion layer."""

from dataclasses import dataclass
from typing import Any, Optional

from shared.exceptions import ParseError


@dataclass(frozen=True)
class FaqRecord:
    """
    One question/answer pair read from the input file.

    Empty strings are valid for either field; only the shape is checked.
    """

    question: str
    answer: str

    @classmethod
    def from_dict(cls, entry: Any, index: int, path: Optional[str] = None) -> "FaqRecord":
        if not isinstance(entry, dict):
            raise ParseError(f"entry {index} is not an object", path=path, index=index)
        values = {}
        for key in ("question", "answer"):
            value = entry.get(key)
            if not isinstance(value, str):
                raise ParseError(
                    f"entry {index} field {key!r} must be a string", path=path, index=index
                )
            values[key] = value
        return cls(**values)


__all__ = ["FaqRecord"]
