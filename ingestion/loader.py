import json
from pathlib import Path
from typing import List, Union

from shared.exceptions import FileOpenError, ParseError

from .models import FaqRecord


class FaqLoader:
    """Reads a JSON array of ``{"question", "answer"}`` objects."""

    encoding = "utf-8"

    def load(self, path: Union[str, Path]) -> List[FaqRecord]:
        """Parse ``path`` into records, preserving file order.

        Raises:
            FileOpenError: the file cannot be opened or read
            ParseError: invalid JSON or an entry of the wrong shape
        """
        path_str = str(path)
        try:
            with open(path, "r", encoding=self.encoding) as f:
                text = f.read()
        except OSError as exc:
            raise FileOpenError(f"cannot open {path_str}: {exc}", path=path_str) from exc
        except UnicodeDecodeError as exc:
            raise ParseError(f"{path_str} is not valid UTF-8: {exc}", path=path_str) from exc

        try:
            data = json.loads(text)
        except ValueError as exc:
            raise ParseError(f"invalid JSON in {path_str}: {exc}", path=path_str) from exc

        if not isinstance(data, list):
            raise ParseError(f"{path_str} must contain a JSON array", path=path_str)
        return [FaqRecord.from_dict(entry, i, path_str) for i, entry in enumerate(data)]


__all__ = ["FaqLoader"]
