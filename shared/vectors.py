from typing import Sequence

from .exceptions import DimensionError


def format_vector_literal(vector: Sequence[float]) -> str:
    """Represent a numeric vector as a Postgres-compatible literal."""
    return "[" + ",".join(str(float(value)) for value in vector) + "]"


def validate_dimension(vector: Sequence[float], expected: int) -> None:
    """Raise DimensionError unless ``vector`` has exactly ``expected`` entries."""
    actual = len(vector)
    if actual != expected:
        raise DimensionError(expected, actual)


__all__ = ["format_vector_literal", "validate_dimension"]
