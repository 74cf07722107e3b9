"""Portfolio validation errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class FieldError:
    """A single rejected field value."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationError(ValueError):
    """Raised when an entry field is assigned an invalid value."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors: List[FieldError] = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        """Build an error for a single field."""
        return cls([FieldError(field, message)])
