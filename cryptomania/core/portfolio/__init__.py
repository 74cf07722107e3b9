"""Portfolio entries and the in-memory store."""

from .errors import FieldError, ValidationError
from .entry import Entry
from .models import EntryPayload, EntryResponse
from .store import PortfolioStore
from .validation import ValidationResult, validate_entry

__all__ = [
    "FieldError",
    "ValidationError",
    "Entry",
    "EntryPayload",
    "EntryResponse",
    "PortfolioStore",
    "ValidationResult",
    "validate_entry",
]
