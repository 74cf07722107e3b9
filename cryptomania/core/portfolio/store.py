"""In-memory portfolio store."""

from __future__ import annotations

import logging
import threading
from decimal import Decimal
from typing import Callable, Iterable, List, Optional

from .entry import Entry
from .validation import validate_entry

logger = logging.getLogger(__name__)

SORT_KEYS = ("name", "price", "quantity")


class PortfolioStore:
    """Ordered, in-memory collection of portfolio entries.

    Insertion order is the canonical order. Reads return copies of the
    stored entries, so callers cannot change the store by mutating them.
    Every operation holds a single re-entrant lock, so the store can be
    shared by concurrent request handlers.
    """

    def __init__(self, entries: Optional[Iterable[Entry]] = None):
        """Initialize the store, optionally with initial entries."""
        self._entries: List[Entry] = list(entries or [])
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def list(self) -> List[Entry]:
        """Return all entries in insertion order."""
        with self._lock:
            logger.debug(f"Returning copy of portfolio, size: {len(self._entries)}")
            return [e.copy() for e in self._entries]

    def _sorted(self, key: Callable[[Entry], object]) -> List[Entry]:
        with self._lock:
            return [e.copy() for e in sorted(self._entries, key=key)]

    def list_sorted_by_name(self) -> List[Entry]:
        """Return entries sorted by name, case-insensitive ascending."""
        logger.debug("Sorting entries by name")
        return self._sorted(lambda e: e.name.lower())

    def list_sorted_by_price(self) -> List[Entry]:
        """Return entries sorted by price, ascending."""
        logger.debug("Sorting entries by price")
        return self._sorted(lambda e: e.price)

    def list_sorted_by_quantity(self) -> List[Entry]:
        """Return entries sorted by quantity, ascending."""
        logger.debug("Sorting entries by quantity")
        return self._sorted(lambda e: e.quantity)

    def list_sorted(self, sort: Optional[str] = None) -> List[Entry]:
        """Return entries ordered by a sort key.

        Args:
            sort: "name", "price" or "quantity" (case-insensitive). Any other
                value, including None, keeps insertion order.

        Returns:
            List of entries
        """
        key = (sort or "").strip().lower()
        if key == "name":
            return self.list_sorted_by_name()
        if key == "price":
            return self.list_sorted_by_price()
        if key == "quantity":
            return self.list_sorted_by_quantity()
        return self.list()

    def _find(self, entry_id: int) -> Optional[Entry]:
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    return entry
        return None

    def find_by_id(self, entry_id: int) -> Optional[Entry]:
        """Get a copy of the first entry with the given ID.

        Returns:
            Entry or None if no entry has that ID
        """
        logger.debug(f"Searching for entry with id: {entry_id}")
        with self._lock:
            entry = self._find(entry_id)
            return entry.copy() if entry is not None else None

    def add(self, entry: Entry) -> Entry:
        """Append an entry.

        IDs are not checked for uniqueness; lookups return the first match.

        Returns:
            The stored entry
        """
        with self._lock:
            self._entries.append(entry)
        logger.info(f"Added entry: {entry.name}")
        return entry

    def update(self, entry_id: int, replacement: Entry) -> Optional[Entry]:
        """Overwrite an existing entry with the replacement's fields.

        All five fields are copied, including the ID, so an update may change
        the entry's ID. The replacement values are validated before the first
        field is written.

        Args:
            entry_id: ID of the entry to update
            replacement: Entry carrying the new values

        Returns:
            The updated (existing) entry, or None if not found

        Raises:
            ValidationError: If the replacement holds an invalid value
        """
        with self._lock:
            entry = self._find(entry_id)
            if entry is None:
                logger.warning(f"Entry with id {entry_id} not found for update.")
                return None

            fields = validate_entry(
                replacement.id,
                replacement.name,
                replacement.symbol,
                replacement.price,
                replacement.quantity,
            ).unwrap()

            entry.id = fields.id
            entry.name = fields.name
            entry.symbol = fields.symbol
            entry.price = fields.price
            entry.quantity = fields.quantity

        logger.info(f"Updated entry: {entry!r}")
        return entry

    def portfolio_value(self) -> Decimal:
        """Sum of price * quantity across all entries."""
        with self._lock:
            total = sum((e.value for e in self._entries), Decimal("0"))
        logger.debug(f"Portfolio value: {total}")
        return total
