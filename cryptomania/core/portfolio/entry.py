"""Portfolio entry entity."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

from .validation import (
    EntryFields,
    validate_entry,
    validate_id,
    validate_name,
    validate_price,
    validate_quantity,
    validate_symbol,
)


class Entry:
    """One cryptocurrency holding in the portfolio.

    Every assignment is validated first, so an invalid value raises
    ``ValidationError`` and the previous value is kept.
    """

    __slots__ = ("_id", "_name", "_symbol", "_price", "_quantity")

    def __init__(
        self,
        id: int,
        name: str,
        symbol: str,
        price: Any,
        quantity: float,
    ):
        """Create an entry.

        Args:
            id: Non-negative entry ID
            name: Display name, e.g. "Bitcoin"
            symbol: Ticker symbol, e.g. "BTC"
            price: Unit price (Decimal, int, float or numeric string)
            quantity: Amount held

        Raises:
            ValidationError: With one FieldError per invalid argument
        """
        fields = validate_entry(id, name, symbol, price, quantity).unwrap()
        self._id = fields.id
        self._name = fields.name
        self._symbol = fields.symbol
        self._price = fields.price
        self._quantity = fields.quantity

    @classmethod
    def from_fields(cls, fields: EntryFields) -> "Entry":
        return cls(*fields)

    @property
    def id(self) -> int:
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        self._id = validate_id(value)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = validate_name(value)

    @property
    def symbol(self) -> str:
        # Re-checked on read as well as on write
        return validate_symbol(self._symbol)

    @symbol.setter
    def symbol(self, value: str) -> None:
        self._symbol = validate_symbol(value)

    @property
    def price(self) -> Decimal:
        return self._price

    @price.setter
    def price(self, value: Any) -> None:
        self._price = validate_price(value)

    @property
    def quantity(self) -> float:
        return self._quantity

    @quantity.setter
    def quantity(self, value: float) -> None:
        self._quantity = validate_quantity(value)

    @property
    def value(self) -> Decimal:
        """Market value of the holding (price * quantity)."""
        return self._price * Decimal(repr(self._quantity))

    def fields(self) -> EntryFields:
        return EntryFields(self._id, self._name, self._symbol, self._price, self._quantity)

    def copy(self) -> "Entry":
        return Entry.from_fields(self.fields())

    def to_dict(self) -> Dict[str, Any]:
        return self.fields()._asdict()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Entry):
            return NotImplemented
        return self.fields() == other.fields()

    def __hash__(self) -> int:
        return hash(self.fields())

    def __repr__(self) -> str:
        return (
            f"Entry(id={self._id}, name={self._name!r}, symbol={self._symbol!r}, "
            f"price={self._price}, quantity={self._quantity})"
        )
