"""Field validation for portfolio entries.

Each ``validate_*`` function returns the value to store, or raises
:class:`ValidationError` naming the offending field. ``validate_entry`` runs
all of them and collects every failure into a :class:`ValidationResult`
instead of stopping at the first one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from numbers import Real
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from .errors import FieldError, ValidationError


class EntryFields(NamedTuple):
    """Validated values for the five entry fields."""

    id: int
    name: str
    symbol: str
    price: Decimal
    quantity: float


def validate_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError.for_field("id", "ID must be an integer")
    if value < 0:
        raise ValidationError.for_field("id", "ID cannot be negative")
    return value


def _validate_text(field_name: str, label: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError.for_field(field_name, f"{label} cannot be null or empty")
    return value


def validate_name(value: Any) -> str:
    return _validate_text("name", "Name", value)


def validate_symbol(value: Any) -> str:
    return _validate_text("symbol", "Symbol", value)


def validate_price(value: Any) -> Decimal:
    """Validate a price and convert it to ``Decimal``.

    Floats go through ``repr`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.
    """
    if value is None:
        raise ValidationError.for_field("price", "Price cannot be null")
    if isinstance(value, bool):
        raise ValidationError.for_field("price", "Price must be a number")

    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, int):
        price = Decimal(value)
    elif isinstance(value, float):
        price = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            price = Decimal(value.strip())
        except InvalidOperation:
            raise ValidationError.for_field("price", "Price must be a number")
    else:
        raise ValidationError.for_field("price", "Price must be a number")

    if not price.is_finite():
        raise ValidationError.for_field("price", "Price must be a finite number")
    if price < 0:
        raise ValidationError.for_field("price", "Price cannot be negative")
    return price


def validate_quantity(value: Any) -> float:
    if value is None:
        raise ValidationError.for_field("quantity", "Quantity cannot be null")
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValidationError.for_field("quantity", "Quantity must be a number")

    quantity = float(value)
    if not math.isfinite(quantity):
        raise ValidationError.for_field("quantity", "Quantity must be a finite number")
    if quantity < 0:
        raise ValidationError.for_field("quantity", "Quantity cannot be negative")
    return quantity


FIELD_VALIDATORS: Dict[str, Callable[[Any], Any]] = {
    "id": validate_id,
    "name": validate_name,
    "symbol": validate_symbol,
    "price": validate_price,
    "quantity": validate_quantity,
}


@dataclass
class ValidationResult:
    """Outcome of validating a full set of entry fields."""

    value: Optional[EntryFields] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> EntryFields:
        """Return the validated fields or raise the collected errors."""
        if self.errors:
            raise ValidationError(self.errors)
        return self.value


def validate_entry(
    id: Any,
    name: Any,
    symbol: Any,
    price: Any,
    quantity: Any,
) -> ValidationResult:
    """Validate all five entry fields, collecting every error.

    Args:
        id: Entry ID
        name: Display name (e.g. "Bitcoin")
        symbol: Ticker symbol (e.g. "BTC")
        price: Unit price
        quantity: Amount held

    Returns:
        ValidationResult with the normalized fields, or the list of errors
    """
    raw = {"id": id, "name": name, "symbol": symbol, "price": price, "quantity": quantity}
    values: Dict[str, Any] = {}
    errors: List[FieldError] = []

    for field_name, validator in FIELD_VALIDATORS.items():
        try:
            values[field_name] = validator(raw[field_name])
        except ValidationError as e:
            errors.extend(e.errors)

    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(value=EntryFields(**values))
