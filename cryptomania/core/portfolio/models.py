"""Pydantic schemas for portfolio operations."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, field_validator

from .entry import Entry
from .validation import (
    validate_id,
    validate_name,
    validate_price,
    validate_quantity,
    validate_symbol,
)


class EntryPayload(BaseModel):
    """Schema for creating or replacing an entry.

    Fields run through the same validators as ``Entry`` itself, so a payload
    that parses is always a valid entry.
    """

    id: int
    name: str
    symbol: str
    price: Decimal
    quantity: float

    @field_validator("id", mode="before")
    @classmethod
    def check_id(cls, v: Any) -> int:
        return validate_id(v)

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return validate_name(v)

    @field_validator("symbol")
    @classmethod
    def check_symbol(cls, v: str) -> str:
        return validate_symbol(v)

    @field_validator("price", mode="before")
    @classmethod
    def check_price(cls, v: Any) -> Decimal:
        return validate_price(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def check_quantity(cls, v: Any) -> float:
        return validate_quantity(v)

    def to_entry(self) -> Entry:
        """Build the domain entry from this payload."""
        return Entry(
            id=self.id,
            name=self.name,
            symbol=self.symbol,
            price=self.price,
            quantity=self.quantity,
        )


class EntryResponse(BaseModel):
    """Schema for entry response."""

    id: int
    name: str
    symbol: str
    price: Decimal
    quantity: float

    class Config:
        from_attributes = True
