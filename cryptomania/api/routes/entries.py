"""Portfolio entry API routes."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from cryptomania.api.deps import get_store
from cryptomania.api.routing import DecimalJSONRoute
from cryptomania.core.portfolio.models import EntryPayload, EntryResponse
from cryptomania.core.portfolio.store import SORT_KEYS, PortfolioStore

router = APIRouter(route_class=DecimalJSONRoute)


@router.get("/entries", response_model=List[EntryResponse])
def list_entries(
    sort: Optional[str] = Query(
        None,
        description=f"Sort key: {', '.join(SORT_KEYS)} (anything else keeps insertion order)",
    ),
    store: PortfolioStore = Depends(get_store),
):
    """List all entries, optionally sorted."""
    return store.list_sorted(sort)


@router.get("/entries/{entry_id}", response_model=EntryResponse)
def get_entry(
    entry_id: int,
    store: PortfolioStore = Depends(get_store),
):
    """Get a specific entry by ID."""
    entry = store.find_by_id(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Entry {entry_id} not found",
        )
    return entry


@router.post("/entries", response_model=EntryResponse, status_code=status.HTTP_201_CREATED)
def add_entry(
    payload: EntryPayload,
    store: PortfolioStore = Depends(get_store),
):
    """Add a new entry."""
    return store.add(payload.to_entry())


@router.put("/entries/{entry_id}", response_model=EntryResponse)
def update_entry(
    entry_id: int,
    payload: EntryPayload,
    store: PortfolioStore = Depends(get_store),
):
    """Replace every field of an entry, including its ID."""
    updated = store.update(entry_id, payload.to_entry())
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Entry {entry_id} not found",
        )
    return updated


@router.get("/portfolio-value", response_model=float)
def portfolio_value(store: PortfolioStore = Depends(get_store)):
    """Total value of the portfolio (sum of price * quantity)."""
    return float(store.portfolio_value())
