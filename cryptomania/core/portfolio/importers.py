"""Portfolio CSV import and export."""

from __future__ import annotations

import csv
from io import StringIO
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .entry import Entry
from .store import PortfolioStore
from .validation import validate_entry

CSV_COLUMNS = ("id", "name", "symbol", "price", "quantity")


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer cell like '12'. Returns None if unparseable."""
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_float(value: Optional[str]) -> Optional[float]:
    """Parse a quantity cell like '1,501.5'. Returns None if unparseable."""
    if value is None or not value.strip():
        return None
    cleaned = value.replace(",", "").strip()
    try:
        return float(cleaned)
    except ValueError:
        return None


def parse_price(value: Optional[str]) -> Optional[str]:
    """Strip currency formatting like '$1,234.56' from a price cell.

    The result stays a string so it converts to Decimal without going
    through float.
    """
    if value is None or not value.strip():
        return None
    return value.replace("$", "").replace(",", "").strip()


def parse_entries_csv(csv_content: str) -> Tuple[List[Entry], List[str]]:
    """Parse a portfolio CSV.

    Expected header: ``id,name,symbol,price,quantity``. Rows that fail
    validation are skipped and reported.

    Args:
        csv_content: Raw CSV content as string

    Returns:
        Tuple of (entries list, error messages list)
    """
    entries: List[Entry] = []
    errors: List[str] = []

    reader = csv.DictReader(StringIO(csv_content.strip()))
    fieldnames = [f.strip().lower() for f in (reader.fieldnames or [])]

    missing = [col for col in CSV_COLUMNS if col not in fieldnames]
    if missing:
        errors.append(f"Missing column(s): {', '.join(missing)}")
        return entries, errors
    reader.fieldnames = fieldnames

    # Header is line 1
    for row_num, row in enumerate(reader, start=2):
        if not any((v or "").strip() for v in row.values() if isinstance(v, str)):
            continue

        result = validate_entry(
            id=parse_int(row.get("id")),
            name=row.get("name"),
            symbol=row.get("symbol"),
            price=parse_price(row.get("price")),
            quantity=parse_float(row.get("quantity")),
        )
        if not result.ok:
            messages = "; ".join(str(e) for e in result.errors)
            errors.append(f"Row {row_num}: {messages}")
            continue

        entries.append(Entry.from_fields(result.unwrap()))

    return entries, errors


def export_entries_csv(entries: Iterable[Entry]) -> str:
    """Render entries as CSV in the format read by parse_entries_csv."""
    buffer = StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_COLUMNS, lineterminator="\n")
    writer.writeheader()
    for e in entries:
        writer.writerow(e.to_dict())
    return buffer.getvalue()


def load_store(path: Path) -> Tuple[PortfolioStore, List[str]]:
    """Build a store from a portfolio CSV file.

    Args:
        path: CSV file path

    Returns:
        Tuple of (store with the valid rows, error messages list)
    """
    entries, errors = parse_entries_csv(path.read_text(encoding="utf-8"))
    return PortfolioStore(entries), errors
