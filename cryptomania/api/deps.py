"""FastAPI dependencies."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from cryptomania.config import get_settings
from cryptomania.core.portfolio.importers import parse_entries_csv
from cryptomania.core.portfolio.store import PortfolioStore

logger = logging.getLogger(__name__)


@lru_cache
def get_store() -> PortfolioStore:
    """Get the application-wide portfolio store.

    Seeded from ``settings.seed_file`` the first time it is requested.
    """
    store = PortfolioStore()

    seed_file = get_settings().seed_file
    if seed_file:
        entries, errors = parse_entries_csv(Path(seed_file).read_text(encoding="utf-8"))
        for entry in entries:
            store.add(entry)
        for err in errors:
            logger.warning(f"Skipped seed row in {seed_file}: {err}")
        logger.info(f"Seeded portfolio with {len(entries)} entries from {seed_file}")

    return store
