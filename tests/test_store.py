"""Tests for PortfolioStore."""

import threading
from decimal import Decimal

import pytest

from cryptomania.core.portfolio.entry import Entry
from cryptomania.core.portfolio.errors import ValidationError
from cryptomania.core.portfolio.store import PortfolioStore


def entry(id: int, name: str = "Coin", price="1", quantity: float = 1.0) -> Entry:
    return Entry(id=id, name=name, symbol=name[:3].upper(), price=Decimal(price), quantity=quantity)


@pytest.fixture
def store() -> PortfolioStore:
    return PortfolioStore()


class TestListing:
    """Tests for list and sorted listings."""

    def test_list_preserves_insertion_order(self, store):
        """Should return entries in the order they were added."""
        e1, e2, e3 = entry(1, "btc"), entry(2, "eth"), entry(3, "ada")
        for e in (e1, e2, e3):
            store.add(e)

        assert store.list() == [e1, e2, e3]

    def test_list_returns_snapshot(self, store):
        """Should not let callers change the store through listed entries."""
        store.add(Entry(1, "a", "A", Decimal("2"), 3.0))
        listed = store.list()
        listed[0].price = Decimal("100")
        listed.clear()

        assert len(store) == 1
        assert store.portfolio_value() == Decimal("6")
        assert store.list() == [Entry(1, "a", "A", Decimal("2"), 3.0)]

    def test_sorted_listing_returns_copies(self, store):
        """Should not let callers change the store through sorted entries."""
        store.add(entry(1, "btc", quantity=1.0))
        store.list_sorted_by_name()[0].quantity = 50.0
        store.list_sorted_by_price()[0].name = "changed"
        store.list_sorted_by_quantity()[0].id = 9

        assert store.list() == [entry(1, "btc", quantity=1.0)]

    def test_empty_store(self, store):
        """Should list nothing for an empty store."""
        assert store.list() == []
        assert store.list_sorted_by_name() == []

    def test_sorted_by_name_ignores_case(self, store):
        """Should sort names case-insensitively."""
        for i, name in enumerate(["btc", "Ethereum", "ada"]):
            store.add(entry(i, name))

        assert [e.name for e in store.list_sorted_by_name()] == ["ada", "btc", "Ethereum"]

    def test_sorted_by_name_is_non_destructive(self, store):
        """Should leave insertion order intact."""
        for i, name in enumerate(["btc", "Ethereum", "ada"]):
            store.add(entry(i, name))
        store.list_sorted_by_name()

        assert [e.name for e in store.list()] == ["btc", "Ethereum", "ada"]

    def test_sorted_by_price(self, store):
        """Should sort by price ascending."""
        store.add(entry(1, "a", price="10.5"))
        store.add(entry(2, "b", price="2"))
        store.add(entry(3, "c", price="10.25"))

        assert [e.id for e in store.list_sorted_by_price()] == [2, 3, 1]

    def test_sorted_by_quantity(self, store):
        """Should sort by quantity ascending."""
        store.add(entry(1, "a", quantity=3.0))
        store.add(entry(2, "b", quantity=0.5))
        store.add(entry(3, "c", quantity=1.0))

        assert [e.id for e in store.list_sorted_by_quantity()] == [2, 3, 1]

    def test_sort_is_stable(self, store):
        """Should keep insertion order for equal keys."""
        store.add(entry(1, "BTC", price="5"))
        store.add(entry(2, "btc", price="5"))
        store.add(entry(3, "Btc", price="5"))

        assert [e.id for e in store.list_sorted_by_name()] == [1, 2, 3]
        assert [e.id for e in store.list_sorted_by_price()] == [1, 2, 3]

    @pytest.mark.parametrize(
        "sort,expected",
        [
            ("name", [3, 1, 2]),
            ("NAME", [3, 1, 2]),
            ("price", [2, 3, 1]),
            ("quantity", [1, 3, 2]),
            ("none", [1, 2, 3]),
            ("bogus", [1, 2, 3]),
            (None, [1, 2, 3]),
            ("", [1, 2, 3]),
        ],
    )
    def test_list_sorted_dispatch(self, store, sort, expected):
        """Should pick the sort key, falling back to insertion order."""
        store.add(entry(1, "btc", price="30", quantity=1.0))
        store.add(entry(2, "eth", price="10", quantity=3.0))
        store.add(entry(3, "ada", price="20", quantity=2.0))

        assert [e.id for e in store.list_sorted(sort)] == expected


class TestLookup:
    """Tests for find_by_id and add."""

    def test_find_on_empty_store(self, store):
        """Should return None rather than raise."""
        assert store.find_by_id(1) is None

    def test_find_missing_id(self, store):
        """Should return None for an unknown id."""
        store.add(entry(1))
        assert store.find_by_id(99) is None

    def test_find_existing(self, store):
        """Should return a copy of the stored entry."""
        e = entry(7)
        store.add(e)
        found = store.find_by_id(7)

        assert found == e
        assert found is not e

    def test_found_entry_is_detached(self, store):
        """Should not change the store when a found entry is mutated."""
        store.add(entry(7, price="2"))
        store.find_by_id(7).price = Decimal("100")

        assert store.find_by_id(7).price == Decimal("2")

    def test_add_returns_stored_entry(self, store):
        """Should append and return the same object."""
        e = entry(1)
        assert store.add(e) is e
        assert len(store) == 1

    def test_duplicate_ids_first_match_wins(self, store):
        """Should allow duplicate ids and return the first."""
        first, second = entry(1, "first"), entry(1, "second")
        store.add(first)
        store.add(second)

        assert len(store) == 2
        assert store.find_by_id(1) == first


class TestUpdate:
    """Tests for update."""

    def test_update_missing_returns_none(self, store):
        """Should return None and leave the store unchanged."""
        original = entry(1, "btc")
        store.add(original)

        assert store.update(2, entry(5, "eth")) is None
        assert store.list() == [entry(1, "btc")]

    def test_update_overwrites_all_fields(self, store):
        """Should copy every replacement field onto the existing entry."""
        existing = entry(1, "btc", price="1", quantity=1.0)
        store.add(existing)
        replacement = Entry(id=9, name="Ether", symbol="ETH", price=Decimal("3000"), quantity=4.0)

        updated = store.update(1, replacement)

        assert updated is existing
        assert updated is not replacement
        assert updated == replacement
        assert store.find_by_id(1) is None
        assert store.find_by_id(9) == replacement

    def test_update_keeps_position(self, store):
        """Should update in place without reordering."""
        store.add(entry(1, "a"))
        store.add(entry(2, "b"))
        store.add(entry(3, "c"))

        store.update(2, entry(20, "z"))

        assert [e.id for e in store.list()] == [1, 20, 3]

    def test_update_rejects_corrupt_replacement_atomically(self, store):
        """Should not write any field if a replacement value is invalid."""
        existing = entry(1, "btc")
        store.add(existing)
        replacement = entry(5, "eth")
        replacement._quantity = -1.0

        with pytest.raises(ValidationError):
            store.update(1, replacement)

        assert existing == entry(1, "btc")


class TestPortfolioValue:
    """Tests for portfolio_value."""

    def test_sums_price_times_quantity(self, store):
        """Should return 2*3 + 5*1 = 11."""
        store.add(entry(1, "a", price="2", quantity=3))
        store.add(entry(2, "b", price="5", quantity=1))

        assert store.portfolio_value() == Decimal("11")

    def test_empty_store_is_zero(self, store):
        """Should be zero with no entries."""
        assert store.portfolio_value() == 0

    def test_decimal_precision(self, store):
        """Should not accumulate float rounding errors."""
        for i in range(10):
            store.add(entry(i, "a", price="0.1", quantity=1.0))

        assert store.portfolio_value() == Decimal("1.0")


class TestConcurrency:
    """Tests for shared use across threads."""

    def test_concurrent_adds(self, store):
        """Should keep every entry added from parallel threads."""

        def worker(offset):
            for i in range(100):
                store.add(entry(offset + i))

        threads = [threading.Thread(target=worker, args=(n * 100,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store) == 800
        assert sorted(e.id for e in store.list()) == list(range(800))
