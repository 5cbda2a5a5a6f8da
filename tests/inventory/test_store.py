# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# stockroom: tests for the typed inventory store
from datetime import date

import pytest

from stockroom.errors import Failure, Success
from stockroom.inventory import (
    DuplicateItemError,
    ElectronicItem,
    GroceryItem,
    InvalidQuantityError,
    InventoryStore,
    ItemNotFoundError,
)


class TestAdd:
    def test_add_distinct_items(self, electronics, laptop, phone) -> None:
        assert electronics.add(laptop).is_success
        assert electronics.add(phone).is_success
        assert {item.id for item in electronics.get_all()} == {1, 2}
        assert len(electronics) == 2

    def test_add_duplicate_fails(self, electronics, laptop) -> None:
        electronics.add(laptop)
        other = ElectronicItem(
            id=1, name="Tablet", quantity=3, brand="Lenovo", warranty_months=6
        )

        result = electronics.add(other)

        assert isinstance(result, Failure)
        assert isinstance(result.error, DuplicateItemError)
        assert result.error.item_id == 1
        # Store content unchanged by the failed attempt
        assert electronics.get_all() == [laptop]
        assert electronics.get_by_id(1).unwrap().name == "Laptop"

    def test_duplicate_error_carries_code(self, electronics, laptop) -> None:
        electronics.add(laptop)
        error = electronics.add(laptop).error
        assert error.code.code == "INVENTORY_DUPLICATE_ITEM"
        assert error.context["item_id"] == 1
        assert error.context["store"] == "electronics"


class TestGetById:
    def test_round_trip(self, groceries, rice) -> None:
        groceries.add(rice)
        result = groceries.get_by_id(101)
        assert isinstance(result, Success)
        assert result.unwrap() == rice

    def test_missing(self, groceries) -> None:
        result = groceries.get_by_id(7)
        assert result.is_failure
        assert isinstance(result.error, ItemNotFoundError)
        assert result.error.item_id == 7

    def test_unwrap_missing_raises(self, groceries) -> None:
        with pytest.raises(RuntimeError):
            groceries.get_by_id(7).unwrap()


class TestRemove:
    def test_remove_existing(self, electronics, laptop) -> None:
        electronics.add(laptop)
        assert electronics.remove(1).is_success
        assert 1 not in electronics
        assert electronics.get_all() == []

    def test_remove_from_empty_store(self, electronics) -> None:
        result = electronics.remove(42)
        assert isinstance(result.error, ItemNotFoundError)
        assert result.error.item_id == 42
        assert electronics.get_all() == []


class TestGetAll:
    def test_empty(self, electronics) -> None:
        assert electronics.get_all() == []

    def test_snapshot_is_independent(self, electronics, laptop, phone) -> None:
        electronics.add(laptop)
        snapshot = electronics.get_all()
        snapshot.append(phone)
        snapshot.clear()
        assert electronics.get_all() == [laptop]

    def test_iteration_uses_snapshot(self, electronics, laptop, phone) -> None:
        electronics.add(laptop)
        electronics.add(phone)
        for item in electronics:
            electronics.remove(item.id)
        assert len(electronics) == 0


class TestUpdateQuantity:
    def test_update_changes_only_quantity(self, electronics, laptop) -> None:
        electronics.add(laptop)

        result = electronics.update_quantity(1, 42)

        assert result.is_success
        updated = electronics.get_by_id(1).unwrap()
        assert updated.quantity == 42
        assert updated.model_dump(exclude={"quantity"}) == laptop.model_dump(
            exclude={"quantity"}
        )
        # The original value is untouched
        assert laptop.quantity == 5

    def test_update_to_zero(self, electronics, laptop) -> None:
        electronics.add(laptop)
        assert electronics.update_quantity(1, 0).unwrap().quantity == 0

    def test_negative_quantity_existing_id(self, electronics, laptop) -> None:
        electronics.add(laptop)
        result = electronics.update_quantity(1, -1)
        assert isinstance(result.error, InvalidQuantityError)
        assert result.error.quantity == -1
        assert electronics.get_by_id(1).unwrap().quantity == 5

    def test_negative_quantity_missing_id(self, electronics) -> None:
        # Quantity is validated before the id is resolved
        result = electronics.update_quantity(99, -1)
        assert isinstance(result.error, InvalidQuantityError)
        assert not isinstance(result.error, ItemNotFoundError)

    def test_missing_id(self, electronics) -> None:
        result = electronics.update_quantity(99, 3)
        assert isinstance(result.error, ItemNotFoundError)
        assert result.error.item_id == 99


def test_stores_are_keyed_independently(electronics, groceries) -> None:
    gadget = ElectronicItem(
        id=5, name="Router", quantity=1, brand="TP-Link", warranty_months=12
    )
    bread = GroceryItem(id=5, name="Bread", quantity=4, expiry_date=date(2030, 1, 2))

    assert electronics.add(gadget).is_success
    assert groceries.add(bread).is_success
    assert electronics.get_by_id(5).unwrap().name == "Router"
    assert groceries.get_by_id(5).unwrap().name == "Bread"


def test_end_to_end_scenario(quiet_logger, service) -> None:
    store: InventoryStore[ElectronicItem] = InventoryStore("scenario", logger=quiet_logger)
    first = ElectronicItem(
        id=1, name="Laptop", quantity=5, brand="Acer", warranty_months=24
    )
    second = ElectronicItem(
        id=2, name="Monitor", quantity=10, brand="Dell", warranty_months=36
    )

    assert store.add(first).is_success
    assert store.add(second).is_success
    assert len(store.get_all()) == 2

    assert service.increase_stock(store, 1, 3).is_success
    assert store.get_by_id(1).unwrap().quantity == 8

    assert store.remove(2).is_success
    missing = store.get_by_id(2)
    assert isinstance(missing.error, ItemNotFoundError)
    assert missing.error.item_id == 2

    again = store.add(first)
    assert isinstance(again.error, DuplicateItemError)
    assert again.error.item_id == 1


def test_repr(electronics, laptop) -> None:
    electronics.add(laptop)
    assert repr(electronics) == "InventoryStore(name='electronics', size=1)"


class TestQuantityLimit:
    def test_update_above_limit_rejected(self, quiet_logger, laptop) -> None:
        store = InventoryStore("small", logger=quiet_logger, max_quantity=10)
        store.add(laptop)

        result = store.update_quantity(1, 11)

        assert isinstance(result.error, InvalidQuantityError)
        assert result.error.quantity == 11
        assert result.error.limit == 10
        assert store.get_by_id(1).unwrap().quantity == 5

    def test_update_to_limit_allowed(self, quiet_logger, laptop) -> None:
        store = InventoryStore("small", logger=quiet_logger, max_quantity=10)
        store.add(laptop)
        assert store.update_quantity(1, 10).unwrap().quantity == 10

    def test_default_limit_is_32_bit_max(self, electronics, laptop) -> None:
        electronics.add(laptop)
        result = electronics.update_quantity(1, (2**31 - 1) * 4)
        assert isinstance(result.error, InvalidQuantityError)
        assert electronics.get_by_id(1).unwrap().quantity == 5

    def test_above_limit_checked_before_existence(self, quiet_logger) -> None:
        store = InventoryStore("small", logger=quiet_logger, max_quantity=10)
        result = store.update_quantity(99, 11)
        assert isinstance(result.error, InvalidQuantityError)

    def test_add_above_limit_rejected(self, quiet_logger, laptop) -> None:
        store = InventoryStore("tiny", logger=quiet_logger, max_quantity=3)

        result = store.add(laptop)

        assert isinstance(result.error, InvalidQuantityError)
        assert result.error.item_id == 1
        assert store.get_all() == []
