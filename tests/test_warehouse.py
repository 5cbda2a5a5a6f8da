# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# stockroom: tests for the warehouse scenario
import io
from datetime import date

import pytest
from rich.console import Console

from stockroom.config import InventorySettings
from stockroom.warehouse import WarehouseManager


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def manager(quiet_logger, output) -> WarehouseManager:
    return WarehouseManager(
        logger=quiet_logger,
        console=Console(file=output, width=200),
        today=date(2026, 1, 1),
    )


def test_seed_data(manager) -> None:
    assert manager.seed_data() == 4
    assert {item.id for item in manager.electronics.get_all()} == {1, 2}
    assert {item.id for item in manager.groceries.get_all()} == {101, 102}
    assert manager.groceries.get_by_id(102).unwrap().expiry_date == date(2026, 1, 11)


def test_seeding_twice_reports_duplicates(manager, output) -> None:
    manager.seed_data()
    assert manager.seed_data() == 0
    assert output.getvalue().count("Seed error: Item with ID") == 4


def test_run(manager, output) -> None:
    manager.run()
    text = output.getvalue()

    assert text.startswith("Grocery items:\n")
    assert "[G] 101 - Rice Qty: 50 Expiry: 2026-07-02" in text
    assert "Increased item 1 to 8" in text
    assert "Duplicate add caught: Item with ID 101 already exists." in text
    assert "Error removing item: Item with ID 999 not found." in text
    assert "Invalid quantity caught: Quantity cannot be negative (got -10)." in text
    assert "Final inventories:" in text
    # The failed update left the laptop untouched
    assert manager.electronics.get_by_id(1).unwrap().quantity == 8
    assert manager.groceries.get_by_id(101).unwrap().name == "Rice"


def test_stores_use_configured_limit(quiet_logger, output) -> None:
    manager = WarehouseManager(
        logger=quiet_logger,
        settings=InventorySettings(max_quantity=20),
        console=Console(file=output, width=200),
        today=date(2026, 1, 1),
    )

    # Rice (50) is above the limit; Milk (20) sits exactly on it
    assert manager.seed_data() == 3
    assert 101 not in manager.groceries
    assert "Seed error: Quantity cannot exceed 20 (got 50)." in output.getvalue()
