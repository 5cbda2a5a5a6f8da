"""Top-level pytest configuration for stockroom."""

from datetime import date

import pytest

from stockroom.config import InventorySettings
from stockroom.inventory import (
    ElectronicItem,
    GroceryItem,
    InventoryService,
    InventoryStore,
)
from stockroom.logging import LoggingSettings, get_logger


class RecordingReporter:
    """Collects (message, error) pairs handed to the service reporter."""

    def __init__(self) -> None:
        self.calls = []

    def __call__(self, message, error) -> None:
        self.calls.append((message, error))

    @property
    def errors(self):
        return [error for _, error in self.calls]


@pytest.fixture
def quiet_logger():
    """A logger that writes nowhere."""
    return get_logger(
        "stockroom.tests", settings=LoggingSettings(console_enabled=False, level="DEBUG")
    )


@pytest.fixture
def laptop() -> ElectronicItem:
    return ElectronicItem(id=1, name="Laptop", quantity=5, brand="Acer", warranty_months=24)


@pytest.fixture
def phone() -> ElectronicItem:
    return ElectronicItem(
        id=2, name="Smartphone", quantity=10, brand="Samsung", warranty_months=12
    )


@pytest.fixture
def rice() -> GroceryItem:
    return GroceryItem(id=101, name="Rice", quantity=50, expiry_date=date(2030, 1, 31))


@pytest.fixture
def electronics(quiet_logger) -> InventoryStore[ElectronicItem]:
    return InventoryStore("electronics", logger=quiet_logger)


@pytest.fixture
def groceries(quiet_logger) -> InventoryStore[GroceryItem]:
    return InventoryStore("groceries", logger=quiet_logger)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def printed() -> list:
    return []


@pytest.fixture
def service(quiet_logger, reporter, printed) -> InventoryService:
    return InventoryService(
        logger=quiet_logger,
        settings=InventorySettings(),
        printer=printed.append,
        reporter=reporter,
    )
