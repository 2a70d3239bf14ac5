import os
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from tax_inventory.config import get_settings
from tax_inventory.domain.depreciation import AssetElection, DepreciationElection
from tax_inventory.domain.value_objects import PropertyClass
from tax_inventory.services.tax_rules import _cached_rules


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run every test with default settings and no stray .env file."""
    for name in list(os.environ):
        if name.startswith("TAX_INVENTORY_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    _cached_rules.cache_clear()
    yield
    get_settings.cache_clear()
    _cached_rules.cache_clear()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_now: datetime):
    return lambda: fixed_now


@pytest.fixture
def vine_paste() -> str:
    return "\n".join(
        [
            "Amazon Vine - Orders Report",
            "Order Number ASIN Product Name Order Type Order Date Shipped Date ETV",
            "114-1234567-1234567 B0ABCD1234 Ninja Air Fryer XL ORDER 01/15/2025 01/17/2025 89.99",
            "114-7654321-7654321 B0ZZZZ9999 Desk Lamp CANCELLATION 01/20/2025 01/21/2025 25.00",
            "114‑2222222‑3333333 B0QWERTY12 Office Chair ORDER 02/01/2025 02/03/2025 149.50",
            "114-5555555-5555555 B0FREE0000 Sample Pack ORDER 02/05/2025 02/06/2025 0.00",
        ]
    )


@pytest.fixture
def widget_csv() -> str:
    return "Name,Price,Date\nWidget,$45.99,01/15/2025\n"


@pytest.fixture
def laptop_election() -> DepreciationElection:
    return DepreciationElection(
        original_cost=Decimal("20000"),
        purchase_year=2025,
        property_class=PropertyClass.FIVE_YEAR,
    )


@pytest.fixture
def two_laptops(laptop_election: DepreciationElection) -> list[AssetElection]:
    return [
        AssetElection(name="Laptop A", election=laptop_election),
        AssetElection(name="Laptop B", election=laptop_election),
    ]
