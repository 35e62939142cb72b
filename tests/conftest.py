"""
Pytest configuration and shared fixtures.

This file adds the project root to the Python path so that tests can import
the domain, repositories, services and api packages.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Callable

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from domain.transaction import Transaction  # noqa: E402
from repositories.transaction_repository import InMemoryTransactionStore  # noqa: E402

MakeTransaction = Callable[..., Transaction]


@pytest.fixture
def make_transaction() -> MakeTransaction:
    """
    Factory for Transactions with sensible defaults.

    Ids are assigned sequentially unless given; `month` picks a 2022 sale date.
    """

    counter = {"next_id": 1}

    def _make(
        *,
        id: int | None = None,
        title: str = "Item",
        description: str = "A product",
        price: str | int | Decimal = "10.00",
        category: str = "electronics",
        sold: bool = True,
        month: int = 5,
        year: int = 2022,
        image: str | None = None,
    ) -> Transaction:
        if id is None:
            id = counter["next_id"]
        counter["next_id"] = max(counter["next_id"], id) + 1
        return Transaction(
            id=id,
            title=title,
            description=description,
            price=Decimal(str(price)),
            category=category,
            sold=sold,
            date_of_sale=datetime(year, month, 15, 12, 0, 0, tzinfo=timezone.utc),
            image=image,
        )

    return _make


@pytest.fixture
def store() -> InMemoryTransactionStore:
    return InMemoryTransactionStore()
