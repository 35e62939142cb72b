"""
Tests for `domain/transaction.py`, `domain/month.py` and `domain/timestamps.py`.

Covers contract rules:
- price >= 0 and finite; date_of_sale is a UTC timestamp.
- Transaction is immutable (frozen).
- Month filter uses the calendar month, independent of year.
- Month values outside 1..12 raise InvalidMonth; ALL_MONTHS is accepted.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from domain.errors import InvalidMonth
from domain.month import ALL_MONTHS, month_matches, require_month
from domain.timestamps import parse_utc_datetime
from domain.transaction import Transaction


def _transaction(**overrides) -> Transaction:
    fields = dict(
        id=1,
        title="Laptop Stand",
        description="Aluminium stand",
        price=Decimal("49.99"),
        category="electronics",
        sold=True,
        date_of_sale=datetime(2022, 5, 1, 0, 0, 0, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return Transaction(**fields)


def test_transaction_negative_price_raises() -> None:
    """Verify price < 0 is rejected."""

    with pytest.raises(ValueError):
        _transaction(price=Decimal("-1"))


@pytest.mark.parametrize("price", [Decimal("NaN"), Decimal("Infinity")])
def test_transaction_non_finite_price_raises(price: Decimal) -> None:
    """Verify NaN and infinite prices are rejected."""

    with pytest.raises(ValueError):
        _transaction(price=price)


def test_transaction_price_must_be_decimal() -> None:
    """Verify float prices are rejected (Decimal precision required)."""

    with pytest.raises(ValueError):
        _transaction(price=49.99)


def test_transaction_zero_price_allowed() -> None:
    assert _transaction(price=Decimal("0")).price == Decimal("0")


def test_transaction_date_of_sale_must_be_utc() -> None:
    """Verify date_of_sale enforces UTC timezone-aware timestamp."""

    with pytest.raises(ValueError):
        _transaction(date_of_sale=datetime(2022, 5, 1, 0, 0, 0))

    with pytest.raises(ValueError):
        _transaction(date_of_sale=datetime(2022, 5, 1, tzinfo=timezone(timedelta(hours=5))))

    with pytest.raises(ValueError):
        _transaction(date_of_sale=None)


def test_transaction_is_immutable() -> None:
    """Verify Transaction cannot be mutated after creation (frozen entity)."""

    transaction = _transaction()

    with pytest.raises(FrozenInstanceError):
        transaction.price = Decimal("1")  # type: ignore[misc]


def test_transaction_month_ignores_year() -> None:
    """Verify the month property is the calendar month of the sale."""

    assert _transaction(date_of_sale=datetime(2021, 3, 31, tzinfo=timezone.utc)).month == 3
    assert _transaction(date_of_sale=datetime(2022, 3, 1, tzinfo=timezone.utc)).month == 3


@pytest.mark.parametrize("month", [1, 6, 12, ALL_MONTHS])
def test_require_month_accepts_valid_values(month) -> None:
    assert require_month(month) == month


@pytest.mark.parametrize("month", [0, 13, -1, True, "5", 5.0])
def test_require_month_rejects_invalid_values(month) -> None:
    """Verify months outside 1..12 (and non-integers) raise InvalidMonth."""

    with pytest.raises(InvalidMonth):
        require_month(month)


def test_invalid_month_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        require_month(0)


def test_month_matches_any_year_and_all_months() -> None:
    """Verify the month filter is year-independent and ALL_MONTHS matches everything."""

    may_2021 = datetime(2021, 5, 10, tzinfo=timezone.utc)
    may_2022 = datetime(2022, 5, 10, tzinfo=timezone.utc)

    assert month_matches(may_2021, 5)
    assert month_matches(may_2022, 5)
    assert not month_matches(may_2022, 6)
    assert month_matches(may_2022, ALL_MONTHS)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2022-05-01T00:00:00Z", datetime(2022, 5, 1, tzinfo=timezone.utc)),
        ("2022-05-01T00:00:00", datetime(2022, 5, 1, tzinfo=timezone.utc)),
        # Offset timestamps are converted, which can move the sale into another month.
        ("2022-06-01T02:00:00+05:30", datetime(2022, 5, 31, 20, 30, tzinfo=timezone.utc)),
        (datetime(2022, 5, 1), datetime(2022, 5, 1, tzinfo=timezone.utc)),
    ],
)
def test_parse_utc_datetime(value, expected: datetime) -> None:
    """Verify stored timestamps are normalized to UTC."""

    parsed = parse_utc_datetime(value)
    assert parsed == expected
    assert parsed.utcoffset() == timedelta(0)


def test_parse_utc_datetime_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        parse_utc_datetime(1650000000)
