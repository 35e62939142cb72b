"""
Tests for `domain/price_range.py`.

Covers contract rules:
- Ten ranges in fixed order with fixed labels.
- Upper bounds are inclusive; the last range is open-ended.
- Prices are compared raw (no truncation or rounding).
- Negative prices raise errors.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from domain.price_range import BUCKET_COUNT, PriceRange


def test_price_range_labels_in_histogram_order() -> None:
    """Verify the ten labels and their order."""

    assert [r.value for r in PriceRange.ordered()] == [
        "0-100",
        "101-200",
        "201-300",
        "301-400",
        "401-500",
        "501-600",
        "601-700",
        "701-800",
        "801-900",
        "901+",
    ]
    assert BUCKET_COUNT == 10
    assert [r.position for r in PriceRange.ordered()] == list(range(10))


@pytest.mark.parametrize(
    "price, expected_index",
    [
        ("0", 0),
        ("0.01", 0),
        ("100", 0),
        ("100.00", 0),
        ("100.01", 1),
        ("100.5", 1),
        ("101", 1),
        ("200", 1),
        ("200.001", 2),
        ("500", 4),
        ("500.99", 5),
        ("900", 8),
        ("900.01", 9),
        ("901", 9),
        ("150000", 9),
    ],
)
def test_price_range_index_for_price_boundaries(price: str, expected_index: int) -> None:
    """Verify price → bucket index for boundary and non-integer prices."""

    assert PriceRange.index_for_price(Decimal(price)) == expected_index


def test_price_range_for_price_returns_range() -> None:
    """Verify for_price returns the enum member for the bucket."""

    assert PriceRange.for_price(Decimal("100")) is PriceRange.RANGE_0_100
    assert PriceRange.for_price(Decimal("100.01")) is PriceRange.RANGE_101_200
    assert PriceRange.for_price(Decimal("901")) is PriceRange.RANGE_901_PLUS


def test_price_range_negative_price_raises() -> None:
    """Verify invalid input (negative price) raises error."""

    with pytest.raises(ValueError):
        PriceRange.index_for_price(Decimal("-0.01"))
