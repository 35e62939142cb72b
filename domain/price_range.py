"""
Domain: histogram price ranges.

Buckets are defined strictly as (inclusive upper bounds, open-ended last bucket):
  - 0-100:    price <= 100
  - 101-200:  100 < price <= 200
  - ...
  - 801-900:  800 < price <= 900
  - 901+:     price > 900

The comparison uses the raw price. Prices are never truncated or rounded before
bucketing, so 100.5 belongs to 101-200 even though its label starts at 101.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import List


class PriceRange(str, Enum):
    RANGE_0_100 = "0-100"
    RANGE_101_200 = "101-200"
    RANGE_201_300 = "201-300"
    RANGE_301_400 = "301-400"
    RANGE_401_500 = "401-500"
    RANGE_501_600 = "501-600"
    RANGE_601_700 = "601-700"
    RANGE_701_800 = "701-800"
    RANGE_801_900 = "801-900"
    RANGE_901_PLUS = "901+"

    @property
    def position(self) -> int:
        """Position of this range in histogram order (0..9)."""
        return _ORDER.index(self)

    @staticmethod
    def ordered() -> List["PriceRange"]:
        """All ranges in histogram order."""
        return list(_ORDER)

    @staticmethod
    def index_for_price(price: Decimal) -> int:
        """
        Resolve the bucket index (0..9) for a price.

        Raises ValueError for negative prices.
        """

        if price < 0:
            raise ValueError("price must be >= 0")

        for index, upper in enumerate(_UPPER_BOUNDS):
            if price <= upper:
                return index
        return len(_UPPER_BOUNDS)

    @staticmethod
    def for_price(price: Decimal) -> "PriceRange":
        """Resolve the PriceRange for a price."""

        return _ORDER[PriceRange.index_for_price(price)]


_ORDER: tuple[PriceRange, ...] = tuple(PriceRange)

# Inclusive upper bounds for buckets 0..8; bucket 9 has none.
_UPPER_BOUNDS: tuple[Decimal, ...] = tuple(Decimal(100 * n) for n in range(1, 10))

BUCKET_COUNT: int = len(_ORDER)


__all__ = ["PriceRange", "BUCKET_COUNT"]
