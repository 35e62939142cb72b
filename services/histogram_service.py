"""
Price-range histogram for a month.

Every transaction in the month (sold or not) contributes exactly 1 to the count
of its price range. All ten ranges are always present, in fixed order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from domain.month import ALL_MONTHS
from domain.price_range import BUCKET_COUNT, PriceRange
from domain.transaction import Transaction
from repositories.transaction_repository import TransactionFilter, TransactionStore


@dataclass(frozen=True, slots=True)
class HistogramBucket:
    """Number of transactions whose price falls in one price range."""
    price_range: PriceRange
    count: int

    @property
    def label(self) -> str:
        return self.price_range.value


def bucket_transactions(transactions: Iterable[Transaction]) -> List[HistogramBucket]:
    """Build the ten-bucket histogram over an already-filtered set of transactions."""

    counts = [0] * BUCKET_COUNT
    for transaction in transactions:
        counts[PriceRange.index_for_price(transaction.price)] += 1

    return [
        HistogramBucket(price_range=price_range, count=counts[price_range.position])
        for price_range in PriceRange.ordered()
    ]


def compute_histogram(
    store: TransactionStore,
    month: Optional[int] = ALL_MONTHS,
) -> List[HistogramBucket]:
    """
    Compute the price-range histogram for a month.

    Raises:
        InvalidMonth: If month is not 1..12 or ALL_MONTHS
        DataUnavailable: If the store cannot be read
    """
    transactions = store.list_transactions(TransactionFilter(month=month))
    return bucket_transactions(transactions)


__all__ = ["HistogramBucket", "bucket_transactions", "compute_histogram"]
