"""
Sales statistics for a month.

totalAmount sums prices of sold transactions only. Aggregation uses Decimal and
never rounds; two-decimal rounding is a presentation concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from domain.month import ALL_MONTHS
from domain.transaction import Transaction
from repositories.transaction_repository import TransactionFilter, TransactionStore


@dataclass(frozen=True, slots=True)
class SalesStatistics:
    """Aggregate sales figures for one month."""
    total_amount: Decimal
    sold_count: int
    not_sold_count: int

    @property
    def total_count(self) -> int:
        """Every filtered transaction counted exactly once."""
        return self.sold_count + self.not_sold_count


def summarize_transactions(transactions: Iterable[Transaction]) -> SalesStatistics:
    """Compute SalesStatistics over an already-filtered set of transactions."""

    total_amount = Decimal("0")
    sold_count = 0
    not_sold_count = 0

    for transaction in transactions:
        if transaction.sold:
            total_amount += transaction.price
            sold_count += 1
        else:
            not_sold_count += 1

    return SalesStatistics(
        total_amount=total_amount,
        sold_count=sold_count,
        not_sold_count=not_sold_count,
    )


def compute_statistics(
    store: TransactionStore,
    month: Optional[int] = ALL_MONTHS,
) -> SalesStatistics:
    """
    Compute sales statistics for a month.

    Args:
        store: Record Store to read from
        month: 1..12, or ALL_MONTHS for every transaction

    Returns:
        SalesStatistics (all zeros when the month has no transactions)

    Raises:
        InvalidMonth: If month is not 1..12 or ALL_MONTHS
        DataUnavailable: If the store cannot be read
    """
    transactions = store.list_transactions(TransactionFilter(month=month))
    return summarize_transactions(transactions)


__all__ = ["SalesStatistics", "summarize_transactions", "compute_statistics"]
