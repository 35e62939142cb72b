"""
Category breakdown for a month (pie-chart data).

Counts transactions per category, sold or not. Only categories present in the
month appear; order is descending count, then category name.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional

from domain.month import ALL_MONTHS
from domain.transaction import Transaction
from repositories.transaction_repository import TransactionFilter, TransactionStore


@dataclass(frozen=True, slots=True)
class CategoryCount:
    category: str
    count: int


def count_categories(transactions: Iterable[Transaction]) -> List[CategoryCount]:
    counts = Counter(t.category for t in transactions)
    return [
        CategoryCount(category=category, count=count)
        for category, count in sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    ]


def compute_category_breakdown(
    store: TransactionStore,
    month: Optional[int] = ALL_MONTHS,
) -> List[CategoryCount]:
    """Count the month's transactions per category."""
    transactions = store.list_transactions(TransactionFilter(month=month))
    return count_categories(transactions)


__all__ = ["CategoryCount", "count_categories", "compute_category_breakdown"]
