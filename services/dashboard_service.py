"""
Combined dashboard data for a month.

Statistics, histogram and category breakdown computed from a single store read,
so the three views are consistent with each other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from domain.month import ALL_MONTHS
from repositories.transaction_repository import TransactionFilter, TransactionStore
from services.category_service import CategoryCount, count_categories
from services.histogram_service import HistogramBucket, bucket_transactions
from services.statistics_service import SalesStatistics, summarize_transactions


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    month: Optional[int]
    statistics: SalesStatistics
    histogram: List[HistogramBucket]
    categories: List[CategoryCount]


def compute_dashboard(
    store: TransactionStore,
    month: Optional[int] = ALL_MONTHS,
) -> DashboardSummary:
    """
    Compute every month-level aggregate at once.

    Raises:
        InvalidMonth: If month is not 1..12 or ALL_MONTHS
        DataUnavailable: If the store cannot be read
    """
    transactions = store.list_transactions(TransactionFilter(month=month))

    return DashboardSummary(
        month=month,
        statistics=summarize_transactions(transactions),
        histogram=bucket_transactions(transactions),
        categories=count_categories(transactions),
    )


__all__ = ["DashboardSummary", "compute_dashboard"]
