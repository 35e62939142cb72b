"""
Paginated transaction query.

Resolves (month, search text, page, page size) into one page of matching
transactions plus the total page count.

Pagination rules:
- page is 1-based; page < 1 or page_size < 1 raises InvalidPage.
- total_pages = ceil(matches / page_size), and 1 when nothing matches.
- A page past the end returns no records but still reports total_pages.
- Records are ordered by ascending id, so consecutive pages never skip or
  repeat a record while the data set is unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from domain.errors import InvalidPage
from domain.month import ALL_MONTHS
from domain.transaction import Transaction
from repositories.transaction_repository import TransactionFilter, TransactionStore

DEFAULT_PAGE_SIZE: int = 10


@dataclass(frozen=True, slots=True)
class TransactionPage:
    """One page of a transaction query."""
    records: List[Transaction]
    current_page: int
    total_pages: int
    total_records: int
    page_size: int

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1


def count_pages(total_records: int, page_size: int) -> int:
    """Number of pages for a result set; an empty result is still one page."""

    if total_records <= 0:
        return 1
    return -(-total_records // page_size)


def paginate(transactions: List[Transaction], page: int, page_size: int) -> TransactionPage:
    """Slice an already-filtered result set into the requested page."""

    if page < 1 or page_size < 1:
        raise InvalidPage(page, page_size)

    ordered = sorted(transactions, key=lambda t: t.id)
    start = (page - 1) * page_size

    return TransactionPage(
        records=ordered[start:start + page_size],
        current_page=page,
        total_pages=count_pages(len(ordered), page_size),
        total_records=len(ordered),
        page_size=page_size,
    )


def query_transactions(
    store: TransactionStore,
    month: Optional[int] = ALL_MONTHS,
    search: Optional[str] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> TransactionPage:
    """
    Query one page of transactions matching a month and search text.

    Args:
        store: Record Store to read from
        month: 1..12, or ALL_MONTHS
        search: Free text; matches title/description/category (case-insensitive
            substring) or an exact price. Blank matches everything.
        page: 1-based page number
        page_size: Records per page

    Returns:
        TransactionPage

    Raises:
        InvalidPage: If page < 1 or page_size < 1 (checked before reading)
        InvalidMonth: If month is not 1..12 or ALL_MONTHS
        DataUnavailable: If the store cannot be read

    Example:
        12 matching transactions, page_size=10:
        page 1 -> 10 records, page 2 -> 2 records, page 3 -> 0 records;
        total_pages is 2 in every case.
    """
    if page < 1 or page_size < 1:
        raise InvalidPage(page, page_size)

    transactions = store.list_transactions(TransactionFilter(month=month, search=search))
    return paginate(transactions, page, page_size)


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "TransactionPage",
    "count_pages",
    "paginate",
    "query_transactions",
]
