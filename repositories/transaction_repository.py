"""
Transaction repository (Record Store).

This module provides *only* read access to transaction records for the engine,
plus a bulk upsert used by the seed script. It does not compute statistics,
histograms or pages; those live in the services layer.

Two stores share the same contract:
- SupabaseTransactionStore: the production collaborator (Supabase table).
- InMemoryTransactionStore: an in-process store for tests and local runs.

Every store failure (unreachable, timeout, API error) surfaces as DataUnavailable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional, Protocol

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from domain.errors import DataUnavailable
from domain.month import ALL_MONTHS, month_matches, require_month
from domain.search import matches_search, normalize_search
from domain.timestamps import parse_utc_datetime, require_utc_timestamp
from domain.transaction import Transaction
from repositories.client import TRANSACTIONS_TABLE, get_supabase

logger = logging.getLogger(__name__)

# Rows fetched per request when scanning the table.
_FETCH_PAGE_SIZE: int = 1000

# Rows sent per request when upserting.
_UPSERT_CHUNK_SIZE: int = 500


@dataclass(frozen=True, slots=True)
class TransactionFilter:
    """Filter criteria for listing transactions."""
    month: Optional[int] = ALL_MONTHS
    search: Optional[str] = None

    def __post_init__(self) -> None:
        require_month(self.month)
        object.__setattr__(self, "search", normalize_search(self.search) or None)

    def matches(self, transaction: Transaction) -> bool:
        """True if the transaction passes both the month and the search filter."""
        return month_matches(transaction.date_of_sale, self.month) and matches_search(
            transaction, self.search
        )


class TransactionStore(Protocol):
    """Read capability consumed by the engine."""

    def list_transactions(self, filters: TransactionFilter) -> List[Transaction]:
        """Return the transactions matching `filters`, in a stable order."""
        ...


class InMemoryTransactionStore:
    """
    Transaction store held in process memory.

    Records are kept in insertion order. `available` can be switched off to
    simulate an unreachable store.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: List[Transaction] = []
        self._ids: set[int] = set()
        self.available = True
        self.add_all(transactions)

    def add(self, transaction: Transaction) -> None:
        if transaction.id in self._ids:
            raise ValueError(f"Duplicate transaction id: {transaction.id}")
        self._ids.add(transaction.id)
        self._transactions.append(transaction)

    def add_all(self, transactions: Iterable[Transaction]) -> None:
        for transaction in transactions:
            self.add(transaction)

    def __len__(self) -> int:
        return len(self._transactions)

    def list_transactions(self, filters: TransactionFilter) -> List[Transaction]:
        if not self.available:
            raise DataUnavailable("In-memory transaction store is unavailable")
        return [t for t in self._transactions if filters.matches(t)]


def row_to_transaction(row: Mapping[str, Any]) -> Transaction:
    """
    Convert a stored row into a Transaction.

    Accepts both the table's snake_case `date_of_sale` column and the camelCase
    `dateOfSale` key of the source data set.
    """

    date_value = row.get("date_of_sale", row.get("dateOfSale"))
    if date_value is None:
        raise ValueError(f"Transaction {row.get('id')!r} has no date of sale")

    return Transaction(
        id=int(row["id"]),
        title=str(row.get("title") or ""),
        description=str(row.get("description") or ""),
        price=Decimal(str(row["price"])),
        category=str(row.get("category") or ""),
        sold=bool(row.get("sold", False)),
        date_of_sale=parse_utc_datetime(date_value),
        image=row.get("image"),
    )


def transaction_to_row(transaction: Transaction) -> dict[str, Any]:
    """Serialize a Transaction into a table row payload."""

    require_utc_timestamp("date_of_sale", transaction.date_of_sale)
    return {
        "id": transaction.id,
        "title": transaction.title,
        "description": transaction.description,
        "price": str(transaction.price),
        "category": transaction.category,
        "sold": transaction.sold,
        "date_of_sale": transaction.date_of_sale.isoformat(),
        "image": transaction.image,
    }


class SupabaseTransactionStore:
    """
    Transaction store backed by a Supabase table.

    Month and search filters are applied in Python after scanning the table in
    id order, so results are deterministic and match the in-memory store
    exactly. The request timeout is configured on the client
    (SUPABASE_TIMEOUT_SECONDS).
    """

    def __init__(self, client: Optional[Client] = None, table: str = TRANSACTIONS_TABLE):
        self._client = client
        self._table = table

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client

    def _fetch_page(self, offset: int) -> List[Mapping[str, Any]]:
        try:
            response = (
                self.client.table(self._table)
                .select("*")
                .order("id")
                .range(offset, offset + _FETCH_PAGE_SIZE - 1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            logger.warning(
                "Transaction store request failed",
                extra={"table": self._table, "offset": offset, "error": str(e)},
            )
            raise DataUnavailable(f"Failed to list transactions: {e}", cause=e) from e

        error = getattr(response, "error", None)
        if error:
            logger.warning(
                "Transaction store returned an error",
                extra={"table": self._table, "offset": offset, "error": str(error)},
            )
            raise DataUnavailable(f"Failed to list transactions: {error}")

        return getattr(response, "data", None) or []

    def _fetch_all_rows(self) -> List[Mapping[str, Any]]:
        all_rows: List[Mapping[str, Any]] = []
        offset = 0

        while True:
            page_rows = self._fetch_page(offset)
            all_rows.extend(page_rows)
            if len(page_rows) < _FETCH_PAGE_SIZE:
                break
            offset += len(page_rows)

        return all_rows

    def list_transactions(self, filters: TransactionFilter) -> List[Transaction]:
        transactions = [row_to_transaction(row) for row in self._fetch_all_rows()]
        return [t for t in transactions if filters.matches(t)]

    def upsert_transactions(self, transactions: Iterable[Transaction]) -> int:
        """
        Insert or replace transactions by id.

        Returns:
            Number of rows sent to the table
        """

        payload = [transaction_to_row(t) for t in transactions]

        for start in range(0, len(payload), _UPSERT_CHUNK_SIZE):
            chunk = payload[start:start + _UPSERT_CHUNK_SIZE]
            try:
                response = self.client.table(self._table).upsert(chunk).execute()
            except (APIError, httpx.HTTPError) as e:
                raise DataUnavailable(f"Failed to upsert transactions: {e}", cause=e) from e

            error = getattr(response, "error", None)
            if error:
                raise DataUnavailable(f"Failed to upsert transactions: {error}")

        return len(payload)


__all__ = [
    "TransactionFilter",
    "TransactionStore",
    "InMemoryTransactionStore",
    "SupabaseTransactionStore",
    "row_to_transaction",
    "transaction_to_row",
]
