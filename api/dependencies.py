"""
FastAPI dependencies.

The Record Store is resolved through `get_transaction_store` so tests can swap
in an in-memory store with `app.dependency_overrides`.
"""

from __future__ import annotations

from functools import lru_cache

from repositories.transaction_repository import SupabaseTransactionStore, TransactionStore


@lru_cache
def get_transaction_store() -> TransactionStore:
    return SupabaseTransactionStore()


__all__ = ["get_transaction_store"]
