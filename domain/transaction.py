"""
Domain: Transaction entity.

Contract excerpts implemented here:
- A Transaction is immutable once stored and is uniquely identified by `id`.
- price >= 0 (finite decimal).
- date_of_sale is always present and is a UTC timestamp. Only its month
  component is used for filtering.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from .timestamps import require_utc_timestamp


@dataclass(frozen=True, slots=True)
class Transaction:
    """
    Pure domain entity for a product sale transaction.

    `sold` distinguishes items that were actually sold from listed but unsold
    items; both are counted by the histogram, only sold items contribute to the
    total sale amount.
    """

    id: int
    title: str
    description: str
    price: Decimal
    category: str
    sold: bool
    date_of_sale: datetime
    image: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            raise ValueError(f"price must be a Decimal, got {type(self.price).__name__}")
        if not self.price.is_finite():
            raise ValueError("price must be a finite number")
        if self.price < 0:
            raise ValueError("price must be >= 0")
        require_utc_timestamp("date_of_sale", self.date_of_sale)

    @property
    def month(self) -> int:
        """Calendar month (1-12) of the sale, independent of year."""
        return self.date_of_sale.month
