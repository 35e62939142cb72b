"""
Domain: free-text transaction search (pure).

A transaction matches a search text when either:
- the text occurs, case-insensitively, in title, description or category; or
- the text is a plain decimal number (e.g. 49.99) equal to the transaction price.

Blank or absent search text matches every transaction.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional

from .transaction import Transaction


# Plain ASCII decimal only: no exponents, underscores, or non-ASCII digits.
_PRICE_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def normalize_search(search_text: Optional[str]) -> str:
    """Strip surrounding whitespace; None becomes the empty string."""

    if search_text is None:
        return ""
    return search_text.strip()


def parse_price_search(search_text: str) -> Optional[Decimal]:
    """Return the search text as a Decimal if it is a plain decimal number, else None."""

    if not _PRICE_PATTERN.fullmatch(search_text):
        return None
    return Decimal(search_text)


def matches_search(transaction: Transaction, search_text: Optional[str]) -> bool:
    """True if the transaction satisfies the search text (see module docstring)."""

    text = normalize_search(search_text)
    if not text:
        return True

    price = parse_price_search(text)
    if price is not None and transaction.price == price:
        return True

    needle = text.casefold()
    return any(
        needle in field.casefold()
        for field in (transaction.title, transaction.description, transaction.category)
    )


__all__ = ["normalize_search", "parse_price_search", "matches_search"]
