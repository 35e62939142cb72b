#!/usr/bin/env python3
"""
Transaction Seed Script

Loads product transactions from a JSON array (local file or URL) into the
Supabase transactions table:
- Every record is validated through the Transaction domain model
- Invalid records are reported and skipped
- Records are upserted by id, so re-running the script is safe

Expected record shape (source data set):
    {"id": 1, "title": "...", "description": "...", "price": 329.85,
     "category": "men's clothing", "sold": false,
     "dateOfSale": "2021-11-27T20:29:54+05:30", "image": "https://..."}

Usage:
    python seed_transactions.py path/to/transactions.json
    python seed_transactions.py https://example.com/transactions.json --dry-run
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

import httpx

# Add parent directory to path to import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.transaction import Transaction
from repositories.transaction_repository import SupabaseTransactionStore, row_to_transaction


@dataclass
class SeedResult:
    """Results from a seed run."""
    total_records: int = 0
    valid: List[Transaction] = field(default_factory=list)
    errors: List[dict] = field(default_factory=list)
    upserted: int = 0


def load_source(source: str, timeout: float = 30.0) -> List[Any]:
    """Read a JSON array from a file path or an http(s) URL."""

    if source.startswith(("http://", "https://")):
        response = httpx.get(source, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        payload = response.json()
    else:
        with open(source, "r", encoding="utf-8") as f:
            payload = json.load(f)

    if not isinstance(payload, list):
        raise ValueError(f"Expected a JSON array of transactions, got {type(payload).__name__}")
    return payload


def parse_records(records: List[Any]) -> SeedResult:
    """Validate raw records; duplicates of an earlier id are reported as errors."""

    result = SeedResult(total_records=len(records))
    seen_ids: set[int] = set()

    for index, record in enumerate(records):
        try:
            if not isinstance(record, dict):
                raise ValueError("record is not an object")
            transaction = row_to_transaction(record)
            if transaction.id in seen_ids:
                raise ValueError(f"duplicate id {transaction.id}")
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            result.errors.append({"index": index, "error": str(e)})
            continue

        seen_ids.add(transaction.id)
        result.valid.append(transaction)

    return result


def print_summary(result: SeedResult, dry_run: bool) -> None:
    print("=" * 60)
    print("SEED SUMMARY")
    print("=" * 60)
    print(f"Total records:   {result.total_records}")
    print(f"Valid:           {len(result.valid)}")
    print(f"Invalid:         {len(result.errors)}")
    if dry_run:
        print("Upserted:        0 (dry run)")
    else:
        print(f"Upserted:        {result.upserted}")

    for error in result.errors[:10]:
        print(f"  record {error['index']}: {error['error']}")
    if len(result.errors) > 10:
        print(f"  ... and {len(result.errors) - 10} more")


def main() -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Seed the transactions table from a JSON data set",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Seed from a local file
  python seed_transactions.py transactions.json

  # Validate only, don't write
  python seed_transactions.py transactions.json --dry-run
        """
    )

    parser.add_argument(
        "source",
        help="Path or http(s) URL of the JSON array to load"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate records without writing to the database"
    )

    args = parser.parse_args()

    try:
        print(f"Loading transactions from {args.source}...")
        result = parse_records(load_source(args.source))

        if not args.dry_run and result.valid:
            result.upserted = SupabaseTransactionStore().upsert_transactions(result.valid)

        print_summary(result, args.dry_run)
        return 1 if result.errors else 0

    except KeyboardInterrupt:
        print("\n\nSeeding interrupted by user")
        return 130

    except Exception as e:
        print(f"\nFATAL ERROR: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
