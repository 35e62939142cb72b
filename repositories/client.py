"""
Supabase client initialization.

This module contains *only* the database connection setup. The client is
created on first use so that importing repositories (e.g. in tests that use
the in-memory store) does not require credentials.

Environment variables:
- SUPABASE_URL: Your Supabase project URL (required)
- SUPABASE_KEY: Your Supabase API key (required, server-side key only)
- SUPABASE_TIMEOUT_SECONDS: Timeout for table requests (default: 10)
- TRANSACTIONS_TABLE: Table holding transaction records (default: transactions)
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from supabase import Client, ClientOptions, create_client

# Load environment variables from the .env file in the project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

TRANSACTIONS_TABLE: str = os.getenv("TRANSACTIONS_TABLE", "transactions")


def get_timeout_seconds() -> float:
    """Request timeout applied to every Record Store call."""

    raw = os.getenv("SUPABASE_TIMEOUT_SECONDS", "10")
    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(
            f"Invalid SUPABASE_TIMEOUT_SECONDS: {raw!r}. Must be a number of seconds."
        )
    if timeout <= 0:
        raise RuntimeError("SUPABASE_TIMEOUT_SECONDS must be > 0")
    return timeout


@lru_cache
def get_supabase() -> Client:
    """Create (once) and return the Supabase client."""

    supabase_url = os.getenv("SUPABASE_URL")
    supabase_key = os.getenv("SUPABASE_KEY")

    if not supabase_url:
        raise RuntimeError(
            "Missing environment variable: SUPABASE_URL. "
            "Set SUPABASE_URL to your Supabase project URL."
        )

    if not supabase_key:
        raise RuntimeError(
            "Missing environment variable: SUPABASE_KEY. "
            "Set SUPABASE_KEY to your Supabase API key."
        )

    options = ClientOptions(postgrest_client_timeout=get_timeout_seconds())
    return create_client(supabase_url, supabase_key, options=options)


__all__ = ["TRANSACTIONS_TABLE", "get_supabase", "get_timeout_seconds"]
