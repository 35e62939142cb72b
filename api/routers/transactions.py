"""
Transactions API Endpoints.

Paginated, searchable listing of the transactions sold in a month.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_transaction_store
from api.models import ErrorResponse, TransactionListResponse
from api.settings import get_settings
from domain.errors import DataUnavailable, InvalidMonth, InvalidPage
from repositories.transaction_repository import TransactionStore
from services.query_service import query_transactions

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/transactions",
    response_model=TransactionListResponse,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="List Transactions",
    description="Page through a month's transactions, optionally filtered by free-text search."
)
def list_transactions(
    month: Optional[int] = Query(None, description="Month of sale (1-12); omit for all months"),
    search: str = Query("", description="Matches title, description or category, or an exact price"),
    page: int = Query(1, description="1-based page number"),
    page_size: Optional[int] = Query(None, alias="pageSize", description="Records per page"),
    store: TransactionStore = Depends(get_transaction_store),
):
    """
    Query one page of transactions.

    A page past the end returns an empty `data` list with the real `totalPages`.

    **Example usage:**
    - March, first page: `GET /api/v1/transactions?month=3`
    - Search: `GET /api/v1/transactions?month=3&search=laptop&page=2`
    - Exact price: `GET /api/v1/transactions?month=3&search=49.99`
    """
    settings = get_settings()
    if page_size is None:
        page_size = settings.default_page_size
    elif page_size > settings.max_page_size:
        raise HTTPException(
            status_code=400,
            detail=f"pageSize must be <= {settings.max_page_size}, got {page_size}"
        )

    try:
        result = query_transactions(
            store,
            month=month,
            search=search,
            page=page,
            page_size=page_size,
        )
        return TransactionListResponse.from_domain(result)

    except (InvalidPage, InvalidMonth) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataUnavailable as e:
        logger.exception("Transaction store unavailable while listing transactions")
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error while listing transactions")
        raise HTTPException(
            status_code=500,
            detail=f"Failed while listing transactions: {str(e)}"
        )
