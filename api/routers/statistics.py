"""
Statistics API Endpoints.

Total sale amount and sold / not-sold item counts for a month.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_transaction_store
from api.models import ErrorResponse, StatisticsResponse
from domain.errors import DataUnavailable, InvalidMonth
from repositories.transaction_repository import TransactionStore
from services.statistics_service import compute_statistics

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/statistics",
    response_model=StatisticsResponse,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Monthly Statistics",
    description="Total amount of sold items plus sold and not-sold item counts."
)
def get_statistics(
    month: Optional[int] = Query(None, description="Month of sale (1-12); omit for all months"),
    store: TransactionStore = Depends(get_transaction_store),
):
    """A month with no transactions returns zeros."""
    try:
        return StatisticsResponse.from_domain(compute_statistics(store, month))

    except InvalidMonth as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataUnavailable as e:
        logger.exception("Transaction store unavailable while computing statistics")
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error while computing statistics")
        raise HTTPException(
            status_code=500,
            detail=f"Failed while computing statistics: {str(e)}"
        )
