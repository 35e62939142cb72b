"""
Chart API Endpoints.

- Bar chart: item counts in ten fixed price ranges.
- Pie chart: item counts per category.
- Combined: statistics and both charts in one response.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_transaction_store
from api.models import (
    CategoryCountResponse,
    CombinedResponse,
    ErrorResponse,
    PriceRangeCountResponse,
)
from domain.errors import DataUnavailable, InvalidMonth
from repositories.transaction_repository import TransactionStore
from services.category_service import compute_category_breakdown
from services.dashboard_service import compute_dashboard
from services.histogram_service import compute_histogram

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}}


@router.get(
    "/bar-chart",
    response_model=List[PriceRangeCountResponse],
    responses=_ERROR_RESPONSES,
    summary="Price Range Histogram",
    description="Number of items (sold or not) in each price range. Always ten entries."
)
def get_bar_chart(
    month: Optional[int] = Query(None, description="Month of sale (1-12); omit for all months"),
    store: TransactionStore = Depends(get_transaction_store),
):
    """
    Ranges are `0-100, 101-200, ..., 801-900, 901+`. Upper bounds are inclusive
    and compared against the exact price: 100 is in `0-100`, 100.01 in `101-200`.
    """
    try:
        return [PriceRangeCountResponse.from_domain(b) for b in compute_histogram(store, month)]

    except InvalidMonth as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataUnavailable as e:
        logger.exception("Transaction store unavailable while computing bar chart")
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error while computing bar chart")
        raise HTTPException(
            status_code=500,
            detail=f"Failed while computing bar chart: {str(e)}"
        )


@router.get(
    "/pie-chart",
    response_model=List[CategoryCountResponse],
    responses=_ERROR_RESPONSES,
    summary="Category Breakdown",
    description="Number of items per category, most frequent first."
)
def get_pie_chart(
    month: Optional[int] = Query(None, description="Month of sale (1-12); omit for all months"),
    store: TransactionStore = Depends(get_transaction_store),
):
    try:
        return [
            CategoryCountResponse.from_domain(c)
            for c in compute_category_breakdown(store, month)
        ]

    except InvalidMonth as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataUnavailable as e:
        logger.exception("Transaction store unavailable while computing pie chart")
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error while computing pie chart")
        raise HTTPException(
            status_code=500,
            detail=f"Failed while computing pie chart: {str(e)}"
        )


@router.get(
    "/combined",
    response_model=CombinedResponse,
    responses=_ERROR_RESPONSES,
    summary="Combined Dashboard Data",
    description="Statistics, bar chart and pie chart for a month, from a single read."
)
def get_combined(
    month: Optional[int] = Query(None, description="Month of sale (1-12); omit for all months"),
    store: TransactionStore = Depends(get_transaction_store),
):
    try:
        return CombinedResponse.from_domain(compute_dashboard(store, month))

    except InvalidMonth as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataUnavailable as e:
        logger.exception("Transaction store unavailable while computing dashboard")
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error while computing dashboard")
        raise HTTPException(
            status_code=500,
            detail=f"Failed while computing dashboard: {str(e)}"
        )
