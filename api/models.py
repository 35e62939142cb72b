"""
API Response Models.

Pydantic models for serializing responses. Field names are snake_case in Python
and camelCase on the wire (`totalSaleAmount`, `soldItems`, `priceRange`, ...),
matching the dashboard front end.

Decimal amounts are emitted as JSON numbers.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel

from domain.transaction import Transaction
from services.category_service import CategoryCount
from services.dashboard_service import DashboardSummary
from services.histogram_service import HistogramBucket
from services.query_service import TransactionPage
from services.statistics_service import SalesStatistics

JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ============================================================================
# Transaction Models
# ============================================================================

class TransactionResponse(CamelModel):
    """Single transaction in API response."""
    id: int
    title: str
    description: str
    price: JsonDecimal
    category: str
    sold: bool
    date_of_sale: datetime
    image: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "title": "Fjallraven Backpack",
                "description": "Your perfect pack for everyday use",
                "price": 329.85,
                "category": "men's clothing",
                "sold": False,
                "dateOfSale": "2021-11-27T14:59:54Z",
                "image": None,
            }
        }

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            title=transaction.title,
            description=transaction.description,
            price=transaction.price,
            category=transaction.category,
            sold=transaction.sold,
            date_of_sale=transaction.date_of_sale,
            image=transaction.image,
        )


class PaginationResponse(CamelModel):
    """Pagination block of a transaction listing."""
    current_page: int
    total_pages: int
    total_records: int
    page_size: int


class TransactionListResponse(CamelModel):
    """Response for the paginated transaction listing."""
    data: List[TransactionResponse]
    pagination: PaginationResponse

    class Config:
        json_schema_extra = {
            "example": {
                "data": [],
                "pagination": {
                    "currentPage": 1,
                    "totalPages": 2,
                    "totalRecords": 12,
                    "pageSize": 10,
                },
            }
        }

    @classmethod
    def from_domain(cls, page: TransactionPage) -> "TransactionListResponse":
        return cls(
            data=[TransactionResponse.from_domain(t) for t in page.records],
            pagination=PaginationResponse(
                current_page=page.current_page,
                total_pages=page.total_pages,
                total_records=page.total_records,
                page_size=page.page_size,
            ),
        )


# ============================================================================
# Aggregate Models
# ============================================================================

class StatisticsResponse(CamelModel):
    """Sales statistics for a month."""
    total_sale_amount: JsonDecimal
    sold_items: int
    not_sold_items: int

    class Config:
        json_schema_extra = {
            "example": {
                "totalSaleAmount": 2841.07,
                "soldItems": 9,
                "notSoldItems": 3,
            }
        }

    @classmethod
    def from_domain(cls, statistics: SalesStatistics) -> "StatisticsResponse":
        return cls(
            total_sale_amount=statistics.total_amount,
            sold_items=statistics.sold_count,
            not_sold_items=statistics.not_sold_count,
        )


class PriceRangeCountResponse(CamelModel):
    """One histogram bar."""
    price_range: str
    count: int

    @classmethod
    def from_domain(cls, bucket: HistogramBucket) -> "PriceRangeCountResponse":
        return cls(price_range=bucket.label, count=bucket.count)


class CategoryCountResponse(CamelModel):
    """One pie-chart slice."""
    category: str
    count: int

    @classmethod
    def from_domain(cls, item: CategoryCount) -> "CategoryCountResponse":
        return cls(category=item.category, count=item.count)


class CombinedResponse(CamelModel):
    """Statistics, bar chart and pie chart for one month."""
    month: Optional[int] = None
    statistics: StatisticsResponse
    bar_chart: List[PriceRangeCountResponse]
    pie_chart: List[CategoryCountResponse]

    @classmethod
    def from_domain(cls, summary: DashboardSummary) -> "CombinedResponse":
        return cls(
            month=summary.month,
            statistics=StatisticsResponse.from_domain(summary.statistics),
            bar_chart=[PriceRangeCountResponse.from_domain(b) for b in summary.histogram],
            pie_chart=[CategoryCountResponse.from_domain(c) for c in summary.categories],
        )


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str

    class Config:
        json_schema_extra = {
            "example": {
                "detail": "Invalid page request: page=0, page_size=10. Both must be >= 1",
            }
        }
