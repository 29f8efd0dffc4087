"""Transaction query service module.

Translates dashboard filters into store queries for the transaction table,
monthly statistics, price-range bar chart and category pie chart.

Every function here is a plain coroutine that returns data; none of them
touch the HTTP response, so they can be composed freely (see
``report_service.build_combined_report``).

Month filtering matches the calendar month across all years, never a
specific year.
"""
import logging
from typing import Optional

from sqlalchemy import String, case, cast, extract, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from salesboard.models.transaction import Transaction
from salesboard.schemas.report import BarChartItem, PieChartItem, StatisticsResponse

logger = logging.getLogger(__name__)

# =============================================================================
# PRICE BUCKETS
# =============================================================================
# Half-open [lower, upper) ranges; anything >= the last boundary goes to the
# overflow bucket.

PRICE_BOUNDARIES = [0, 100, 200, 300, 400, 500, 600, 700, 800, 900]
OVERFLOW_LABEL = "901+"

BAR_CHART_LABELS = [
    f"{lower}-{upper}" for lower, upper in zip(PRICE_BOUNDARIES, PRICE_BOUNDARIES[1:])
] + [OVERFLOW_LABEL]

LIKE_ESCAPE = "\\"


def _month_filters(month: Optional[int]) -> list:
    """Build the calendar-month predicate (empty when no month is given)."""
    if month is None:
        return []
    return [extract("month", Transaction.date_of_sale) == month]


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def _search_filters(search: Optional[str]) -> list:
    """Case-insensitive substring match on title, description or price."""
    if not search:
        return []
    pattern = f"%{_escape_like(search)}%"
    return [
        or_(
            Transaction.title.ilike(pattern, escape=LIKE_ESCAPE),
            Transaction.description.ilike(pattern, escape=LIKE_ESCAPE),
            cast(Transaction.price, String).ilike(pattern, escape=LIKE_ESCAPE),
        )
    ]


def _price_bucket_expression():
    """CASE expression mapping a price to its bar chart label."""
    whens = [
        (Transaction.price < upper, f"{lower}-{upper}")
        for lower, upper in zip(PRICE_BOUNDARIES, PRICE_BOUNDARIES[1:])
    ]
    return case(*whens, else_=OVERFLOW_LABEL)


# =============================================================================
# LISTING
# =============================================================================

async def list_transactions(
    db: AsyncSession,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    month: Optional[int] = None,
) -> list[Transaction]:
    """
    Return one page of transactions in the store's natural (insertion) order.

    Args:
        db: Database session
        page: 1-based page number
        per_page: Page size
        search: Substring matched against title, description and price
        month: Calendar month (1-12) of the sale date

    Returns:
        List of Transaction rows for the requested page
    """
    offset = (page - 1) * per_page
    query = (
        select(Transaction)
        .where(*_month_filters(month), *_search_filters(search))
        .order_by(Transaction.id)
        .offset(offset)
        .limit(per_page)
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def count_transactions(
    db: AsyncSession,
    search: Optional[str] = None,
    month: Optional[int] = None,
) -> int:
    """Count the transactions ``list_transactions`` pages over."""
    query = (
        select(func.count(Transaction.id))
        .where(*_month_filters(month), *_search_filters(search))
    )
    result = await db.execute(query)
    return result.scalar() or 0


# =============================================================================
# STATISTICS
# =============================================================================

async def compute_statistics(
    db: AsyncSession,
    month: Optional[int] = None,
) -> StatisticsResponse:
    """
    Compute total sales and sold/unsold counts for a month.

    Single aggregation query; ``totalSales`` is 0 when nothing matches.
    """
    sold_flag = case((Transaction.sold.is_(True), 1), else_=0)
    query = (
        select(
            func.coalesce(func.sum(Transaction.price), 0).label("total_sales"),
            func.coalesce(func.sum(sold_flag), 0).label("sold_count"),
            func.count(Transaction.id).label("total_count"),
        )
        .where(*_month_filters(month))
    )
    result = await db.execute(query)
    row = result.one()

    sold_count = int(row.sold_count)
    return StatisticsResponse(
        total_sales=round(float(row.total_sales), 2),
        sold_count=sold_count,
        unsold_count=int(row.total_count) - sold_count,
    )


# =============================================================================
# CHARTS
# =============================================================================

async def compute_bar_chart(
    db: AsyncSession,
    month: Optional[int] = None,
) -> list[BarChartItem]:
    """
    Count transactions per price range for a month.

    All ranges are returned in boundary order; empty ranges carry a zero
    count so the chart always has the same axis.
    """
    # Bucket in a subquery so GROUP BY references a plain column
    bucketed = (
        select(_price_bucket_expression().label("price_range"))
        .where(*_month_filters(month))
        .subquery()
    )
    query = (
        select(bucketed.c.price_range, func.count().label("transaction_count"))
        .group_by(bucketed.c.price_range)
    )
    result = await db.execute(query)
    counts = {row.price_range: row.transaction_count for row in result.all()}

    return [
        BarChartItem(id=label, count=counts.get(label, 0))
        for label in BAR_CHART_LABELS
    ]


async def compute_pie_chart(
    db: AsyncSession,
    month: Optional[int] = None,
) -> list[PieChartItem]:
    """Count transactions per category for a month.

    Categories are grouped verbatim (case-sensitive, untrimmed).
    """
    query = (
        select(Transaction.category, func.count(Transaction.id).label("transaction_count"))
        .where(*_month_filters(month))
        .group_by(Transaction.category)
        .order_by(Transaction.category)
    )
    result = await db.execute(query)
    return [PieChartItem(id=row.category, count=row.transaction_count) for row in result.all()]
