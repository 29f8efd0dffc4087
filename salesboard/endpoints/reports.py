"""Report endpoint module.

Provides monthly statistics, price-range bar chart, category pie chart and
the combined report used by the dashboard.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from salesboard.database.database import get_db
from salesboard.endpoints.params import MonthParam
from salesboard.exceptions.api_exception import StoreQueryError
from salesboard.schemas.report import (
    BarChartItem,
    CombinedReportResponse,
    PieChartItem,
    StatisticsResponse,
)
from salesboard.services.report_service import build_combined_report
from salesboard.services.transaction_service import (
    compute_bar_chart,
    compute_pie_chart,
    compute_statistics,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reports"])


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    month: MonthParam = None,
    db: AsyncSession = Depends(get_db),
) -> StatisticsResponse:
    """
    Get sales statistics for a month.

    - **totalSales**: Sum of prices of the month's transactions
    - **soldCount**: Number of sold items
    - **unsoldCount**: Number of unsold items
    """
    try:
        return await compute_statistics(db, month=month)
    except SQLAlchemyError as exc:
        logger.exception("Statistics query failed (month=%s)", month)
        raise StoreQueryError("Failed to fetch statistics") from exc


@router.get("/bar-chart", response_model=list[BarChartItem])
async def get_bar_chart(
    month: MonthParam = None,
    db: AsyncSession = Depends(get_db),
) -> list[BarChartItem]:
    """
    Get the number of transactions per price range.

    Ranges: 0-100, 100-200, ..., 800-900 and 901+ (any price from 900 up).
    """
    try:
        return await compute_bar_chart(db, month=month)
    except SQLAlchemyError as exc:
        logger.exception("Bar chart query failed (month=%s)", month)
        raise StoreQueryError("Failed to fetch bar chart data") from exc


@router.get("/pie-chart", response_model=list[PieChartItem])
async def get_pie_chart(
    month: MonthParam = None,
    db: AsyncSession = Depends(get_db),
) -> list[PieChartItem]:
    """Get the number of transactions per category."""
    try:
        return await compute_pie_chart(db, month=month)
    except SQLAlchemyError as exc:
        logger.exception("Pie chart query failed (month=%s)", month)
        raise StoreQueryError("Failed to fetch pie chart data") from exc


@router.get("/combined", response_model=CombinedReportResponse)
async def get_combined_report(
    month: MonthParam = None,
    db: AsyncSession = Depends(get_db),
) -> CombinedReportResponse:
    """Get statistics, bar chart and pie chart for a month in one payload."""
    try:
        return await build_combined_report(db, month=month)
    except SQLAlchemyError as exc:
        logger.exception("Combined report failed (month=%s)", month)
        raise StoreQueryError("Failed to fetch combined data") from exc
