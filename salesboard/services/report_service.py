"""Combined report service module."""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from salesboard.schemas.report import CombinedReportResponse
from salesboard.services.transaction_service import (
    compute_bar_chart,
    compute_pie_chart,
    compute_statistics,
)

logger = logging.getLogger(__name__)


async def build_combined_report(
    db: AsyncSession,
    month: Optional[int] = None,
) -> CombinedReportResponse:
    """
    Assemble statistics, bar chart and pie chart for the same month.

    The three queries run one after another on the same session. Any failure
    propagates unchanged, so callers never see a partial report.
    """
    statistics = await compute_statistics(db, month=month)
    bar_chart = await compute_bar_chart(db, month=month)
    pie_chart = await compute_pie_chart(db, month=month)

    logger.debug(
        "Combined report for month=%s: %d ranges, %d categories",
        month, len(bar_chart), len(pie_chart),
    )
    return CombinedReportResponse(
        statistics=statistics,
        bar_chart=bar_chart,
        pie_chart=pie_chart,
    )
