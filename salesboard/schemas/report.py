"""Report schemas module.

Defines response schemas for the monthly statistics, price-range bar chart,
category pie chart and combined report endpoints.
"""
from pydantic import BaseModel, Field


# --- Statistics Component ---

class StatisticsResponse(BaseModel):
    """Sales totals for a month."""

    total_sales: float = Field(
        0.0,
        alias="totalSales",
        description="Sum of prices of all transactions in the month",
    )
    sold_count: int = Field(
        0,
        alias="soldCount",
        description="Number of sold items in the month",
    )
    unsold_count: int = Field(
        0,
        alias="unsoldCount",
        description="Number of unsold items in the month",
    )

    class Config:
        populate_by_name = True


# --- Bar Chart Component ---

class BarChartItem(BaseModel):
    """Number of transactions in one price range."""

    id: str = Field(..., alias="_id", description="Price range label, e.g. '100-200'")
    count: int = Field(..., description="Transactions in the price range")

    class Config:
        populate_by_name = True


# --- Pie Chart Component ---

class PieChartItem(BaseModel):
    """Number of transactions in one category."""

    id: str = Field(..., alias="_id", description="Category name")
    count: int = Field(..., description="Transactions in the category")

    class Config:
        populate_by_name = True


# --- Combined Report ---

class CombinedReportResponse(BaseModel):
    """Statistics and both charts for the same month."""

    statistics: StatisticsResponse
    bar_chart: list[BarChartItem] = Field(
        default_factory=list,
        alias="barChart",
    )
    pie_chart: list[PieChartItem] = Field(
        default_factory=list,
        alias="pieChart",
    )

    class Config:
        populate_by_name = True
