"""Transaction schemas module."""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator


class TransactionBase(BaseModel):
    """Base transaction schema with common fields."""

    title: str = Field(..., max_length=256, description="Product title")
    description: str = Field("", description="Product description")
    price: float = Field(..., ge=0, description="Sale price")
    date_of_sale: datetime = Field(
        ...,
        alias="dateOfSale",
        description="Sale timestamp (UTC)",
    )
    category: str = Field(..., max_length=128, description="Product category")
    sold: bool = Field(False, description="Whether the item was sold")
    image: Optional[str] = Field(None, max_length=512, description="Product image URL")

    class Config:
        populate_by_name = True


class SeedTransaction(TransactionBase):
    """Record of the upstream seed dataset.

    Upstream timestamps carry a UTC offset (e.g. ``2021-11-27T20:29:54+05:30``);
    they are normalized to naive UTC so month extraction happens in UTC
    regardless of the backing store.
    """

    @field_validator("date_of_sale")
    @classmethod
    def _to_naive_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class TransactionResponse(TransactionBase):
    """Schema for transaction response."""

    id: int = Field(..., description="Transaction ID")

    @field_serializer("date_of_sale")
    def _serialize_utc(self, value: datetime) -> datetime:
        # Stored naive UTC; emit an explicit offset
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

    class Config:
        from_attributes = True
        populate_by_name = True


class InitializeResponse(BaseModel):
    """Schema for the database initialization response."""

    message: str = Field(..., description="Operation result message")
    inserted: int = Field(..., description="Number of transactions loaded")
