"""Transaction listing endpoint module."""
import logging

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from salesboard.database.database import get_db
from salesboard.endpoints.params import MonthParam
from salesboard.exceptions.api_exception import StoreQueryError
from salesboard.schemas.transaction import TransactionResponse
from salesboard.services.transaction_service import count_transactions, list_transactions

logger = logging.getLogger(__name__)

router = APIRouter(tags=["transactions"])


@router.get("/transactions", response_model=list[TransactionResponse])
async def get_transactions(
    response: Response,
    page: int = Query(1, ge=1, description="Page number"),
    per_page: int = Query(
        10,
        ge=1,
        le=1000,
        alias="perPage",
        description="Items per page",
    ),
    search: str = Query(
        "",
        description="Case-insensitive text matched against title, description and price",
    ),
    month: MonthParam = None,
    db: AsyncSession = Depends(get_db),
) -> list[TransactionResponse]:
    """
    List transactions with offset pagination, text search and month filter.

    The body is a bare array of transactions. The number of matching
    transactions across all pages is returned in the ``X-Total-Count`` header.
    """
    try:
        total = await count_transactions(db, search=search, month=month)
        items = await list_transactions(
            db,
            page=page,
            per_page=per_page,
            search=search,
            month=month,
        )
    except SQLAlchemyError as exc:
        logger.exception("Transaction listing failed (page=%s, month=%s)", page, month)
        raise StoreQueryError("Failed to fetch transactions") from exc

    response.headers["X-Total-Count"] = str(total)
    return [TransactionResponse.model_validate(item) for item in items]
