"""Database initialization endpoint module."""
import logging
from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from salesboard.database.database import get_db
from salesboard.exceptions.api_exception import InitializationError
from salesboard.schemas.transaction import InitializeResponse
from salesboard.services.seed_service import initialize_database
from salesboard.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])


async def get_seed_client() -> AsyncIterator[httpx.AsyncClient]:
    """Dependency for the HTTP client that downloads the seed dataset."""
    async with httpx.AsyncClient(timeout=settings.SEED_TIMEOUT) as client:
        yield client


@router.get("/initialize", response_model=InitializeResponse)
async def initialize(
    db: AsyncSession = Depends(get_db),
    client: httpx.AsyncClient = Depends(get_seed_client),
) -> InitializeResponse:
    """
    Replace all transactions with the upstream seed dataset.

    Existing transactions are deleted before the fetched ones are inserted.
    Not safe to call concurrently.
    """
    try:
        inserted = await initialize_database(db, client)
    except (httpx.HTTPError, ValueError, SQLAlchemyError) as exc:
        # ValueError: undecodable JSON or a record failing validation
        logger.exception("Database initialization failed")
        raise InitializationError("Failed to initialize database") from exc

    return InitializeResponse(
        message="Database initialized successfully",
        inserted=inserted,
    )
