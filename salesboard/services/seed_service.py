"""Seed data service module.

Loads the upstream product transaction dataset into the store.

The load is a full replace: every existing row is deleted and the fetched
records are bulk-inserted in the same database transaction. The dataset is
fetched and validated before the store is touched, so an upstream failure
leaves existing data in place.

Concurrent initializations race on delete-then-insert; this is meant for a
single administrator.
"""
import logging
from typing import Any, Iterable, Optional

import httpx
from pydantic import TypeAdapter
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from salesboard.models.transaction import Transaction
from salesboard.schemas.transaction import SeedTransaction
from salesboard.settings import settings

logger = logging.getLogger(__name__)

_SEED_ADAPTER = TypeAdapter(list[SeedTransaction])


def parse_seed_records(payload: Any) -> list[SeedTransaction]:
    """Validate a decoded JSON payload as a list of seed transactions.

    Raises:
        pydantic.ValidationError: If the payload is not a list of valid records
    """
    return _SEED_ADAPTER.validate_python(payload)


async def fetch_seed_data(
    client: httpx.AsyncClient,
    url: Optional[str] = None,
) -> list[SeedTransaction]:
    """
    Download and validate the seed dataset.

    Args:
        client: HTTP client used for the request
        url: Dataset URL (default: settings.SEED_DATA_URL)

    Returns:
        Validated seed records in upstream order

    Raises:
        httpx.HTTPError: If the request fails or returns an error status
        pydantic.ValidationError: If the payload does not match the schema
    """
    source = url or settings.SEED_DATA_URL
    logger.info("Fetching seed data from %s", source)
    response = await client.get(source)
    response.raise_for_status()
    return parse_seed_records(response.json())


async def replace_transactions(
    db: AsyncSession,
    records: Iterable[SeedTransaction],
) -> int:
    """
    Delete all transactions and insert ``records`` in one transaction.

    Returns:
        Number of inserted transactions
    """
    rows = [Transaction(**record.model_dump()) for record in records]
    try:
        await db.execute(delete(Transaction))
        db.add_all(rows)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        raise

    logger.info("Loaded %d transaction(s)", len(rows))
    return len(rows)


async def initialize_database(
    db: AsyncSession,
    client: httpx.AsyncClient,
    url: Optional[str] = None,
) -> int:
    """Fetch the seed dataset and replace the stored transactions with it."""
    records = await fetch_seed_data(client, url)
    return await replace_transactions(db, records)
