#!/usr/bin/env python
"""
Seed Transactions Script

Replaces all transactions in the database with the product transaction
dataset, either downloaded from the upstream URL or read from a local JSON
dump of the same format.

Usage:
    python seed_transactions.py
    python seed_transactions.py --file data/product_transaction.json
    python seed_transactions.py --url https://example.com/transactions.json --timeout 60
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import httpx
from sqlalchemy.exc import SQLAlchemyError

from salesboard.database.database import async_session, engine
from salesboard.schemas.transaction import SeedTransaction
from salesboard.services.seed_service import (
    fetch_seed_data,
    parse_seed_records,
    replace_transactions,
)
from salesboard.settings import settings


def read_json_transactions(file_path: Path) -> list[SeedTransaction]:
    """
    Read and validate seed transactions from a JSON file.

    Args:
        file_path: Path to a JSON array of transaction records

    Returns:
        List of validated seed records
    """
    with open(file_path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    return parse_seed_records(payload)


async def download_transactions(url: Optional[str], timeout: float) -> list[SeedTransaction]:
    """Download and validate seed transactions."""
    async with httpx.AsyncClient(timeout=timeout) as client:
        return await fetch_seed_data(client, url)


async def seed(records: list[SeedTransaction]) -> int:
    """Replace stored transactions with ``records``."""
    try:
        async with async_session() as session:
            return await replace_transactions(session, records)
    finally:
        await engine.dispose()


def main():
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        description="Replace all transactions with the seed dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --file data/product_transaction.json
  %(prog)s --url https://example.com/transactions.json --timeout 60
        """
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--file",
        type=Path,
        help="Local JSON file with transaction records"
    )
    source.add_argument(
        "--url",
        type=str,
        default=None,
        help=f"Dataset URL (default: {settings.SEED_DATA_URL})"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.SEED_TIMEOUT,
        help=f"Download timeout in seconds (default: {settings.SEED_TIMEOUT})"
    )

    args = parser.parse_args()

    try:
        if args.file:
            if not args.file.exists():
                print(f"❌ File not found: {args.file}", file=sys.stderr)
                sys.exit(1)
            records = read_json_transactions(args.file)
        else:
            records = asyncio.run(download_transactions(args.url, args.timeout))
    except (OSError, ValueError, httpx.HTTPError) as e:
        print(f"❌ Could not load seed data: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"📄 Loaded {len(records)} transaction(s)")

    try:
        inserted = asyncio.run(seed(records))
    except SQLAlchemyError as e:
        print(f"❌ Database error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"✅ Replaced stored transactions with {inserted} record(s)")


if __name__ == "__main__":
    main()
