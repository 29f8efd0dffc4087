"""Pytest fixtures for async SQLite test database."""
import os

# Must be set before salesboard.settings is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import datetime  # noqa: E402

import httpx  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker  # noqa: E402

from salesboard.database.database import Base  # noqa: E402
from salesboard.models.transaction import Transaction  # noqa: E402


def make_transaction(
    title: str,
    price: float,
    date_of_sale: datetime,
    category: str = "electronics",
    sold: bool = False,
    description: str = "",
) -> Transaction:
    """Build an unsaved transaction row."""
    return Transaction(
        title=title,
        description=description,
        price=price,
        date_of_sale=date_of_sale,
        category=category,
        sold=sold,
    )


@pytest_asyncio.fixture
async def db_session():
    """Create an in-memory SQLite async session for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def sample_transactions(db_session):
    """Create sample transactions spread over March, April, July and November.

    March (any year) holds five transactions:
    - prices 22.30 and 64.00 fall in 0-100
    - prices 100.00 (boundary) and 109.95 fall in 100-200
    - price 999.99 falls in 901+
    """
    transactions = [
        make_transaction(
            "Fjallraven Backpack",
            109.95,
            datetime(2022, 3, 5, 10, 0),
            category="men's clothing",
            sold=True,
            description="Your perfect pack for everyday use and walks in the forest",
        ),
        make_transaction(
            "Mens Casual Premium Slim Fit T-Shirts",
            22.30,
            datetime(2021, 3, 17, 8, 30),
            category="men's clothing",
            description="Slim-fitting style, contrast raglan long sleeve",
        ),
        make_transaction(
            "WD 2TB Elements Portable Hard Drive",
            64.00,
            datetime(2022, 3, 28, 16, 45),
            sold=True,
            description="USB 3.0 and USB 2.0 compatibility",
        ),
        make_transaction(
            "Samsung 49-Inch Curved Gaming Monitor",
            999.99,
            datetime(2021, 3, 10, 12, 0),
            description="49 inch super ultrawide 32:9 curved gaming monitor",
        ),
        make_transaction(
            "Solid Gold Petite Micropave",
            168.00,
            datetime(2022, 4, 2, 9, 15),
            category="jewelery",
            sold=True,
            description="Satisfaction Guaranteed. Return or exchange any order within 30 days",
        ),
        make_transaction(
            "White Gold Plated Princess",
            9.99,
            datetime(2021, 7, 21, 19, 0),
            category="jewelery",
            description="Classic Created Wedding Engagement Solitaire Diamond Promise Ring",
        ),
        make_transaction(
            "Silicon Power 256GB SSD",
            100.00,
            datetime(2022, 3, 1, 0, 0),
            description="3D NAND flash are applied to deliver high transfer speeds",
        ),
        make_transaction(
            "Rain Jacket Women Windbreaker",
            900.00,
            datetime(2021, 11, 11, 11, 11),
            category="women's clothing",
            sold=True,
            description="Lightweight perfect for trip or casual wear",
        ),
    ]
    db_session.add_all(transactions)
    await db_session.commit()
    return transactions


@pytest_asyncio.fixture
async def many_transactions(db_session):
    """Create 25 January transactions titled 'Item 01' to 'Item 25'."""
    transactions = [
        make_transaction(f"Item {i:02d}", 10.0 * i, datetime(2022, 1, i))
        for i in range(1, 26)
    ]
    db_session.add_all(transactions)
    await db_session.commit()
    return transactions


def seed_payload() -> list[dict]:
    """Upstream-format records (camelCase keys, offset timestamps)."""
    return [
        {
            "id": 1,
            "title": "Fjallraven Backpack",
            "price": 329.85,
            "description": "Your perfect pack for everyday use",
            "category": "men's clothing",
            "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
            "sold": False,
            "dateOfSale": "2021-11-27T20:29:54+05:30",
        },
        {
            "id": 2,
            "title": "Mens Casual Premium Slim Fit T-Shirts",
            "price": 44.6,
            "description": "Slim-fitting style",
            "category": "men's clothing",
            "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
            "sold": False,
            "dateOfSale": "2021-10-27T20:29:54+05:30",
        },
        {
            "id": 3,
            "title": "Mens Cotton Jacket",
            "price": 615.89,
            "description": "Great outerwear jackets for Spring/Autumn/Winter",
            "category": "men's clothing",
            "image": "https://fakestoreapi.com/img/71li-ujtlUL._AC_UX679_.jpg",
            "sold": True,
            # 2022-03-31T20:30:00 in UTC
            "dateOfSale": "2022-04-01T02:00:00+05:30",
        },
    ]


def seed_client(payload=None, status_code: int = 200) -> httpx.AsyncClient:
    """HTTP client whose every request returns ``payload`` as JSON."""
    body = seed_payload() if payload is None else payload

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
