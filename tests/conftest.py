import os

# Must be set before config is imported by the app modules below
os.environ["MODE"] = "test"

from datetime import date, timedelta

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from main import app as fastapi_app
import db as project_db
from db_base import Base
from db_models import Asset, AssetCategory, Location
from client.api_client import InventoryClient

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# One shared in-memory connection so every session sees the same tables
engine = create_async_engine(
    TEST_DATABASE_URL,
    future=True,
    echo=False,
    poolclass=StaticPool,
    connect_args={"check_same_thread": False},
)
AsyncSessionTest = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def prepare_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db_session(prepare_db):
    async with AsyncSessionTest() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def seeded(db_session):
    """
    Sample inventory:
    - 3 categories ("10", "20", "abc"), 2 locations (one without assets)
    - 3 standalone assets, one with a legacy status value
    - one bulk parent ("bulk-1") with 3 children inserted out of sequence order
    """
    today = date.today()

    electronics = AssetCategory(code="10", name="Elektronik", description="Perangkat elektronik")
    furniture = AssetCategory(code="20", name="Furnitur")
    other = AssetCategory(code="abc", name="Lainnya")
    room = Location(code="GDA-101", name="Ruang Rapat", building="Gedung A", floor="1", room="101")
    warehouse = Location(code="GDB-001", name="Gudang", building="Gedung B")
    db_session.add_all([electronics, furniture, other, room, warehouse])
    await db_session.flush()

    assets = [
        Asset(
            code="AST-001", name="Laptop", category_id=electronics.id, location_id=room.id,
            acquisition_price=10_000_000, status="baik",
            acquisition_date=today - timedelta(days=730), economic_life_years=5,
            acquisition_source="Pembelian",
        ),
        Asset(
            code="AST-002", name="Printer", category_id=electronics.id,
            acquisition_price=5_000_000, status="rusak",
        ),
        Asset(
            code="AST-003", name="Meja Lama", category_id=furniture.id, location="Lorong",
            acquisition_price=0, status="legacy_value", acquisition_date=today,
            acquisition_source="Hibah",
        ),
        Asset(
            code="BLK-001", name="Kursi", category_id=furniture.id, location_id=room.id,
            acquisition_price=1_000_000, status="baik", is_bulk_parent=True,
            bulk_id="bulk-1", bulk_total_count=3, bulk_sequence=0,
        ),
    ]
    for sequence, status in ((3, "weird"), (1, "baik"), (2, "tidak_memadai")):
        assets.append(
            Asset(
                code=f"BLK-001-{sequence}", name="Kursi", category_id=furniture.id,
                location_id=room.id, acquisition_price=1_000_000, residual_value=100_000,
                status=status, bulk_id="bulk-1", bulk_total_count=3, bulk_sequence=sequence,
            )
        )
    db_session.add_all(assets)
    await db_session.commit()

    return {
        "categories": [electronics, furniture, other],
        "locations": [room, warehouse],
        "assets": assets,
    }


@pytest.fixture
async def async_client(prepare_db):
    # Override the get_session dependency to create a fresh session for each request
    async def override_get_session():
        async with AsyncSessionTest() as session:
            yield session

    fastapi_app.dependency_overrides[project_db.get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://testserver") as ac:
        yield ac

    # Clean up
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def inventory_client(async_client):
    """InventoryClient talking to the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=fastapi_app),
        base_url="http://testserver/api/v1",
    ) as http:
        yield InventoryClient(http_client=http)
