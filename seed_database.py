"""Script to seed a development database with sample inventory data"""
import asyncio
import logging
import uuid
from datetime import date, timedelta

from sqlalchemy import func, select

from config import settings
from core.logging_config import configure_logging
from db import AsyncSessionLocal, init_db
from db_models import Asset, AssetCategory, Location

logger = logging.getLogger("inventory.seed")

CATEGORIES = [
    ("10", "Peralatan Kantor", "Meja, kursi dan lemari"),
    ("20", "Elektronik", "Komputer, printer dan proyektor"),
    ("30", "Kendaraan", "Kendaraan dinas"),
]

LOCATIONS = [
    ("GDA-101", "Ruang Rapat", "Gedung A", "1", "101"),
    ("GDA-201", "Ruang Staf", "Gedung A", "2", "201"),
    ("GDB-001", "Gudang", "Gedung B", None, None),
]


def build_assets(categories: list[AssetCategory], locations: list[Location]) -> list[Asset]:
    today = date.today()
    office, electronics, vehicles = categories
    meeting_room, staff_room, warehouse = locations

    assets = [
        Asset(
            code="ELK-001", name="Laptop", specification="14 inci",
            category_id=electronics.id, location_id=staff_room.id,
            unit="unit", acquisition_price=15_000_000, residual_value=1_500_000,
            accumulated_depreciation=6_000_000, status="baik",
            acquisition_date=today - timedelta(days=730), economic_life_years=4,
            acquisition_source="Pembelian",
        ),
        Asset(
            code="ELK-002", name="Proyektor",
            category_id=electronics.id, location_id=meeting_room.id,
            unit="unit", acquisition_price=8_000_000, status="rusak",
            acquisition_date=today - timedelta(days=60),
            acquisition_source="Hibah",
        ),
        Asset(
            code="KND-001", name="Mobil Operasional",
            category_id=vehicles.id, location="Parkir belakang",
            unit="unit", acquisition_price=250_000_000, status="tidak_memadai",
            acquisition_source="Pembelian", economic_life_years=8,
        ),
    ]

    # A bulk group of chairs: one parent plus its members
    bulk_id = uuid.uuid4().hex
    count = 4
    acquired = today - timedelta(days=200)
    assets.append(
        Asset(
            code="KTR-100", name="Kursi Kerja", category_id=office.id,
            location_id=warehouse.id, quantity=count, unit="buah",
            acquisition_price=750_000, status="baik", acquisition_date=acquired,
            acquisition_source="Pembelian", is_bulk_parent=True,
            bulk_id=bulk_id, bulk_total_count=count, bulk_sequence=0,
        )
    )
    for sequence in range(1, count + 1):
        assets.append(
            Asset(
                code=f"KTR-100-{sequence:03d}", name="Kursi Kerja",
                category_id=office.id, location_id=warehouse.id, unit="buah",
                acquisition_price=750_000, residual_value=75_000,
                status="baik" if sequence != count else "rusak",
                acquisition_date=acquired, acquisition_source="Pembelian",
                bulk_id=bulk_id, bulk_total_count=count, bulk_sequence=sequence,
            )
        )
    return assets


async def seed() -> None:
    await init_db()

    async with AsyncSessionLocal() as session:
        existing = (await session.execute(select(func.count(Asset.id)))).scalar() or 0
        if existing:
            logger.info("Database already has %d assets, skipping seed", existing)
            return

        categories = [AssetCategory(code=c, name=n, description=d) for c, n, d in CATEGORIES]
        locations = [
            Location(code=c, name=n, building=b, floor=f, room=r)
            for c, n, b, f, r in LOCATIONS
        ]
        session.add_all(categories + locations)
        await session.flush()

        assets = build_assets(categories, locations)
        session.add_all(assets)
        await session.commit()
        logger.info(
            "Seeded %d categories, %d locations and %d assets",
            len(categories), len(locations), len(assets),
        )


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    asyncio.run(seed())
