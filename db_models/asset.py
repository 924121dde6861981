# db_models/asset.py
from datetime import date

from sqlalchemy import (
    String,
    Text,
    Boolean,
    Date,
    Float,
    Integer,
    ForeignKey,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db_base import Base, TimestampMixin


class Asset(TimestampMixin, Base):
    __tablename__ = "assets"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    code: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        nullable=False,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    specification: Mapped[str | None] = mapped_column(Text, nullable=True)

    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("asset_categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    location_id: Mapped[int | None] = mapped_column(
        ForeignKey("locations.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    # Free-text location, used when no Location row is linked
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)

    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    unit: Mapped[str | None] = mapped_column(String(50), nullable=True)

    acquisition_price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    residual_value: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    accumulated_depreciation: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    # Stored as received; readers normalise unknown values to "baik"
    status: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        default="baik",
        server_default="baik",
    )

    acquisition_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    economic_life_years: Mapped[int | None] = mapped_column(Integer, nullable=True)
    acquisition_source: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Bulk groups: one parent row plus children sharing bulk_id
    is_bulk_parent: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="false",
    )
    bulk_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    bulk_total_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    bulk_sequence: Mapped[int | None] = mapped_column(Integer, nullable=True)

    category: Mapped["AssetCategory | None"] = relationship(
        "AssetCategory",
        back_populates="assets",
    )
    location_info: Mapped["Location | None"] = relationship(
        "Location",
        back_populates="assets",
    )
