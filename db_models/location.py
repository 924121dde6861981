# db_models/location.py
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db_base import Base


class Location(Base):
    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    code: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        index=True,
        nullable=False,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    building: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )
    floor: Mapped[str | None] = mapped_column(String(50), nullable=True)
    room: Mapped[str | None] = mapped_column(String(100), nullable=True)

    assets: Mapped[list["Asset"]] = relationship(
        "Asset",
        back_populates="location_info",
    )
