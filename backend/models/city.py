"""City model for DB persistence."""
from geoalchemy2 import Geography
from geoalchemy2.elements import WKBElement, WKTElement
from sqlalchemy import CheckConstraint, Identity, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from models import WGS84_SRID, Base


class City(Base):
    """Cities table: id, name, location (geography point, lon/lat WGS-84)."""

    __tablename__ = "cities"
    __table_args__ = (
        CheckConstraint("name <> ''", name="ck_cities_name_not_empty"),
        Index("ix_cities_location", "location", postgresql_using="gist"),
    )

    id: Mapped[int] = mapped_column(Integer, Identity(always=False), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    # Geography, not geometry, so ST_Distance is measured on the spheroid in metres.
    # The GIST index is declared above so it has a stable name for migrations.
    location: Mapped[WKBElement] = mapped_column(
        Geography(geometry_type="POINT", srid=WGS84_SRID, spatial_index=False),
        nullable=False,
    )


def point_element(longitude: float, latitude: float) -> WKTElement:
    """Point for the location column. Longitude (X) comes before latitude (Y)."""
    return WKTElement(f"POINT({longitude} {latitude})", srid=WGS84_SRID)
