"""SQLAlchemy declarative base and models."""
from sqlalchemy.orm import DeclarativeBase

WGS84_SRID = 4326


class Base(DeclarativeBase):
    """Base class for all DB models."""
    pass
