"""Pydantic schemas for cities and proximity results."""
from pydantic import BaseModel, Field


class GeoPoint(BaseModel):
    """WGS-84 point in degrees; longitude (X) first."""

    longitude: float = Field(ge=-180.0, le=180.0)
    latitude: float = Field(ge=-90.0, le=90.0)


class CityResponse(BaseModel):
    """Stored city as read back from the database."""

    id: int
    name: str = Field(min_length=1)
    longitude: float
    latitude: float


class CityWithDistance(BaseModel):
    """City plus its geodesic distance to a query point. Never persisted."""

    city: CityResponse
    distance_metres: float

    @property
    def distance_km(self) -> float:
        return self.distance_metres / 1000
