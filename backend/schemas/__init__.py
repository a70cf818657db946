# Schemas package
from .cities import CityResponse, CityWithDistance, GeoPoint

__all__ = [
    "CityResponse",
    "CityWithDistance",
    "GeoPoint",
]
