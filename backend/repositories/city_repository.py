"""City repository: count, list, create, seed, and radius search."""
import logging

from geoalchemy2 import Geography, Geometry
from sqlalchemy import cast, func, select
from sqlalchemy.orm import Session

from models import WGS84_SRID
from models.city import City, point_element
from schemas.cities import CityResponse, CityWithDistance, GeoPoint
from utils.seed_data import SEED_CITIES

logger = logging.getLogger(__name__)

# ST_X/ST_Y only accept geometry, so read coordinates through a cast.
_location_geometry = cast(City.location, Geometry(geometry_type="POINT", srid=WGS84_SRID))
_longitude = func.ST_X(_location_geometry).label("longitude")
_latitude = func.ST_Y(_location_geometry).label("latitude")


def _reference_geography(point: GeoPoint):
    """SQL expression for a query point as geography(POINT,4326)."""
    return cast(
        func.ST_SetSRID(func.ST_MakePoint(point.longitude, point.latitude), WGS84_SRID),
        Geography(geometry_type="POINT", srid=WGS84_SRID),
    )


def _to_response(city: City, longitude: float, latitude: float) -> CityResponse:
    return CityResponse(id=city.id, name=city.name, longitude=longitude, latitude=latitude)


def count_cities(session: Session) -> int:
    """Return the number of cities (for seeding)."""
    result = session.execute(select(func.count()).select_from(City))
    return result.scalar() or 0


def list_cities(session: Session) -> list[CityResponse]:
    """Return all cities ordered by id."""
    rows = session.execute(select(City, _longitude, _latitude).order_by(City.id))
    return [_to_response(city, lon, lat) for city, lon, lat in rows]


def create_city(session: Session, name: str, longitude: float, latitude: float) -> City:
    """Create a city, commit, and return it. Id is assigned by the database."""
    if not name:
        raise ValueError("City name must not be empty")
    city = City(name=name, location=point_element(longitude, latitude))
    session.add(city)
    session.commit()
    session.refresh(city)
    return city


def seed_cities(session: Session) -> int:
    """Insert the sample cities if the table is empty. Returns the number inserted.

    All rows go in with a single commit, so a failure leaves the table empty.
    """
    existing = count_cities(session)
    if existing > 0:
        logger.info("Cities table already holds %d rows; skipping seed", existing)
        return 0
    session.add_all(
        City(name=seed.name, location=point_element(seed.longitude, seed.latitude))
        for seed in SEED_CITIES
    )
    session.commit()
    logger.info("Seeded %d cities", len(SEED_CITIES))
    return len(SEED_CITIES)


def find_nearby(session: Session, reference_point: GeoPoint, radius_metres: float) -> list[CityWithDistance]:
    """Return cities within radius_metres of reference_point, nearest first.

    Distance is ST_Distance on geography, i.e. geodesic metres on the WGS-84
    spheroid. The radius is inclusive; ties keep the database's order.
    """
    if radius_metres < 0:
        raise ValueError(f"radius_metres must be non-negative, got {radius_metres}")
    distance = func.ST_Distance(City.location, _reference_geography(reference_point))
    stmt = (
        select(City, _longitude, _latitude, distance.label("distance_metres"))
        .where(distance <= radius_metres)
        .order_by(distance)
    )
    results = [
        CityWithDistance(city=_to_response(city, lon, lat), distance_metres=dist)
        for city, lon, lat, dist in session.execute(stmt)
    ]
    logger.info(
        "Found %d cities within %.0f m of (%s, %s)",
        len(results),
        radius_metres,
        reference_point.longitude,
        reference_point.latitude,
    )
    return results
