"""PostGIS proximity demo: migrate, seed UK cities, list those near London."""
import logging
import os
import subprocess
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

from sqlalchemy.exc import SQLAlchemyError

from db import SessionLocal, masked_database_url
from repositories.city_repository import find_nearby, seed_cities
from schemas.cities import CityWithDistance, GeoPoint
from utils.output import format_city_line

logger = logging.getLogger(__name__)

LONDON = GeoPoint(longitude=-0.1276, latitude=51.5074)
SEARCH_RADIUS_M = 600_000.0


def run_migrations() -> None:
    """Run `alembic upgrade head` from the backend directory."""
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")


def seed_and_search() -> list[CityWithDistance]:
    """Seed the cities table if empty, then search around London."""
    db = SessionLocal()
    try:
        seed_cities(db)
        return find_nearby(db, LONDON, SEARCH_RADIUS_M)
    finally:
        db.close()


def main() -> int:
    logger.info("Using database %s", masked_database_url())
    try:
        run_migrations()
        nearby = seed_and_search()
    except RuntimeError as exc:
        logger.error("Schema setup failed: %s", exc)
        return 1
    except SQLAlchemyError as exc:
        logger.error("Database error: %s", exc)
        return 1
    for result in nearby:
        print(format_city_line(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
