"""Database engine and session for PostgreSQL with PostGIS."""
import os

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker

from utils.config import DATABASE_URL

# Runtime safety: when TESTING=true, never use the demo DB.
if os.environ.get("TESTING") == "true":
    if "test" not in (make_url(DATABASE_URL).database or "").lower():
        raise RuntimeError(
            "Tests must not run against the demo database. Set TESTING_DATABASE_URL to a "
            "PostGIS database whose name contains 'test'."
        )

_engine = create_engine(DATABASE_URL, echo=False)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def masked_database_url() -> str:
    """Connection URL with the password hidden, for logging."""
    return make_url(DATABASE_URL).render_as_string(hide_password=True)
