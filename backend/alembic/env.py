"""Alembic environment: URL from utils.config, metadata from models."""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from models import Base
from models.city import City  # noqa: F401 - register with Base
from utils.config import DATABASE_URL

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# Use the same URL as the application instead of any placeholder in alembic.ini.
config.set_main_option("sqlalchemy.url", DATABASE_URL.replace("%", "%%"))


def include_object(obj, name, type_, reflected, compare_to):
    """Skip PostGIS-owned tables (spatial_ref_sys, tiger, topology) in autogenerate."""
    if type_ == "table" and reflected and compare_to is None:
        return False
    return True


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        include_object=include_object,
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_on(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        include_object=include_object,
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode.

    A caller may pass an open connection in config.attributes["connection"]
    (tests do, to run the revision inside a transaction they roll back).
    """
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_on(connection)
        return
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        _run_on(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
