"""create_cities_table

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:12:44.218305

"""
from typing import Sequence, Union

from alembic import op
import geoalchemy2
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Enable PostGIS and create the cities table with a GIST index on location."""
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")
    op.create_table(
        "cities",
        sa.Column("id", sa.Integer(), sa.Identity(always=False), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column(
            "location",
            geoalchemy2.Geography(geometry_type="POINT", srid=4326, spatial_index=False),
            nullable=False,
        ),
        sa.CheckConstraint("name <> ''", name="ck_cities_name_not_empty"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_cities_location", "cities", ["location"], postgresql_using="gist")


def downgrade() -> None:
    """Drop the cities table. The postgis extension is left installed."""
    op.drop_index("ix_cities_location", table_name="cities")
    op.drop_table("cities", if_exists=True)
