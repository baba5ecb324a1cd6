"""create regions table

Revision ID: 0a1b2c3d4e5f
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql
from geoalchemy2 import Geometry

# revision identifiers, used by Alembic.
revision = '0a1b2c3d4e5f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")
    op.create_table(
        'regions',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('geom', Geometry('POLYGON', srid=4326, spatial_index=False), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_regions_name', 'regions', ['name'])
    op.create_index('idx_regions_geom', 'regions', ['geom'], postgresql_using='gist')


def downgrade() -> None:
    op.drop_index('idx_regions_geom', table_name='regions')
    op.drop_index('ix_regions_name', table_name='regions')
    op.drop_table('regions')
