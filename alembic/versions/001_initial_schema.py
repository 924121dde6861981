"""Initial inventory schema: categories, locations, assets

Revision ID: 001_initial_schema
Revises:
Create Date: 2025-01-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'asset_categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(50), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_asset_categories_id', 'asset_categories', ['id'], unique=False)
    op.create_index('ix_asset_categories_code', 'asset_categories', ['code'], unique=True)

    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(50), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('building', sa.String(255), nullable=False, server_default=''),
        sa.Column('floor', sa.String(50), nullable=True),
        sa.Column('room', sa.String(100), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_locations_id', 'locations', ['id'], unique=False)
    op.create_index('ix_locations_code', 'locations', ['code'], unique=True)

    op.create_table(
        'assets',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(100), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('specification', sa.Text(), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('location_id', sa.Integer(), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('unit', sa.String(50), nullable=True),
        sa.Column('acquisition_price', sa.Float(), nullable=False, server_default='0'),
        sa.Column('residual_value', sa.Float(), nullable=False, server_default='0'),
        sa.Column('accumulated_depreciation', sa.Float(), nullable=False, server_default='0'),
        sa.Column('status', sa.String(30), nullable=False, server_default='baik'),
        sa.Column('acquisition_date', sa.Date(), nullable=True),
        sa.Column('economic_life_years', sa.Integer(), nullable=True),
        sa.Column('acquisition_source', sa.String(100), nullable=True),
        sa.Column('is_bulk_parent', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('bulk_id', sa.String(64), nullable=True),
        sa.Column('bulk_total_count', sa.Integer(), nullable=True),
        sa.Column('bulk_sequence', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['category_id'], ['asset_categories.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_assets_id', 'assets', ['id'], unique=False)
    op.create_index('ix_assets_code', 'assets', ['code'], unique=True)
    op.create_index('ix_assets_category_id', 'assets', ['category_id'], unique=False)
    op.create_index('ix_assets_location_id', 'assets', ['location_id'], unique=False)
    op.create_index('ix_assets_bulk_id', 'assets', ['bulk_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_assets_bulk_id', table_name='assets')
    op.drop_index('ix_assets_location_id', table_name='assets')
    op.drop_index('ix_assets_category_id', table_name='assets')
    op.drop_index('ix_assets_code', table_name='assets')
    op.drop_index('ix_assets_id', table_name='assets')
    op.drop_table('assets')

    op.drop_index('ix_locations_code', table_name='locations')
    op.drop_index('ix_locations_id', table_name='locations')
    op.drop_table('locations')

    op.drop_index('ix_asset_categories_code', table_name='asset_categories')
    op.drop_index('ix_asset_categories_id', table_name='asset_categories')
    op.drop_table('asset_categories')
