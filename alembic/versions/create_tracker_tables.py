"""Create tracker tables

Revision ID: create_tracker_tables
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'create_tracker_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'tracker_settings',
        sa.Column('key', sa.String(), nullable=False),
        sa.Column('value', sa.String(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('key'),
    )
    op.create_table(
        'workout_completions',
        sa.Column('date', sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint('date'),
    )
    op.create_table(
        'workout_statuses',
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('date'),
    )
    op.create_table(
        'weight_entries',
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('date'),
    )
    op.create_table(
        'daily_notes',
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('note', sa.Text(), nullable=False),
        sa.Column('mood', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('date'),
    )
    op.create_table(
        'progress_photos',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('data_url', sa.Text(), nullable=False),
        sa.Column('note', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_progress_photos_date', 'progress_photos', ['date'])


def downgrade() -> None:
    op.drop_index('ix_progress_photos_date', table_name='progress_photos')
    op.drop_table('progress_photos')
    op.drop_table('daily_notes')
    op.drop_table('weight_entries')
    op.drop_table('workout_statuses')
    op.drop_table('workout_completions')
    op.drop_table('tracker_settings')
