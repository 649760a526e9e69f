"""create_campaign_tables

Revision ID: 001_campaign_tables
Revises:
Create Date: 2026-10-19

Creates lottery_draws, second_kill_events and the shared participants table.

participants.activity_id points into whichever campaign table
participants.activity_kind names, so it carries no foreign key. The unique
constraint on (activity_kind, activity_id, user_id) enforces one
participation per user per campaign.

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_campaign_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CAMPAIGN_TABLES = ('lottery_draws', 'second_kill_events')


def upgrade() -> None:
    for table in CAMPAIGN_TABLES:
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('start_time', sa.BigInteger(), nullable=False),
            sa.Column('end_time', sa.BigInteger(), nullable=False),
            sa.Column('status', sa.String(length=20), nullable=False),
            sa.Column('created_at', sa.BigInteger(), nullable=False),
            sa.Column('updated_at', sa.BigInteger(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('name'),
        )
        op.create_index(f'idx_{table}_status', table, ['status'])

    op.create_table(
        'participants',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('activity_kind', sa.String(length=20), nullable=False),
        sa.Column('activity_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.BigInteger(), nullable=False),
        sa.Column('participated_at', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'activity_kind', 'activity_id', 'user_id',
            name='uq_participants_activity_user',
        ),
    )
    op.create_index(
        'idx_participants_activity', 'participants', ['activity_kind', 'activity_id']
    )


def downgrade() -> None:
    op.drop_index('idx_participants_activity', table_name='participants')
    op.drop_table('participants')

    for table in reversed(CAMPAIGN_TABLES):
        op.drop_index(f'idx_{table}_status', table_name=table)
        op.drop_table(table)
