"""create game_record table for archived sessions

Revision ID: 3a7c9e1d2b40
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c9e1d2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'game_record' in insp.get_table_names():
        return
    op.create_table(
        'game_record',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('players_count', sa.Integer(), nullable=False),
        sa.Column('plays_count', sa.Integer(), nullable=False),
        sa.Column('winner_name', sa.String(length=64), nullable=True),
        sa.Column('winner_score', sa.Integer(), nullable=True),
        sa.Column('total_score', sa.Integer(), nullable=False),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('ended_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('duration_seconds', sa.Integer(), nullable=True),
    )


def downgrade():
    op.drop_table('game_record')
