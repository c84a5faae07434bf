"""create user, game_record and achievement_unlock tables

Revision ID: 5c2a9e7d41b0
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2a9e7d41b0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'user' not in existing_tables:
        op.create_table(
            'user',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('username', sa.String(length=20), nullable=False),
            sa.Column('username_key', sa.String(length=64), nullable=False),
            sa.Column('password_hash', sa.String(length=128), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_user_username_key', 'user', ['username_key'], unique=True)

    if 'game_record' not in existing_tables:
        op.create_table(
            'game_record',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('score', sa.Integer(), nullable=False),
            sa.Column('wave', sa.Integer(), nullable=False),
            sa.Column('accuracy', sa.Integer(), nullable=False),
            sa.Column('wpm', sa.Float(), nullable=False),
            sa.Column('mode', sa.String(length=32), nullable=False),
            sa.Column('kills', sa.Integer(), nullable=False),
            sa.Column('played_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['user.id']),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_game_record_user_id', 'game_record', ['user_id'], unique=False)
        op.create_index('ix_game_record_mode_score', 'game_record', ['mode', 'score'], unique=False)

    if 'achievement_unlock' not in existing_tables:
        op.create_table(
            'achievement_unlock',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('achievement_id', sa.String(length=64), nullable=False),
            sa.Column('unlocked_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['user.id']),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('user_id', 'achievement_id', name='uq_achievement_unlock_user_achievement'),
        )
        op.create_index('ix_achievement_unlock_user_id', 'achievement_unlock', ['user_id'], unique=False)


def downgrade():
    op.drop_index('ix_achievement_unlock_user_id', table_name='achievement_unlock')
    op.drop_table('achievement_unlock')
    op.drop_index('ix_game_record_mode_score', table_name='game_record')
    op.drop_index('ix_game_record_user_id', table_name='game_record')
    op.drop_table('game_record')
    op.drop_index('ix_user_username_key', table_name='user')
    op.drop_table('user')
