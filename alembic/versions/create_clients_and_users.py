"""create clients and users

Revision ID: create_base_001
Revises: 
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'create_base_001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'clients',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('division', sa.String(255), nullable=True),
        sa.Column('vertical', sa.String(255), nullable=True),
        sa.Column('logo', sa.String(500), nullable=True),
        # Document parts: multi-valued fields and embedded sub-entities
        sa.Column('contact_numbers', sa.JSON(), nullable=False),
        sa.Column('emails', sa.JSON(), nullable=False),
        sa.Column('addresses', sa.JSON(), nullable=False),
        sa.Column('contact_persons', sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_clients_name', 'clients', ['name'], unique=True)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.String(255), nullable=False),
        sa.Column('last_name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('user_type', sa.JSON(), nullable=False),
        sa.Column('avatar', sa.String(500), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    op.drop_index('ix_clients_name', table_name='clients')
    op.drop_table('clients')
