"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17

Schema:
- users: accounts, unique email, admin flag
- concerts: published concerts
- tickets: ticket classes of a concert with remaining stock (never below zero)
- orders: immutable order records, one per successful order transaction
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables with final schema."""

    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'concerts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('venue', sa.String(length=255), nullable=False),
    )
    op.create_index('ix_concerts_date', 'concerts', ['date'])

    op.create_table(
        'tickets',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column(
            'concert_id',
            sa.Uuid(),
            sa.ForeignKey('concerts.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('ticket_type', sa.String(length=100), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False),
        sa.CheckConstraint('stock >= 0', name='ck_tickets_stock_non_negative'),
    )
    op.create_index('ix_tickets_concert_id', 'tickets', ['concert_id'])

    op.create_table(
        'orders',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('ticket_id', sa.Uuid(), sa.ForeignKey('tickets.id'), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('quantity >= 1', name='ck_orders_quantity_positive'),
    )
    op.create_index('ix_orders_ticket_id', 'orders', ['ticket_id'])
    op.create_index('ix_orders_user_id_created_at', 'orders', ['user_id', 'created_at'])


def downgrade() -> None:
    op.drop_table('orders')
    op.drop_table('tickets')
    op.drop_table('concerts')
    op.drop_table('users')
