"""Initial schema: users, campaigns and payments.

Revision ID: 001_initial
Revises:
Create Date: 2025-01-15

"""
from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ### Users table ###
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('username', sa.String(100), unique=True, index=True, nullable=False),
        sa.Column('name', sa.String(255)),
        sa.Column('email', sa.String(255), unique=True, index=True, nullable=False),
        sa.Column('profilepic', sa.String(1024)),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), onupdate=sa.func.now()),
    )

    # ### Campaigns table ###
    op.create_table(
        'campaigns',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('creator_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('title', sa.String(100), nullable=False),
        sa.Column('slug', sa.String(150), unique=True, nullable=False),
        sa.Column('category', sa.String(50), server_default='other'),
        sa.Column('goal_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('current_amount', sa.Numeric(precision=12, scale=2), server_default='0'),
        sa.Column('currency', sa.String(3), server_default='INR'),
        sa.Column('status', sa.String(20), server_default='draft', index=True),
        sa.Column('start_date', sa.DateTime(timezone=True)),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), onupdate=sa.func.now()),
    )
    op.create_index('ix_campaigns_creator_status', 'campaigns', ['creator_id', 'status'])

    # ### Payments table ###
    op.create_table(
        'payments',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255)),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('to_user', sa.String(100), nullable=False),
        sa.Column('campaign_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('campaigns.id', ondelete='SET NULL'), nullable=True),
        sa.Column('oid', sa.String(255), nullable=False, index=True),
        sa.Column('payment_id', sa.String(255)),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('currency', sa.String(3), server_default='INR'),
        sa.Column('message', sa.String(500)),
        sa.Column('anonymous', sa.Boolean(), server_default=sa.false()),
        sa.Column('done', sa.Boolean(), server_default=sa.false()),
        sa.Column('status', sa.String(20), server_default='pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), index=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), onupdate=sa.func.now()),
    )
    op.create_index('ix_payments_to_user_done', 'payments', ['to_user', 'done'])
    op.create_index('ix_payments_campaign_done', 'payments', ['campaign_id', 'done'])


def downgrade() -> None:
    op.drop_index('ix_payments_campaign_done', table_name='payments')
    op.drop_index('ix_payments_to_user_done', table_name='payments')
    op.drop_table('payments')
    op.drop_index('ix_campaigns_creator_status', table_name='campaigns')
    op.drop_table('campaigns')
    op.drop_table('users')
