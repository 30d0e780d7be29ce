"""create subscription tables

Revision ID: c3f1a9d27e40
Revises: None
Create Date: 2026-10-18 10:12:31.402117

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = 'c3f1a9d27e40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """Create the subscriber and confirmation token tables."""
    op.create_table(
        'subscriptions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(1024), nullable=False),
        sa.Column('subscribed_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(32), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_subscriptions_email', 'subscriptions', ['email'], unique=True)

    op.create_table(
        'subscription_tokens',
        sa.Column('subscription_token', sa.String(64), nullable=False),
        sa.Column('subscriber_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(['subscriber_id'], ['subscriptions.id']),
        sa.PrimaryKeyConstraint('subscription_token')
    )
    op.create_index('ix_subscription_tokens_subscriber_id', 'subscription_tokens', ['subscriber_id'])


def downgrade():
    """Drop the subscriber and confirmation token tables."""
    op.drop_index('ix_subscription_tokens_subscriber_id', table_name='subscription_tokens')
    op.drop_table('subscription_tokens')
    op.drop_index('ix_subscriptions_email', table_name='subscriptions')
    op.drop_table('subscriptions')
