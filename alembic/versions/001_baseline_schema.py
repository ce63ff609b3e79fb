"""baseline outreach schema

Revision ID: 001
Revises:
Create Date: 2026-10-12 09:00:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


lead_status = sa.Enum('new', 'contacted', 'interested', 'converted', 'not_interested', name='lead_status')
campaign_status = sa.Enum('draft', 'active', 'paused', 'completed', name='campaign_status')
appointment_status = sa.Enum('scheduled', 'completed', 'cancelled', name='appointment_status')
interaction_type = sa.Enum('call', 'whatsapp', 'email', name='interaction_type')
interaction_status = sa.Enum('pending', 'completed', 'failed', name='interaction_status')


def upgrade() -> None:
    op.create_table(
        'businesses',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('user_id', sa.String(length=128), nullable=False, index=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('service_type', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    # No foreign keys: deleting a business or lead leaves references dangling
    op.create_table(
        'leads',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('user_id', sa.String(length=128), nullable=False, index=True),
        sa.Column('business_id', sa.String(length=64), nullable=False, index=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('status', lead_status, nullable=False, index=True),
        sa.Column('source', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'campaigns',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('user_id', sa.String(length=128), nullable=False, index=True),
        sa.Column('business_id', sa.String(length=64), nullable=False, index=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('script', sa.Text(), nullable=False),
        sa.Column('status', campaign_status, nullable=False, index=True),
        sa.Column('scheduled_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'appointments',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('user_id', sa.String(length=128), nullable=False, index=True),
        sa.Column('lead_id', sa.String(length=64), nullable=False, index=True),
        sa.Column('business_id', sa.String(length=64), nullable=False, index=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('scheduled_at', sa.DateTime(), nullable=False, index=True),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('status', appointment_status, nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'interactions',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('user_id', sa.String(length=128), nullable=False, index=True),
        sa.Column('lead_id', sa.String(length=64), nullable=False, index=True),
        sa.Column('campaign_id', sa.String(length=64), nullable=True, index=True),
        sa.Column('type', interaction_type, nullable=False),
        sa.Column('status', interaction_status, nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('response', sa.Text(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, index=True),
    )

    op.create_table(
        'integration_settings',
        sa.Column('user_id', sa.String(length=128), primary_key=True),
        sa.Column('voice_enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('whatsapp_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('email_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('auto_followup', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('followup_delay_hours', sa.Integer(), nullable=False, server_default='24'),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('integration_settings')
    op.drop_table('interactions')
    op.drop_table('appointments')
    op.drop_table('campaigns')
    op.drop_table('leads')
    op.drop_table('businesses')

    bind = op.get_bind()
    for enum_type in (interaction_status, interaction_type, appointment_status, campaign_status, lead_status):
        enum_type.drop(bind, checkfirst=True)
