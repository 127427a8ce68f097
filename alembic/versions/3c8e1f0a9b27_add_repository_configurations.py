# This project was developed with assistance from AI tools.
"""add repository_configurations

Revision ID: 3c8e1f0a9b27
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '3c8e1f0a9b27'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'repository_configurations',
        sa.Column('uuid', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column(
            'distribution_versions',
            postgresql.ARRAY(sa.String(length=255)),
            server_default='{}',
            nullable=False,
        ),
        sa.Column('distribution_arch', sa.String(length=255), server_default='any', nullable=False),
        sa.Column('account_id', sa.String(length=255), nullable=True),
        sa.Column('org_id', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('uuid'),
        sa.UniqueConstraint('org_id', 'name', name='uq_repository_configurations_org_name'),
        sa.UniqueConstraint('org_id', 'url', name='uq_repository_configurations_org_url'),
    )
    op.create_index(
        'ix_repository_configurations_org_id',
        'repository_configurations',
        ['org_id'],
    )


def downgrade() -> None:
    op.drop_index('ix_repository_configurations_org_id', table_name='repository_configurations')
    op.drop_table('repository_configurations')
