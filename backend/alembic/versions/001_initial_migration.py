"""Initial migration - create every table

Revision ID: 001_initial
Revises: 
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


BED_STATUS = sa.Enum(
    'FREE', 'OCCUPIED', 'CLEANING', 'BLOCKED', 'RESERVED',
    name='bedstatusenum'
)
ADMISSION_TYPE = sa.Enum('CLINICAL', 'SURGICAL', name='admissiontypeenum')


def upgrade() -> None:
    """Creates every table of the system."""

    # Sector table
    op.create_table(
        'sector',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('code', sa.String(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False, default=0),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_sector_name', 'sector', ['name'])

    # Bed table
    op.create_table(
        'bed',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('number', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('sector_id', sa.String(), nullable=False),
        sa.Column('status', BED_STATUS, nullable=False),
        sa.Column('occupancy_data', sa.String(), nullable=True),
        sa.Column('last_occupancy_data', sa.String(), nullable=True),
        sa.Column('version', sa.Integer(), nullable=False, default=1),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status_updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['sector_id'], ['sector.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_bed_number', 'bed', ['number'])
    op.create_index('ix_bed_sector_id', 'bed', ['sector_id'])
    op.create_index('ix_bed_status', 'bed', ['status'])

    # Reference tables
    op.create_table(
        'payer',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_payer_name', 'payer', ['name'])

    op.create_table(
        'cid',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('code', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_cid_code', 'cid', ['code'])

    op.create_table(
        'doctor',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('specialty', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_doctor_name', 'doctor', ['name'])

    op.create_table(
        'procedure',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # InternmentHistory table
    op.create_table(
        'internment_history',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('episode_id', sa.String(), nullable=False),
        sa.Column('bed_id', sa.String(), nullable=False),
        sa.Column('sector_id', sa.String(), nullable=False),
        sa.Column('patient_name', sa.String(), nullable=False),
        sa.Column('doctor_name', sa.String(), nullable=True),
        sa.Column('admission_type', ADMISSION_TYPE, nullable=True),
        sa.Column('admission_date', sa.Date(), nullable=False),
        sa.Column('payer_id', sa.String(), nullable=True),
        sa.Column('cid_id', sa.String(), nullable=True),
        sa.Column('entitled_category', sa.String(), nullable=True),
        sa.Column('opened_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('release_date', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_internment_history_episode_id', 'internment_history', ['episode_id'])
    op.create_index('ix_internment_history_bed_id', 'internment_history', ['bed_id'])
    op.create_index('ix_internment_history_sector_id', 'internment_history', ['sector_id'])
    op.create_index('ix_internment_history_release_date', 'internment_history', ['release_date'])

    # AuditLog table
    op.create_table(
        'audit_log',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('action', sa.String(), nullable=False),
        sa.Column('bed_number', sa.String(), nullable=False),
        sa.Column('actor', sa.String(), nullable=False),
        sa.Column('details', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_audit_log_timestamp', 'audit_log', ['timestamp'])
    op.create_index('ix_audit_log_action', 'audit_log', ['action'])


def downgrade() -> None:
    """Drops every table."""
    op.drop_table('audit_log')
    op.drop_table('internment_history')
    op.drop_table('procedure')
    op.drop_table('doctor')
    op.drop_table('cid')
    op.drop_table('payer')
    op.drop_table('bed')
    op.drop_table('sector')
