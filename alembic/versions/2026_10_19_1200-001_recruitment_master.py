"""Recruitment master tables

Revision ID: 001
Revises: 
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create job_options table
    op.create_table(
        'job_options',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            'kind',
            sa.Enum('DEPARTMENT', 'EMPLOYMENT_TYPE', 'EXPERIENCE_LEVEL', 'PREFERRED_INDUSTRY', name='joboptionkind'),
            nullable=False
        ),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('name_ko', sa.String(length=100), nullable=True),
        sa.Column('name_en', sa.String(length=100), nullable=True),
        sa.Column('name_mn', sa.String(length=100), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('kind', 'name', name='uq_job_options_kind_name')
    )
    op.create_index(op.f('ix_job_options_kind'), 'job_options', ['kind'], unique=False)

    # Create skills table
    op.create_table(
        'skills',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_skills_name'), 'skills', ['name'], unique=True)


def downgrade() -> None:
    # Drop tables in reverse order
    op.drop_index(op.f('ix_skills_name'), table_name='skills')
    op.drop_table('skills')

    op.drop_index(op.f('ix_job_options_kind'), table_name='job_options')
    op.drop_table('job_options')
    sa.Enum(name='joboptionkind').drop(op.get_bind(), checkfirst=True)
