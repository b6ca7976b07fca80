"""Initial cleaning schema

Revision ID: a1c3e5f7b9d2
Revises: 
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c3e5f7b9d2'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "role IN ('admin', 'employee', 'customer')", name='ck_profiles_role'
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('ix_profiles_role', 'profiles', ['role'])

    op.create_table(
        'cleaning_requests',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('customer_id', sa.Uuid(), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('district', sa.String(length=100), nullable=False),
        sa.Column('neighborhood', sa.String(length=100), nullable=False),
        sa.Column('address_detail', sa.Text(), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('service_date', sa.Date(), nullable=False),
        sa.Column('service_time', sa.Time(), nullable=False),
        sa.Column('home_size', sa.String(length=10), nullable=False),
        sa.Column('employee_count', sa.Integer(), nullable=False),
        sa.Column('special_notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=30), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('confirmed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "home_size IN ('small', 'medium', 'large')",
            name='ck_cleaning_requests_home_size',
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'assigned', 'in_progress', "
            "'awaiting_confirmation', 'completed', 'cancelled')",
            name='ck_cleaning_requests_status',
        ),
        sa.CheckConstraint(
            'employee_count BETWEEN 1 AND 5',
            name='ck_cleaning_requests_employee_count',
        ),
        sa.ForeignKeyConstraint(['customer_id'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_cleaning_requests_customer_id', 'cleaning_requests', ['customer_id']
    )
    op.create_index(
        'ix_cleaning_requests_service_date', 'cleaning_requests', ['service_date']
    )
    op.create_index('ix_cleaning_requests_status', 'cleaning_requests', ['status'])

    op.create_table(
        'request_assignments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('request_id', sa.Uuid(), nullable=False),
        sa.Column('employee_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ['request_id'], ['cleaning_requests.id'], ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(['employee_id'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'request_id', 'employee_id', name='uq_request_assignments_pair'
        ),
    )
    op.create_index(
        'ix_request_assignments_request_id', 'request_assignments', ['request_id']
    )
    op.create_index(
        'ix_request_assignments_employee_id', 'request_assignments', ['employee_id']
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_request_assignments_employee_id', table_name='request_assignments')
    op.drop_index('ix_request_assignments_request_id', table_name='request_assignments')
    op.drop_table('request_assignments')
    op.drop_index('ix_cleaning_requests_status', table_name='cleaning_requests')
    op.drop_index('ix_cleaning_requests_service_date', table_name='cleaning_requests')
    op.drop_index('ix_cleaning_requests_customer_id', table_name='cleaning_requests')
    op.drop_table('cleaning_requests')
    op.drop_index('ix_profiles_role', table_name='profiles')
    op.drop_table('profiles')
