"""initial schema

Revision ID: 0001_initial
Revises: 
Create Date: 2025-11-02
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=32), nullable=False, server_default='ADMIN'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('email'),
    )
    op.create_index('ix_users_email', 'users', ['email'])
    op.create_table('vehicles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('plate', sa.String(length=32), nullable=False),
        sa.Column('brand', sa.String(length=120), nullable=False),
        sa.Column('model', sa.String(length=120), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False, server_default='4'),
        sa.Column('type', sa.String(length=32), nullable=False, server_default='STANDARD'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('plate'),
    )
    op.create_index('ix_vehicles_plate', 'vehicles', ['plate'])
    op.create_table('drivers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=64), nullable=False),
        sa.Column('email', sa.String(length=255)),
        sa.Column('license_no', sa.String(length=64)),
        sa.Column('is_external', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('vehicle_id', sa.Integer(), sa.ForeignKey('vehicles.id', ondelete='SET NULL')),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_drivers_name', 'drivers', ['name'])
    op.create_table('reservations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('origin', sa.String(length=255), nullable=False),
        sa.Column('destination', sa.String(length=255), nullable=False),
        sa.Column('date', sa.String(length=32), nullable=False),
        sa.Column('time', sa.String(length=16), nullable=False),
        sa.Column('phone', sa.String(length=64), nullable=False),
        sa.Column('flight_code', sa.String(length=32)),
        sa.Column('passenger_count', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('luggage_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='PENDING'),
        sa.Column('price', sa.Numeric(10,2)),
        sa.Column('payment_status', sa.String(length=32), server_default='UNPAID'),
        sa.Column('driver_id', sa.Integer(), sa.ForeignKey('drivers.id', ondelete='SET NULL')),
        sa.Column('is_external', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('external_driver_name', sa.String(length=255)),
        sa.Column('external_driver_phone', sa.String(length=64)),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_reservations_date', 'reservations', ['date'])
    op.create_index('ix_reservations_status', 'reservations', ['status'])
    op.create_index('ix_reservations_created_at', 'reservations', ['created_at'])
    op.create_table('passengers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('reservation_id', sa.Integer(), sa.ForeignKey('reservations.id', ondelete='CASCADE'), nullable=False),
    )
    op.create_index('ix_passengers_reservation_id', 'passengers', ['reservation_id'])
    op.create_table('accounting_records',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('amount', sa.Numeric(10,2), nullable=False),
        sa.Column('type', sa.String(length=16), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('payment_method', sa.String(length=64)),
        sa.Column('payment_date', sa.Date(), nullable=False),
        sa.Column('reservation_id', sa.Integer(), sa.ForeignKey('reservations.id', ondelete='SET NULL')),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('amount > 0', name='ck_accounting_records_amount_positive'),
    )
    op.create_index('ix_accounting_records_type', 'accounting_records', ['type'])
    op.create_index('ix_accounting_records_payment_date', 'accounting_records', ['payment_date'])

def downgrade():
    op.drop_index('ix_accounting_records_payment_date', table_name='accounting_records')
    op.drop_index('ix_accounting_records_type', table_name='accounting_records')
    op.drop_table('accounting_records')
    op.drop_index('ix_passengers_reservation_id', table_name='passengers')
    op.drop_table('passengers')
    op.drop_index('ix_reservations_created_at', table_name='reservations')
    op.drop_index('ix_reservations_status', table_name='reservations')
    op.drop_index('ix_reservations_date', table_name='reservations')
    op.drop_table('reservations')
    op.drop_index('ix_drivers_name', table_name='drivers')
    op.drop_table('drivers')
    op.drop_index('ix_vehicles_plate', table_name='vehicles')
    op.drop_table('vehicles')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
