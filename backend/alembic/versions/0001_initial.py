"""airports and tickets

Revision ID: 0001_initial
Revises:
Create Date: 2025-03-01
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

def upgrade() -> None:
    op.create_table('airports',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('code', sa.String(length=3), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('country', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_airports_code', 'airports', ['code'], unique=True)
    op.create_table('tickets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('passport_id', sa.String(length=64), nullable=False),
        sa.Column('source_airport', sa.Integer(), sa.ForeignKey('airports.id', ondelete='CASCADE'), nullable=False),
        sa.Column('destination_airport', sa.Integer(), sa.ForeignKey('airports.id', ondelete='CASCADE'), nullable=False),
        sa.Column('departure_time', sa.DateTime(), nullable=False),
        sa.Column('aircraft_number', sa.String(length=32), nullable=False),
        sa.Column('seat', sa.String(length=3), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='booked'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        # seat is unique per flight instance, cancelled tickets included
        sa.UniqueConstraint('aircraft_number', 'departure_time', 'seat', name='uq_tickets_flight_seat'),
    )
    op.create_index('ix_tickets_passport_id', 'tickets', ['passport_id'])
    op.create_index('ix_tickets_aircraft_number', 'tickets', ['aircraft_number'])

def downgrade() -> None:
    op.drop_index('ix_tickets_aircraft_number', table_name='tickets')
    op.drop_index('ix_tickets_passport_id', table_name='tickets')
    op.drop_table('tickets')
    op.drop_index('ix_airports_code', table_name='airports')
    op.drop_table('airports')
