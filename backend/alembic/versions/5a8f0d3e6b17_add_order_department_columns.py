"""Add department workflow columns to orders and ledger columns to stock items

Revision ID: 5a8f0d3e6b17
Revises: 1c4e7a9b2d30
Create Date: 2025-12-02 15:41:37.204118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# Revision identifiers used by Alembic
revision: str = '5a8f0d3e6b17'
down_revision: Union[str, Sequence[str], None] = '1c4e7a9b2d30'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ORDER_COLUMNS = [
    # Design job info
    ('job_size', sa.String()),
    ('box_size', sa.String()),
    ('efficiency', sa.String()),
    # Assignment
    ('assigned_user_id', sa.String()),
    ('assigned_user_name', sa.String()),
    ('assigned_role_name', sa.String()),
    # Department sub-status and details
    ('design_status', sa.String()),
    ('procurement_status', sa.String()),
    ('production_status', sa.String()),
    ('procurement_date', sa.String()),
    ('stock_usage', sa.Text()),
    ('procurement_details', sa.Text()),
    ('production_approved_details', sa.Text()),
    ('production_diffs', sa.Text()),
    # Documents
    ('invoice_url', sa.String()),
    ('waybill_url', sa.String()),
    ('additional_doc_url', sa.String()),
    # Shipment
    ('packaging_type', sa.String()),
    ('packaging_count', sa.Float()),
    ('package_number', sa.String()),
    ('vehicle_plate', sa.String()),
    ('trailer_plate', sa.String()),
    # Payment and add-on pricing
    ('payment_method', sa.String()),
    ('maturity_days', sa.Integer()),
    ('prepayment_amount', sa.String()),
    ('gofre_price', sa.Float()),
    ('gofre_quantity', sa.Float()),
    ('gofre_unit_price', sa.Float()),
    ('gofre_vat_rate', sa.Float()),
    ('shipping_price', sa.Float()),
    ('shipping_vat_rate', sa.Float()),
]


def upgrade() -> None:
    """Upgrade schema."""
    for name, type_ in ORDER_COLUMNS:
        op.add_column('orders', sa.Column(name, type_, nullable=True))
    op.create_index(op.f('ix_orders_assigned_user_id'), 'orders', ['assigned_user_id'], unique=False)
    op.create_index(op.f('ix_orders_assigned_role_name'), 'orders', ['assigned_role_name'], unique=False)

    # Stock ledger classification
    op.add_column('stock_items', sa.Column('category', sa.String(), nullable=True))
    op.add_column('stock_items', sa.Column('product_id', sa.String(), nullable=True))
    op.add_column('stock_items', sa.Column('notes', sa.Text(), nullable=True))
    op.create_index(op.f('ix_stock_items_category'), 'stock_items', ['category'], unique=False)
    op.create_index(op.f('ix_stock_items_product_id'), 'stock_items', ['product_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table('stock_items') as batch_op:
        batch_op.drop_index(op.f('ix_stock_items_product_id'))
        batch_op.drop_index(op.f('ix_stock_items_category'))
        batch_op.drop_column('notes')
        batch_op.drop_column('product_id')
        batch_op.drop_column('category')

    with op.batch_alter_table('orders') as batch_op:
        batch_op.drop_index(op.f('ix_orders_assigned_role_name'))
        batch_op.drop_index(op.f('ix_orders_assigned_user_id'))
        for name, _ in reversed(ORDER_COLUMNS):
            batch_op.drop_column(name)
