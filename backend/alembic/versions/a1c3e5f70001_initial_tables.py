"""initial tables: departments .. material_mappings

Revision ID: a1c3e5f70001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'a1c3e5f70001'
down_revision = None
branch_labels = None
depends_on = None


def _id():
    return sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True)

def _created_at():
    return sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now())


def upgrade():
    op.create_table(
        'departments',
        _id(),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('location', sa.String(200)),
        sa.Column('manager', sa.String(200)),
        sa.Column('employee_count', sa.Integer(), nullable=False, server_default=sa.text('0')),
        _created_at(),
    )
    op.create_table(
        'employees',
        _id(),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('position', sa.String(200)),
        sa.Column('department', sa.String(200)),
        sa.Column('email', sa.String(200)),
        sa.Column('phone', sa.String(50)),
        sa.Column('join_date', sa.String(20)),
        _created_at(),
    )
    op.create_table(
        'products',
        _id(),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('sku', sa.String(50)),
        sa.Column('category', sa.String(100)),
        sa.Column('price', sa.String(50)),
        sa.Column('stock', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('description', sa.Text()),
        _created_at(),
    )
    op.create_table(
        'raw_materials',
        _id(),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('code', sa.String(50)),
        sa.Column('category', sa.String(100)),
        sa.Column('supplier', sa.String(200)),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('unit_cost', sa.String(50)),
        sa.Column('description', sa.Text()),
        _created_at(),
    )
    op.create_table(
        'customers',
        _id(),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('contact', sa.String(200)),
        sa.Column('email', sa.String(200)),
        sa.Column('phone', sa.String(50)),
        sa.Column('address', sa.String(500)),
        sa.Column('order_count', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('status', sa.String(20), nullable=False, server_default=sa.text("'Active'")),
        _created_at(),
        sa.CheckConstraint("status in ('Active','Inactive')", name='ck_customers_status'),
    )
    op.create_table(
        'suppliers',
        _id(),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('contact', sa.String(200)),
        sa.Column('email', sa.String(200)),
        sa.Column('phone', sa.String(50)),
        sa.Column('address', sa.String(500)),
        sa.Column('materials', sa.Text()),
        sa.Column('status', sa.String(20), nullable=False, server_default=sa.text("'Active'")),
        _created_at(),
        sa.CheckConstraint("status in ('Active','Inactive')", name='ck_suppliers_status'),
    )
    op.create_table(
        'defects',
        _id(),
        sa.Column('product', sa.String(200), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('reported_by', sa.String(200)),
        sa.Column('report_date', sa.String(20)),
        sa.Column('status', sa.String(20), nullable=False, server_default=sa.text("'Open'")),
        sa.Column('severity', sa.String(20), nullable=False, server_default=sa.text("'Medium'")),
        _created_at(),
        sa.CheckConstraint("status in ('Open','In Progress','Resolved','Closed')", name='ck_defects_status'),
        sa.CheckConstraint("severity in ('Low','Medium','High','Critical')", name='ck_defects_severity'),
    )
    op.create_table(
        'material_mappings',
        _id(),
        sa.Column('product', sa.String(200), nullable=False),
        sa.Column('material', sa.String(200), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False, server_default=sa.text('0')),
        sa.Column('unit', sa.String(20)),
        sa.Column('cost', sa.String(50)),
        _created_at(),
    )


def downgrade():
    for name in ('material_mappings', 'defects', 'suppliers', 'customers',
                 'raw_materials', 'products', 'employees', 'departments'):
        op.drop_table(name)
