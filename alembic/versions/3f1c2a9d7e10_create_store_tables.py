"""create_store_tables

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2025-06-04 09:12:40.118305
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'categorias',
        sa.Column('id_categoria', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('nombre', sa.Text(), nullable=False),
    )

    op.create_table(
        'productos',
        sa.Column('id_producto', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('nombre', sa.Text(), nullable=False),
        sa.Column('precio_venta', sa.Numeric(10, 2), nullable=False),
        sa.Column('precio_compra', sa.Numeric(10, 2), nullable=False, server_default=sa.text('0')),
        sa.Column('codigos', postgresql.ARRAY(sa.Text()), nullable=False, server_default=sa.text("'{}'")),
        sa.Column('categoria_id', sa.Integer(), sa.ForeignKey('categorias.id_categoria'), nullable=False),
    )

    # Sale timestamps are stored as the store-local text the till shows
    op.create_table(
        'ventas',
        sa.Column('id_venta', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('fecha_venta', sa.Text(), nullable=False),
    )

    op.create_table(
        'productos_vendidos',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('venta_id', sa.Integer(), sa.ForeignKey('ventas.id_venta'), nullable=False),
        sa.Column('producto_id', sa.Integer(), sa.ForeignKey('productos.id_producto'), nullable=False),
        sa.Column('cantidad', sa.Integer(), nullable=False),
    )
    op.create_index('ix_productos_vendidos_venta_id', 'productos_vendidos', ['venta_id'])
    op.create_index('ix_productos_vendidos_producto_id', 'productos_vendidos', ['producto_id'])


def downgrade() -> None:
    op.drop_index('ix_productos_vendidos_producto_id', table_name='productos_vendidos')
    op.drop_index('ix_productos_vendidos_venta_id', table_name='productos_vendidos')
    op.drop_table('productos_vendidos')
    op.drop_table('ventas')
    op.drop_table('productos')
    op.drop_table('categorias')
