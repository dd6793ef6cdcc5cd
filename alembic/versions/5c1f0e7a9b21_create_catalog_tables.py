"""create_catalog_tables

Revision ID: 5c1f0e7a9b21
Revises:
Create Date: 2026-10-18 10:12:44.318201

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1f0e7a9b21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'categorias',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nombre', sa.String(), nullable=True),
        sa.Column('descripcion', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'productos',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nombre', sa.String(), nullable=True),
        sa.Column('precio', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('descripcion', sa.Text(), nullable=True),
        sa.Column('stock', sa.Integer(), nullable=True),
        sa.Column('imagen_url', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    # Таблица M2M связи продуктов и категорий
    op.create_table(
        'producto_categoria',
        sa.Column('producto_id', sa.Integer(), nullable=False),
        sa.Column('categoria_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['producto_id'], ['productos.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['categoria_id'], ['categorias.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('producto_id', 'categoria_id')
    )


def downgrade() -> None:
    op.drop_table('producto_categoria')
    op.drop_table('productos')
    op.drop_table('categorias')
