"""Модель связи продукт-категория (M2M)."""
from sqlalchemy import ForeignKey, Table, Column

from app.database import Base

# Таблица для M2M связи
product_categories = Table(
    "producto_categoria",
    Base.metadata,
    Column("producto_id", ForeignKey("productos.id", ondelete="CASCADE"), primary_key=True),
    Column("categoria_id", ForeignKey("categorias.id", ondelete="CASCADE"), primary_key=True),
)
