"""Модель продукта."""
from decimal import Decimal

from sqlalchemy import String, Text, Numeric, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.product_category import product_categories


class Product(Base):
    """Модель продукта."""

    __tablename__ = "productos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column("nombre", String, nullable=True)
    price: Mapped[Decimal | None] = mapped_column("precio", Numeric(10, 2), nullable=True)
    description: Mapped[str | None] = mapped_column("descripcion", Text, nullable=True)
    stock: Mapped[int | None] = mapped_column(Integer, nullable=True)
    image_url: Mapped[str | None] = mapped_column("imagen_url", String, nullable=True)

    # Relationships
    categories: Mapped[list["Category"]] = relationship(
        "Category", secondary=product_categories, back_populates="products", lazy="raise"
    )
