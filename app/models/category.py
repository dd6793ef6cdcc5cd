"""Модель категории."""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.product_category import product_categories


class Category(Base):
    """Модель категории."""

    __tablename__ = "categorias"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column("nombre", String, nullable=True)
    description: Mapped[str | None] = mapped_column("descripcion", String, nullable=True)

    # Relationships (обратная сторона, связи хранит Product.categories)
    products: Mapped[list["Product"]] = relationship(
        "Product", secondary=product_categories, back_populates="categories", lazy="raise"
    )
