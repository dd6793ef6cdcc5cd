"""Репозиторий категорий."""
from sqlalchemy import delete
from sqlalchemy.orm import selectinload

from app.core.pagination import PageRequest
from app.models.category import Category
from app.models.product_category import product_categories
from app.repositories.base import CrudRepository


class CategoryRepository(CrudRepository[Category]):
    """Репозиторий категорий."""

    model = Category
    sortable = {
        "id": Category.id,
        "nombre": Category.name,
        "descripcion": Category.description,
    }

    @staticmethod
    def _options(with_products: bool) -> list:
        return [selectinload(Category.products)] if with_products else []

    async def find_all(self, request: PageRequest, with_products: bool = False) -> tuple[list[Category], int]:
        return await super().find_all(request, self._options(with_products))

    async def find_by_id(self, category_id: int, with_products: bool = False) -> Category | None:
        return await super().find_by_id(category_id, self._options(with_products))

    async def _delete_links(self, category_id: int) -> None:
        # Удаляем связи с продуктами, сами продукты остаются
        stmt = delete(product_categories).where(product_categories.c.categoria_id == category_id)
        await self.db.execute(stmt)
