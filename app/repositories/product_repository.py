"""Репозиторий продуктов."""
from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from app.core.pagination import PageRequest
from app.models.category import Category
from app.models.product import Product
from app.models.product_category import product_categories
from app.repositories.base import CrudRepository


class ProductRepository(CrudRepository[Product]):
    """Репозиторий продуктов."""

    model = Product
    sortable = {
        "id": Product.id,
        "nombre": Product.name,
        "precio": Product.price,
        "stock": Product.stock,
    }

    @staticmethod
    def _options(with_categories: bool) -> list:
        return [selectinload(Product.categories)] if with_categories else []

    async def find_all(self, request: PageRequest, with_categories: bool = False) -> tuple[list[Product], int]:
        return await super().find_all(request, self._options(with_categories))

    async def find_by_id(self, product_id: int, with_categories: bool = False) -> Product | None:
        return await super().find_by_id(product_id, self._options(with_categories))

    async def find_by_category(self, category_id: int) -> list[Product]:
        """Получить все продукты категории."""
        stmt = (
            select(Product)
            .join(Product.categories)
            .where(Category.id == category_id)
            .order_by(Product.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def set_categories(self, product_id: int, category_ids: list[int]) -> Product | None:
        """Заменить набор категорий продукта."""
        product = await self.find_by_id(product_id, with_categories=True)
        if not product:
            return None

        categories: list[Category] = []
        if category_ids:
            stmt = select(Category).where(Category.id.in_(category_ids))
            result = await self.db.execute(stmt)
            categories = list(result.scalars().all())

        product.categories = categories
        await self.db.commit()
        return await self.find_by_id(product_id, with_categories=True)

    async def _delete_links(self, product_id: int) -> None:
        stmt = delete(product_categories).where(product_categories.c.producto_id == product_id)
        await self.db.execute(stmt)
