"""Сервис для работы с продуктами."""
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.pagination import PageRequest
from app.models.product import Product
from app.repositories.product_repository import ProductRepository


class ProductService:
    """Сервис для работы с продуктами."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    @classmethod
    def for_session(cls, db: AsyncSession) -> "ProductService":
        return cls(ProductRepository(db))

    async def find_all(self, request: PageRequest) -> tuple[list[Product], int]:
        return await self.repository.find_all(request, with_categories=True)

    async def find_by_id(self, product_id: int) -> Product | None:
        """Получить продукт по ID вместе с категориями."""
        return await self.repository.find_by_id(product_id, with_categories=True)

    async def find_by_category(self, category_id: int) -> list[Product]:
        return await self.repository.find_by_category(category_id)

    async def create(
        self,
        name: str,
        price: Decimal,
        description: str | None = None,
        stock: int | None = None,
        image_url: str | None = None,
        category_ids: list[int] | None = None,
    ) -> Product:
        """Создать новый продукт и привязать его к категориям."""
        product = Product(
            name=name,
            price=price,
            description=description,
            stock=stock,
            image_url=image_url,
        )
        product = await self.repository.save(product)

        if category_ids:
            return await self.repository.set_categories(product.id, category_ids)
        return await self.repository.find_by_id(product.id, with_categories=True)

    async def set_categories(self, product_id: int, category_ids: list[int]) -> Product | None:
        return await self.repository.set_categories(product_id, category_ids)

    async def delete_by_id(self, product_id: int) -> bool:
        """Удалить продукт (связи с категориями удаляются, категории остаются)."""
        return await self.repository.delete_by_id(product_id)
