"""Сервис для работы с категориями."""
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.pagination import PageRequest
from app.models.category import Category
from app.repositories.category_repository import CategoryRepository


class CategoryService:
    """Сервис для работы с категориями."""

    def __init__(self, repository: CategoryRepository):
        self.repository = repository

    @classmethod
    def for_session(cls, db: AsyncSession) -> "CategoryService":
        return cls(CategoryRepository(db))

    async def find_all(self, request: PageRequest) -> tuple[list[Category], int]:
        """Получить страницу категорий вместе с их продуктами."""
        return await self.repository.find_all(request, with_products=True)

    async def find_by_id(self, category_id: int, with_products: bool = True) -> Category | None:
        """Получить категорию по ID."""
        return await self.repository.find_by_id(category_id, with_products=with_products)

    async def save(self, category: Category) -> Category:
        """Сохранить категорию и вернуть ее с актуальным списком продуктов."""
        saved = await self.repository.save(category)
        return await self.repository.find_by_id(saved.id, with_products=True)

    async def exists_by_id(self, category_id: int) -> bool:
        return await self.repository.exists_by_id(category_id)

    async def delete_by_id(self, category_id: int) -> bool:
        """Удалить категорию (связи с продуктами удаляются, продукты остаются)."""
        return await self.repository.delete_by_id(category_id)
