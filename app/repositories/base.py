"""Базовый репозиторий: CRUD и постраничные запросы по ключу."""
from typing import Any, Generic, Mapping, Sequence, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.base import ExecutableOption

from app.core.errors import InvalidSortError
from app.core.pagination import PageRequest
from app.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):
    """Доступ к одной таблице по первичному ключу ``id``.

    Подклассы задают ``model`` и ``sortable`` (имя свойства в API -> колонка).
    """

    model: type[ModelT]
    sortable: Mapping[str, Any]

    def __init__(self, db: AsyncSession):
        self.db = db

    def _order_by(self, request: PageRequest) -> list:
        if not request.sort:
            # Стабильный порядок для постраничного вывода
            return [self.model.id]

        clauses = []
        for order in request.sort:
            column = self.sortable.get(order.key)
            if column is None:
                raise InvalidSortError(
                    f"Нельзя сортировать по свойству '{order.key}'"
                )
            clauses.append(column.desc() if order.is_descending else column.asc())
        return clauses

    async def find_all(
        self,
        request: PageRequest,
        options: Sequence[ExecutableOption] = (),
    ) -> tuple[list[ModelT], int]:
        """Получить страницу записей и общее количество."""
        stmt = (
            select(self.model)
            .options(*options)
            .order_by(*self._order_by(request))
            .offset(request.offset)
            .limit(request.size)
        )
        result = await self.db.execute(stmt)
        items = list(result.scalars().all())
        return items, await self.count()

    async def find_by_id(
        self,
        entity_id: int,
        options: Sequence[ExecutableOption] = (),
    ) -> ModelT | None:
        """Получить запись по ID."""
        stmt = select(self.model).options(*options).where(self.model.id == entity_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def exists_by_id(self, entity_id: int) -> bool:
        stmt = select(self.model.id).where(self.model.id == entity_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, entity: ModelT) -> ModelT:
        """Сохранить запись: вставка если id пустой, иначе полная замена."""
        if entity.id is None:
            self.db.add(entity)
        else:
            entity = await self.db.merge(entity)
        await self.db.commit()
        await self.db.refresh(entity)
        return entity

    async def delete_by_id(self, entity_id: int) -> bool:
        """Удалить запись по ID."""
        await self._delete_links(entity_id)
        stmt = delete(self.model).where(self.model.id == entity_id)
        result = await self.db.execute(stmt)
        await self.db.commit()
        return result.rowcount > 0

    async def _delete_links(self, entity_id: int) -> None:
        """Удалить связанные строки перед удалением записи."""
        pass
