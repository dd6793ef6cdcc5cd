"""Общие фикстуры тестов: отдельная SQLite база на время прогона."""
import asyncio
import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="catalog-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'catalog.db')}"
os.environ["ENVIRONMENT"] = "test"
os.environ["CREATE_TABLES_ON_STARTUP"] = "true"
os.environ["MAX_PAGE_SIZE"] = "50"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from app.config import settings  # noqa: E402
from app.database import Base  # noqa: E402
from app.main import app  # noqa: E402
from app.services.product_service import ProductService  # noqa: E402


async def _reset_database():
    engine = create_async_engine(settings.database_url, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(table.delete())
    await engine.dispose()


@pytest.fixture(autouse=True)
def clean_database():
    asyncio.run(_reset_database())
    yield


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_factory():
    engine = create_async_engine(settings.database_url, poolclass=NullPool)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def create_product(session_factory):
    """Создать продукт напрямую через сервис (HTTP API для продуктов нет)."""

    def _create(category_ids, **fields):
        async def _run():
            async with session_factory() as db:
                product = await ProductService.for_session(db).create(category_ids=category_ids, **fields)
                return product.id

        return asyncio.run(_run())

    return _create
