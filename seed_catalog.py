"""Скрипт для наполнения каталога демо-данными."""
import asyncio
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.config import settings
from app.core.pagination import PageRequest
from app.database import Base
from app.models.category import Category
from app.services.category_service import CategoryService
from app.services.product_service import ProductService

CATEGORIES_DATA = [
    {"nombre": "Bebidas", "descripcion": "Refrescos, zumos y agua"},
    {"nombre": "Lácteos", "descripcion": "Leche, yogures y quesos"},
    {"nombre": "Panadería", "descripcion": "Pan y bollería del día"},
]

PRODUCTS_DATA = [
    {
        "nombre": "Agua mineral 1,5 L",
        "precio": Decimal("0.65"),
        "stock": 120,
        "categorias": ["Bebidas"],
    },
    {
        "nombre": "Zumo de naranja",
        "precio": Decimal("2.10"),
        "stock": 40,
        "categorias": ["Bebidas"],
    },
    {
        "nombre": "Batido de chocolate",
        "precio": Decimal("1.35"),
        "stock": 35,
        "categorias": ["Bebidas", "Lácteos"],
    },
    {
        "nombre": "Queso manchego",
        "precio": Decimal("8.90"),
        "stock": 12,
        "descripcion": "Curado, 250 g",
        "categorias": ["Lácteos"],
    },
    {
        "nombre": "Barra de pan",
        "precio": Decimal("0.90"),
        "stock": 60,
        "categorias": ["Panadería"],
    },
]


async def seed_catalog(session_factory: async_sessionmaker) -> tuple[int, int]:
    """Создать демо-категории и товары. Возвращает (категорий, товаров) создано."""
    async with session_factory() as db:
        category_service = CategoryService.for_session(db)
        product_service = ProductService.for_session(db)

        existing, _ = await category_service.find_all(PageRequest(page=0, size=settings.max_page_size))
        categories_by_name = {category.name: category for category in existing}

        created_categories = 0
        for cat_data in CATEGORIES_DATA:
            if cat_data["nombre"] in categories_by_name:
                print(f"⚠️  Категория '{cat_data['nombre']}' уже существует, пропускаем")
                continue
            category = await category_service.save(
                Category(name=cat_data["nombre"], description=cat_data["descripcion"])
            )
            categories_by_name[category.name] = category
            created_categories += 1
            print(f"✅ Создана категория: {category.name} (ID: {category.id})")

        # Проверяем существующие товары
        existing_products, _ = await product_service.find_all(PageRequest(page=0, size=settings.max_page_size))
        existing_names = {product.name for product in existing_products}

        created_products = 0
        for product_data in PRODUCTS_DATA:
            # Пропускаем, если товар уже существует
            if product_data["nombre"] in existing_names:
                print(f"⚠️  Товар '{product_data['nombre']}' уже существует, пропускаем")
                continue

            product = await product_service.create(
                name=product_data["nombre"],
                price=product_data["precio"],
                description=product_data.get("descripcion"),
                stock=product_data["stock"],
                category_ids=[categories_by_name[name].id for name in product_data["categorias"]],
            )
            created_products += 1
            print(f"✅ Создан товар: {product.name} - {product.price} € (ID: {product.id})")

    return created_categories, created_products


async def main():
    engine = create_async_engine(settings.database_url, echo=False)
    if settings.create_tables_on_startup:
        import app.models  # noqa: F401

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    categories, products = await seed_catalog(session_factory)

    print(f"\n📊 Итого:")
    print(f"  - Категорий создано: {categories}")
    print(f"  - Товаров создано: {products}")

    await engine.dispose()


if __name__ == "__main__":
    print("🚀 Наполнение каталога...\n")
    asyncio.run(main())
