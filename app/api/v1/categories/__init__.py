"""Categories API."""
import logging

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import CategoryNotFoundError
from app.core.pagination import Page, PageRequest, get_page_request
from app.database import get_db
from app.models.category import Category
from app.models.product import Product
from app.services.category_service import CategoryService

logger = logging.getLogger(__name__)

router = APIRouter()

# Верхняя граница INTEGER колонки id
MAX_ID = 2**31 - 1


class ProductResponse(BaseModel):
    """Продукт внутри категории."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    nombre: str | None = None
    precio: float | None = None
    descripcion: str | None = None
    stock: int | None = None
    imagen_url: str | None = Field(default=None, alias="imagenUrl")

    @classmethod
    def from_model(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            nombre=product.name,
            precio=float(product.price) if product.price is not None else None,
            descripcion=product.description,
            stock=product.stock,
            imagen_url=product.image_url,
        )


class CategoryResponse(BaseModel):
    """Ответ с информацией о категории."""

    id: int | None = None
    nombre: str | None = None
    descripcion: str | None = None
    productos: list[ProductResponse] = []

    @classmethod
    def from_model(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            nombre=category.name,
            descripcion=category.description,
            productos=[ProductResponse.from_model(product) for product in category.products],
        )


class CategoryRequest(BaseModel):
    """Тело запроса на создание/обновление категории.

    ``id`` и ``productos`` принимаются, но не используются: идентификатор
    берется из пути (или назначается базой), а связи хранит продукт.
    """

    id: int | None = None
    nombre: str
    descripcion: str | None = None

    def to_model(self, category_id: int | None = None) -> Category:
        return Category(id=category_id, name=self.nombre, description=self.descripcion)


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    """Dependency для получения сервиса категорий."""
    return CategoryService.for_session(db)


async def get_categories(
    page_request: PageRequest = Depends(get_page_request),
    service: CategoryService = Depends(get_category_service),
):
    """
    Получить постраничный список категорий.

    Параметры:
    - page: номер страницы (с нуля)
    - size: количество элементов на странице
    - sort: свойство[,asc|desc], можно передать несколько раз
    """
    logger.info(f"## get_categories ## page={page_request.page} size={page_request.size}")
    categories, total = await service.find_all(page_request)
    content = [CategoryResponse.from_model(category) for category in categories]
    return Page[CategoryResponse].build(content, page_request, total)


async def get_category(
    category_id: int = Path(le=MAX_ID),
    service: CategoryService = Depends(get_category_service),
):
    """Получить категорию по ID."""
    logger.info(f"## get_category ## id={category_id}")
    category = await service.find_by_id(category_id)
    if not category:
        raise CategoryNotFoundError(category_id)
    return CategoryResponse.from_model(category)


async def create_category(
    request: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
):
    """Создать новую категорию (переданный id игнорируется)."""
    logger.info("## create_category ##")
    # Проверки на дубликаты имени нет намеренно
    category = await service.save(request.to_model())
    return CategoryResponse.from_model(category)


async def update_category(
    request: CategoryRequest,
    category_id: int = Path(le=MAX_ID),
    service: CategoryService = Depends(get_category_service),
):
    """Полностью заменить поля категории."""
    logger.info(f"## update_category ## id={category_id}")
    if not await service.exists_by_id(category_id):
        logger.warning(f"Категория {category_id} не найдена для обновления")
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    category = await service.save(request.to_model(category_id))
    return CategoryResponse.from_model(category)


async def delete_category(
    category_id: int = Path(le=MAX_ID),
    service: CategoryService = Depends(get_category_service),
):
    """Удалить категорию."""
    logger.info(f"## delete_category ## id={category_id}")
    if not await service.exists_by_id(category_id):
        logger.warning(f"Категория {category_id} не найдена для удаления")
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    await service.delete_by_id(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# (метод, путь, обработчик, параметры маршрута)
ROUTES = [
    ("GET", "", get_categories, {"response_model": Page[CategoryResponse]}),
    ("POST", "", create_category, {"response_model": CategoryResponse, "status_code": status.HTTP_201_CREATED}),
    ("GET", "/{category_id}", get_category, {"response_model": CategoryResponse}),
    ("PUT", "/{category_id}", update_category, {"response_model": CategoryResponse}),
    ("DELETE", "/{category_id}", delete_category, {"status_code": status.HTTP_204_NO_CONTENT, "response_class": Response}),
]

for method, path, endpoint, options in ROUTES:
    router.add_api_route(path, endpoint, methods=[method], **options)
    if path == "":
        # Тот же маршрут со слэшем на конце
        router.add_api_route("/", endpoint, methods=[method], include_in_schema=False, **options)
