"""Главный файл приложения."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.v1 import router as api_v1_router
from app.core.errors import register_exception_handlers
from app.database import create_tables, engine

# Настройка логирования
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения."""
    # Startup
    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Таблицы базы данных созданы")

    yield

    # Shutdown
    await engine.dispose()


app = FastAPI(
    title="Catalog API",
    description="CRUD API каталога: категории и продукты",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS - в development режиме разрешаем все origins
if settings.is_development:
    cors_origins = ["*"]
    # Нельзя использовать allow_credentials=True с allow_origins=["*"]
    allow_creds = False
else:
    cors_origins = list(set(settings.cors_origins))
    allow_creds = True

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_creds,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Подключаем роутеры
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Корневой endpoint."""
    return {
        "message": "Catalog API",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
