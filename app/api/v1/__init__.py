"""API v1 роутеры."""
from fastapi import APIRouter

from app.api.v1 import categories

router = APIRouter()

# Подключаем все роутеры
router.include_router(categories.router, prefix="/categorias", tags=["categorias"])
