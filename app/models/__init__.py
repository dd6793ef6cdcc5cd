"""Модели базы данных."""
from app.models.product import Product
from app.models.category import Category
from app.models.product_category import product_categories

__all__ = [
    "Product",
    "Category",
    "product_categories",
]
