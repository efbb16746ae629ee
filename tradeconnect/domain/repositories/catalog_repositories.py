"""Catalog repository interfaces"""

from ..entities.category import Category
from ..entities.product import Product
from .base import IRepository


class ICategoryRepository(IRepository[Category]):
    pass


class IProductRepository(IRepository[Product]):
    pass
