from .category import Category
from .product import Product
from .sale import Sale
from .sale_line import SaleLine

__all__ = [
    'Category',
    'Product',
    'Sale',
    'SaleLine'
]
