from collections import defaultdict
from typing import Dict, List

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import contains_eager, selectinload

from app.db.models import Category, Product


class ProductNotFound(LookupError):
    """No product with the requested id."""


async def list_categories_with_products(db: AsyncSession) -> List[Category]:
    """All categories, each with its products ordered by sale price."""
    stmt = select(Category).options(selectinload(Category.products)).order_by(Category.id)
    result = await db.execute(stmt)
    return result.scalars().all()


async def add_product_code(db: AsyncSession, product_id: int, code: str) -> List[str]:
    """Append a scan code to a product unless it already has it; returns the full list."""
    product = await db.get(Product, product_id)
    if product is None:
        raise ProductNotFound(f"Product {product_id} not found")

    codes = list(product.codes or [])
    if code not in codes:
        codes.append(code)

    # Assign a new list so the ARRAY column is flagged as modified
    product.codes = codes
    await db.commit()
    return codes


async def list_products_without_codes(db: AsyncSession) -> Dict[str, List[Product]]:
    """Products with no scan code yet, grouped by category name (A to Z)."""
    stmt = select(Product).join(
        Product.category
    ).options(
        contains_eager(Product.category)
    ).where(
        func.cardinality(Product.codes) == 0
    ).order_by(
        Category.name,
        Product.id
    )
    result = await db.execute(stmt)

    grouped: Dict[str, List[Product]] = defaultdict(list)
    for product in result.scalars().all():
        grouped[product.category.name].append(product)
    return dict(grouped)
