from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Product, Sale, SaleLine
from app.schemas.analytics import ProductQuantity, ProductSummary, SaleLineRecord
from app.schemas.sale import SaleItemCreate
from app.services.analytics.date_normalizer import format_sale_timestamp, store_now
from app.services.analytics.sources import SalesDataSource


class SqlSalesDataSource(SalesDataSource):
    """Sales data source backed by the request's database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def fetch_sale_lines(self) -> List[SaleLineRecord]:
        query = select(
            SaleLine.product_id.label("product_id"),
            SaleLine.quantity.label("quantity"),
            Product.sale_price.label("sale_price"),
            Product.cost_price.label("cost_price"),
            Sale.sale_date.label("sale_date")
        ).select_from(
            SaleLine
        ).join(
            Sale, SaleLine.sale_id == Sale.id
        ).join(
            Product, SaleLine.product_id == Product.id
        )

        result = await self.db.execute(query)
        return [SaleLineRecord.model_validate(dict(row._mapping)) for row in result.all()]

    async def fetch_quantity_sums(self, limit: Optional[int] = None) -> List[ProductQuantity]:
        total = func.sum(SaleLine.quantity).label("quantity")
        query = select(
            SaleLine.product_id.label("product_id"),
            total
        ).group_by(
            SaleLine.product_id
        ).order_by(
            desc(total),
            SaleLine.product_id
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self.db.execute(query)
        return [
            ProductQuantity(product_id=row.product_id, quantity=int(row.quantity or 0))
            for row in result.all()
        ]

    async def fetch_products(self, product_ids: Iterable[int]) -> List[ProductSummary]:
        ids = list(product_ids)
        if not ids:
            return []

        result = await self.db.execute(select(Product).where(Product.id.in_(ids)))
        return [
            ProductSummary(
                product_id=product.id,
                name=product.name,
                sale_price=product.sale_price,
                codes=list(product.codes or [])
            ) for product in result.scalars().all()
        ]


async def create_sale(
    db: AsyncSession,
    items: List[SaleItemCreate],
    now: Optional[datetime] = None
) -> Sale:
    """Record a sale stamped with the store-local time, one line per item."""
    sale = Sale(
        sale_date=format_sale_timestamp(now or store_now()),
        lines=[SaleLine(product_id=item.product_id, quantity=item.quantity) for item in items]
    )
    db.add(sale)
    await db.commit()
    return sale
