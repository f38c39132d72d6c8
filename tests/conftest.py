from decimal import Decimal
from typing import Iterable, List, Optional

import pytest

from app.schemas.analytics import ProductQuantity, ProductSummary, SaleLineRecord
from app.services.analytics.sources import SalesDataSource


class FakeSalesSource(SalesDataSource):
    """In-memory sales data source."""

    def __init__(self, sale_lines=(), quantities=(), products=()):
        self.sale_lines = list(sale_lines)
        self.quantities = list(quantities)
        self.products = list(products)
        self.requested_ids: Optional[List[int]] = None

    async def fetch_sale_lines(self) -> List[SaleLineRecord]:
        return list(self.sale_lines)

    async def fetch_quantity_sums(self, limit: Optional[int] = None) -> List[ProductQuantity]:
        rows = list(self.quantities)
        return rows if limit is None else rows[:limit]

    async def fetch_products(self, product_ids: Iterable[int]) -> List[ProductSummary]:
        self.requested_ids = list(product_ids)
        wanted = set(self.requested_ids)
        return [product for product in self.products if product.product_id in wanted]


@pytest.fixture
def make_source():
    """Factory for in-memory sales data sources"""
    return FakeSalesSource


@pytest.fixture
def sale_record():
    """Factory for sale line rows as the data source delivers them"""
    def _make(sale_date, sale_price, cost_price="0", quantity=1, product_id=1):
        return SaleLineRecord(
            product_id=product_id,
            quantity=quantity,
            sale_price=Decimal(sale_price),
            cost_price=Decimal(cost_price),
            sale_date=sale_date
        )
    return _make
