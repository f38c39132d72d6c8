import logging
from typing import Iterable, List, Optional

from app.schemas.analytics import BestSellerEntry, ProductQuantity, ProductSummary
from app.services.analytics.sources import SalesDataSource

logger = logging.getLogger(__name__)


def rank_best_sellers(
    quantities: Iterable[ProductQuantity],
    products: Iterable[ProductSummary]
) -> List[BestSellerEntry]:
    """Join quantity sums with product metadata, keeping the incoming order.

    A product without metadata still gets an entry, with only its id and
    quantity filled in.
    """
    by_id = {product.product_id: product for product in products}
    entries = []

    for row in quantities:
        product = by_id.get(row.product_id)
        if product is None:
            logger.warning(f"No product metadata for best seller {row.product_id}")
            entries.append(BestSellerEntry(product_id=row.product_id, quantity_sold=row.quantity))
            continue

        entries.append(BestSellerEntry(
            product_id=product.product_id,
            name=product.name,
            sale_price=product.sale_price,
            codes=list(product.codes),
            quantity_sold=row.quantity
        ))

    return entries


class BestSellerRanker:
    """Products ranked by total quantity sold."""

    @staticmethod
    async def compute_best_sellers(
        source: SalesDataSource,
        limit: Optional[int] = None
    ) -> List[BestSellerEntry]:
        quantities = await source.fetch_quantity_sums(limit=limit)
        if not quantities:
            return []

        products = await source.fetch_products([row.product_id for row in quantities])
        return rank_best_sellers(quantities, products)
