from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from app.schemas.analytics import ProductQuantity, ProductSummary, SaleLineRecord


class SalesDataSource(ABC):
    """Storage collaborator feeding the analytics reports.

    Implementations are handed to the report entry points explicitly, one
    per request.
    """

    @abstractmethod
    async def fetch_sale_lines(self) -> List[SaleLineRecord]:
        """
        Every sale line with its sale's raw timestamp and its product's
        current sale and cost price. No date filtering is applied.
        """
        pass

    @abstractmethod
    async def fetch_quantity_sums(self, limit: Optional[int] = None) -> List[ProductQuantity]:
        """Total quantity sold per product, highest first."""
        pass

    @abstractmethod
    async def fetch_products(self, product_ids: Iterable[int]) -> List[ProductSummary]:
        """Display metadata for the given product ids."""
        pass
