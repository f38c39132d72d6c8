import strawberry
from typing import List, Optional
from app.api.graphql.types.scalars import Numeric

@strawberry.type
class DailyProfit:
    """Profit for one calendar day; amounts are two-decimal strings."""
    date: str
    gross_profit: str
    net_profit: str

@strawberry.type
class BestSeller:
    product_id: int
    quantity_sold: int
    name: Optional[str] = None
    sale_price: Optional[Numeric] = None
    codes: Optional[List[str]] = None
