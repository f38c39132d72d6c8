from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, PositiveInt

ZERO = Decimal('0')


# Rows handed over by the sales data source
class SaleLineRecord(BaseModel):
    product_id: int
    quantity: PositiveInt
    sale_price: Decimal
    cost_price: Decimal = ZERO
    sale_date: str  # raw "MM/DD/YYYY, HH:MM:SS"

    model_config = {
        "from_attributes": True
    }


class ProductQuantity(BaseModel):
    product_id: int
    quantity: int


class ProductSummary(BaseModel):
    product_id: int
    name: str
    sale_price: Decimal
    codes: List[str] = []

    model_config = {
        "from_attributes": True
    }


# Typed records used while computing a report
class SaleLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: int
    quantity: PositiveInt
    unit_sale_price: Decimal
    unit_cost_price: Decimal
    sale_timestamp: datetime


class DateRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


class DailyBucket(BaseModel):
    date: str
    gross_profit: Decimal = ZERO
    net_profit: Decimal = ZERO


# Response shapes
class DailyProfit(BaseModel):
    date: str
    gross_profit: str
    net_profit: str


class BestSellerEntry(BaseModel):
    product_id: int
    name: Optional[str] = None
    sale_price: Optional[Decimal] = None
    codes: Optional[List[str]] = None
    quantity_sold: int
