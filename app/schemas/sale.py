from typing import List

from pydantic import BaseModel, Field, PositiveInt


class SaleItemCreate(BaseModel):
    product_id: int = Field(alias="id_producto")
    quantity: PositiveInt = Field(alias="cantidad")

    model_config = {
        "populate_by_name": True
    }


class SaleLineRead(BaseModel):
    id: int
    product_id: int
    quantity: int

    model_config = {
        "from_attributes": True
    }


class SaleRead(BaseModel):
    id: int
    sale_date: str
    lines: List[SaleLineRead] = []

    model_config = {
        "from_attributes": True
    }
