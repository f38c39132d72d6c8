from decimal import Decimal
from typing import Dict, List, Optional, Union

from pydantic import BaseModel


class ProductRead(BaseModel):
    id: int
    name: str
    sale_price: Decimal
    codes: List[str] = []

    model_config = {
        "from_attributes": True
    }


class ProductWithCategory(ProductRead):
    cost_price: Decimal
    category_id: int


class CategoryRead(BaseModel):
    id: int
    name: str
    products: List[ProductRead] = []

    model_config = {
        "from_attributes": True
    }


# Body of POST /agregar_codigo; both fields are checked by the router
class CodeAssignment(BaseModel):
    code: Optional[str] = None
    product: Optional[Union[int, str]] = None


class CodeAssignmentResult(BaseModel):
    message: str
    codes: List[str]


ProductsByCategory = Dict[str, List[ProductWithCategory]]
