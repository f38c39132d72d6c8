from typing import List
import strawberry
from strawberry.scalars import ID
from app.api.graphql.types.scalars import Numeric

@strawberry.type
class Product:
    id: ID
    name: str
    sale_price: Numeric
    codes: List[str]

@strawberry.type
class Category:
    id: ID
    name: str
    products: List[Product]
