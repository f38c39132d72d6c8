from typing import List
from strawberry.types import Info

from app.api.graphql.products.types import Category, Product
from app.crud.products import list_categories_with_products
from app.db.models.category import Category as CategoryModel
from app.db.models.product import Product as ProductModel

def to_product_type(model: ProductModel) -> Product:
    return Product(
        id=str(model.id),
        name=model.name,
        sale_price=model.sale_price,
        codes=list(model.codes or [])
    )

def to_category_type(model: CategoryModel) -> Category:
    return Category(
        id=str(model.id),
        name=model.name,
        products=[to_product_type(product) for product in model.products]
    )

async def resolve_categories(info: Info) -> List[Category]:
    """Resolver for categories with their products, cheapest first."""
    db = info.context["db"]
    categories = await list_categories_with_products(db)
    return [to_category_type(category) for category in categories]
