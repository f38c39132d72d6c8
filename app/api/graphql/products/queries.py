import strawberry
from typing import List
from strawberry.types import Info
from app.api.graphql.products.types import Category

@strawberry.type
class ProductQuery:
    @strawberry.field
    async def categories(self, info: Info) -> List[Category]:
        """Get all categories with their products."""
        from app.api.graphql.products.resolvers import resolve_categories
        return await resolve_categories(info)
