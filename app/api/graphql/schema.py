import strawberry

from app.api.graphql.analytics.queries import AnalyticsQuery
from app.api.graphql.products.queries import ProductQuery

@strawberry.type
class Query(AnalyticsQuery, ProductQuery):
    pass

schema = strawberry.Schema(query=Query)
