from typing import Any, Dict

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import GraphQLRouter

from app.api.graphql.schema import schema
from app.crud.sales import SqlSalesDataSource
from app.db.base import get_db

async def get_context(request: Request, db: AsyncSession = Depends(get_db)) -> Dict[str, Any]:
    """
    Creates a context for GraphQL resolvers with the database session and
    the sales data source built on it.
    """
    return {
        "request": request,
        "db": db,
        "sales_source": SqlSalesDataSource(db)
    }

graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphiql=True
)
