from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.sales import SqlSalesDataSource
from app.db.base import get_db
from app.services.analytics.sources import SalesDataSource


async def get_sales_source(db: AsyncSession = Depends(get_db)) -> SalesDataSource:
    """Sales data source bound to the current request's session."""
    return SqlSalesDataSource(db)
