import strawberry
from typing import Optional, List
from strawberry.types import Info
from app.api.graphql.analytics.types import BestSeller, DailyProfit

@strawberry.type
class AnalyticsQuery:
    @strawberry.field
    async def daily_profit(
        self,
        info: Info,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[DailyProfit]:
        """Daily gross and net profit; dates are MM/DD/YYYY."""
        from app.api.graphql.analytics.resolvers import resolve_daily_profit
        return await resolve_daily_profit(info, start_date, end_date)

    @strawberry.field
    async def best_sellers(self, info: Info, limit: Optional[int] = None) -> List[BestSeller]:
        from app.api.graphql.analytics.resolvers import resolve_best_sellers
        return await resolve_best_sellers(info, limit)
