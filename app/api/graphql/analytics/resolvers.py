from typing import List, Optional
from strawberry.types import Info

from app.api.graphql.analytics.types import BestSeller, DailyProfit
from app.services.analytics.best_sellers import BestSellerRanker
from app.services.analytics.profit_calculator import ProfitCalculator

async def resolve_daily_profit(
    info: Info,
    start_date: Optional[str],
    end_date: Optional[str]
) -> List[DailyProfit]:
    """Resolver for the daily profit calendar.

    Args:
        info: GraphQL resolver info
        start_date: Optional start day, MM/DD/YYYY
        end_date: Optional end day, MM/DD/YYYY

    Returns:
        One DailyProfit per day of the start month, plus any later days with sales
    """
    source = info.context["sales_source"]
    report = await ProfitCalculator.compute_profit_report(source, start_date=start_date, end_date=end_date)
    return [
        DailyProfit(date=day.date, gross_profit=day.gross_profit, net_profit=day.net_profit)
        for day in report
    ]

async def resolve_best_sellers(info: Info, limit: Optional[int]) -> List[BestSeller]:
    if limit is not None and limit < 1:
        raise ValueError("limit must be at least 1")
    source = info.context["sales_source"]
    entries = await BestSellerRanker.compute_best_sellers(source, limit=limit)
    return [BestSeller(**entry.model_dump()) for entry in entries]
