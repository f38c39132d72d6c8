import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.api.dependencies import get_sales_source
from app.schemas.analytics import BestSellerEntry, DailyProfit
from app.services.analytics.best_sellers import BestSellerRanker
from app.services.analytics.date_normalizer import MalformedTimestamp
from app.services.analytics.profit_calculator import MalformedSaleRecord, ProfitCalculator
from app.services.analytics.sources import SalesDataSource

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/ganancias", response_model=List[DailyProfit])
async def get_daily_profit(
    inicio: Optional[str] = Query(None, description="Start day, MM/DD/YYYY"),
    fin: Optional[str] = Query(None, description="End day, MM/DD/YYYY"),
    source: SalesDataSource = Depends(get_sales_source)
):
    """
    Daily gross and net profit. Defaults to the current month.
    """
    try:
        return await ProfitCalculator.compute_profit_report(source, start_date=inicio, end_date=fin)
    except MalformedSaleRecord as e:
        logger.error(f"Stored sale has an unreadable date: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error computing profit report")
    except MalformedTimestamp as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except (SQLAlchemyError, ValidationError) as e:
        logger.error(f"Error computing profit report: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error computing profit report")

@router.get("/mas-vendidos", response_model=List[BestSellerEntry])
async def get_best_sellers(
    limite: Optional[int] = Query(None, ge=1, description="Return only the top N products"),
    source: SalesDataSource = Depends(get_sales_source)
):
    """
    Products ranked by total quantity sold.
    """
    try:
        return await BestSellerRanker.compute_best_sellers(source, limit=limite)
    except (SQLAlchemyError, ValidationError) as e:
        logger.error(f"Error fetching best sellers: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error fetching best-selling products")
