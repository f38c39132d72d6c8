import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import sales as sales_crud
from app.db.base import get_db
from app.schemas.sale import SaleItemCreate, SaleRead

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/venta", response_model=SaleRead, status_code=status.HTTP_201_CREATED)
async def register_sale(
    items: List[SaleItemCreate],
    db: AsyncSession = Depends(get_db)
):
    """
    Record a sale made now with the given products and quantities.
    """
    if not items:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No products were provided for the sale"
        )

    logger.info(f"Registering sale with {len(items)} line(s)")
    try:
        return await sales_crud.create_sale(db, items)
    except SQLAlchemyError as e:
        logger.error(f"Error creating sale: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error processing the sale")
